from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Literal, Tuple


@dataclass(frozen=True, order=True)
class DateParts:
    """(year, month, day). Ordering is chronological for well-formed parts."""
    year: int
    month: int
    day: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.year, self.month, self.day))

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    @property
    def month_parts(self) -> "MonthParts":
        return MonthParts(self.year, self.month)


@dataclass(frozen=True, order=True)
class OrdinalParts:
    """(year, day_of_year)."""
    year: int
    day_of_year: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.year, self.day_of_year))

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.day_of_year:03d}"


@dataclass(frozen=True, order=True)
class MonthParts:
    """(year, month)."""
    year: int
    month: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.year, self.month))

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class Range:
    """Closed interval [min, max] of integers."""
    min: int
    max: int

    def __post_init__(self) -> None:
        if self.max < self.min:
            raise ValueError(f"Range requires min <= max, got [{self.min}, {self.max}]")

    @classmethod
    def singleton(cls, value: int) -> "Range":
        return cls(value, value)

    @classmethod
    def starting_at(cls, start: int, length: int) -> "Range":
        return cls(start, start + length - 1)

    @property
    def endpoints(self) -> Tuple[int, int]:
        return (self.min, self.max)

    @property
    def count(self) -> int:
        return self.max - self.min + 1

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.min <= value <= self.max

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.min, self.max + 1))

    def is_subset_of(self, other: "Range") -> bool:
        return other.min <= self.min and self.max <= other.max

    def with_min(self, value: int) -> "Range":
        return replace(self, min=value)

    def with_max(self, value: int) -> "Range":
        return replace(self, max=value)

    def __str__(self) -> str:
        return f"[{self.min}..{self.max}]"


@dataclass(frozen=True)
class AdditionResult:
    """Outcome of a truncating addition; roundoff > 0 iff the day was clamped."""
    parts: DateParts
    roundoff: int = 0

    @property
    def truncated(self) -> bool:
        return self.roundoff > 0


@dataclass(frozen=True)
class SchemaId:
    family: Literal["solar", "lunar", "lunisolar", "annus_vagus", "other"]
    name: str
    version: str = "1"
