from __future__ import annotations

from typing import Optional


class CalschemaError(Exception):
    """Base error."""


class OutOfRangeError(CalschemaError, ValueError):
    """A caller-supplied value lies outside a documented bound."""

    def __init__(self, param_name: str, value: int, message: str) -> None:
        super().__init__(message)
        self.param_name = param_name
        self.value = value

    @classmethod
    def year(cls, year: int, param_name: Optional[str] = None) -> "OutOfRangeError":
        return cls(
            param_name or "year",
            year,
            f"The value of the year was out of range; value = {year}.",
        )

    @classmethod
    def month(cls, month: int, param_name: Optional[str] = None) -> "OutOfRangeError":
        return cls(
            param_name or "month",
            month,
            f"The value of the month of the year was out of range; value = {month}.",
        )

    @classmethod
    def day(cls, day: int, param_name: Optional[str] = None) -> "OutOfRangeError":
        return cls(
            param_name or "day",
            day,
            f"The value of the day of the month was out of range; value = {day}.",
        )

    @classmethod
    def day_of_year(cls, day_of_year: int, param_name: Optional[str] = None) -> "OutOfRangeError":
        return cls(
            param_name or "day_of_year",
            day_of_year,
            f"The value of the day of the year was out of range; value = {day_of_year}.",
        )

    @classmethod
    def generic(cls, value: int, param_name: str) -> "OutOfRangeError":
        return cls(param_name, value, f"The value of {param_name} was out of range; value = {value}.")


class CalendarOverflowError(CalschemaError, OverflowError):
    """A computed result falls outside the supported range."""

    @classmethod
    def dates(cls) -> "CalendarOverflowError":
        return cls("The computation would overflow the range of supported dates.")

    @classmethod
    def months(cls) -> "CalendarOverflowError":
        return cls("The computation would overflow the range of supported months.")

    @classmethod
    def years(cls) -> "CalendarOverflowError":
        return cls("The computation would overflow the range of supported years.")


class InvalidStateError(CalschemaError, RuntimeError):
    """Raised when an object is used before it is ready (e.g. an unset builder endpoint)."""
