"""
calschema.schemas.specs
-----------------------
Pure data payloads describing the built-in schemas. A spec names the rule
set (kind) and, optionally, a narrower window of supported years.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from calschema.core.types import Range, SchemaId


@dataclass(frozen=True)
class SchemaSpec:
    kind: str
    id: SchemaId
    supported_years: Optional[Range] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.kind:
            raise ValueError("kind must be a non-empty string")

    def tweak(self, **kwargs) -> "SchemaSpec":
        return replace(self, **kwargs)


def _spec(kind: str, family: str, description: str) -> SchemaSpec:
    return SchemaSpec(kind=kind, id=SchemaId(family, kind), meta={"description": description})


ALL_SPECS: Dict[str, SchemaSpec] = {
    "gregorian": _spec("gregorian", "solar", "Proleptic Gregorian calendar"),
    "julian": _spec("julian", "solar", "Proleptic Julian calendar"),
    "coptic12": _spec("coptic12", "solar", "Coptic/Ethiopic, epagomenal days in month 12"),
    "coptic13": _spec("coptic13", "solar", "Coptic/Ethiopic, epagomenal days as month 13"),
    "egyptian12": _spec("egyptian12", "annus_vagus", "Armenian/Zoroastrian, epagomenal days in month 12"),
    "egyptian13": _spec("egyptian13", "annus_vagus", "Armenian/Zoroastrian, epagomenal days as month 13"),
    "french_republican12": _spec("french_republican12", "solar", "French Republican, complementary days in month 12"),
    "french_republican13": _spec("french_republican13", "solar", "French Republican, complementary days as month 13"),
    "tabular_islamic": _spec("tabular_islamic", "lunar", "Tabular Islamic calendar (30-year cycle)"),
    "persian2820": _spec("persian2820", "solar", "Arithmetical Persian calendar (2820-year cycle)"),
    "world": _spec("world", "solar", "World calendar"),
    "positivist": _spec("positivist", "solar", "Positivist calendar"),
    "international_fixed": _spec("international_fixed", "solar", "International Fixed calendar"),
    "pax": _spec("pax", "other", "Pax leap-week calendar"),
    "lunisolar": _spec("lunisolar", "lunisolar", "Simple arithmetical lunisolar calendar"),
}
