"""
calschema.schemas.factory
-------------------------
Transforms SchemaSpec payloads into live schema objects.
"""

from __future__ import annotations

from typing import Callable, Dict

from calschema.schemas.base import CalendricalSchema
from calschema.schemas.gj import GregorianSchema, JulianSchema
from calschema.schemas.islamic import TabularIslamicSchema
from calschema.schemas.lunisolar import LunisolarSchema
from calschema.schemas.pax import PaxSchema
from calschema.schemas.perennial import InternationalFixedSchema, PositivistSchema, WorldSchema
from calschema.schemas.persian import Persian2820Schema
from calschema.schemas.ptolemaic import (
    Coptic12Schema,
    Coptic13Schema,
    Egyptian12Schema,
    Egyptian13Schema,
    FrenchRepublican12Schema,
    FrenchRepublican13Schema,
)
from calschema.schemas.specs import SchemaSpec

SCHEMA_CLASSES: Dict[str, Callable[..., CalendricalSchema]] = {
    "gregorian": GregorianSchema,
    "julian": JulianSchema,
    "coptic12": Coptic12Schema,
    "coptic13": Coptic13Schema,
    "egyptian12": Egyptian12Schema,
    "egyptian13": Egyptian13Schema,
    "french_republican12": FrenchRepublican12Schema,
    "french_republican13": FrenchRepublican13Schema,
    "tabular_islamic": TabularIslamicSchema,
    "persian2820": Persian2820Schema,
    "world": WorldSchema,
    "positivist": PositivistSchema,
    "international_fixed": InternationalFixedSchema,
    "pax": PaxSchema,
    "lunisolar": LunisolarSchema,
}


def make_schema(spec: SchemaSpec) -> CalendricalSchema:
    """The universal entry point."""
    if not isinstance(spec, SchemaSpec):
        raise TypeError(f"Unknown spec type: {type(spec)}")
    if spec.kind not in SCHEMA_CLASSES:
        raise ValueError(f"Unknown schema kind '{spec.kind}'. Known: {sorted(SCHEMA_CLASSES)}")
    return SCHEMA_CLASSES[spec.kind](supported_years=spec.supported_years)
