"""Concrete calendrical schemas and the machinery to build them from specs."""

from .base import CalendricalSchema
from .regular import RegularSchema
from .prototype import NonRegularSchemaPrototype
from .gj import GregorianSchema, JulianSchema
from .ptolemaic import (
    Coptic12Schema,
    Coptic13Schema,
    Egyptian12Schema,
    Egyptian13Schema,
    FrenchRepublican12Schema,
    FrenchRepublican13Schema,
)
from .islamic import TabularIslamicSchema
from .persian import Persian2820Schema
from .perennial import InternationalFixedSchema, PositivistSchema, WorldSchema
from .pax import PaxSchema
from .lunisolar import LunisolarSchema

__all__ = [
    "CalendricalSchema",
    "RegularSchema",
    "NonRegularSchemaPrototype",
    "GregorianSchema",
    "JulianSchema",
    "Coptic12Schema",
    "Coptic13Schema",
    "Egyptian12Schema",
    "Egyptian13Schema",
    "FrenchRepublican12Schema",
    "FrenchRepublican13Schema",
    "TabularIslamicSchema",
    "Persian2820Schema",
    "InternationalFixedSchema",
    "PositivistSchema",
    "WorldSchema",
    "PaxSchema",
    "LunisolarSchema",
]
