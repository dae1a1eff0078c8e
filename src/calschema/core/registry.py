from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

from calschema.schemas.base import CalendricalSchema
from calschema.schemas.interfaces import SchemaProtocol

logger = logging.getLogger(__name__)


@dataclass
class SchemaRegistry:
    _schemas: Dict[str, CalendricalSchema]

    def get(self, name: str) -> CalendricalSchema:
        if name not in self._schemas:
            raise KeyError(f"Unknown schema '{name}'. Available: {sorted(self._schemas)}")
        return self._schemas[name]

    def list(self) -> List[str]:
        return sorted(self._schemas.keys())

    def register(self, name: str, schema: CalendricalSchema, *, overwrite: bool = False) -> None:
        if not isinstance(schema, SchemaProtocol):
            raise TypeError(f"{type(schema).__name__} does not implement the schema contract")
        if (not overwrite) and (name in self._schemas):
            raise KeyError(f"Schema '{name}' already exists. Use overwrite=True to replace.")
        logger.debug("registering schema %r (%s)", name, type(schema).__name__)
        self._schemas[name] = schema
