from __future__ import annotations

import logging

from calschema.core.registry import SchemaRegistry
from calschema.schemas.factory import make_schema
from calschema.schemas.specs import ALL_SPECS

logger = logging.getLogger(__name__)


def build_registry() -> SchemaRegistry:
    schemas = {}
    for name, spec in ALL_SPECS.items():
        schemas[name] = make_schema(spec)
    logger.debug("built registry with %d schemas", len(schemas))
    return SchemaRegistry(schemas)
