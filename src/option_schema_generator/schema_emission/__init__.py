"""Schema emission exports."""

from .property_emitter import (
    FieldFilter,
    ReferenceRegistry,
    SchemaFragment,
    build_object_schema,
    build_properties,
)

__all__ = [
    "FieldFilter",
    "ReferenceRegistry",
    "SchemaFragment",
    "build_object_schema",
    "build_properties",
]
