"""JSON-Schema generation for option record types."""

from .definition_registry import (
    DefinitionRegistry,
    SchemaDocument,
    build_schema_document,
    describe_definitions,
    render_schema_document,
)
from .record_introspection import (
    CollectionKind,
    EnumKind,
    FieldDescriptor,
    JsonType,
    MapKind,
    RecordReference,
    ScalarKind,
    read_field_descriptors,
    schema_field,
)
from .schema_emission import build_object_schema, build_properties

__all__ = [
    "CollectionKind",
    "DefinitionRegistry",
    "EnumKind",
    "FieldDescriptor",
    "JsonType",
    "MapKind",
    "RecordReference",
    "ScalarKind",
    "SchemaDocument",
    "build_object_schema",
    "build_properties",
    "build_schema_document",
    "describe_definitions",
    "read_field_descriptors",
    "render_schema_document",
    "schema_field",
]
