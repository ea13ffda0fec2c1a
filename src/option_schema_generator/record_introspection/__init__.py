"""Record introspection exports."""

from .field_models import (
    CollectionKind,
    EnumKind,
    FieldDescriptor,
    JsonType,
    MapKind,
    RecordReference,
    ScalarKind,
    ValueKind,
    schema_field,
)
from .field_reader import (
    definition_key,
    definition_key_from_name,
    is_record_type,
    qualified_name,
    read_field_descriptors,
)
from .type_loader import RecordTypeLoadError, load_record_type

__all__ = [
    "CollectionKind",
    "EnumKind",
    "FieldDescriptor",
    "JsonType",
    "MapKind",
    "RecordReference",
    "ScalarKind",
    "ValueKind",
    "schema_field",
    "definition_key",
    "definition_key_from_name",
    "is_record_type",
    "qualified_name",
    "read_field_descriptors",
    "RecordTypeLoadError",
    "load_record_type",
]
