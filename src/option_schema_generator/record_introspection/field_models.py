"""Record field domain entities."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any

DESCRIPTION_METADATA_KEY = "schema_description"
IGNORE_METADATA_KEY = "schema_ignore"


class JsonType(str, Enum):
    """JSON primitive names used for the `type` keyword."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True)
class ScalarKind:
    """Plain value of one JSON primitive type."""

    json_type: JsonType


@dataclass(frozen=True)
class EnumKind:
    """Enum value restricted to the listed constant names."""

    constants: tuple[str, ...]


@dataclass(frozen=True)
class RecordReference:
    """Collection element that is itself a record type."""

    record_type: type


@dataclass(frozen=True)
class CollectionKind:
    """Ordered collection; `element` is None when it could not be resolved."""

    element: ScalarKind | RecordReference | None

    def __post_init__(self) -> None:
        if self.element is None or isinstance(self.element, RecordReference):
            return
        if self.element != ScalarKind(JsonType.STRING):
            raise ValueError(
                f"Collection elements must be strings or record types, got {self.element}."
            )


@dataclass(frozen=True)
class MapKind:
    """String-keyed mapping; values are always described as strings."""


ValueKind = ScalarKind | EnumKind | CollectionKind | MapKind


@dataclass(frozen=True)
class FieldDescriptor:
    """One visible property of a record type."""

    name: str
    kind: ValueKind
    description: str = ""
    ignore: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Field descriptor name must not be empty.")

    @property
    def json_type(self) -> JsonType:
        """Return the JSON type implied by the value kind."""
        if isinstance(self.kind, ScalarKind):
            return self.kind.json_type
        if isinstance(self.kind, EnumKind):
            return JsonType.STRING
        if isinstance(self.kind, CollectionKind):
            return JsonType.ARRAY
        return JsonType.OBJECT


def schema_field(*, description: str = "", ignore: bool = False, **field_kwargs: Any) -> Any:
    """Declare a dataclass field carrying a schema description and/or ignore flag.

    Args:
      description: Human-readable text copied into the property's `description`.
      ignore: Omit the property from generated schemas entirely.
      **field_kwargs: Forwarded to `dataclasses.field` (default, default_factory, ...).
    """
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[DESCRIPTION_METADATA_KEY] = description
    metadata[IGNORE_METADATA_KEY] = ignore
    return dataclasses.field(metadata=metadata, **field_kwargs)
