"""Object schema emission for one record type."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, Protocol

from option_schema_generator.record_introspection import (
    CollectionKind,
    EnumKind,
    FieldDescriptor,
    JsonType,
    MapKind,
    RecordReference,
    qualified_name,
    read_field_descriptors,
)

logger = logging.getLogger(__name__)

FieldFilter = Callable[[str], bool]
SchemaFragment = dict[str, Any]


class ReferenceRegistry(Protocol):
    """Collaborator that hands out definition keys for nested record types."""

    @property
    def definition_pointer_prefix(self) -> str: ...

    def add_class(self, record_type: type) -> str: ...


def build_object_schema(
    record: type | object,
    *,
    reference_registry: ReferenceRegistry | None = None,
    field_filter: FieldFilter | None = None,
) -> SchemaFragment:
    """Return the `{type: object, properties, additionalProperties: false}` fragment."""
    record_type = record if isinstance(record, type) else type(record)
    return {
        "type": "object",
        "properties": build_properties(
            read_field_descriptors(record_type),
            reference_registry=reference_registry,
            field_filter=field_filter,
            record_name=qualified_name(record_type),
        ),
        "additionalProperties": False,
    }


def build_properties(
    descriptors: Sequence[FieldDescriptor],
    *,
    reference_registry: ReferenceRegistry | None = None,
    field_filter: FieldFilter | None = None,
    record_name: str = "",
) -> SchemaFragment:
    """Return the `properties` mapping for the given field descriptors.

    Ignored fields and fields rejected by `field_filter` are skipped. Collections of
    record types are emitted as `$ref` pointers obtained from `reference_registry`,
    which also queues the referenced type for description.
    """
    properties: SchemaFragment = {}
    for descriptor in descriptors:
        if descriptor.ignore:
            continue
        if field_filter is not None and not field_filter(descriptor.name):
            continue
        properties[descriptor.name] = _build_property(
            descriptor, reference_registry=reference_registry, record_name=record_name
        )
    return properties


def _build_property(
    descriptor: FieldDescriptor,
    *,
    reference_registry: ReferenceRegistry | None,
    record_name: str,
) -> SchemaFragment:
    node: SchemaFragment = {"type": descriptor.json_type.value}
    if descriptor.description:
        node["description"] = descriptor.description

    kind = descriptor.kind
    if isinstance(kind, EnumKind):
        node["enum"] = [constant.lower() for constant in kind.constants]
    elif isinstance(kind, MapKind):
        node["additionalProperties"] = {"type": JsonType.STRING.value}
    elif isinstance(kind, CollectionKind):
        items = _build_items(kind, descriptor.name, reference_registry, record_name)
        if items is not None:
            node["items"] = items
    return node


def _build_items(
    kind: CollectionKind,
    field_name: str,
    reference_registry: ReferenceRegistry | None,
    record_name: str,
) -> SchemaFragment | None:
    element = kind.element
    if element is None:
        return None
    if not isinstance(element, RecordReference):
        return {"type": element.json_type.value}
    if reference_registry is None:
        logger.warning(
            "Collection property %s of %s references %s but no reference registry was supplied.",
            field_name,
            record_name or "<record>",
            qualified_name(element.record_type),
        )
        return None
    key = reference_registry.add_class(element.record_type)
    return {"$ref": f"{reference_registry.definition_pointer_prefix}{key}"}
