"""Assembly of a complete schema document for one root record type."""

from __future__ import annotations

import json
from typing import Any

from option_schema_generator.record_introspection import qualified_name, read_field_descriptors
from option_schema_generator.schema_emission import FieldFilter, build_properties

from .registry import DEFAULT_DEFINITION_NODE_KEY, DefinitionRegistry
from .schema_document import SchemaDocument


def build_schema_document(
    root_type: type,
    *,
    definition_node_key: str = DEFAULT_DEFINITION_NODE_KEY,
    field_filter: FieldFilter | None = None,
) -> dict[str, Any]:
    """Describe `root_type` inline and its nested record types as definitions.

    `field_filter` applies to the root properties only. The definitions node is
    omitted when no nested record type is referenced.
    """
    registry = DefinitionRegistry(definition_node_key)
    properties = build_properties(
        read_field_descriptors(root_type),
        reference_registry=registry,
        field_filter=field_filter,
        record_name=qualified_name(root_type),
    )
    document: dict[str, Any] = {
        "type": "object",
        "properties": properties,
        "additionalProperties": False,
    }
    definitions = registry.describe()
    if definitions:
        document[definition_node_key] = definitions.as_dict()
    return document


def describe_definitions(
    root_type: type, *, definition_node_key: str = DEFAULT_DEFINITION_NODE_KEY
) -> SchemaDocument:
    """Return the definitions document with `root_type` described as a definition."""
    registry = DefinitionRegistry(definition_node_key)
    registry.add_class(root_type)
    return registry.describe()


def render_schema_document(
    root_type: type,
    *,
    definition_node_key: str = DEFAULT_DEFINITION_NODE_KEY,
    field_filter: FieldFilter | None = None,
    indent: int | None = 2,
) -> str:
    """Render `build_schema_document` as JSON text."""
    document = build_schema_document(
        root_type, definition_node_key=definition_node_key, field_filter=field_filter
    )
    return json.dumps(document, indent=indent, ensure_ascii=False)
