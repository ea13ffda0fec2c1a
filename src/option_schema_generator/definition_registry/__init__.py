"""Definition registry exports."""

from .document_builder import (
    build_schema_document,
    describe_definitions,
    render_schema_document,
)
from .registry import DEFAULT_DEFINITION_NODE_KEY, DefinitionRegistry
from .schema_document import SchemaDocument

__all__ = [
    "DEFAULT_DEFINITION_NODE_KEY",
    "DefinitionRegistry",
    "SchemaDocument",
    "build_schema_document",
    "describe_definitions",
    "render_schema_document",
]
