"""Worklist-driven registry of nested record type definitions."""

from __future__ import annotations

import logging

from option_schema_generator.record_introspection import (
    definition_key_from_name,
    is_record_type,
    qualified_name,
)
from option_schema_generator.schema_emission import build_object_schema

from .schema_document import SchemaDocument

logger = logging.getLogger(__name__)

DEFAULT_DEFINITION_NODE_KEY = "definitions"


class DefinitionRegistry:
    """Describe record types exactly once and hand out references to them.

    Types requested through `add_class` are queued. `describe` drains the queue in
    batches: each batch is a name-sorted snapshot of the pending types, and
    describing a batch may queue further types for the next one. Draining stops
    once a batch starts with nothing pending.
    """

    def __init__(self, definition_node_key: str = DEFAULT_DEFINITION_NODE_KEY) -> None:
        self.definition_node_key = definition_node_key
        self._pending: dict[str, type] = {}
        self._key_owners: dict[str, str] = {}
        self._document = SchemaDocument()
        self.drain_iterations = 0

    @property
    def definition_pointer_prefix(self) -> str:
        """Prefix of every `$ref` pointer handed out by this registry."""
        return f"#/{self.definition_node_key}/"

    @property
    def pending(self) -> tuple[str, ...]:
        """Qualified names of the types queued for the next drain batch."""
        return tuple(self._pending)

    @property
    def document(self) -> SchemaDocument:
        return self._document

    def add_class(self, record_type: type) -> str:
        """Queue `record_type` unless already known and return its definition key."""
        if not is_record_type(record_type):
            raise TypeError(f"{record_type!r} is not a record type.")

        name = qualified_name(record_type)
        key = definition_key_from_name(name)
        owner = self._key_owners.get(key)
        if owner is None:
            self._key_owners[key] = name
            self._pending[name] = record_type
        elif owner != name:
            logger.warning(
                "Definition key %s of %s collides with %s; the type is not described.",
                key,
                name,
                owner,
            )
        return key

    def describe(self) -> SchemaDocument:
        """Drain the pending types and return the finished document."""
        while self._pending:
            batch = sorted(self._pending)
            self.drain_iterations += 1
            logger.debug("Describing batch %d: %s", self.drain_iterations, ", ".join(batch))
            for name in batch:
                # A type leaves the queue only once its fragment is written.
                fragment = build_object_schema(self._pending[name], reference_registry=self)
                self._document.add_definition(definition_key_from_name(name), fragment)
                del self._pending[name]
        return self._document
