"""Append-only definitions document."""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Iterator, Mapping
from typing import Any

logger = logging.getLogger(__name__)


class SchemaDocument(Mapping[str, dict[str, Any]]):
    """Ordered mapping of definition key to object schema fragment.

    Keys keep the order in which they were written. A written key is never
    replaced, and lookups hand out copies of the stored fragment.
    """

    def __init__(self) -> None:
        self._definitions: dict[str, dict[str, Any]] = {}

    def add_definition(self, key: str, fragment: Mapping[str, Any]) -> bool:
        """Record one fragment; return False when the key was already written."""
        if key in self._definitions:
            logger.warning("Definition %s already written; keeping the first fragment.", key)
            return False
        self._definitions[key] = copy.deepcopy(dict(fragment))
        return True

    def __getitem__(self, key: str) -> dict[str, Any]:
        return copy.deepcopy(self._definitions[key])

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def as_dict(self) -> dict[str, dict[str, Any]]:
        """Return a deep copy of the definitions."""
        return copy.deepcopy(self._definitions)

    def to_json(self, indent: int | None = 2) -> str:
        """Render the definitions as a JSON object."""
        return json.dumps(self._definitions, indent=indent, ensure_ascii=False)
