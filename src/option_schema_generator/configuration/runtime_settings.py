"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GeneratorSettings:
    """Root record type and `$ref` pointer settings."""

    root_type: str
    definition_node_key: str


@dataclass(frozen=True)
class FieldSelection:
    """Root-level property names left out of the generated schema."""

    exclude: tuple[str, ...]

    def accepts(self, name: str) -> bool:
        """Return True when `name` is not excluded."""
        return name not in self.exclude


@dataclass(frozen=True)
class OutputSettings:
    """Where and how the generated schema is written."""

    path: Path | None
    indent: int
    definitions_only: bool


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    generator: GeneratorSettings
    fields: FieldSelection
    output: OutputSettings
