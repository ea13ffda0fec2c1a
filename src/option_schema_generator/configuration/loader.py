"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from option_schema_generator.definition_registry import DEFAULT_DEFINITION_NODE_KEY

from .runtime_settings import Configuration, FieldSelection, GeneratorSettings, OutputSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Configuration(
        path=path,
        generator=_parse_generator_section(parsed.get("generator")),
        fields=_parse_fields_section(parsed.get("fields")),
        output=_parse_output_section(parsed.get("output"), path.parent),
    )


def _parse_generator_section(value: Any) -> GeneratorSettings:
    section = _require_mapping(value, "generator")
    root_type = _require_non_empty_string(section.get("root_type"), "generator.root_type")
    if ":" not in root_type:
        raise ConfigurationError(
            "generator.root_type must look like 'package.module:ClassName'."
        )
    definition_node_key = _require_non_empty_string(
        section.get("definition_node_key", DEFAULT_DEFINITION_NODE_KEY),
        "generator.definition_node_key",
    )
    if "/" in definition_node_key:
        raise ConfigurationError("generator.definition_node_key must not contain '/'.")
    return GeneratorSettings(root_type=root_type, definition_node_key=definition_node_key)


def _parse_fields_section(value: Any) -> FieldSelection:
    if value is None:
        return FieldSelection(exclude=())
    section = _require_mapping(value, "fields")
    return FieldSelection(exclude=_normalize_string_sequence(section.get("exclude")))


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    if value is None:
        return OutputSettings(path=None, indent=2, definitions_only=False)
    section = _require_mapping(value, "output")
    raw_path = _optional_string(section.get("path"), "output.path")
    indent = _require_non_negative_int(section.get("indent", 2), "output.indent")
    definitions_only = section.get("definitions_only", False)
    if not isinstance(definitions_only, bool):
        raise ConfigurationError("output.definitions_only must be a boolean.")
    return OutputSettings(
        path=_resolve_path(base_path, raw_path) if raw_path else None,
        indent=indent,
        definitions_only=definitions_only,
    )


def _normalize_string_sequence(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError("fields.exclude entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError("fields.exclude must be a string or list of strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
