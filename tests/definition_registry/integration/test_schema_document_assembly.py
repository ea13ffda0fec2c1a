"""Complete schema document assembly tests."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum

from option_schema_generator import (
    build_schema_document,
    describe_definitions,
    render_schema_document,
    schema_field,
)
from option_schema_generator.record_introspection import definition_key


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class CheckOptions:
    id: str = ""
    severity: Severity = Severity.WARNING
    paths: list[str] = field(default_factory=list)


@dataclass
class ProfileOptions:
    name: str = ""
    checks: list[CheckOptions] = field(default_factory=list)
    overrides: dict[str, str] = field(default_factory=dict)


@dataclass
class WorkspaceState:
    title: str = schema_field(default="", description="Workspace title")
    profiles: list[ProfileOptions] = field(default_factory=list)
    default_checks: list[CheckOptions] = field(default_factory=list)
    scratch: str = schema_field(default="", ignore=True)
    debug: bool = False


@dataclass
class FlatState:
    name: str = ""


def test_root_properties_are_inline_and_nested_types_are_definitions() -> None:
    document = build_schema_document(WorkspaceState)

    assert document["type"] == "object"
    assert document["additionalProperties"] is False
    assert list(document["properties"]) == ["title", "profiles", "default_checks", "debug"]
    assert document["properties"]["title"]["description"] == "Workspace title"
    assert list(document["definitions"]) == [
        definition_key(CheckOptions),
        definition_key(ProfileOptions),
    ]
    assert definition_key(WorkspaceState) not in document["definitions"]

    check = document["definitions"][definition_key(CheckOptions)]["properties"]
    assert check["severity"] == {"type": "string", "enum": ["info", "warning", "error"]}
    assert check["paths"] == {"type": "array", "items": {"type": "string"}}


def test_field_filter_applies_to_root_properties_only() -> None:
    document = build_schema_document(
        WorkspaceState,
        definition_node_key="defs",
        field_filter=lambda name: name not in {"debug", "default_checks", "name"},
    )

    assert list(document["properties"]) == ["title", "profiles"]
    profile = document["defs"][definition_key(ProfileOptions)]["properties"]
    assert "name" in profile
    assert profile["checks"]["items"] == {"$ref": f"#/defs/{definition_key(CheckOptions)}"}


def test_definitions_node_is_omitted_without_nested_types() -> None:
    document = build_schema_document(FlatState)

    assert document == {
        "type": "object",
        "properties": {"name": {"type": "string"}},
        "additionalProperties": False,
    }


def test_describe_definitions_includes_root_as_definition() -> None:
    definitions = describe_definitions(WorkspaceState)

    assert list(definitions) == [
        definition_key(WorkspaceState),
        definition_key(CheckOptions),
        definition_key(ProfileOptions),
    ]


def test_rendered_document_is_valid_json_and_stable() -> None:
    first = render_schema_document(WorkspaceState, indent=2)
    second = render_schema_document(WorkspaceState, indent=2)

    assert first == second
    assert json.loads(first) == build_schema_document(WorkspaceState)
    assert "\n  " in first
