"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from option_schema_generator.configuration import ConfigurationError, load_configuration
from option_schema_generator.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Generator configuration template" in scaffold
    assert "generator:" in scaffold
    assert "root_type:" in scaffold
    assert "definition_node_key:" in scaffold
    assert "fields:" in scaffold
    assert "exclude:" in scaffold
    assert "output:" in scaffold
    assert "definitions_only:" in scaffold
    assert "<REQUIRED>" in scaffold
    assert "<OPTIONAL>" in scaffold


def test_write_placeholder_configuration_writes_file(tmp_path: Path) -> None:
    output_path = tmp_path / "schema-generator.yaml"

    written_path = write_placeholder_configuration(output_path)

    assert written_path == output_path.resolve()
    assert output_path.exists()
    assert "<REQUIRED>" in output_path.read_text(encoding="utf-8")


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "schema-generator.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)


def test_unfilled_scaffold_is_rejected_by_loader(tmp_path: Path) -> None:
    output_path = write_placeholder_configuration(tmp_path / "schema-generator.yaml")

    with pytest.raises(ConfigurationError, match="generator.root_type"):
        load_configuration(output_path)
