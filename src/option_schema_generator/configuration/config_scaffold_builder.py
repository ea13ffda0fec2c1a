"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-generator.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generator configuration template for option-schema-generator.
# Replace every <REQUIRED> placeholder before running generate.
# Remove or fill <OPTIONAL> placeholders only when your setup needs them.

generator:
  # Root record type as 'package.module:ClassName' (a dataclass or a class with __schema_fields__).
  root_type: "<REQUIRED>"
  # Node under which nested record definitions are stored; $ref pointers use '#/<node>/'.
  definition_node_key: "definitions"

fields:
  # Root-level property names to leave out of the generated schema.
  exclude:
    - "<OPTIONAL>"

output:
  # Destination file, relative to this configuration file. Omit to print to stdout.
  # path: "<OPTIONAL>"
  indent: 2
  # Emit only the definitions document with the root type described as a definition.
  definitions_only: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generator configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
