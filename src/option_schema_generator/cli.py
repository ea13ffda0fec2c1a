"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from option_schema_generator.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    FieldSelection,
    GeneratorSettings,
    OutputSettings,
    load_configuration,
    write_placeholder_configuration,
)
from option_schema_generator.definition_registry import (
    DEFAULT_DEFINITION_NODE_KEY,
    describe_definitions,
    render_schema_document,
)
from option_schema_generator.record_introspection import (
    CollectionKind,
    EnumKind,
    FieldDescriptor,
    RecordReference,
    RecordTypeLoadError,
    load_record_type,
    qualified_name,
    read_field_descriptors,
)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="option-schema-generator")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """JSON-Schema generator for option record types."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
        stream=sys.stderr,
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generator configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML generator configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON generator configuration file",
)
@click.option(
    "--root",
    "root_type",
    required=False,
    help="Root record type as 'package.module:ClassName' (instead of --config)",
)
@click.option(
    "--definitions-key",
    "definition_node_key",
    required=False,
    help=f"Definitions node name used in $ref pointers [default: {DEFAULT_DEFINITION_NODE_KEY}]",
)
@click.option(
    "--exclude",
    "excluded_fields",
    multiple=True,
    help="Root property name to leave out; repeatable",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the schema to this file instead of stdout",
)
@click.option("--indent", type=click.IntRange(min=0), required=False, help="JSON indentation")
@click.option(
    "--definitions-only",
    is_flag=True,
    default=False,
    help="Emit only the definitions document, with the root described as a definition.",
)
def generate(  # pylint: disable=too-many-arguments
    config_path: str | None,
    root_type: str | None,
    definition_node_key: str | None,
    excluded_fields: tuple[str, ...],
    output_path: str | None,
    indent: int | None,
    definitions_only: bool,
) -> None:
    """Generate the JSON schema of a root record type."""
    try:
        configuration = _resolve_configuration(config_path, root_type)
        generator = configuration.generator
        node_key = definition_node_key or generator.definition_node_key
        if "/" in node_key:
            raise CliError("--definitions-key must not contain '/'.")
        exclude = configuration.fields.exclude + tuple(excluded_fields)
        output = configuration.output
        record_type = load_record_type(generator.root_type)
        resolved_indent = output.indent if indent is None else indent
        if definitions_only or output.definitions_only:
            text = describe_definitions(record_type, definition_node_key=node_key).to_json(
                resolved_indent
            )
        else:
            text = render_schema_document(
                record_type,
                definition_node_key=node_key,
                field_filter=FieldSelection(exclude=exclude).accepts,
                indent=resolved_indent,
            )
        destination = Path(output_path) if output_path else output.path
        if destination is None:
            click.echo(text)
            return
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(text + "\n", encoding="utf-8")
    except (ConfigurationError, RecordTypeLoadError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination.resolve()))


@cli.command(name="fields")
@click.option(
    "--root",
    "root_type",
    required=True,
    help="Record type as 'package.module:ClassName'",
)
def list_fields(root_type: str) -> None:
    """Print the field descriptors read from a record type, one per line."""
    try:
        record_type = load_record_type(root_type)
    except RecordTypeLoadError as exc:
        raise CliError(str(exc)) from exc
    for descriptor in read_field_descriptors(record_type):
        click.echo(_format_descriptor(descriptor))


def _resolve_configuration(config_path: str | None, root_type: str | None) -> Configuration:
    if config_path and root_type:
        raise CliError("Use either --config or --root, not both.")
    if config_path:
        return load_configuration(config_path)
    if not root_type:
        raise CliError("Either --config or --root is required.")
    return Configuration(
        path=Path.cwd(),
        generator=GeneratorSettings(
            root_type=root_type, definition_node_key=DEFAULT_DEFINITION_NODE_KEY
        ),
        fields=FieldSelection(exclude=()),
        output=OutputSettings(path=None, indent=2, definitions_only=False),
    )


def _format_descriptor(descriptor: FieldDescriptor) -> str:
    kind = descriptor.kind
    kind_text = descriptor.json_type.value
    if isinstance(kind, EnumKind):
        kind_text = f"enum[{', '.join(kind.constants)}]"
    elif isinstance(kind, CollectionKind):
        element = kind.element
        if element is None:
            kind_text = "array[?]"
        elif isinstance(element, RecordReference):
            kind_text = f"array[{qualified_name(element.record_type)}]"
        else:
            kind_text = f"array[{element.json_type.value}]"
    flags = "ignored" if descriptor.ignore else "-"
    return "\t".join((descriptor.name, kind_text, flags, descriptor.description))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
