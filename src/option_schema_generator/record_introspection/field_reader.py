"""Field descriptor reader for record types."""

from __future__ import annotations

import collections.abc
import dataclasses
import inspect
import logging
import sys
import types
import typing
from decimal import Decimal
from enum import Enum
from typing import Any, Union, get_args, get_origin

from .field_models import (
    DESCRIPTION_METADATA_KEY,
    IGNORE_METADATA_KEY,
    CollectionKind,
    EnumKind,
    FieldDescriptor,
    JsonType,
    MapKind,
    RecordReference,
    ScalarKind,
    ValueKind,
)

logger = logging.getLogger(__name__)

EXPLICIT_FIELDS_ATTRIBUTE = "__schema_fields__"

_SCALAR_TYPES: tuple[tuple[type, JsonType], ...] = (
    # bool must precede int: bool is an int subclass.
    (bool, JsonType.BOOLEAN),
    (int, JsonType.INTEGER),
    (float, JsonType.NUMBER),
    (Decimal, JsonType.NUMBER),
    (str, JsonType.STRING),
)
_MAPPING_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)
_COLLECTION_ORIGINS = (
    list,
    tuple,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
)


def is_record_type(candidate: object) -> bool:
    """Return True for classes that can be described as a record type."""
    if not isinstance(candidate, type):
        return False
    return dataclasses.is_dataclass(candidate) or callable(
        getattr(candidate, EXPLICIT_FIELDS_ATTRIBUTE, None)
    )


def qualified_name(record_type: type) -> str:
    """Return the fully-qualified name used to identify a record type."""
    return f"{record_type.__module__}.{record_type.__qualname__}"


def definition_key_from_name(name: str) -> str:
    """Derive a definition key from a fully-qualified name."""
    return name.replace(".", "_")


def definition_key(record_type: type) -> str:
    """Derive the definition key of a record type."""
    return definition_key_from_name(qualified_name(record_type))


def read_field_descriptors(record: type | object) -> tuple[FieldDescriptor, ...]:
    """Return the field descriptors of a record class or instance in declaration order.

    Classes exposing ``__schema_fields__()`` are self-describing and their list is
    returned unchanged. Dataclasses are introspected from their type hints and
    field metadata. Shapes that cannot be resolved are logged and degraded so the
    caller always receives one descriptor per declared field.
    """
    record_type = record if isinstance(record, type) else type(record)
    explicit_fields = getattr(record_type, EXPLICIT_FIELDS_ATTRIBUTE, None)
    if callable(explicit_fields):
        return tuple(explicit_fields())
    if not dataclasses.is_dataclass(record_type):
        raise TypeError(f"{qualified_name(record_type)} is not a record type.")

    hints = _read_type_hints(record_type)
    descriptors = []
    for field in dataclasses.fields(record_type):
        annotation = hints.get(field.name, Any)
        if isinstance(annotation, _UnresolvedAnnotation):
            kind = _degrade_unresolved(annotation, field.name, record_type)
        else:
            kind = _resolve_value_kind(annotation, field.name, record_type)
        descriptors.append(
            FieldDescriptor(
                name=field.name,
                kind=kind,
                description=str(field.metadata.get(DESCRIPTION_METADATA_KEY) or ""),
                ignore=bool(field.metadata.get(IGNORE_METADATA_KEY, False)),
            )
        )
    return tuple(descriptors)


@dataclasses.dataclass(frozen=True)
class _UnresolvedAnnotation:
    text: str
    container: Any
    reason: str


def _read_type_hints(record_type: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(record_type)
    except (NameError, TypeError, SyntaxError) as exc:
        logger.debug(
            "Resolving annotations of %s one field at a time: %s", qualified_name(record_type), exc
        )

    # Same namespaces get_type_hints uses for classes, one annotation at a time.
    hints: dict[str, Any] = {}
    for base in reversed(record_type.__mro__):
        globalns = getattr(sys.modules.get(base.__module__), "__dict__", {})
        localns = dict(vars(base))
        for name, annotation in inspect.get_annotations(base).items():
            try:
                hints[name] = _evaluate_annotation(annotation, globalns, localns)
            except (NameError, TypeError, SyntaxError) as exc:
                hints[name] = _UnresolvedAnnotation(
                    text=str(annotation),
                    container=_annotation_container(annotation, globalns, localns),
                    reason=str(exc),
                )
    return hints


def _evaluate_annotation(
    annotation: Any, globalns: dict[str, Any], localns: dict[str, Any]
) -> Any:
    holder = types.SimpleNamespace(__annotations__={"value": annotation})
    return typing.get_type_hints(holder, globalns=globalns, localns=localns)["value"]


def _annotation_container(
    annotation: Any, globalns: dict[str, Any], localns: dict[str, Any]
) -> Any:
    if not isinstance(annotation, str):
        return None
    head = annotation.partition("[")[0].strip()
    try:
        return _evaluate_annotation(head, globalns, localns)
    except (NameError, TypeError, SyntaxError):
        return None


def _degrade_unresolved(
    annotation: _UnresolvedAnnotation, field_name: str, record_type: type
) -> ValueKind:
    logger.warning(
        "Cannot resolve type %r of property %s of %s (%s); describing it without detail.",
        annotation.text,
        field_name,
        qualified_name(record_type),
        annotation.reason,
    )
    container = annotation.container
    origin = get_origin(container) or container
    if origin in _COLLECTION_ORIGINS:
        return CollectionKind(element=None)
    if origin in _MAPPING_ORIGINS:
        return MapKind()
    return ScalarKind(JsonType.OBJECT)


def _resolve_value_kind(annotation: Any, field_name: str, record_type: type) -> ValueKind:
    annotation = _unwrap_optional(annotation)
    origin = get_origin(annotation)

    if origin is None and isinstance(annotation, type):
        if issubclass(annotation, Enum):
            return EnumKind(constants=tuple(member.name for member in annotation))
        for scalar_type, json_type in _SCALAR_TYPES:
            if issubclass(annotation, scalar_type):
                return ScalarKind(json_type)

    container = origin if origin is not None else annotation
    if container in _MAPPING_ORIGINS:
        _check_mapping_key(annotation, field_name, record_type)
        return MapKind()
    if container in _COLLECTION_ORIGINS:
        return CollectionKind(element=_resolve_element(annotation, field_name, record_type))
    if is_record_type(annotation):
        return ScalarKind(JsonType.OBJECT)

    logger.warning(
        "Unsupported type %r for property %s of %s; describing it as a plain object.",
        annotation,
        field_name,
        qualified_name(record_type),
    )
    return ScalarKind(JsonType.OBJECT)


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) not in (Union, types.UnionType):
        return annotation
    options = [arg for arg in get_args(annotation) if arg is not type(None)]
    if len(options) == 1:
        return options[0]
    return annotation


def _check_mapping_key(annotation: Any, field_name: str, record_type: type) -> None:
    arguments = get_args(annotation)
    if arguments and arguments[0] is not str:
        logger.warning(
            "Map property %s of %s has non-string keys %r; describing it as string-keyed.",
            field_name,
            qualified_name(record_type),
            arguments[0],
        )


def _resolve_element(
    annotation: Any, field_name: str, record_type: type
) -> ScalarKind | RecordReference | None:
    arguments = get_args(annotation)
    if get_origin(annotation) is tuple and len(arguments) == 2 and arguments[1] is Ellipsis:
        arguments = arguments[:1]
    if len(arguments) != 1:
        logger.warning(
            "%r not supported for collection property %s of %s: expected one type argument.",
            annotation,
            field_name,
            qualified_name(record_type),
        )
        return None

    element_type = _unwrap_optional(arguments[0])
    if element_type is str:
        return ScalarKind(JsonType.STRING)
    if is_record_type(element_type):
        return RecordReference(element_type)

    logger.warning(
        "%r not supported for collection property %s of %s: elements must be str or records.",
        annotation,
        field_name,
        qualified_name(record_type),
    )
    return None
