"""Record type loading from `module:Qualname` references."""

from __future__ import annotations

import importlib

from .field_reader import is_record_type


class RecordTypeLoadError(Exception):
    """Raised when a record type reference cannot be resolved."""


def load_record_type(reference: str) -> type:
    """Import and return the record class named by `package.module:Outer.Inner`."""
    module_name, separator, attribute_path = reference.strip().partition(":")
    if not separator or not module_name or not attribute_path:
        raise RecordTypeLoadError(
            f"Record type reference must look like 'package.module:ClassName', got '{reference}'."
        )

    try:
        target: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise RecordTypeLoadError(f"Cannot import module '{module_name}': {exc}") from exc

    for attribute in attribute_path.split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as exc:
            raise RecordTypeLoadError(
                f"Module '{module_name}' has no attribute '{attribute_path}'."
            ) from exc

    if not is_record_type(target):
        raise RecordTypeLoadError(
            f"'{reference}' is not a record type (a dataclass or a class with __schema_fields__)."
        )
    assert isinstance(target, type)
    return target
