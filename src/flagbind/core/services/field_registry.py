"""
Per-type field registry used by the struct binder.

Each destination type is described once: every field is indexed under its
normalized key together with its declared type and whether it may be
assigned. Lookups afterwards are plain dict hits.
"""

from __future__ import annotations

import builtins
import dataclasses
import sys
import typing
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from flagbind.core.common.logging_utils import get_logger
from flagbind.core.common.naming import to_field_key

logger = get_logger(__name__)


@dataclass(frozen=True)
class FieldSpec:
    """Describes one assignable (or not) field of a record type."""

    name: str
    key: str
    field_type: Any
    settable: bool = True

    @property
    def type_name(self) -> str:
        if typing.get_origin(self.field_type) is None and isinstance(self.field_type, type):
            return self.field_type.__name__
        return str(self.field_type)


def _resolve_type_hints(obj: Any) -> dict[str, Any]:
    try:
        return typing.get_type_hints(obj)
    except Exception as e:
        # Unresolvable forward references; callers resolve field by field
        logger.debug("Could not resolve type hints", target=repr(obj), error=str(e))
        return {}


def _resolve_annotation(annotation: Any, record_type: type) -> Any:
    """Evaluate one string annotation in the module that defines its record type.

    Annotations that still cannot be evaluated are returned unchanged and
    are reported as unsupported when a key targets them.
    """
    if not isinstance(annotation, str):
        return annotation
    module = sys.modules.get(record_type.__module__)
    namespace = dict(vars(module)) if module is not None else {}
    try:
        return eval(annotation, {"__builtins__": builtins}, namespace)  # noqa: S307
    except Exception:
        logger.debug("Could not resolve annotation", annotation=annotation)
        return annotation


def _dataclass_fields(record_type: type) -> list[FieldSpec]:
    hints = _resolve_type_hints(record_type)
    specs: list[FieldSpec] = []
    for field in dataclasses.fields(record_type):
        specs.append(
            FieldSpec(
                name=field.name,
                key=to_field_key(field.name),
                field_type=hints[field.name]
                if field.name in hints
                else _resolve_annotation(field.type, record_type),
                settable=not field.name.startswith("_"),
            )
        )
    return specs


def _model_fields(record_type: type[BaseModel]) -> list[FieldSpec]:
    specs: list[FieldSpec] = []
    for name, info in record_type.model_fields.items():
        specs.append(
            FieldSpec(
                name=name,
                key=to_field_key(name),
                field_type=info.annotation,
                settable=not info.frozen,
            )
        )
    return specs


def _property_fields(record_type: type) -> list[FieldSpec]:
    specs: dict[str, FieldSpec] = {}
    # Walk base classes first so overrides in subclasses win
    for klass in reversed(record_type.__mro__):
        if klass.__module__.startswith("pydantic") or klass is object:
            continue
        for name, attr in vars(klass).items():
            if not isinstance(attr, property) or name.startswith("_"):
                continue
            field_type = _resolve_type_hints(attr.fget).get("return") if attr.fget else None
            specs[name] = FieldSpec(
                name=name,
                key=to_field_key(name),
                field_type=field_type,
                settable=attr.fset is not None,
            )
    return list(specs.values())


def is_record_type(record_type: Any) -> bool:
    """Return True for the record kinds the binder knows how to describe."""
    if not isinstance(record_type, type):
        return False
    return dataclasses.is_dataclass(record_type) or issubclass(record_type, BaseModel)


class FieldRegistry:
    """Normalized-key index over the fields of one record type."""

    def __init__(self, record_type: type) -> None:
        if not is_record_type(record_type):
            raise TypeError(f"{record_type!r} is not a dataclass or pydantic model type")

        self.record_type = record_type
        self._fields: dict[str, FieldSpec] = {}

        if dataclasses.is_dataclass(record_type):
            declared = _dataclass_fields(record_type)
        else:
            declared = _model_fields(record_type)

        # Public declared fields shadow properties, which shadow private fields
        private = [spec for spec in declared if spec.name.startswith("_")]
        public = [spec for spec in declared if not spec.name.startswith("_")]
        for spec in private + _property_fields(record_type) + public:
            self._fields[spec.key] = spec

        logger.debug(
            "Built field registry",
            record=record_type.__qualname__,
            keys=sorted(self._fields),
        )

    def lookup(self, key: str) -> FieldSpec | None:
        """Return the field registered under ``key``, or None."""
        return self._fields.get(key)

    def keys(self) -> list[str]:
        return list(self._fields)

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __len__(self) -> int:
        return len(self._fields)


_registry: dict[type, FieldRegistry] = {}


def get_field_registry(record_type: type) -> FieldRegistry:
    """
    Gets the field registry for a record type, building it on first use.

    Args:
        record_type: A dataclass or pydantic model class.

    Returns:
        The cached registry for the type.
    """
    registry = _registry.get(record_type)
    if registry is None:
        registry = FieldRegistry(record_type)
        _registry[record_type] = registry
    return registry


def clear_registry() -> None:
    """
    Clears the cached field registries.
    """
    _registry.clear()
