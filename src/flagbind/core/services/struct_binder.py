"""
Assigns mapped argument values to the fields of a record instance.

Keys are normalized with :func:`to_camel_case` and matched against the
destination type's field registry. Assignments are applied one key at a
time; when a key fails, the fields already written stay written.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from flagbind.core.common.coercion import get_coercer
from flagbind.core.common.exceptions import (
    InvalidDestinationError,
    InvalidValueError,
    NotSettableError,
    TypeMismatchError,
    UnknownFieldError,
    UnsupportedFieldTypeError,
)
from flagbind.core.common.logging_utils import get_logger
from flagbind.core.common.naming import to_camel_case
from flagbind.core.config.binding_config import BindingConfig
from flagbind.core.interfaces.struct_binder_interface import IStructBinder
from flagbind.core.services.field_registry import (
    FieldRegistry,
    FieldSpec,
    get_field_registry,
    is_record_type,
)

logger = get_logger(__name__)


def _is_frozen(destination: Any) -> bool:
    if dataclasses.is_dataclass(destination):
        params = getattr(type(destination), "__dataclass_params__", None)
        return bool(getattr(params, "frozen", False))
    if isinstance(destination, BaseModel):
        return bool(type(destination).model_config.get("frozen", False))
    return False


class StructBinder(IStructBinder):
    """Bind string arguments onto dataclass or pydantic model instances."""

    def __init__(self, config: BindingConfig | None = None) -> None:
        self.config = config or BindingConfig()

    @property
    def ignore_unknown(self) -> bool:
        return self.config.ignore_unknown

    def _registry_for(self, destination: Any) -> FieldRegistry:
        record_type = type(destination)
        if isinstance(destination, type) or not is_record_type(record_type):
            raise InvalidDestinationError(destination_type=record_type.__name__)
        if _is_frozen(destination):
            raise InvalidDestinationError(
                f"destination {record_type.__name__} is frozen",
                destination_type=record_type.__name__,
            )
        return get_field_registry(record_type)

    def bind(self, arguments: Mapping[str, Any], destination: Any) -> None:
        registry = self._registry_for(destination)

        for key, value in arguments.items():
            field_key = to_camel_case(key)
            spec = registry.lookup(field_key)

            if spec is None:
                if not self.ignore_unknown:
                    raise UnknownFieldError(field_key)
                logger.debug("Skipping unknown field", field=field_key)
                continue

            self._assign(destination, spec, value)

    def _assign(self, destination: Any, spec: FieldSpec, value: Any) -> None:
        if not spec.settable:
            raise NotSettableError(spec.key)

        if not isinstance(value, str):
            raise TypeMismatchError(spec.key, value=value, expected_type=spec.type_name)

        coercer = get_coercer(spec.field_type)
        if coercer is None:
            raise UnsupportedFieldTypeError(spec.key, spec.type_name)

        try:
            coerced = coercer(value)
        except ValueError as e:
            raise InvalidValueError(
                spec.key,
                value=value,
                expected_type=spec.type_name,
                details={"reason": str(e)},
            ) from e

        try:
            setattr(destination, spec.name, coerced)
        except ValidationError as e:
            # Models with validate_assignment apply their own field constraints
            raise InvalidValueError(
                spec.key,
                value=value,
                expected_type=spec.type_name,
                details={"reason": str(e)},
            ) from e
        logger.debug(
            "Set field", record=type(destination).__name__, field=spec.name
        )


def bind_arguments(
    arguments: Mapping[str, Any], destination: Any, ignore_unknown: bool = False
) -> None:
    """Populate ``destination`` from ``arguments`` in place.

    Args:
        arguments: Mapping of argument name to string value.
        destination: A mutable dataclass or pydantic model instance.
        ignore_unknown: Skip keys that match no field instead of failing.

    Raises:
        InvalidDestinationError: ``destination`` is not a mutable record.
        UnknownFieldError: A key matches no field and ``ignore_unknown`` is off.
        NotSettableError: The matching field cannot be assigned.
        InvalidValueError: The value cannot be coerced to the field's type.
        UnsupportedFieldTypeError: The field's type has no coercion rule.
    """
    StructBinder(BindingConfig(ignore_unknown=ignore_unknown)).bind(arguments, destination)
