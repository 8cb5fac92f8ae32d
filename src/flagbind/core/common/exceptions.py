"""
Common exception classes for flagbind.

This module defines the error taxonomy raised by the argument mapper and the
struct binder. Every error is returned to the immediate caller; nothing here
logs or terminates the process.
"""

from __future__ import annotations

from typing import Any


class FlagBindError(Exception):
    """Base exception class for all flagbind errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        **kwargs: Any,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        # Attach any extra attributes provided by the raising site
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }

        # Include any additional attributes that were set via kwargs
        for attr_name in dir(self):
            if (
                not attr_name.startswith("_")
                and attr_name not in ["message", "details", "args"]
                and not callable(getattr(self, attr_name))
            ):
                error_dict[attr_name] = getattr(self, attr_name)

        return {"error": error_dict}


class EmptyInputError(FlagBindError):
    """Raised when there are no arguments to map.

    The ``mapping`` attribute always holds an empty dict so callers that
    catch this sentinel can keep going with the empty result.
    """

    def __init__(
        self,
        message: str = "no valid input provided",
        details: dict | None = None,
        **kwargs: Any,
    ):
        kwargs.setdefault("mapping", {})
        super().__init__(message, details, **kwargs)


class InvalidDestinationError(FlagBindError):
    """Raised when the destination is not a mutable record instance."""

    def __init__(
        self,
        message: str = "destination must be a mutable record instance",
        destination_type: str | None = None,
        details: dict | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, details, destination_type=destination_type, **kwargs)


class UnknownFieldError(FlagBindError):
    """Raised when a normalized key matches no field of the destination."""

    def __init__(
        self,
        field_name: str,
        message: str | None = None,
        details: dict | None = None,
        **kwargs: Any,
    ):
        if message is None:
            message = f"no such field [{field_name}] in provided output struct"
        super().__init__(message, details, field_name=field_name, **kwargs)


class NotSettableError(FlagBindError):
    """Raised when the matching field exists but cannot be assigned."""

    def __init__(
        self,
        field_name: str,
        message: str | None = None,
        details: dict | None = None,
        **kwargs: Any,
    ):
        if message is None:
            message = f"cannot set field {field_name}"
        super().__init__(message, details, field_name=field_name, **kwargs)


class InvalidValueError(FlagBindError):
    """Raised when a value cannot be coerced to the field's declared type."""

    def __init__(
        self,
        field_name: str,
        value: Any = None,
        expected_type: str | None = None,
        message: str | None = None,
        details: dict | None = None,
        **kwargs: Any,
    ):
        if message is None:
            message = f"invalid {expected_type} value for {field_name}: {value!r}"
        super().__init__(
            message,
            details,
            field_name=field_name,
            value=value,
            expected_type=expected_type,
            **kwargs,
        )


class TypeMismatchError(InvalidValueError):
    """Raised when a mapped value is not a string and so cannot be coerced."""

    def __init__(
        self,
        field_name: str,
        value: Any = None,
        expected_type: str | None = None,
        details: dict | None = None,
        **kwargs: Any,
    ):
        super().__init__(
            field_name,
            value=value,
            expected_type=expected_type,
            message=f"value for {field_name} is not a string",
            details=details,
            **kwargs,
        )


class UnsupportedFieldTypeError(FlagBindError):
    """Raised when a field's declared type has no coercion rule."""

    def __init__(
        self,
        field_name: str,
        field_type: str,
        message: str | None = None,
        details: dict | None = None,
        **kwargs: Any,
    ):
        if message is None:
            message = f"unsupported field type {field_type} for field {field_name}"
        super().__init__(
            message, details, field_name=field_name, field_type=field_type, **kwargs
        )
