"""flagbind: map command-line arguments to dictionaries and records."""

__version__ = "0.1.0"

from flagbind.api import get_args_map, get_args_struct
from flagbind.core.common.exceptions import (
    EmptyInputError,
    FlagBindError,
    InvalidDestinationError,
    InvalidValueError,
    NotSettableError,
    TypeMismatchError,
    UnknownFieldError,
    UnsupportedFieldTypeError,
)
from flagbind.core.common.naming import to_camel_case
from flagbind.core.config.binding_config import BindingConfig
from flagbind.core.services.argument_mapper import ArgumentMapper, map_arguments
from flagbind.core.services.struct_binder import StructBinder, bind_arguments

__all__ = [
    "ArgumentMapper",
    "BindingConfig",
    "EmptyInputError",
    "FlagBindError",
    "InvalidDestinationError",
    "InvalidValueError",
    "NotSettableError",
    "StructBinder",
    "TypeMismatchError",
    "UnknownFieldError",
    "UnsupportedFieldTypeError",
    "bind_arguments",
    "get_args_map",
    "get_args_struct",
    "map_arguments",
    "to_camel_case",
]
