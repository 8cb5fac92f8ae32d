"""
Process-level entry points.

These read ``sys.argv`` by default, drop the program name and hand the
rest to the mapper and binder.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any

from flagbind.core.common.exceptions import EmptyInputError
from flagbind.core.config.binding_config import BindingConfig
from flagbind.core.services.argument_mapper import ArgumentMapper
from flagbind.core.services.struct_binder import StructBinder


def _program_arguments(argv: Sequence[str] | None) -> Sequence[str]:
    if argv is None:
        argv = sys.argv
    if len(argv) == 0:
        raise EmptyInputError()
    return argv[1:]


def get_args_map(
    argv: Sequence[str] | None = None, config: BindingConfig | None = None
) -> dict[str, str]:
    """Map the process arguments into a dictionary.

    Running ``myapp -name John -age 30`` yields
    ``{"name": "John", "age": "30"}``.

    Args:
        argv: Full argument vector including the program name. Defaults to
            ``sys.argv``.
        config: Optional binding config supplying the flag prefix.

    Raises:
        EmptyInputError: If there are no arguments after the program name.
    """
    config = config or BindingConfig()
    return ArgumentMapper.from_config(config).parse(_program_arguments(argv))


def get_args_struct(
    destination: Any,
    ignore_unknown: bool | None = None,
    argv: Sequence[str] | None = None,
    config: BindingConfig | None = None,
) -> None:
    """Populate ``destination`` from the process arguments.

    Example::

        @dataclass
        class Settings:
            port: int = 0
            debug: bool = False

        settings = Settings()
        get_args_struct(settings, ignore_unknown=True)

    Keys are normalized with ``to_camel_case`` before they are matched to
    fields, so ``-max_size 10`` sets a field named ``max_size`` or ``MaxSize``.

    Args:
        destination: A mutable dataclass or pydantic model instance.
        ignore_unknown: Skip arguments that match no field. When given
            together with ``config`` it overrides the config's own flag.
        argv: Full argument vector including the program name. Defaults to
            ``sys.argv``.
        config: Optional binding config.

    Raises:
        EmptyInputError: If there are no arguments after the program name.
        FlagBindError: Any binding failure; see ``StructBinder.bind``.
    """
    if config is None:
        config = BindingConfig(ignore_unknown=bool(ignore_unknown))
    elif ignore_unknown is not None:
        config = config.model_copy(update={"ignore_unknown": ignore_unknown})
    mapped = get_args_map(argv, config)
    StructBinder(config).bind(mapped, destination)
