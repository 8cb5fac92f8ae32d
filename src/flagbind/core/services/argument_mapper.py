from __future__ import annotations

from collections.abc import Sequence

from flagbind.core.common.exceptions import EmptyInputError
from flagbind.core.common.logging_utils import get_logger
from flagbind.core.config.binding_config import DEFAULT_FLAG_PREFIX, BindingConfig
from flagbind.core.interfaces.argument_mapper_interface import IArgumentMapper

logger = get_logger(__name__)


class ArgumentMapper(IArgumentMapper):
    """Pairs flat ``[-]name value`` tokens into a name to value mapping.

    - Strips every leading occurrence of the flag prefix from names
    - Accepts names without a prefix the same way
    - Pairs a trailing unpaired name with ``""``
    - Lets later duplicates overwrite earlier ones
    """

    def __init__(self, flag_prefix: str = DEFAULT_FLAG_PREFIX) -> None:
        self._flag_prefix = ""
        self.flag_prefix = flag_prefix

    @classmethod
    def from_config(cls, config: BindingConfig) -> ArgumentMapper:
        return cls(flag_prefix=config.flag_prefix)

    @property
    def flag_prefix(self) -> str:
        """Return the current flag prefix."""
        return self._flag_prefix

    @flag_prefix.setter
    def flag_prefix(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("Flag prefix must be a string.")
        if value == "":
            raise ValueError("Flag prefix must not be empty.")
        self._flag_prefix = value

    def strip_prefix(self, name: str) -> str:
        prefix = self._flag_prefix
        while name.startswith(prefix):
            name = name[len(prefix) :]
        return name

    def parse(self, args: Sequence[str]) -> dict[str, str]:
        if len(args) == 0:
            raise EmptyInputError()

        tokens = list(args)
        if len(tokens) % 2 != 0:
            tokens.append("")

        mapped: dict[str, str] = {}
        for index in range(0, len(tokens), 2):
            mapped[self.strip_prefix(tokens[index])] = tokens[index + 1]

        logger.debug("Mapped arguments", tokens=len(tokens), keys=list(mapped))

        return mapped


def map_arguments(
    args: Sequence[str], flag_prefix: str = DEFAULT_FLAG_PREFIX
) -> dict[str, str]:
    """Map ``[-]name value`` tokens into a dictionary.

    Args:
        args: Argument tokens with the program name already removed.
        flag_prefix: Prefix stripped from the start of each name.

    Returns:
        A dictionary of argument name to argument value.

    Raises:
        EmptyInputError: If ``args`` is empty.
    """
    return ArgumentMapper(flag_prefix).parse(args)
