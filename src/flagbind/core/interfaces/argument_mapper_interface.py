from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class IArgumentMapper(Protocol):
    """Turns a flat argument list into a mapping of name to value.

    Implementations should be pure and side-effect free.
    """

    def parse(self, args: Sequence[str]) -> dict[str, str]:
        """Pair up ``[-]name value`` tokens into a dictionary.

        Args:
            args: Argument tokens with the program name already removed

        Returns:
            A dictionary of argument name to argument value.

        Raises:
            EmptyInputError: If ``args`` is empty.
        """
        ...
