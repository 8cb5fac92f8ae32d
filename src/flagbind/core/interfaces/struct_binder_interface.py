from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class IStructBinder(Protocol):
    """Projects an argument mapping onto a caller-owned record instance."""

    def bind(self, arguments: Mapping[str, Any], destination: Any) -> None:
        """Assign each mapped value to the matching field of ``destination``.

        Assignments made before a failure are kept.
        """
        ...
