from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import ConfigDict, field_validator

from flagbind.core.common.logging_utils import get_logger
from flagbind.core.interfaces.model_bases import DomainModel

logger = get_logger(__name__)

ENV_IGNORE_UNKNOWN = "FLAGBIND_IGNORE_UNKNOWN"
ENV_FLAG_PREFIX = "FLAGBIND_FLAG_PREFIX"

DEFAULT_FLAG_PREFIX = "-"


def _env_to_bool(name: str, default: bool, env: Mapping[str, str]) -> bool:
    """Return an environment variable parsed as a boolean flag."""
    value = env.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BindingConfig(DomainModel):
    """Options shared by the argument mapper and the struct binder."""

    model_config = ConfigDict(frozen=True)

    ignore_unknown: bool = False
    flag_prefix: str = DEFAULT_FLAG_PREFIX

    @field_validator("flag_prefix")
    @classmethod
    def _validate_flag_prefix(cls, value: str) -> str:
        if value == "":
            raise ValueError("Flag prefix must not be empty.")
        return value

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> BindingConfig:
        """Build a config from ``FLAGBIND_*`` environment variables.

        Unset variables keep their defaults.
        """
        if env is None:
            env = os.environ

        values: dict[str, object] = {
            "ignore_unknown": _env_to_bool(ENV_IGNORE_UNKNOWN, False, env),
        }
        if ENV_FLAG_PREFIX in env:
            values["flag_prefix"] = env[ENV_FLAG_PREFIX]

        config = cls(**values)
        logger.debug("Loaded binding config from environment", config=repr(config))
        return config
