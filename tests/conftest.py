from collections.abc import Iterator
from dataclasses import dataclass

import pytest
from flagbind.core.services.field_registry import clear_registry


@dataclass
class Config:
    source: str = ""
    size: int = 0
    skip: bool = False


@pytest.fixture(autouse=True)
def _fresh_field_registry() -> Iterator[None]:
    """Keep cached field registries from leaking between tests."""
    clear_registry()
    yield
    clear_registry()


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("FLAGBIND_IGNORE_UNKNOWN", "FLAGBIND_FLAG_PREFIX"):
        monkeypatch.delenv(name, raising=False)
