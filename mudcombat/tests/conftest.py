"""
Test configuration and fixtures for the mudcombat test suite.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

os.environ.setdefault("LOGGING_ENVIRONMENT", "unit_test")

from mudcombat.config import reset_config  # noqa: E402
from mudcombat.structured_logging.enhanced_logging_config import get_logger  # noqa: E402
from mudcombat.tests.fixtures.combat_world import CombatWorld, build_combat_world  # noqa: E402


@pytest.fixture(autouse=True)
def reset_config_singleton() -> Generator[None, None, None]:
    """Reset config singleton before and after each test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def clear_game_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep GAME_* settings from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("GAME_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def combat_world() -> CombatWorld:
    """Standard world with handlers registered on the event bus."""
    return build_combat_world()


@pytest.fixture
def test_logger() -> Any:
    """Provide a logger for tests."""
    return get_logger(__name__)


def pytest_collection_modifyitems(config: Any, items: list[Any]) -> None:
    """Tests in unit/ get @pytest.mark.unit."""
    for item in items:
        file_path = str(item.fspath)
        if "/unit/" in file_path or "\\unit\\" in file_path:
            item.add_marker(pytest.mark.unit)
