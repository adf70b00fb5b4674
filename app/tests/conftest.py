import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection. Pytest
# may import `conftest` before the project root is on sys.path depending on
# invocation; add it explicitly here before importing application modules.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from infrastructure.i18n import InMemoryTranslationRegistry  # noqa: E402


def pytest_configure(config):
    """Register unit test marker."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")


@pytest.fixture
def registry():
    """Empty in-memory registry with English active."""
    return InMemoryTranslationRegistry(default_language="en")
