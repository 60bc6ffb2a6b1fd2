# tests/integration/conftest.py
from pathlib import Path
import pytest


FIXTURES = Path(__file__).parent.parent / "fixtures"


def pytest_collection_modifyitems(items):
    """Add 'integration' marker to all tests in this directory."""
    for item in items:
        if "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def load_fixture():
    def load(name: str) -> str:
        return (FIXTURES / name).read_text(encoding="utf-8")
    return load
