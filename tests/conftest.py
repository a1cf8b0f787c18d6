"""Pytest configuration for ue5-remote-bridge tests."""
import sys
from pathlib import Path
import pytest

# Add src directory to Python path so tests can import core, services, transport, etc.
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def reset_rc_client():
    """Drop any client a test installed so the next test starts from config defaults."""
    yield
    from transport.rc_client import set_rc_client
    set_rc_client(None)


def pytest_collection_modifyitems(session, config, items):
    """Run unit tests before the tool-level integration tests."""
    integration_tests = []
    other_tests = []

    for item in items:
        if "integration" in str(item.fspath):
            integration_tests.append(item)
        else:
            other_tests.append(item)

    items[:] = other_tests + integration_tests
