"""Root test configuration: quiet logging and session-level cleanup of runtime artifacts"""

from pathlib import Path

import pytest

from revdiff.logging_config import configure_logging


_PROJECT_ROOT = Path(__file__).parent.parent

_CLEANUP_FILES = ["revdiff.db", "test.db"]


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Route log records through the stdlib handler at WARNING so tests stay quiet."""
    configure_logging("WARNING")


@pytest.fixture(scope="session", autouse=True)
def cleanup_artifacts():
    """Remove DB files created during the test session."""
    yield
    for name in _CLEANUP_FILES:
        p = _PROJECT_ROOT / name
        if p.exists():
            p.unlink()
