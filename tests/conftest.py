"""
Shared fixtures for the test suite.

Centralizes reusable test infrastructure so individual test files
don't need to repeat override boilerplate.
"""

import pytest
from fastapi.testclient import TestClient

from api.deps import get_config
from api.main import app
from core.config import ServiceConfig

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

TEST_CONFIG = ServiceConfig(default_root="A", default_scale="dorian", log_level="DEBUG")
"""Non-default config so tests can tell configured defaults from hardcoded ones."""


# ---------------------------------------------------------------------------
# FastAPI test client fixture
# ---------------------------------------------------------------------------


@pytest.fixture()
def api_client():
    """FastAPI ``TestClient`` with the service config overridden."""
    app.dependency_overrides[get_config] = lambda: TEST_CONFIG

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
