"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest
import json

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.meteologix.api import MeteologixClient  # noqa: E402
from src.meteologix.core.config import OPTIONS, Config  # noqa: E402

TEST_BASE_URL = "https://api.test.example/v02"
TEST_GEOCODER_URL = "https://geocoder.test.example/search"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep METEOLOGIX_* variables of the host from leaking into tests."""
    monkeypatch.delenv("METEOLOGIX_CONFIG_FILE", raising=False)
    for _, _, env_var in OPTIONS.values():
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def config():
    """Client configuration pointing at the mocked endpoints."""
    return Config(
        api_base_url=TEST_BASE_URL,
        geocoder_url=TEST_GEOCODER_URL,
        api_key="test-key",
    )


@pytest.fixture
def client(config):
    """Create API client with API key authentication."""
    with MeteologixClient(config) as api_client:
        yield api_client


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def load_fixture(fixtures_dir):
    """Return a loader for JSON wire fixtures."""
    def _load(name):
        with open(fixtures_dir / name, encoding="utf-8") as f:
            return json.load(f)
    return _load


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test against a mocked HTTP transport"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
