"""Pytest fixtures for Halal Finance tests."""
import json
import pytest
from datetime import date
from unittest.mock import MagicMock

from halal_finance import create_app
from halal_finance.services.time_provider import TimeProvider


# Fixed "today" for deterministic tests
FROZEN_TODAY = date(2026, 1, 15)

PROVIDER_ENV_VARS = (
    'GOLDAPI_KEY',
    'UPSTOX_ACCESS_TOKEN',
    'SILVER_PRICE_PER_GRAM',
    'GOLD_PRICE_FALLBACK',
    'PRICING_CURRENCY',
    'PRICING_ALLOW_NETWORK',
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test without provider keys or price overrides."""
    for name in PROVIDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def app():
    """Create application for testing.

    Yields:
        Flask application configured for testing.
    """
    app = create_app({'TESTING': True})
    yield app


@pytest.fixture
def client(app):
    """Create test client.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making requests.
    """
    with app.test_client() as client:
        yield client


@pytest.fixture
def runner(app):
    """Create CLI runner for the app's Click commands."""
    return app.test_cli_runner()


@pytest.fixture
def frozen_time():
    """Freeze get_today() to FROZEN_TODAY for the duration of a test."""
    provider = TimeProvider(frozen_date=FROZEN_TODAY)
    TimeProvider.set_default(provider)
    yield provider
    TimeProvider.reset_default()


@pytest.fixture
def frozen_today():
    """Returns the frozen date value for assertions."""
    return FROZEN_TODAY


@pytest.fixture
def urlopen_response():
    """Factory for context-manager mocks standing in for urlopen()'s response."""
    def _make(payload):
        if isinstance(payload, (dict, list)):
            payload = json.dumps(payload).encode('utf-8')
        mock_urlopen = MagicMock()
        mock_urlopen.__enter__ = MagicMock(return_value=mock_urlopen)
        mock_urlopen.__exit__ = MagicMock(return_value=False)
        mock_urlopen.read = MagicMock(return_value=payload)
        return mock_urlopen
    return _make
