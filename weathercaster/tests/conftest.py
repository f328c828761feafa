"""Shared test fixtures."""

from pathlib import Path

import pytest

from weathercaster.config.defaults import ENV_API_HOST, ENV_API_KEY, ENV_LOCATION, ENV_UNITS
from weathercaster.config.schema import WeathercasterConfig
from weathercaster.models.conditions import Conditions

FIXTURE_DIR = Path(__file__).parent / "fixtures"

TEST_API_KEY = "DummyAPIKey"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's shell settings out of config loading."""
    for name in (ENV_API_KEY, ENV_LOCATION, ENV_UNITS, ENV_API_HOST):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def great_neck_body() -> bytes:
    """Raw forecast response for Great Neck Plaza, one timestamp."""
    return (FIXTURE_DIR / "owm_forecast_great_neck.json").read_bytes()


@pytest.fixture
def clear_sky() -> Conditions:
    return Conditions(
        description="clear sky",
        temperature=301.15,
        feels_like=300.0,
        humidity=38.0,
        wind_speed=4.12,
    )


@pytest.fixture
def test_config() -> WeathercasterConfig:
    """Config with a dummy key pointing at a test host."""
    return WeathercasterConfig(
        api={"host": "https://owm.example.com"},
        api_key=TEST_API_KEY,
    )
