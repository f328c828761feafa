"""Tests for CLI commands."""

import json
from pathlib import Path

import httpx
import pytest
import respx

from weathercaster.cli import main

FORECAST_URL = "https://owm.example.com/data/2.5/forecast/"


@pytest.fixture
def owm_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENWEATHERMAP_API_KEY", "DummyAPIKey")
    monkeypatch.setenv("WEATHERCASTER_API_HOST", "https://owm.example.com")


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        result = main([])
        assert result == 1

    @respx.mock
    def test_forecast(self, owm_env, great_neck_body: bytes, capsys):
        respx.get(url__startswith=FORECAST_URL).mock(
            return_value=httpx.Response(200, content=great_neck_body)
        )

        result = main(["forecast", "-l", "Great Neck Plaza,NY,US"])
        assert result == 0
        captured = capsys.readouterr()
        assert captured.out == (
            "clear sky, temp 34.8 ºF, feels like 23.8 ºF, humidity 38.0%, wind 9.2 MPH\n"
        )

    @respx.mock
    def test_forecast_units_flag(self, owm_env, great_neck_body: bytes, capsys):
        route = respx.get(url__startswith=FORECAST_URL).mock(
            return_value=httpx.Response(200, content=great_neck_body)
        )

        result = main(["forecast", "--location", "London", "--units", "c"])
        assert result == 0
        assert "ºC" in capsys.readouterr().out
        assert "units" not in str(route.calls[0].request.url)

    @respx.mock
    def test_forecast_location_from_env(
        self, owm_env, monkeypatch: pytest.MonkeyPatch, great_neck_body: bytes, capsys
    ):
        monkeypatch.setenv("WEATHERCASTER_LOCATION", "Paris,FR")
        route = respx.get(url__startswith=FORECAST_URL).mock(
            return_value=httpx.Response(200, content=great_neck_body)
        )

        assert main(["forecast"]) == 0
        assert "q=Paris%2CFR" in str(route.calls[0].request.url)

    def test_missing_api_key(self, capsys):
        result = main(["forecast", "-l", "London"])
        assert result == 1
        captured = capsys.readouterr()
        assert "OPENWEATHERMAP_API_KEY" in captured.err
        assert captured.out == ""

    def test_missing_location(self, owm_env, capsys):
        result = main(["forecast"])
        assert result == 1
        assert "-l command-line flag" in capsys.readouterr().err

    def test_invalid_units(self, owm_env, capsys):
        result = main(["forecast", "-l", "London", "-u", "rankine"])
        assert result == 1
        assert "rankine" in capsys.readouterr().err

    @respx.mock
    def test_upstream_error_names_location(self, owm_env, capsys):
        respx.get(url__startswith=FORECAST_URL).mock(
            return_value=httpx.Response(404, json={"cod": "404", "message": "city not found"})
        )

        result = main(["forecast", "-l", "Atlantis"])
        assert result == 1
        err = capsys.readouterr().err
        assert "Error querying weather API for location 'Atlantis'" in err
        assert "HTTP 404" in err
        assert "city not found" in err

    def test_config_show(self, owm_env, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("units: metric\n")
        result = main(["--config", str(config_path), "config", "show"])
        assert result == 0
        shown = json.loads(capsys.readouterr().out)
        assert shown["units"] == "metric"
        assert shown["api"]["host"] == "https://owm.example.com"
        assert shown["api_key"] != "DummyAPIKey"

    def test_config_without_subcommand(self, capsys):
        assert main(["config"]) == 1

    def test_bad_config_file(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("units: rankine\n")
        result = main(["--config", str(config_path), "config", "show"])
        assert result == 1
        assert "Error loading config" in capsys.readouterr().err

    def test_missing_config_file(self, tmp_path: Path, capsys):
        result = main(["--config", str(tmp_path / "nope.yaml"), "config", "show"])
        assert result == 1

    @pytest.mark.parametrize("text", ["units: [metric\n", "- London\n- metric\n", "London\n"])
    def test_unreadable_config_file(self, tmp_path: Path, text: str, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text(text)
        result = main(["--config", str(config_path), "forecast", "-l", "London"])
        assert result == 1
        captured = capsys.readouterr()
        assert "Error loading config" in captured.err
        assert captured.out == ""
