"""Shared fixtures for skycast tests."""

import copy

import pytest


SAMPLE_RESPONSE = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [
        {"id": 804, "main": "Clouds", "description": "overcast clouds", "icon": "04d"}
    ],
    "base": "stations",
    "main": {
        "temp": 276.15,
        "feels_like": 274.15,
        "temp_min": 275.15,
        "temp_max": 277.15,
        "pressure": 1012,
        "humidity": 76,
    },
    "visibility": 10000,
    "wind": {"speed": 1.67, "deg": 330},
    "clouds": {"all": 100},
    "dt": 1700010000,
    "sys": {"country": "GB", "sunrise": 1700000000, "sunset": 1700030000},
    "timezone": 0,
    "id": 2643743,
    "name": "London",
    "cod": 200,
}


@pytest.fixture
def weather_payload():
    """A fresh copy of a provider current-weather document."""
    return copy.deepcopy(SAMPLE_RESPONSE)


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point config loading at an empty temp location and clear env overrides."""
    path = tmp_path / "config.json"
    monkeypatch.setattr("skycast.config.loader.get_config_path", lambda: path)
    monkeypatch.delenv("WEATHER_API_KEY", raising=False)
    monkeypatch.delenv("SKYCAST_BASE_URL", raising=False)
    return path
