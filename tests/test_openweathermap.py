"""Tests for the OpenWeatherMap fetch stage."""

from unittest.mock import patch

import httpx
import pytest

from skycast.config.schema import Config
from skycast.errors import ApiError, NetworkError, NotFoundError, ParseError
from skycast.providers.openweathermap import fetch_current_weather

_RealClient = httpx.Client


def _client(handler) -> httpx.Client:
    return _RealClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def config():
    return Config(api_key="test_key", base_url="https://weather.test/data/2.5/weather")


def test_fetch_success(config, weather_payload):
    """Test a successful lookup returns the decoded document."""
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=weather_payload)

    with _client(handler) as client:
        data = fetch_current_weather("London", config, client=client)

    assert data["name"] == "London"
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert seen[0].url.host == "weather.test"
    assert seen[0].url.params["q"] == "London"
    assert seen[0].url.params["appid"] == "test_key"
    assert seen[0].url.params["units"] == "standard"


def test_fetch_encodes_city_name(config, weather_payload):
    """Test free-text city names are URL-encoded, not validated."""
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=weather_payload)

    with _client(handler) as client:
        fetch_current_weather("São Paulo, BR&x=1", config, client=client)

    assert seen[0].url.params["q"] == "São Paulo, BR&x=1"
    assert "x" not in seen[0].url.params


def test_fetch_not_found(config):
    """Test a 404 maps to NotFoundError."""
    def handler(request):
        return httpx.Response(404, json={"cod": "404", "message": "city not found"})

    with _client(handler) as client:
        with pytest.raises(NotFoundError, match="City not found: Atlantis"):
            fetch_current_weather("Atlantis", config, client=client)


def test_fetch_unauthorized(config):
    """Test a rejected API key maps to ApiError."""
    def handler(request):
        return httpx.Response(401, json={"cod": 401, "message": "Invalid API key."})

    with _client(handler) as client:
        with pytest.raises(ApiError) as exc_info:
            fetch_current_weather("London", config, client=client)

    assert exc_info.value.status_code == 401
    assert "WEATHER_API_KEY" in str(exc_info.value)
    assert "config.json" in str(exc_info.value)


def test_fetch_server_error_includes_provider_message(config):
    """Test other non-2xx statuses carry the provider's message."""
    def handler(request):
        return httpx.Response(503, text="upstream unavailable")

    with _client(handler) as client:
        with pytest.raises(ApiError, match="503: upstream unavailable") as exc_info:
            fetch_current_weather("London", config, client=client)

    assert exc_info.value.status_code == 503


def test_fetch_network_error(config):
    """Test transport failures map to NetworkError."""
    def handler(request):
        raise httpx.ConnectError("Connection refused", request=request)

    with _client(handler) as client:
        with pytest.raises(NetworkError, match="Connection refused"):
            fetch_current_weather("London", config, client=client)


def test_fetch_timeout(config):
    """Test timeouts map to NetworkError."""
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with _client(handler) as client:
        with pytest.raises(NetworkError):
            fetch_current_weather("London", config, client=client)


def test_fetch_malformed_json(config):
    """Test a non-JSON body raises ParseError."""
    def handler(request):
        return httpx.Response(200, text="<html>oops</html>")

    with _client(handler) as client:
        with pytest.raises(ParseError, match="Failed to parse"):
            fetch_current_weather("London", config, client=client)


def test_fetch_json_not_an_object(config):
    """Test a JSON array body raises ParseError."""
    def handler(request):
        return httpx.Response(200, json=[1, 2, 3])

    with _client(handler) as client:
        with pytest.raises(ParseError, match="JSON object"):
            fetch_current_weather("London", config, client=client)


def test_fetch_creates_and_closes_client(config, weather_payload):
    """Test a short-lived client is used when none is injected."""
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=weather_payload))
    created = []

    def make_client(**kwargs):
        client = _RealClient(transport=transport, **kwargs)
        created.append(client)
        return client

    with patch("httpx.Client", side_effect=make_client) as mock_client:
        data = fetch_current_weather("London", config)

    assert data["name"] == "London"
    mock_client.assert_called_once_with(timeout=config.timeout)
    assert created[0].is_closed
