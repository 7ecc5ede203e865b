"""OpenWeatherMap current weather lookup."""

from typing import Any

import httpx
from loguru import logger

from skycast.config.loader import API_KEY_ENV, get_config_path
from skycast.config.schema import Config
from skycast.errors import ApiError, NetworkError, NotFoundError, ParseError


# Temperatures come back in Kelvin and are converted locally
UNITS = "standard"


def _provider_message(response: httpx.Response) -> str:
    """Pull the human-readable message out of an error body, if any."""
    try:
        data = response.json()
    except ValueError:
        return response.text.strip()

    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return response.text.strip()


def fetch_current_weather(
    city: str,
    config: Config,
    client: httpx.Client | None = None,
) -> dict[str, Any]:
    """
    Fetch current conditions for a city.

    Args:
        city: Free-text city name, sent as-is (URL-encoded).
        config: Loaded configuration with API key and endpoint.
        client: Optional HTTP client. A short-lived one is created if omitted.

    Returns:
        The decoded JSON document.

    Raises:
        NetworkError: If the request could not be completed.
        NotFoundError: If the provider does not know the city.
        ApiError: For any other non-2xx status.
        ParseError: If the body is not a JSON object.
    """
    params = {"q": city, "appid": config.api_key, "units": UNITS}
    logger.debug(f"GET {config.base_url} q={city!r} units={UNITS} appid=***")

    try:
        if client is None:
            with httpx.Client(timeout=config.timeout) as owned:
                response = owned.get(config.base_url, params=params)
        else:
            response = client.get(config.base_url, params=params)
    except httpx.HTTPError as e:
        raise NetworkError(f"Failed to fetch weather data: {e}") from e

    logger.debug(f"Provider responded with {response.status_code}")

    if response.status_code == 404:
        raise NotFoundError(f"City not found: {city}")
    elif response.status_code == 401:
        raise ApiError(
            "Weather API rejected the API key. "
            f"Check the {API_KEY_ENV} environment variable or \"api_key\" in {get_config_path()}",
            status_code=401,
        )
    elif not response.is_success:
        message = _provider_message(response)
        raise ApiError(
            f"Weather API error {response.status_code}: {message}",
            status_code=response.status_code,
        )

    try:
        data = response.json()
    except ValueError as e:
        raise ParseError(f"Failed to parse weather data: {e}") from e

    if not isinstance(data, dict):
        raise ParseError("Failed to parse weather data: expected a JSON object")

    return data
