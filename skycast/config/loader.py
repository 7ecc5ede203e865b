"""Configuration loading from ~/.skycast/config.json and the environment."""

import json
import os
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from skycast.config.schema import Config
from skycast.errors import ConfigError


# Environment variable holding the OpenWeatherMap API key
API_KEY_ENV = "WEATHER_API_KEY"

# Environment variable overriding the provider endpoint
BASE_URL_ENV = "SKYCAST_BASE_URL"


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".skycast" / "config.json"


def _read_config_file(path: Path) -> dict:
    if not path.exists():
        logger.debug(f"No config file at {path}")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    logger.debug(f"Loaded config from {path}")
    return data


def load_config(path: Path | None = None) -> Config:
    """
    Load configuration from file, then apply environment overrides.

    Args:
        path: Optional config file path. Uses the default if not provided.

    Returns:
        Loaded configuration with an API key set.

    Raises:
        ConfigError: If the file is unreadable or no API key is available.
    """
    data = _read_config_file(path or get_config_path())

    api_key = os.environ.get(API_KEY_ENV)
    if api_key:
        data["api_key"] = api_key

    base_url = os.environ.get(BASE_URL_ENV)
    if base_url:
        data["base_url"] = base_url

    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    if not config.api_key:
        raise ConfigError(
            f"Please set the {API_KEY_ENV} environment variable "
            f"or add \"api_key\" to {path or get_config_path()}"
        )

    return config
