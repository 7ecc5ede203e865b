"""Configuration schema using Pydantic."""

from pydantic import BaseModel, ConfigDict


# OpenWeatherMap current weather endpoint
DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"


class Config(BaseModel):
    """Root configuration for skycast."""

    model_config = ConfigDict(extra="ignore")

    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
