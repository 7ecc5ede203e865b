"""Weather data providers."""

from skycast.providers.openweathermap import fetch_current_weather

__all__ = ["fetch_current_weather"]
