"""skycast - current weather for a city, in your terminal."""

__version__ = "0.1.0"
__logo__ = "🌍"
