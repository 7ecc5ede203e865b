"""Configuration module for skycast."""

from skycast.config.loader import get_config_path, load_config
from skycast.config.schema import Config

__all__ = ["Config", "load_config", "get_config_path"]
