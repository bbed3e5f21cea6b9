"""Configuration: constants and environment-driven settings."""

from storebot.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
