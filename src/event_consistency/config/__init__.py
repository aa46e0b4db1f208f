"""Configuration module - alias rules and runtime settings."""

from .settings import ALIAS_CONFIG_ENV, ALIAS_SCHEMA_PATH, Settings

__all__ = ["ALIAS_CONFIG_ENV", "ALIAS_SCHEMA_PATH", "Settings"]
