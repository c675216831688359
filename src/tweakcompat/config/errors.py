"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Base class for configuration problems detected before a run starts."""


class MissingConfigurationError(ConfigurationError):
    """A required environment variable is unset or blank."""
