"""Exceptions for the premium rank layer."""

from connectors.errors import BackendConnectionError, ConnectorError, UnsupportedBackendError

__all__ = [
    "PremiumError",
    "ConfigError",
    "ConnectorError",
    "BackendConnectionError",
    "UnsupportedBackendError",
]


class PremiumError(Exception):
    """Base class for premium-layer failures."""


class ConfigError(PremiumError, ValueError):
    """The config document exists but can't be used."""
