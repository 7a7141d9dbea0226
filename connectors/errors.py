"""Exceptions raised by the connector layer."""


class ConnectorError(Exception):
    """Base class for connector failures that callers are expected to handle."""


class BackendConnectionError(ConnectorError, ConnectionError):
    """The driver could not open a connection. The connector stays disconnected."""


class UnsupportedBackendError(ConnectorError, ValueError):
    """database.type names an engine we have no connector for."""
