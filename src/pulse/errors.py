"""Pulse exception hierarchy.

Only the data source raises these, and the adapter converts every one of
them into a demo-mode load result before it reaches the rest of the engine.
"""


class PulseError(Exception):
    """Base exception for all Pulse failures."""


class DataSourceError(PulseError):
    """Raised when a snapshot cannot be obtained from a source."""


class TransportFailure(DataSourceError):
    """Raised for network errors and non-2xx responses from the live endpoint."""


class ParseFailure(DataSourceError):
    """Raised when the live endpoint answers with a body that is not JSON."""


class FallbackFailure(DataSourceError):
    """Raised when the local demo snapshot cannot be read either."""
