"""
Custom exceptions for the Users API.
"""


class StoreError(Exception):
    """Raised when a statement against the database fails for any reason."""

    pass


class PoolClosedError(StoreError):
    """Raised when a statement is issued after the connection pool was drained."""

    pass
