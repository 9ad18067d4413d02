"""Data access errors raised by the storage layer."""


class DataAccessError(Exception):
    """Base class for failures talking to the store."""

    kind = "data_access_error"


class ConnectionUnavailable(DataAccessError):
    """No usable connection configuration, or the pool could not be built."""

    kind = "connection_unavailable"


class QueryFailed(DataAccessError):
    """The store rejected or timed out a query."""

    kind = "query_failed"

    def __init__(self, message: str, original: BaseException | None = None):
        super().__init__(message)
        self.original = original
