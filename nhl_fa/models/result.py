"""Result wrapper returned by repository reads."""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict

from ..exceptions import DataAccessError

T = TypeVar("T")


class FetchError(BaseModel):
    """Why a read could not be served from the store."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["connection_unavailable", "query_failed"]
    message: str

    @classmethod
    def from_exception(cls, exc: DataAccessError) -> "FetchError":
        kind = "connection_unavailable" if exc.kind == "connection_unavailable" else "query_failed"
        return cls(kind=kind, message=str(exc))


class FetchResult(BaseModel, Generic[T]):
    """Data plus where it came from.

    ``data`` is always renderable. When the store could not be read,
    ``error`` says why and ``source`` says what was substituted.
    """

    model_config = ConfigDict(frozen=True)

    data: T
    source: Literal["database", "mock", "empty"] = "database"
    error: FetchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def used_fallback(self) -> bool:
        return self.source != "database"
