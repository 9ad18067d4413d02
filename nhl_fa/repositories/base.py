"""Shared read/fallback handling for repositories."""

from collections.abc import Callable
from enum import Enum
from typing import TypeVar

import structlog

from ..exceptions import ConnectionUnavailable, DataAccessError
from ..models import FetchError, FetchResult
from ..storage import Database

logger = structlog.get_logger()

T = TypeVar("T")


class FallbackPolicy(str, Enum):
    """What a read substitutes when the store cannot be reached."""

    MOCK = "mock"  # Serve the sample dataset so there is always something to show
    EMPTY = "empty"  # Serve nothing; an empty result is itself meaningful


class BaseRepository:
    """Runs reads against an optional Database and applies a fallback policy."""

    COMPONENT = "repository"

    def __init__(self, db: Database | None):
        self.db = db
        self.logger = logger.bind(component=self.COMPONENT)

    def _query(self, statement, params: dict | None = None) -> list[dict]:
        if self.db is None:
            raise ConnectionUnavailable("No database access in this context")
        return self.db.execute_query(statement, params)

    def _fetch(
        self,
        operation: str,
        load: Callable[[], T],
        policy: FallbackPolicy,
        fallback: Callable[[], T],
    ) -> FetchResult[T]:
        """Run ``load``; on a data access failure serve ``fallback()`` instead."""
        try:
            return FetchResult(data=load())
        except DataAccessError as e:
            error = FetchError.from_exception(e)
            self.logger.warning(
                "using_fallback_data",
                operation=operation,
                policy=policy.value,
                error_kind=error.kind,
                error=error.message,
            )
            return FetchResult(data=fallback(), source=policy.value, error=error)
