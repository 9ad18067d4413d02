"""Connection provider for the projection and stats store."""

import ssl
import threading
from typing import Any

from sqlalchemy import create_engine, inspect, literal_column, select, text
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.sql.expression import Executable
import structlog

from ..config import Settings
from ..exceptions import ConnectionUnavailable, QueryFailed
from .schema import metadata

logger = structlog.get_logger()

PROBE_QUERY = "SELECT 1 AS test"


def _permissive_ssl_context() -> ssl.SSLContext:
    """TLS context that accepts self-signed server certificates."""
    ctx = ssl.create_default_context()
    ctx.check_hostname = False
    ctx.verify_mode = ssl.CERT_NONE
    return ctx


class Database:
    """Lazily built, shared connection pool for the store.

    Construct one per process and hand it to the repositories. A Database
    built with ``url=None`` or an unparsable url has no store behind it:
    ``get_engine()`` returns None and every query raises ConnectionUnavailable.
    """

    def __init__(
        self,
        url: str | URL | None,
        *,
        pool_size: int = 10,
        pool_timeout: int = 30,
        verify_ssl: bool = False,
    ):
        self.pool_size = pool_size
        self.pool_timeout = pool_timeout
        self.verify_ssl = verify_ssl

        self._engine: Engine | None = None
        self._lock = threading.Lock()
        self.logger = logger.bind(component="database")
        self.url = self._parse_url(url)

    def _parse_url(self, url: str | URL | None) -> URL | None:
        if url is None:
            return None
        try:
            return make_url(url)
        except ArgumentError:
            # Unparsable means unconfigured
            self.logger.warning("invalid_connection_url")
            return None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build from DATABASE_URL or the discrete DATABASE_* variables."""
        return cls(
            settings.connection_url(),
            pool_size=settings.database_pool_size,
            pool_timeout=settings.database_pool_timeout,
            verify_ssl=settings.database_verify_ssl,
        )

    @property
    def is_configured(self) -> bool:
        return self.url is not None

    @property
    def redacted_url(self) -> str:
        if self.url is None:
            return "Not set"
        return self.url.render_as_string(hide_password=True)

    def get_engine(self) -> Engine | None:
        """Return the pooled engine, building it on first use.

        Returns None (never raises) when no connection is configured or the
        driver cannot be loaded.
        """
        if self._engine is not None:
            return self._engine

        with self._lock:
            if self._engine is None:
                self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine | None:
        if self.url is None:
            self.logger.warning("no_connection_configured")
            return None

        backend = self.url.get_backend_name()
        kwargs: dict[str, Any] = {"pool_pre_ping": True}
        if backend != "sqlite":
            # Fixed pool, excess checkouts wait for a free connection
            kwargs.update(pool_size=self.pool_size, max_overflow=0, pool_timeout=self.pool_timeout)
        if backend == "mysql" and not self.verify_ssl:
            kwargs["connect_args"] = {"ssl": _permissive_ssl_context()}

        self.logger.info("creating_engine", url=self.redacted_url, pool_size=self.pool_size)
        try:
            engine = create_engine(self.url, **kwargs)
        except (ImportError, ArgumentError) as e:
            self.logger.error("driver_unavailable", url=self.redacted_url, error=str(e))
            return None

        try:
            with engine.connect() as conn:
                conn.execute(text(PROBE_QUERY))
            self.logger.info("engine_created", url=self.redacted_url)
        except SQLAlchemyError as e:
            self.logger.error("liveness_probe_failed", url=self.redacted_url, error=str(e))

        return engine

    def execute_query(
        self,
        statement: str | Executable,
        params: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Run a single read and return rows as plain dicts."""
        engine = self.get_engine()
        if engine is None:
            raise ConnectionUnavailable("Database connection not available")

        if isinstance(statement, str):
            statement = text(statement)

        try:
            with engine.connect() as conn:
                result = conn.execute(statement, params or {})
                return [dict(row) for row in result.mappings()]
        except SQLAlchemyError as e:
            self.logger.error("query_failed", error=str(e))
            raise QueryFailed(f"Database query error: {e}", original=e) from e

    def test_connection(self) -> bool:
        """Check whether a trivial query round-trips."""
        engine = self.get_engine()
        if engine is None:
            return False

        try:
            with engine.connect() as conn:
                return conn.execute(text(PROBE_QUERY)).scalar() == 1
        except SQLAlchemyError as e:
            self.logger.error("connection_test_failed", error=str(e))
            return False

    def table_info(self) -> dict[str, dict[str, Any]]:
        """Describe the known tables: existence, columns and a sample row."""
        engine = self.get_engine()
        if engine is None:
            raise ConnectionUnavailable("Database connection not available")

        info: dict[str, dict[str, Any]] = {}
        try:
            inspector = inspect(engine)
            with engine.connect() as conn:
                for name, table in metadata.tables.items():
                    if not inspector.has_table(name):
                        info[name] = {"exists": False, "columns": [], "sample": []}
                        continue
                    columns = [c["name"] for c in inspector.get_columns(name)]
                    rows = conn.execute(
                        select(literal_column("*")).select_from(table).limit(1)
                    ).mappings()
                    info[name] = {
                        "exists": True,
                        "columns": columns,
                        "sample": [dict(r) for r in rows],
                    }
        except SQLAlchemyError as e:
            raise QueryFailed(f"Failed to inspect tables: {e}", original=e) from e

        return info

    def dispose(self) -> None:
        """Close pooled connections."""
        with self._lock:
            if self._engine is not None:
                self._engine.dispose()
                self._engine = None
