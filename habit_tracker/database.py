import logging

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from .config import ConfigError

logger = logging.getLogger(__name__)

# backends with a single-statement INSERT ... ON CONFLICT for check-ins
SUPPORTED_BACKENDS = ("sqlite", "postgresql")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the engine (and its connection pool) for one application.

    Built by the composition root and handed to the app; requests open
    short-lived sessions from it.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        kwargs = {"echo": echo}
        parsed = make_url(url)
        backend = parsed.get_backend_name()
        if backend not in SUPPORTED_BACKENDS:
            raise ConfigError(f"Unsupported database backend {backend!r}")
        if backend == "sqlite":
            kwargs["connect_args"] = {"check_same_thread": False}
            if parsed.database in (None, "", ":memory:"):
                kwargs["poolclass"] = StaticPool
        self.engine = create_engine(url, **kwargs)
        if backend == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    def create_all(self) -> None:
        # import for side effect: registers the tables on SQLModel.metadata
        from . import models  # noqa: F401

        SQLModel.metadata.create_all(self.engine)
        logger.info("Database ready (%s)", self.dialect)

    def session(self) -> Session:
        return Session(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connections closed")
