# python
"""Database engine and connection utilities.

This module builds the synchronous SQLAlchemy engine used by the data access
layer. Every operation opens its own connection and closes it when done; the
engine uses ``NullPool`` so nothing is kept open between calls.
"""
import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import NullPool

from app.core.config import DatabaseSettings, settings
from app.exceptions.base import DbException
from models import init_db

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record):
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(config: DatabaseSettings) -> Engine:
    """Create an unpooled engine for ``config``."""
    engine = create_engine(config.url, poolclass=NullPool, echo=config.echo)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


class DbConnection:
    """Connection provider for the projects schema.

    Holds the configuration it was built from and hands out one session per
    operation. Sessions keep loaded attributes after commit so records can be
    used once the connection is gone.
    """

    def __init__(self, config: DatabaseSettings):
        self.config = config
        self.engine = build_engine(config)
        self._session_factory = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False
        )

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session bound to a fresh connection and close it afterwards."""
        session = self._session_factory()
        logger.debug("Opening session on %s", self.config.safe_url)
        try:
            yield session
        finally:
            session.close()
            logger.debug("Closed session on %s", self.config.safe_url)

    def ping(self) -> bool:
        """Return True when the database answers a trivial query."""
        try:
            with self.engine.connect() as conn:
                conn.exec_driver_sql("SELECT 1")
            return True
        except SQLAlchemyError:
            logger.error("Cannot connect to %s", self.config.safe_url)
            return False

    def create_schema(self) -> None:
        """Create any missing tables."""
        try:
            with self.engine.begin() as conn:
                init_db(conn)
        except SQLAlchemyError as e:
            logger.error("Cannot create schema on %s", self.config.safe_url)
            raise DbException(f"Cannot create schema on {self.config.safe_url}") from e

    def dispose(self) -> None:
        self.engine.dispose()


_connection: DbConnection | None = None
_connection_lock = threading.Lock()


def get_connection() -> DbConnection:
    """Return the application-wide connection provider, building it on first use.

    Sync dependencies run in a threadpool, so the first build is guarded.
    """
    global _connection
    if _connection is None:
        with _connection_lock:
            if _connection is None:
                _connection = DbConnection(settings.database)
    return _connection
