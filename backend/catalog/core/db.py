"""Declarative base and the single shared store connection."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import Request
from loguru import logger
from sqlalchemy import Connection, Engine, create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    pass


class Store:
    """One engine, one long-lived connection.

    The connection runs in AUTOCOMMIT so every statement stands on its own.
    All statements go through :meth:`execute`, which serializes access to the
    connection across request threads.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = make_url(url)
        self._lock = threading.RLock()
        self._connection: Connection | None = None
        self._engine = self._create_engine(echo)

    def _create_engine(self, echo: bool) -> Engine:
        kwargs = {"echo": echo, "isolation_level": "AUTOCOMMIT"}
        if self.dialect == "sqlite":
            kwargs["connect_args"] = {"check_same_thread": False}
            if self.url.database in (None, "", ":memory:"):
                kwargs["poolclass"] = StaticPool

        engine = create_engine(self.url, **kwargs)

        if self.dialect == "sqlite":
            # SQLite ships with foreign keys off
            @event.listens_for(engine, "connect")
            def _enable_foreign_keys(dbapi_connection, connection_record):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys = ON")
                cursor.close()

        return engine

    @property
    def dialect(self) -> str:
        return self.url.get_backend_name()

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def connected(self) -> bool:
        return self._connection is not None and not self._connection.closed

    @property
    def connection(self) -> Connection:
        if not self.connected:
            raise RuntimeError("Store is not connected")
        return self._connection

    def connect(self) -> "Store":
        if self.connected:
            return self
        logger.info("Connecting to {} database at {}", self.dialect, self.url.render_as_string(hide_password=True))
        self._connection = self._engine.connect()
        logger.info("Successfully connected to {} database!", self.dialect)
        return self

    def close(self) -> None:
        with self._lock:
            if self._connection is not None:
                self._connection.close()
                self._connection = None
            self._engine.dispose()
        logger.info("Database connection closed")

    @contextmanager
    def locked(self) -> Iterator[Connection]:
        """Hold the connection for a run of statements nobody may interleave with."""
        with self._lock:
            yield self.connection

    def execute(self, statement, parameters=None):
        with self.locked() as conn:
            try:
                result = conn.execute(statement, parameters)
                conn.commit()
            except Exception:
                conn.rollback()
                raise
            return result

    def fetch(self, statement, parameters=None) -> list:
        with self.locked() as conn:
            rows = conn.execute(statement, parameters).all()
            conn.commit()
            return rows

    def scalar(self, statement, parameters=None):
        with self.locked() as conn:
            value = conn.scalar(statement, parameters)
            conn.commit()
            return value


def get_store(request: Request) -> Store:
    return request.app.state.store
