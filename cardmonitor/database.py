"""Database engine and helpers."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterator

from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.exc import DBAPIError
from sqlalchemy.pool import NullPool
from sqlmodel import Session, create_engine

from .config import get_settings

logger = logging.getLogger(__name__)

CONNECTION_ERROR_MESSAGE = "Unable to connect to the MySQL server."


class DatabaseUnavailableError(RuntimeError):
    """The monitoring database could not be reached."""


@lru_cache
def get_engine() -> Engine:
    """Build the process-wide engine. NullPool: every checkout is a fresh connection."""
    settings = get_settings()
    url = make_url(settings.sqlalchemy_url())
    if url.get_backend_name() == "sqlite":
        connect_args = {"check_same_thread": False}
    else:
        connect_args = {"connect_timeout": settings.mysql_connect_timeout}
    return create_engine(url, echo=False, poolclass=NullPool, connect_args=connect_args)


def open_connection(engine: Engine) -> Connection:
    try:
        return engine.connect()
    except DBAPIError as exc:
        logger.error("Could not connect to %s: %s", engine.url.render_as_string(hide_password=True), exc.orig)
        raise DatabaseUnavailableError(CONNECTION_ERROR_MESSAGE) from exc


def get_session() -> Iterator[Session]:
    """FastAPI dependency that yields a session on its own connection."""
    connection = open_connection(get_engine())
    try:
        with Session(bind=connection) as session:
            yield session
    finally:
        connection.close()
