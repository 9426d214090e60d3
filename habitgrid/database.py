# habitgrid/database.py
import logging
import sqlite3
from contextlib import contextmanager

from sqlalchemy import DateTime, create_engine, event
from sqlalchemy.dialects.sqlite import DATETIME as SQLITE_DATETIME
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import DATABASE_URL

logger = logging.getLogger(__name__)

TIMESTAMP_STORAGE_FORMAT = "%(year)04d-%(month)02d-%(day)02d %(hour)02d:%(minute)02d:%(second)02d"

# local time written as "YYYY-MM-DD HH:MM:SS" text, no fractional seconds
Timestamp = DateTime().with_variant(SQLITE_DATETIME(storage_format=TIMESTAMP_STORAGE_FORMAT), "sqlite")


def make_engine(url: str = DATABASE_URL, **kwargs) -> Engine:
    """Create an engine; SQLite connections may be shared across request threads."""
    if url.startswith("sqlite"):
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        kwargs["connect_args"] = connect_args
    return create_engine(url, **kwargs)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # ON DELETE CASCADE is only honoured with this pragma on
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = make_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


@contextmanager
def session_scope(session_factory=SessionLocal):
    db = session_factory()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db(bind: Engine = engine) -> None:
    """Create all tables that do not exist yet."""
    from . import models  # noqa: F401  registers the mappers on Base

    Base.metadata.create_all(bind=bind)
    logger.info("Database tables ready on %s", bind.url.render_as_string(hide_password=True))
