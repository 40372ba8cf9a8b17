"""
Engine and session factory construction.

SQLite needs two adjustments to be usable from FastAPI's thread pool:
connections are shared across threads, and an in-memory database must
live on a single pooled connection or every session would see an empty
database.
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from diary_backend.database.entities import Base

logger = logging.getLogger(__name__)


def build_engine(db_url: str) -> Engine:
    """Create a SQLAlchemy engine for ``db_url``."""
    kwargs = {}
    if db_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in db_url or db_url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool
    logger.debug("Creating engine for %s", db_url.split("@")[-1])
    return create_engine(db_url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(engine)
