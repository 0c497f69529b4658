"""Database engine and session management."""
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from hostel_allocation.config.settings import Settings, settings as default_settings


def build_engine(database_url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """
    Create an engine for the given URL.

    SQLite connections are shared across threads; an in-memory SQLite
    database is pinned to a single connection so every session sees it.
    """
    database_url = database_url or default_settings.DATABASE_URL
    if not database_url:
        raise ValueError("DATABASE_URL is not configured")
    if echo is None:
        echo = default_settings.DATABASE_ECHO

    kwargs = {"echo": echo, "pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool

    return create_engine(database_url, **kwargs)


def build_session_factory(config: Optional[Settings] = None, engine: Optional[Engine] = None) -> sessionmaker:
    """Create a session factory bound to the configured database."""
    config = config or default_settings
    if engine is None:
        engine = build_engine(config.DATABASE_URL, config.DATABASE_ECHO)
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
