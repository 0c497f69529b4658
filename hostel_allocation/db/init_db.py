"""Database initialization utilities."""
import logging

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from hostel_allocation.db.base import Base, import_models

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """
    Create the allocation tables if they do not exist yet.

    Suitable for development and tests; a production deployment manages
    its schema with migrations.
    """
    import_models()

    existing_tables = set(inspect(engine).get_table_names())
    missing = [name for name in Base.metadata.tables if name not in existing_tables]

    if missing:
        Base.metadata.create_all(bind=engine)
        logger.info(f"Created database tables: {', '.join(sorted(missing))}")
    else:
        logger.info(f"Database already initialized with {len(existing_tables)} tables")


def drop_db(engine: Engine) -> None:
    """Drop all allocation tables."""
    import_models()
    Base.metadata.drop_all(bind=engine)
    logger.warning("All database tables dropped")
