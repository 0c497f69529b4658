"""SQLAlchemy Base class for all models."""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def import_models() -> None:
    """Import all models to register them with SQLAlchemy."""
    from hostel_allocation.models import application, room  # noqa: F401
