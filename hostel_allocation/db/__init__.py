from hostel_allocation.db.base import Base
from hostel_allocation.db.init_db import drop_db, init_db
from hostel_allocation.db.session import build_engine, build_session_factory

__all__ = ["Base", "build_engine", "build_session_factory", "init_db", "drop_db"]
