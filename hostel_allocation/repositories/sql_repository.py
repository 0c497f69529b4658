"""
SQLAlchemy-backed store implementations.

Each call runs in its own short transaction obtained from the session
factory; records cross the boundary as pydantic schemas.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from hostel_allocation.config.logging import get_logger
from hostel_allocation.core.exceptions import (
    ApplicationNotFoundError,
    DuplicateRoomNumberError,
    RoomNotFoundError,
)
from hostel_allocation.models.application import ApplicationModel
from hostel_allocation.models.room import RoomModel
from hostel_allocation.repositories.base import ApplicationStore, RoomStore
from hostel_allocation.schemas.application import Application
from hostel_allocation.schemas.room import Room

logger = get_logger(__name__)


class _SqlStore:

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Transaction context manager with automatic rollback.

        Usage:
            with store.transaction() as session:
                session.add(row)
        """
        session: Session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception as e:
            session.rollback()
            logger.warning(f"Transaction rollback: {str(e)}")
            raise
        finally:
            session.close()


class SqlApplicationStore(_SqlStore, ApplicationStore):

    def add(self, application: Application) -> Application:
        with self.transaction() as session:
            row = ApplicationModel(**application.model_dump())
            session.add(row)
            session.flush()
            return Application.model_validate(row)

    def get(self, application_id: str) -> Optional[Application]:
        with self.transaction() as session:
            row = self._find(session, application_id)
            return Application.model_validate(row) if row else None

    def save(self, application: Application) -> Application:
        with self.transaction() as session:
            row = self._find(session, application.id)
            if row is None:
                raise ApplicationNotFoundError(application.id)
            for field, value in application.model_dump(exclude={"id"}).items():
                setattr(row, field, value)
            session.flush()
            return Application.model_validate(row)

    def list(self) -> List[Application]:
        with self.transaction() as session:
            rows = session.scalars(select(ApplicationModel).order_by(ApplicationModel.pk)).all()
            return [Application.model_validate(row) for row in rows]

    @staticmethod
    def _find(session: Session, application_id: str) -> Optional[ApplicationModel]:
        return session.scalars(
            select(ApplicationModel).where(ApplicationModel.id == application_id)
        ).one_or_none()


class SqlRoomStore(_SqlStore, RoomStore):

    def add(self, room: Room) -> Room:
        try:
            with self.transaction() as session:
                row = RoomModel(**room.model_dump())
                session.add(row)
                session.flush()
                return Room.model_validate(row)
        except IntegrityError as e:
            if self.get_by_number(room.number) is not None:
                raise DuplicateRoomNumberError(room.number) from e
            raise

    def get(self, room_id: str) -> Optional[Room]:
        with self.transaction() as session:
            row = self._find(session, room_id)
            return Room.model_validate(row) if row else None

    def get_by_number(self, number: str) -> Optional[Room]:
        with self.transaction() as session:
            row = session.scalars(select(RoomModel).where(RoomModel.number == number)).one_or_none()
            return Room.model_validate(row) if row else None

    def save(self, room: Room) -> Room:
        with self.transaction() as session:
            row = self._find(session, room.id)
            if row is None:
                raise RoomNotFoundError(room.id)
            for field, value in room.model_dump(exclude={"id"}).items():
                setattr(row, field, value)
            session.flush()
            return Room.model_validate(row)

    def delete(self, room_id: str) -> None:
        with self.transaction() as session:
            row = self._find(session, room_id)
            if row is None:
                raise RoomNotFoundError(room_id)
            session.delete(row)

    def list(self) -> List[Room]:
        with self.transaction() as session:
            rows = session.scalars(select(RoomModel).order_by(RoomModel.pk)).all()
            return [Room.model_validate(row) for row in rows]

    @staticmethod
    def _find(session: Session, room_id: str) -> Optional[RoomModel]:
        return session.scalars(select(RoomModel).where(RoomModel.id == room_id)).one_or_none()
