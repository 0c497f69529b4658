"""
Room ORM model.
"""

from sqlalchemy import CheckConstraint, Enum as SAEnum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hostel_allocation.db.base import Base
from hostel_allocation.schemas.common.enums import Block, RoomStatus, RoomType


class RoomModel(Base):
    __tablename__ = "rooms"
    __table_args__ = (
        CheckConstraint("capacity >= 1", name="ck_rooms_capacity_positive"),
        CheckConstraint("occupancy >= 0 AND occupancy <= capacity", name="ck_rooms_occupancy_bounds"),
    )

    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(36), unique=True, index=True, nullable=False)

    number: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    block: Mapped[Block] = mapped_column(
        SAEnum(Block, name="block", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    type: Mapped[RoomType] = mapped_column(
        SAEnum(RoomType, name="room_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    occupancy: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    status: Mapped[RoomStatus] = mapped_column(
        SAEnum(RoomStatus, name="room_status", values_callable=lambda e: [m.value for m in e]),
        default=RoomStatus.AVAILABLE,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<RoomModel(id={self.id}, number={self.number}, status={self.status})>"
