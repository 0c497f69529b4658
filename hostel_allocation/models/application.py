"""
Room application ORM model.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Enum as SAEnum, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hostel_allocation.db.base import Base
from hostel_allocation.schemas.common.enums import ApplicationStatus, Block, RoomType


class ApplicationModel(Base):
    __tablename__ = "applications"

    # Surrogate key keeps submission order stable across backends
    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(36), unique=True, index=True, nullable=False)

    student_id: Mapped[str] = mapped_column(String(50), index=True, nullable=False)
    student_name: Mapped[str] = mapped_column(String(100), nullable=False)
    room_type: Mapped[RoomType] = mapped_column(
        SAEnum(RoomType, name="room_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    preferred_block: Mapped[Block] = mapped_column(
        SAEnum(Block, name="block", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    cgpa: Mapped[float] = mapped_column(Float, nullable=False)
    department_name: Mapped[str] = mapped_column(String(100), nullable=False)
    year: Mapped[str] = mapped_column(String(20), nullable=False)

    status: Mapped[ApplicationStatus] = mapped_column(
        SAEnum(ApplicationStatus, name="application_status", values_callable=lambda e: [m.value for m in e]),
        default=ApplicationStatus.PENDING,
        nullable=False,
    )
    room_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"<ApplicationModel(id={self.id}, student_id={self.student_id}, status={self.status})>"
