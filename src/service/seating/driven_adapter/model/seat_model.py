from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.db_setting import Base


class SeatModel(Base):
    __tablename__ = 'seat'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    session_id: Mapped[str] = mapped_column(
        String(36), ForeignKey('cinema_session.id', ondelete='CASCADE'), nullable=False
    )
    row_label: Mapped[str] = mapped_column(String(8), nullable=False)
    number: Mapped[int] = mapped_column(Integer, nullable=False)
    seat_id: Mapped[str] = mapped_column(String(16), nullable=False)
    seat_type: Mapped[str] = mapped_column(String(20), default='STANDARD', nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='AVAILABLE', nullable=False)
    held_until: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    held_by_cart_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    sold_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    sold_cart_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint('session_id', 'row_label', 'number', name='uq_seat_session_coordinate'),
        UniqueConstraint('session_id', 'seat_id', name='uq_seat_session_seat_id'),
        Index('ix_seat_status_held_until', 'status', 'held_until'),
        Index('ix_seat_held_by_cart_id', 'held_by_cart_id'),
    )
