from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from src.platform.database.db_setting import Base

if TYPE_CHECKING:
    from src.service.seating.driven_adapter.model.auditorium_model import AuditoriumModel


class CinemaSessionModel(Base):
    __tablename__ = 'cinema_session'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    auditorium_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey('auditorium.id'), nullable=True, index=True
    )
    starts_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    base_price: Mapped[int] = mapped_column(Integer, nullable=False)
    vip_price: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Relationships
    auditorium: Mapped[Optional['AuditoriumModel']] = relationship(
        'AuditoriumModel', foreign_keys=[auditorium_id], lazy='selectin'
    )
