from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.db_setting import Base


class QueueEntryModel(Base):
    __tablename__ = 'queue_entry'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    scope_key: Mapped[str] = mapped_column(String(120), nullable=False)
    queue_number: Mapped[int] = mapped_column(Integer, nullable=False)
    visitor_token: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    user_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    cart_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    status: Mapped[str] = mapped_column(String(20), default='WAITING', nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint('scope_key', 'queue_number', name='uq_queue_entry_scope_number'),
        Index('ix_queue_entry_scope_visitor', 'scope_key', 'visitor_token'),
        Index('ix_queue_entry_scope_status', 'scope_key', 'status'),
    )
