from typing import Optional

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.db_setting import Base


class AuditoriumModel(Base):
    __tablename__ = 'auditorium'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Either column may describe the seats, seat_map_config takes precedence
    layout: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)
    seat_map_config: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)
