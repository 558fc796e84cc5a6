from datetime import datetime
from typing import Optional

import attrs

from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.enum.seat_type import SeatType


@attrs.define
class SeatEntity:
    session_id: str
    row: str
    number: int
    seat_id: str
    seat_type: SeatType
    price: int
    status: SeatStatus = SeatStatus.AVAILABLE
    held_until: Optional[datetime] = None
    held_by_cart_id: Optional[str] = None
    sold_at: Optional[datetime] = None
    sold_cart_id: Optional[str] = None
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
