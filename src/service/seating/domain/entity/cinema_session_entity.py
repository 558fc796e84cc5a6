from typing import Optional

import attrs

from src.service.seating.domain.enum.seat_type import SeatType
from src.service.seating.domain.value_object.auditorium_layout import AuditoriumLayout


@attrs.define
class CinemaSession:
    """A screening, as far as seat inventory cares: where it plays and what seats cost"""

    id: str
    base_price: int
    vip_price: Optional[int] = None
    auditorium_id: Optional[str] = None
    layout: Optional[AuditoriumLayout] = None

    def price_for(self, seat_type: SeatType) -> int:
        if seat_type == SeatType.VIP and self.vip_price is not None:
            return self.vip_price
        return self.base_price
