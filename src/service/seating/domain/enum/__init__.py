"""Seating Domain Enums"""

from src.service.seating.domain.enum.cart_status import CartStatus
from src.service.seating.domain.enum.queue_entry_status import QueueEntryStatus
from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.enum.seat_type import SeatType

__all__ = ['CartStatus', 'QueueEntryStatus', 'SeatStatus', 'SeatType']
