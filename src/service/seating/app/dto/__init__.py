"""Application layer DTOs"""

from src.service.seating.app.dto.seat_inventory_dto import (
    HoldSeatsResult,
    QueueAdmission,
    ReleaseExpiredResult,
    SeatGenerationResult,
    SeatMap,
)

__all__ = [
    'HoldSeatsResult',
    'QueueAdmission',
    'ReleaseExpiredResult',
    'SeatGenerationResult',
    'SeatMap',
]
