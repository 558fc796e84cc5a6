"""Seating Domain Value Objects"""

from src.service.seating.domain.value_object.auditorium_layout import (
    AuditoriumLayout,
    RowLayout,
    SeatCoordinate,
    format_seat_id,
    normalize_row_label,
)

__all__ = [
    'AuditoriumLayout',
    'RowLayout',
    'SeatCoordinate',
    'format_seat_id',
    'normalize_row_label',
]
