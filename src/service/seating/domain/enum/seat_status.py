from enum import StrEnum


class SeatStatus(StrEnum):
    """Stored seat status. Only a hint for display, see seat_state_projector."""

    AVAILABLE = 'AVAILABLE'
    HELD = 'HELD'
    SOLD = 'SOLD'
