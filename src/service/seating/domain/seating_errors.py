"""
Seating domain errors

Every error carries the HTTP status it surfaces with, so controllers never
translate them by hand (see platform/exception/exception_handlers.py).
"""

from collections.abc import Iterable

from src.platform.exception.exceptions import ConflictError, DomainError, NotFoundError


SEAT_OCCUPIED_MESSAGE = 'Some of your seats were just taken, please reselect'


class SessionNotFoundError(NotFoundError):
    def __init__(self, session_id: str) -> None:
        super().__init__('Session not found', extra={'code': 'SESSION_NOT_FOUND'})
        self.session_id = session_id


class LayoutMissingError(DomainError):
    def __init__(self, message: str = 'Session has no auditorium layout') -> None:
        super().__init__(message, 400, extra={'code': 'LAYOUT_MISSING'})


class CartNotFoundError(NotFoundError):
    def __init__(self, cart_id: str) -> None:
        super().__init__('Cart not found', extra={'code': 'CART_NOT_FOUND'})
        self.cart_id = cart_id


class CartNotActiveError(ConflictError):
    def __init__(self, cart_id: str) -> None:
        super().__init__('Cart is not active', extra={'code': 'CART_NOT_ACTIVE'})
        self.cart_id = cart_id


class SeatNotFoundError(DomainError):
    def __init__(self, seat_ids: Iterable[str]) -> None:
        self.seat_ids = sorted(seat_ids)
        super().__init__(
            f'Seats not found: {", ".join(self.seat_ids)}',
            400,
            extra={'code': 'SEAT_NOT_FOUND', 'seat_ids': self.seat_ids},
        )


class SeatOccupiedError(ConflictError):
    def __init__(self, seat_ids: Iterable[str]) -> None:
        self.seat_ids = sorted(seat_ids)
        super().__init__(
            SEAT_OCCUPIED_MESSAGE, extra={'code': 'SEAT_OCCUPIED', 'seat_ids': self.seat_ids}
        )


class SeatsAlreadySoldError(ConflictError):
    def __init__(self, session_id: str) -> None:
        super().__init__(
            'Session already has sold seats or tickets', extra={'code': 'SESSION_HAS_SOLD_SEATS'}
        )
        self.session_id = session_id
