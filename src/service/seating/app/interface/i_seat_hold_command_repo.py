"""
Seat Hold Command Repository Interface

All mutual exclusion between carts happens inside these calls, through
conditional updates checked by affected row count. Nothing here may read
seat state and then write it back without re-checking the predicate.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from src.service.seating.app.dto.seat_inventory_dto import ReleaseExpiredResult


class ISeatHoldCommandRepo(ABC):
    @abstractmethod
    async def hold_seats(
        self, *, cart_id: str, seat_ids: list[str], held_until: datetime, now: datetime
    ) -> list[str]:
        """
        Hold every seat in `seat_ids` for the cart, or none of them

        A seat qualifies when it is AVAILABLE, when its hold has lapsed, or when
        the same cart already holds it (re-hold extends the expiry). On success
        the cart's expires_at becomes `held_until` in the same transaction.

        Args:
            cart_id: Holding cart
            seat_ids: Display seat ids (e.g. "A1"), already de-duplicated
            held_until: New hold expiry
            now: Instant the lapsed-hold check is evaluated against

        Returns:
            The held display seat ids

        Raises:
            CartNotFoundError: cart does not exist
            CartNotActiveError: cart is not ACTIVE
            SeatNotFoundError: a seat is not in the cart's session or is a GAP
            SeatOccupiedError: at least one seat belongs to someone else
        """
        pass

    @abstractmethod
    async def release_cart_seats(
        self, *, cart_id: str, seat_ids: Optional[list[str]] = None
    ) -> list[str]:
        """
        Release seats still HELD by the cart (all of them when seat_ids is None)

        Returns:
            The released display seat ids
        """
        pass

    @abstractmethod
    async def sell_held_seats(self, *, cart_id: str, now: datetime) -> list[str]:
        """
        Promote the cart's unexpired holds to SOLD, write tickets and convert the cart

        Calling it again for a converted cart returns the seats sold the first time.

        Raises:
            CartNotFoundError: cart does not exist
            CartNotActiveError: cart expired
            SeatOccupiedError: a hold lapsed and the seat is no longer the cart's
        """
        pass

    @abstractmethod
    async def release_expired_reservations(self, *, now: datetime) -> ReleaseExpiredResult:
        """
        Reclaim lapsed holds and expire lapsed carts

        Returns:
            Seat ids released and the number of carts moved to EXPIRED
        """
        pass
