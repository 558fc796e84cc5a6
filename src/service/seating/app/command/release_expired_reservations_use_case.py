from datetime import datetime
from typing import Optional

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.dto.seat_inventory_dto import ReleaseExpiredResult
from src.service.seating.app.interface.i_seat_hold_command_repo import ISeatHoldCommandRepo
from src.service.seating.domain.utc_clock import as_utc, utc_now


class ReleaseExpiredReservationsUseCase:
    """
    Sweep lapsed holds back to AVAILABLE and expire lapsed carts.

    Idempotent: a second sweep at the same instant releases nothing. Called by
    the periodic runner and by the cron endpoint, so it is a container
    singleton rather than a per-request dependency.
    """

    def __init__(self, *, seat_hold_command_repo: ISeatHoldCommandRepo) -> None:
        self.seat_hold_command_repo = seat_hold_command_repo

    @Logger.io
    async def execute(self, *, now: Optional[datetime] = None) -> ReleaseExpiredResult:
        result = await self.seat_hold_command_repo.release_expired_reservations(
            now=as_utc(now) or utc_now()
        )
        if result.released_count or result.expired_cart_count:
            Logger.base.info(
                f'⏰ [EXPIRY] released {result.released_count} seats, '
                f'expired {result.expired_cart_count} carts'
            )
        return result
