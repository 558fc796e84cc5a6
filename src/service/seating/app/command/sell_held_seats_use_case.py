from datetime import datetime
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_seat_hold_command_repo import ISeatHoldCommandRepo
from src.service.seating.domain.utc_clock import as_utc, utc_now


class SellHeldSeatsUseCase:
    """
    Promote a cart's unexpired holds to SOLD, issue tickets and convert the cart.

    Entry point for checkout. Repeating it on a converted cart returns the
    seats it already bought.
    """

    def __init__(self, *, seat_hold_command_repo: ISeatHoldCommandRepo) -> None:
        self.seat_hold_command_repo = seat_hold_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        seat_hold_command_repo: ISeatHoldCommandRepo = Depends(
            Provide[Container.seat_hold_command_repo]
        ),
    ) -> Self:
        return cls(seat_hold_command_repo=seat_hold_command_repo)

    @Logger.io
    async def execute(self, *, cart_id: str, now: Optional[datetime] = None) -> list[str]:
        return await self.seat_hold_command_repo.sell_held_seats(
            cart_id=cart_id, now=as_utc(now) or utc_now()
        )
