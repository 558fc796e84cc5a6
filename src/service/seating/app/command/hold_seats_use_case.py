from datetime import datetime, timedelta
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.command.create_cart_use_case import validate_ttl_minutes
from src.service.seating.app.dto.seat_inventory_dto import HoldSeatsResult
from src.service.seating.app.interface.i_seat_hold_command_repo import ISeatHoldCommandRepo
from src.service.seating.domain.utc_clock import as_utc, utc_now
from src.service.seating.domain.value_object.auditorium_layout import normalize_row_label


def normalize_seat_ids(seat_ids: list[str]) -> list[str]:
    """Upper-case, strip and de-duplicate display ids, keeping request order"""
    normalized: dict[str, None] = {}
    for seat_id in seat_ids:
        cleaned = normalize_row_label(seat_id)
        if cleaned:
            normalized[cleaned] = None
    return list(normalized)


class HoldSeatsUseCase:
    """
    Hold seats for a cart, all or nothing.

    Either every requested seat ends up HELD by the cart until `held_until`
    or nothing changes and SeatOccupiedError lists the seats that were taken.
    Re-holding seats the cart already holds extends them.
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
    async def execute(
        self,
        *,
        cart_id: str,
        seat_ids: list[str],
        ttl_minutes: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> HoldSeatsResult:
        ttl_minutes = validate_ttl_minutes(ttl_minutes)
        requested = normalize_seat_ids(seat_ids)
        if not requested:
            raise DomainError('seat_ids must not be empty')

        now = as_utc(now) or utc_now()
        held_until = now + timedelta(minutes=ttl_minutes)
        held = await self.seat_hold_command_repo.hold_seats(
            cart_id=cart_id, seat_ids=requested, held_until=held_until, now=now
        )

        Logger.base.info(f'🎟️  [HOLD] cart={cart_id} holds {held} until {held_until.isoformat()}')
        return HoldSeatsResult(cart_id=cart_id, held_until=held_until, held_seat_ids=held)
