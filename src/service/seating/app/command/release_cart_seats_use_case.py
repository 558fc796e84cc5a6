from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.command.hold_seats_use_case import normalize_seat_ids
from src.service.seating.app.interface.i_cart_command_repo import ICartCommandRepo
from src.service.seating.app.interface.i_seat_hold_command_repo import ISeatHoldCommandRepo
from src.service.seating.domain.seating_errors import CartNotFoundError


class ReleaseCartSeatsUseCase:
    def __init__(
        self,
        *,
        cart_command_repo: ICartCommandRepo,
        seat_hold_command_repo: ISeatHoldCommandRepo,
    ) -> None:
        self.cart_command_repo = cart_command_repo
        self.seat_hold_command_repo = seat_hold_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        cart_command_repo: ICartCommandRepo = Depends(Provide[Container.cart_command_repo]),
        seat_hold_command_repo: ISeatHoldCommandRepo = Depends(
            Provide[Container.seat_hold_command_repo]
        ),
    ) -> Self:
        return cls(cart_command_repo=cart_command_repo, seat_hold_command_repo=seat_hold_command_repo)

    @Logger.io
    async def execute(self, *, cart_id: str, seat_ids: Optional[list[str]] = None) -> list[str]:
        """Release the cart's held seats; all of them when `seat_ids` is None"""
        if await self.cart_command_repo.get_by_id(cart_id=cart_id) is None:
            raise CartNotFoundError(cart_id)

        return await self.seat_hold_command_repo.release_cart_seats(
            cart_id=cart_id,
            seat_ids=normalize_seat_ids(seat_ids) if seat_ids is not None else None,
        )
