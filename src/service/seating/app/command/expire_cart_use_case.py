from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_cart_command_repo import ICartCommandRepo
from src.service.seating.domain.utc_clock import utc_now


class ExpireCartUseCase:
    """Close an ACTIVE cart right away instead of waiting for the sweep."""

    def __init__(self, *, cart_command_repo: ICartCommandRepo) -> None:
        self.cart_command_repo = cart_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        cart_command_repo: ICartCommandRepo = Depends(Provide[Container.cart_command_repo]),
    ) -> Self:
        return cls(cart_command_repo=cart_command_repo)

    @Logger.io
    async def execute(self, *, cart_id: str) -> bool:
        expired = await self.cart_command_repo.expire(cart_id=cart_id, now=utc_now())
        if expired:
            Logger.base.info(f'🗑️  [CART] expired cart={cart_id}')
        return expired
