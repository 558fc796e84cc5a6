from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
import uuid_utils as uuid

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_cart_command_repo import ICartCommandRepo
from src.service.seating.app.interface.i_cinema_session_query_repo import (
    ICinemaSessionQueryRepo,
)
from src.service.seating.domain.entity.cart_entity import Cart
from src.service.seating.domain.seating_errors import SessionNotFoundError
from src.service.seating.domain.utc_clock import utc_now


class CreateCartUseCase:
    def __init__(
        self,
        *,
        cinema_session_query_repo: ICinemaSessionQueryRepo,
        cart_command_repo: ICartCommandRepo,
    ) -> None:
        self.cinema_session_query_repo = cinema_session_query_repo
        self.cart_command_repo = cart_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        cinema_session_query_repo: ICinemaSessionQueryRepo = Depends(
            Provide[Container.cinema_session_query_repo]
        ),
        cart_command_repo: ICartCommandRepo = Depends(Provide[Container.cart_command_repo]),
    ) -> Self:
        return cls(
            cinema_session_query_repo=cinema_session_query_repo,
            cart_command_repo=cart_command_repo,
        )

    @Logger.io
    async def execute(
        self,
        *,
        session_id: str,
        user_id: Optional[str] = None,
        ttl_minutes: Optional[int] = None,
    ) -> Cart:
        ttl_minutes = validate_ttl_minutes(ttl_minutes)
        if await self.cinema_session_query_repo.get_by_id(session_id=session_id) is None:
            raise SessionNotFoundError(session_id)

        cart = Cart.open(
            id=str(uuid.uuid7()),
            session_id=session_id,
            now=utc_now(),
            ttl_minutes=ttl_minutes,
            user_id=user_id,
        )
        return await self.cart_command_repo.create(cart=cart)


def validate_ttl_minutes(ttl_minutes: Optional[int]) -> int:
    if ttl_minutes is None:
        return settings.SEAT_HOLD_TTL_MINUTES
    if not 1 <= ttl_minutes <= settings.SEAT_HOLD_MAX_TTL_MINUTES:
        raise DomainError(
            f'ttl_minutes must be between 1 and {settings.SEAT_HOLD_MAX_TTL_MINUTES}'
        )
    return ttl_minutes
