from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncContextManager, AsyncIterator, Callable, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_cart_command_repo import ICartCommandRepo
from src.service.seating.domain.entity.cart_entity import Cart
from src.service.seating.domain.enum.cart_status import CartStatus
from src.service.seating.domain.utc_clock import as_utc
from src.service.seating.driven_adapter.model.cart_model import CartModel


class CartCommandRepoImpl(ICartCommandRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @staticmethod
    def _model_to_cart(model: CartModel) -> Cart:
        return Cart(
            id=model.id,
            session_id=model.session_id,
            user_id=model.user_id,
            status=CartStatus(model.status),
            expires_at=as_utc(model.expires_at),  # type: ignore[arg-type]
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    @Logger.io
    async def create(self, *, cart: Cart) -> Cart:
        async with self._get_session() as session, session.begin():
            model = CartModel(
                id=cart.id,
                session_id=cart.session_id,
                user_id=cart.user_id,
                status=cart.status.value,
                expires_at=cart.expires_at,
                created_at=cart.created_at,
                updated_at=cart.updated_at,
            )
            session.add(model)
            await session.flush()
            return self._model_to_cart(model)

    @Logger.io
    async def get_by_id(self, *, cart_id: str) -> Optional[Cart]:
        async with self._get_session() as session:
            model = await session.scalar(select(CartModel).where(CartModel.id == cart_id))
            return self._model_to_cart(model) if model else None

    @Logger.io
    async def expire(self, *, cart_id: str, now: datetime) -> bool:
        async with self._get_session() as session, session.begin():
            result = await session.execute(
                update(CartModel)
                .where(CartModel.id == cart_id, CartModel.status == CartStatus.ACTIVE.value)
                .values(status=CartStatus.EXPIRED.value, updated_at=now)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount == 1  # type: ignore[attr-defined]
