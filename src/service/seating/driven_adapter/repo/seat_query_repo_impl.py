from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_seat_query_repo import ISeatQueryRepo
from src.service.seating.domain.entity.seat_entity import SeatEntity
from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.enum.seat_type import SeatType
from src.service.seating.domain.utc_clock import as_utc
from src.service.seating.driven_adapter.model.seat_model import SeatModel


class SeatQueryRepoImpl(ISeatQueryRepo):
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
    def _model_to_seat(model: SeatModel) -> SeatEntity:
        return SeatEntity(
            id=model.id,
            session_id=model.session_id,
            row=model.row_label,
            number=model.number,
            seat_id=model.seat_id,
            seat_type=SeatType(model.seat_type),
            price=model.price,
            status=SeatStatus(model.status),
            held_until=as_utc(model.held_until),
            held_by_cart_id=model.held_by_cart_id,
            sold_at=as_utc(model.sold_at),
            sold_cart_id=model.sold_cart_id,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    @Logger.io(truncate_content=True)
    async def list_by_session(self, *, session_id: str) -> list[SeatEntity]:
        async with self._get_session() as session:
            result = await session.scalars(
                select(SeatModel)
                .where(SeatModel.session_id == session_id)
                .order_by(SeatModel.row_label, SeatModel.number)
            )
            return [self._model_to_seat(model) for model in result.all()]
