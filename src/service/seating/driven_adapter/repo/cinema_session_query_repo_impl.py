from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_cinema_session_query_repo import (
    ICinemaSessionQueryRepo,
)
from src.service.seating.domain.entity.cinema_session_entity import CinemaSession
from src.service.seating.domain.value_object.auditorium_layout import AuditoriumLayout
from src.service.seating.driven_adapter.model.cinema_session_model import CinemaSessionModel


class CinemaSessionQueryRepoImpl(ICinemaSessionQueryRepo):
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
    def _model_to_session(model: CinemaSessionModel) -> CinemaSession:
        layout = None
        if model.auditorium is not None:
            layout = AuditoriumLayout.from_dict(
                model.auditorium.seat_map_config or model.auditorium.layout
            )
        return CinemaSession(
            id=model.id,
            base_price=model.base_price,
            vip_price=model.vip_price,
            auditorium_id=model.auditorium_id,
            layout=layout,
        )

    @Logger.io
    async def get_by_id(self, *, session_id: str) -> Optional[CinemaSession]:
        async with self._get_session() as session:
            model = await session.scalar(
                select(CinemaSessionModel).where(CinemaSessionModel.id == session_id)
            )
            return self._model_to_session(model) if model else None
