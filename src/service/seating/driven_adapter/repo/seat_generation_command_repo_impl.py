"""
Seat Generation Command Repository Implementation

Idempotent seat creation relies on ON CONFLICT DO NOTHING against the two
seat uniqueness constraints. Whichever concurrent caller loses the insert
race simply inserts fewer rows.
"""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, AsyncContextManager, AsyncIterator, Callable

from sqlalchemy import delete, func, insert, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
import uuid_utils as uuid

from src.platform.database.dialect_insert import dialect_insert
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_seat_generation_command_repo import (
    ISeatGenerationCommandRepo,
)
from src.service.seating.domain.entity.seat_entity import SeatEntity
from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.seating_errors import SeatsAlreadySoldError
from src.service.seating.domain.utc_clock import utc_now
from src.service.seating.domain.value_object.auditorium_layout import normalize_row_label
from src.service.seating.driven_adapter.model.seat_model import SeatModel
from src.service.seating.driven_adapter.model.ticket_model import TicketModel


class SeatGenerationCommandRepoImpl(ISeatGenerationCommandRepo):
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
    def _seat_to_row(seat: SeatEntity, now: datetime) -> dict[str, Any]:
        return {
            'id': seat.id or str(uuid.uuid7()),
            'session_id': seat.session_id,
            'row_label': seat.row,
            'number': seat.number,
            'seat_id': seat.seat_id,
            'seat_type': seat.seat_type.value,
            'price': seat.price,
            'status': SeatStatus.AVAILABLE.value,
            'created_at': now,
            'updated_at': now,
        }

    @Logger.io
    async def insert_missing_seats(self, *, session_id: str, seats: list[SeatEntity]) -> int:
        now = utc_now()
        async with self._get_session() as session, session.begin():
            existing = (
                await session.execute(
                    select(SeatModel.row_label, SeatModel.number, SeatModel.seat_id).where(
                        SeatModel.session_id == session_id
                    )
                )
            ).all()
            existing_coordinates = {(normalize_row_label(r.row_label), r.number) for r in existing}
            existing_seat_ids = {r.seat_id for r in existing}

            missing = [
                seat
                for seat in seats
                if (seat.row, seat.number) not in existing_coordinates
                and seat.seat_id not in existing_seat_ids
            ]
            if not missing:
                return 0

            stmt = (
                dialect_insert(session, SeatModel)
                .values([self._seat_to_row(seat, now) for seat in missing])
                .on_conflict_do_nothing()
                .returning(SeatModel.id)
            )
            inserted = (await session.execute(stmt)).all()

        Logger.base.info(
            f'🪑 [SEAT-GEN] session={session_id} inserted={len(inserted)}/{len(missing)} missing'
        )
        return len(inserted)

    @Logger.io
    async def insert_seats(self, *, seats: list[SeatEntity]) -> int:
        if not seats:
            return 0
        now = utc_now()
        async with self._get_session() as session, session.begin():
            await session.execute(insert(SeatModel), [self._seat_to_row(s, now) for s in seats])
        return len(seats)

    @Logger.io
    async def replace_session_seats(self, *, session_id: str, seats: list[SeatEntity]) -> int:
        now = utc_now()
        async with self._get_session() as session, session.begin():
            if await self._has_sales(session, session_id=session_id):
                raise SeatsAlreadySoldError(session_id)

            # Conditional delete, then re-check: a sale committed after the check
            # above leaves its seat behind and aborts the regeneration
            await session.execute(
                delete(SeatModel)
                .where(
                    SeatModel.session_id == session_id,
                    SeatModel.status != SeatStatus.SOLD.value,
                    SeatModel.sold_cart_id.is_(None),
                    SeatModel.sold_at.is_(None),
                )
                .execution_options(synchronize_session=False)
            )
            remaining = await session.scalar(
                select(func.count()).select_from(SeatModel).where(SeatModel.session_id == session_id)
            )
            if remaining:
                raise SeatsAlreadySoldError(session_id)

            if seats:
                await session.execute(
                    insert(SeatModel), [self._seat_to_row(seat, now) for seat in seats]
                )

        Logger.base.info(f'♻️  [SEAT-GEN] session={session_id} regenerated {len(seats)} seats')
        return len(seats)

    @staticmethod
    async def _has_sales(session: AsyncSession, *, session_id: str) -> bool:
        sold_seat = await session.scalar(
            select(SeatModel.id)
            .where(
                SeatModel.session_id == session_id,
                or_(
                    SeatModel.status == SeatStatus.SOLD.value,
                    SeatModel.sold_cart_id.is_not(None),
                    SeatModel.sold_at.is_not(None),
                ),
            )
            .limit(1)
        )
        if sold_seat is not None:
            return True
        ticket = await session.scalar(
            select(TicketModel.id).where(TicketModel.session_id == session_id).limit(1)
        )
        return ticket is not None
