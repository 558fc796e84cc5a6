"""
Seat Hold Command Repository Implementation

Every write is a single conditional UPDATE whose WHERE clause re-states the
precondition, checked by affected row count inside one transaction:

- hold:    AVAILABLE, or HELD with a lapsed hold, or HELD by the same cart
- release: HELD by the releasing cart
- sell:    HELD by the selling cart with an unexpired hold
- reclaim: HELD with a lapsed hold, or held by a cart that is no longer live

Raising inside `session.begin()` rolls the whole transaction back, which is
what makes a failed hold leave no partial state behind.
"""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncContextManager, AsyncIterator, Callable, Optional

from sqlalchemy import and_, case, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
import uuid_utils as uuid

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.dto.seat_inventory_dto import ReleaseExpiredResult
from src.service.seating.app.interface.i_seat_hold_command_repo import ISeatHoldCommandRepo
from src.service.seating.domain.enum.cart_status import CartStatus
from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.enum.seat_type import SeatType
from src.service.seating.domain.seating_errors import (
    CartNotActiveError,
    CartNotFoundError,
    SeatNotFoundError,
    SeatOccupiedError,
)
from src.service.seating.domain.utc_clock import as_utc, utc_now
from src.service.seating.driven_adapter.model.cart_model import CartModel
from src.service.seating.driven_adapter.model.seat_model import SeatModel
from src.service.seating.driven_adapter.model.ticket_model import TicketModel


_NOT_SOLD = and_(
    SeatModel.status != SeatStatus.SOLD.value,
    SeatModel.sold_cart_id.is_(None),
    SeatModel.sold_at.is_(None),
)


class SeatHoldCommandRepoImpl(ISeatHoldCommandRepo):
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
    async def _get_cart(session: AsyncSession, *, cart_id: str) -> CartModel:
        cart = await session.scalar(select(CartModel).where(CartModel.id == cart_id))
        if cart is None:
            raise CartNotFoundError(cart_id)
        return cart

    @Logger.io
    async def hold_seats(
        self, *, cart_id: str, seat_ids: list[str], held_until: datetime, now: datetime
    ) -> list[str]:
        async with self._get_session() as session, session.begin():
            cart = await self._get_cart(session, cart_id=cart_id)
            cart_expires_at = as_utc(cart.expires_at)
            if cart.status != CartStatus.ACTIVE.value or (
                cart_expires_at is not None and cart_expires_at <= now
            ):
                raise CartNotActiveError(cart_id)

            found = {
                row.seat_id: row.seat_type
                for row in await session.execute(
                    select(SeatModel.seat_id, SeatModel.seat_type).where(
                        SeatModel.session_id == cart.session_id,
                        SeatModel.seat_id.in_(seat_ids),
                    )
                )
            }
            missing = [
                seat_id
                for seat_id in seat_ids
                if seat_id not in found or found[seat_id] == SeatType.GAP.value
            ]
            if missing:
                raise SeatNotFoundError(missing)

            result = await session.execute(
                update(SeatModel)
                .where(
                    SeatModel.session_id == cart.session_id,
                    SeatModel.seat_id.in_(seat_ids),
                    _NOT_SOLD,
                    or_(
                        SeatModel.status == SeatStatus.AVAILABLE.value,
                        and_(
                            SeatModel.status == SeatStatus.HELD.value,
                            or_(SeatModel.held_until.is_(None), SeatModel.held_until <= now),
                        ),
                        SeatModel.held_by_cart_id == cart_id,
                    ),
                )
                .values(
                    status=SeatStatus.HELD.value,
                    held_until=held_until,
                    held_by_cart_id=cart_id,
                    updated_at=now,
                )
                .execution_options(synchronize_session=False)
            )

            if result.rowcount != len(seat_ids):  # type: ignore[attr-defined]
                occupied = await self._seats_not_held_by(
                    session, session_id=cart.session_id, seat_ids=seat_ids, cart_id=cart_id
                )
                Logger.base.info(
                    f'🚫 [HOLD] cart={cart_id} lost {occupied} '
                    f'({result.rowcount}/{len(seat_ids)} matched), rolling back'  # type: ignore[attr-defined]
                )
                raise SeatOccupiedError(occupied)

            # The cart outlives its latest hold, so a shorter re-hold never lowers it
            cart_update = await session.execute(
                update(CartModel)
                .where(CartModel.id == cart_id, CartModel.status == CartStatus.ACTIVE.value)
                .values(
                    expires_at=case(
                        (CartModel.expires_at < held_until, held_until),
                        else_=CartModel.expires_at,
                    ),
                    updated_at=now,
                )
                .execution_options(synchronize_session=False)
            )
            if cart_update.rowcount != 1:  # type: ignore[attr-defined]
                raise CartNotActiveError(cart_id)

        return list(seat_ids)

    @staticmethod
    async def _seats_not_held_by(
        session: AsyncSession, *, session_id: str, seat_ids: list[str], cart_id: str
    ) -> list[str]:
        rows = await session.execute(
            select(SeatModel.seat_id, SeatModel.status, SeatModel.held_by_cart_id).where(
                SeatModel.session_id == session_id, SeatModel.seat_id.in_(seat_ids)
            )
        )
        return [
            row.seat_id
            for row in rows
            if not (row.status == SeatStatus.HELD.value and row.held_by_cart_id == cart_id)
        ]

    @Logger.io
    async def release_cart_seats(
        self, *, cart_id: str, seat_ids: Optional[list[str]] = None
    ) -> list[str]:
        now = utc_now()
        stmt = update(SeatModel).where(
            SeatModel.status == SeatStatus.HELD.value,
            SeatModel.held_by_cart_id == cart_id,
            _NOT_SOLD,
        )
        if seat_ids is not None:
            stmt = stmt.where(SeatModel.seat_id.in_(seat_ids))

        async with self._get_session() as session, session.begin():
            result = await session.execute(
                stmt.values(
                    status=SeatStatus.AVAILABLE.value,
                    held_until=None,
                    held_by_cart_id=None,
                    updated_at=now,
                )
                .returning(SeatModel.seat_id)
                .execution_options(synchronize_session=False)
            )
            released = sorted(result.scalars().all())

        return released

    @Logger.io
    async def sell_held_seats(self, *, cart_id: str, now: datetime) -> list[str]:
        async with self._get_session() as session, session.begin():
            cart = await self._get_cart(session, cart_id=cart_id)

            if cart.status == CartStatus.CONVERTED.value:
                sold = await session.scalars(
                    select(SeatModel.seat_id).where(SeatModel.sold_cart_id == cart_id)
                )
                return sorted(sold.all())
            if cart.status != CartStatus.ACTIVE.value:
                raise CartNotActiveError(cart_id)

            held = (
                await session.execute(
                    select(
                        SeatModel.id,
                        SeatModel.seat_id,
                        SeatModel.seat_type,
                        SeatModel.price,
                        SeatModel.session_id,
                    ).where(
                        SeatModel.held_by_cart_id == cart_id,
                        SeatModel.status == SeatStatus.HELD.value,
                    )
                )
            ).all()
            if not held:
                raise DomainError('Cart holds no seats')

            result = await session.execute(
                update(SeatModel)
                .where(
                    SeatModel.id.in_([row.id for row in held]),
                    SeatModel.status == SeatStatus.HELD.value,
                    SeatModel.held_by_cart_id == cart_id,
                    SeatModel.held_until > now,
                    _NOT_SOLD,
                )
                .values(
                    status=SeatStatus.SOLD.value,
                    sold_at=now,
                    sold_cart_id=cart_id,
                    held_until=None,
                    held_by_cart_id=None,
                    updated_at=now,
                )
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != len(held):  # type: ignore[attr-defined]
                lapsed = await self._seats_not_sold_to(
                    session, seat_row_ids=[row.id for row in held], cart_id=cart_id
                )
                raise SeatOccupiedError(lapsed)

            session.add_all(
                TicketModel(
                    id=str(uuid.uuid7()),
                    session_id=row.session_id,
                    seat_row_id=row.id,
                    cart_id=cart_id,
                    seat_type=row.seat_type,
                    price=row.price,
                    created_at=now,
                )
                for row in held
            )

            await session.execute(
                update(CartModel)
                .where(CartModel.id == cart_id)
                .values(status=CartStatus.CONVERTED.value, updated_at=now)
                .execution_options(synchronize_session=False)
            )

        Logger.base.info(f'💳 [SELL] cart={cart_id} sold {len(held)} seats')
        return sorted(row.seat_id for row in held)

    @staticmethod
    async def _seats_not_sold_to(
        session: AsyncSession, *, seat_row_ids: list[str], cart_id: str
    ) -> list[str]:
        rows = await session.execute(
            select(SeatModel.seat_id, SeatModel.sold_cart_id).where(SeatModel.id.in_(seat_row_ids))
        )
        return [row.seat_id for row in rows if row.sold_cart_id != cart_id]

    @Logger.io
    async def release_expired_reservations(self, *, now: datetime) -> ReleaseExpiredResult:
        lapsed_carts = select(CartModel.id).where(
            or_(CartModel.status != CartStatus.ACTIVE.value, CartModel.expires_at <= now)
        )

        async with self._get_session() as session, session.begin():
            released = await session.execute(
                update(SeatModel)
                .where(
                    SeatModel.status == SeatStatus.HELD.value,
                    _NOT_SOLD,
                    or_(
                        SeatModel.held_until.is_(None),
                        SeatModel.held_until <= now,
                        SeatModel.held_by_cart_id.is_(None),
                        SeatModel.held_by_cart_id.in_(lapsed_carts),
                    ),
                )
                .values(
                    status=SeatStatus.AVAILABLE.value,
                    held_until=None,
                    held_by_cart_id=None,
                    updated_at=now,
                )
                .returning(SeatModel.id)
                .execution_options(synchronize_session=False)
            )
            released_seat_ids = sorted(released.scalars().all())

            expired = await session.execute(
                update(CartModel)
                .where(CartModel.status == CartStatus.ACTIVE.value, CartModel.expires_at <= now)
                .values(status=CartStatus.EXPIRED.value, updated_at=now)
                .execution_options(synchronize_session=False)
            )
            expired_cart_count = expired.rowcount  # type: ignore[attr-defined]

        return ReleaseExpiredResult(
            released_seat_ids=released_seat_ids, expired_cart_count=expired_cart_count
        )
