"""
Seating Service Fixtures

Real repositories over the test database plus helpers that seed auditoriums,
sessions and carts straight through the ORM.
"""

from collections.abc import Awaitable, Callable
from datetime import datetime, timedelta
from typing import Any, Optional

import pytest
from sqlalchemy import select, update
import uuid_utils as uuid

from src.platform.database.orm_db_setting import Database, get_session_maker
from src.service.seating.domain.entity.cart_entity import Cart
from src.service.seating.domain.enum.cart_status import CartStatus
from src.service.seating.domain.utc_clock import utc_now
from src.service.seating.driven_adapter.model.auditorium_model import AuditoriumModel
from src.service.seating.driven_adapter.model.cart_model import CartModel
from src.service.seating.driven_adapter.model.cinema_session_model import CinemaSessionModel
from src.service.seating.driven_adapter.model.seat_model import SeatModel
from src.service.seating.driven_adapter.repo.cart_command_repo_impl import CartCommandRepoImpl
from src.service.seating.driven_adapter.repo.cinema_session_query_repo_impl import (
    CinemaSessionQueryRepoImpl,
)
from src.service.seating.driven_adapter.repo.queue_command_repo_impl import QueueCommandRepoImpl
from src.service.seating.driven_adapter.repo.seat_generation_command_repo_impl import (
    SeatGenerationCommandRepoImpl,
)
from src.service.seating.driven_adapter.repo.seat_hold_command_repo_impl import (
    SeatHoldCommandRepoImpl,
)
from src.service.seating.driven_adapter.repo.seat_query_repo_impl import SeatQueryRepoImpl
from test.test_constants import (
    SCENARIO_LAYOUT,
    TEST_AUDITORIUM_ID_1,
    TEST_BASE_PRICE,
    TEST_SESSION_ID_1,
    TEST_VIP_PRICE,
)


SeedSession = Callable[..., Awaitable[str]]
OpenCart = Callable[..., Awaitable[str]]


# =============================================================================
# Repositories
# =============================================================================
@pytest.fixture
def database() -> Database:
    return Database()


@pytest.fixture
def cinema_session_query_repo(database: Database) -> CinemaSessionQueryRepoImpl:
    return CinemaSessionQueryRepoImpl(session_factory=database.session)


@pytest.fixture
def seat_query_repo(database: Database) -> SeatQueryRepoImpl:
    return SeatQueryRepoImpl(session_factory=database.session)


@pytest.fixture
def seat_generation_command_repo(database: Database) -> SeatGenerationCommandRepoImpl:
    return SeatGenerationCommandRepoImpl(session_factory=database.session)


@pytest.fixture
def seat_hold_command_repo(database: Database) -> SeatHoldCommandRepoImpl:
    return SeatHoldCommandRepoImpl(session_factory=database.session)


@pytest.fixture
def cart_command_repo(database: Database) -> CartCommandRepoImpl:
    return CartCommandRepoImpl(session_factory=database.session)


@pytest.fixture
def queue_command_repo(database: Database) -> QueueCommandRepoImpl:
    return QueueCommandRepoImpl(session_factory=database.session)


# =============================================================================
# Seeding helpers
# =============================================================================
@pytest.fixture
def seed_session() -> SeedSession:
    async def _seed(
        *,
        session_id: str = TEST_SESSION_ID_1,
        auditorium_id: Optional[str] = TEST_AUDITORIUM_ID_1,
        layout: Optional[dict[str, Any]] = None,
        seat_map_config: Optional[dict[str, Any]] = None,
        base_price: int = TEST_BASE_PRICE,
        vip_price: Optional[int] = TEST_VIP_PRICE,
    ) -> str:
        if layout is None and seat_map_config is None:
            layout = SCENARIO_LAYOUT

        async with get_session_maker()() as session, session.begin():
            if auditorium_id is not None:
                existing = await session.scalar(
                    select(AuditoriumModel.id).where(AuditoriumModel.id == auditorium_id)
                )
                if existing is None:
                    session.add(
                        AuditoriumModel(
                            id=auditorium_id,
                            name=f'Auditorium {auditorium_id[-4:]}',
                            layout=layout,
                            seat_map_config=seat_map_config,
                        )
                    )
                    await session.flush()
            session.add(
                CinemaSessionModel(
                    id=session_id,
                    auditorium_id=auditorium_id,
                    starts_at=utc_now() + timedelta(days=1),
                    base_price=base_price,
                    vip_price=vip_price,
                )
            )
        return session_id

    return _seed


@pytest.fixture
def open_cart(cart_command_repo: CartCommandRepoImpl) -> OpenCart:
    async def _open(
        *,
        session_id: str = TEST_SESSION_ID_1,
        ttl_minutes: int = 10,
        now: Optional[datetime] = None,
    ) -> str:
        cart = Cart.open(
            id=str(uuid.uuid7()),
            session_id=session_id,
            now=now or utc_now(),
            ttl_minutes=ttl_minutes,
        )
        created = await cart_command_repo.create(cart=cart)
        return created.id

    return _open


async def fetch_seat_rows(session_id: str = TEST_SESSION_ID_1) -> dict[str, SeatModel]:
    """Stored seat rows keyed by display id"""
    async with get_session_maker()() as session:
        rows = await session.scalars(select(SeatModel).where(SeatModel.session_id == session_id))
        return {row.seat_id: row for row in rows}


async def fetch_cart_row(cart_id: str) -> Optional[CartModel]:
    async with get_session_maker()() as session:
        return await session.scalar(select(CartModel).where(CartModel.id == cart_id))


async def fetch_cart_rows(session_id: str = TEST_SESSION_ID_1) -> dict[str, CartModel]:
    async with get_session_maker()() as session:
        rows = await session.scalars(select(CartModel).where(CartModel.session_id == session_id))
        return {row.id: row for row in rows}


async def force_cart_status(cart_id: str, status: CartStatus) -> None:
    async with get_session_maker()() as session, session.begin():
        await session.execute(
            update(CartModel).where(CartModel.id == cart_id).values(status=status.value)
        )
