import asyncio
from datetime import timedelta

import pytest

from src.service.seating.app.command.bind_queue_entry_to_cart_use_case import (
    BindQueueEntryToCartUseCase,
)
from src.service.seating.app.command.ensure_seats_for_session_use_case import (
    EnsureSeatsForSessionUseCase,
)
from src.service.seating.app.command.hold_seats_use_case import HoldSeatsUseCase
from src.service.seating.app.command.join_queue_use_case import JoinQueueUseCase
from src.service.seating.app.command.release_expired_reservations_use_case import (
    ReleaseExpiredReservationsUseCase,
)
from src.service.seating.app.query.get_seat_map_use_case import GetSeatMapUseCase
from src.service.seating.domain.enum.cart_status import CartStatus
from src.service.seating.domain.enum.queue_entry_status import QueueEntryStatus
from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.utc_clock import utc_now
from test.service.seating.fixtures import fetch_cart_row, fetch_seat_rows
from test.test_constants import QUEUE_SCOPE_KEY, TEST_SESSION_ID_1


pytestmark = pytest.mark.integration


@pytest.fixture
def ensure_seats_use_case(
    cinema_session_query_repo, seat_generation_command_repo
) -> EnsureSeatsForSessionUseCase:
    return EnsureSeatsForSessionUseCase(
        cinema_session_query_repo=cinema_session_query_repo,
        seat_generation_command_repo=seat_generation_command_repo,
    )


@pytest.fixture
def release_expired_use_case(seat_hold_command_repo) -> ReleaseExpiredReservationsUseCase:
    return ReleaseExpiredReservationsUseCase(seat_hold_command_repo=seat_hold_command_repo)


@pytest.fixture
def join_queue_use_case(queue_command_repo) -> JoinQueueUseCase:
    return JoinQueueUseCase(queue_command_repo=queue_command_repo)


class TestReleaseExpiredReservations:
    async def test_expired_hold_reads_available_then_is_swept(
        self,
        seed_session,
        open_cart,
        ensure_seats_use_case,
        seat_query_repo,
        seat_hold_command_repo,
        release_expired_use_case,
    ) -> None:
        await seed_session()
        await ensure_seats_use_case.execute(session_id=TEST_SESSION_ID_1)
        cart_id = await open_cart(ttl_minutes=1)
        await HoldSeatsUseCase(seat_hold_command_repo=seat_hold_command_repo).execute(
            cart_id=cart_id, seat_ids=['A1', 'A2'], ttl_minutes=1
        )
        later = utc_now() + timedelta(minutes=2)
        seat_map_use_case = GetSeatMapUseCase(
            ensure_seats_use_case=ensure_seats_use_case, seat_query_repo=seat_query_repo
        )

        seat_map = await seat_map_use_case.execute(session_id=TEST_SESSION_ID_1, now=later)

        row_a = seat_map.rows[0]
        assert row_a.seats[0].status == SeatStatus.AVAILABLE
        assert row_a.seats[0].held_by_cart_id is None
        assert (await fetch_seat_rows())['A1'].status == SeatStatus.HELD.value

        result = await release_expired_use_case.execute(now=later)

        assert result.released_count == 2
        assert result.expired_cart_count == 1
        seats = await fetch_seat_rows()
        assert seats['A1'].status == SeatStatus.AVAILABLE.value
        assert seats['A1'].held_until is None
        assert seats['A1'].held_by_cart_id is None
        assert (await fetch_cart_row(cart_id)).status == CartStatus.EXPIRED.value

    async def test_sweep_is_idempotent(
        self,
        seed_session,
        open_cart,
        ensure_seats_use_case,
        seat_hold_command_repo,
        release_expired_use_case,
    ) -> None:
        await seed_session()
        await ensure_seats_use_case.execute(session_id=TEST_SESSION_ID_1)
        cart_id = await open_cart(ttl_minutes=1)
        await HoldSeatsUseCase(seat_hold_command_repo=seat_hold_command_repo).execute(
            cart_id=cart_id, seat_ids=['A1'], ttl_minutes=1
        )
        later = utc_now() + timedelta(minutes=2)
        await release_expired_use_case.execute(now=later)

        again = await release_expired_use_case.execute(now=later)

        assert again.released_count == 0
        assert again.expired_cart_count == 0

    async def test_live_holds_survive(
        self,
        seed_session,
        open_cart,
        ensure_seats_use_case,
        seat_hold_command_repo,
        release_expired_use_case,
    ) -> None:
        await seed_session()
        await ensure_seats_use_case.execute(session_id=TEST_SESSION_ID_1)
        cart_id = await open_cart()
        await HoldSeatsUseCase(seat_hold_command_repo=seat_hold_command_repo).execute(
            cart_id=cart_id, seat_ids=['A1'], ttl_minutes=10
        )

        result = await release_expired_use_case.execute()

        assert result.released_count == 0
        assert (await fetch_seat_rows())['A1'].held_by_cart_id == cart_id
        assert (await fetch_cart_row(cart_id)).status == CartStatus.ACTIVE.value


class TestQueueAdmission:
    async def test_numbers_are_sequential(self, join_queue_use_case) -> None:
        first = await join_queue_use_case.execute(scope_key=QUEUE_SCOPE_KEY)
        second = await join_queue_use_case.execute(scope_key=QUEUE_SCOPE_KEY)

        assert (first.queue_number, second.queue_number) == (1, 2)
        assert second.people_in_queue == 2
        assert second.status == QueueEntryStatus.WAITING

    async def test_concurrent_joins_get_distinct_numbers(self, join_queue_use_case) -> None:
        admissions = await asyncio.gather(
            *(join_queue_use_case.execute(scope_key=QUEUE_SCOPE_KEY) for _ in range(10))
        )

        assert sorted(admission.queue_number for admission in admissions) == list(range(1, 11))

    async def test_scopes_are_numbered_independently(self, join_queue_use_case) -> None:
        await join_queue_use_case.execute(scope_key=QUEUE_SCOPE_KEY)

        other = await join_queue_use_case.execute(scope_key='dune-part-two:imax')

        assert other.queue_number == 1
        assert other.people_in_queue == 1

    async def test_binding_activates_the_visitor_entry(
        self, seed_session, open_cart, join_queue_use_case, queue_command_repo
    ) -> None:
        await seed_session()
        cart_id = await open_cart()
        await join_queue_use_case.execute(scope_key=QUEUE_SCOPE_KEY, visitor_token='visitor-1')
        await join_queue_use_case.execute(scope_key=QUEUE_SCOPE_KEY, visitor_token='visitor-2')

        entry = await BindQueueEntryToCartUseCase(queue_command_repo=queue_command_repo).execute(
            scope_key=QUEUE_SCOPE_KEY, visitor_token='visitor-1', cart_id=cart_id
        )

        assert entry is not None
        assert entry.queue_number == 1
        assert entry.cart_id == cart_id
        assert entry.status == QueueEntryStatus.ACTIVE
        assert await queue_command_repo.count_waiting(scope_key=QUEUE_SCOPE_KEY) == 1

    async def test_binding_unknown_visitor_is_a_no_op(self, queue_command_repo) -> None:
        entry = await BindQueueEntryToCartUseCase(queue_command_repo=queue_command_repo).execute(
            scope_key=QUEUE_SCOPE_KEY, visitor_token='nobody', cart_id='cart-1'
        )

        assert entry is None
