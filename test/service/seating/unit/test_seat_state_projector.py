from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from src.service.seating.domain.entity.seat_entity import SeatEntity
from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.enum.seat_type import SeatType
from src.service.seating.domain.seat_state_projector import (
    count_seat_statuses,
    project_seat_rows,
    project_seat_state,
)


pytestmark = pytest.mark.unit

NOW = datetime(2026, 1, 10, 10, 30, tzinfo=timezone.utc)


def _seat(row: str = 'A', number: int = 1, **overrides: Any) -> SeatEntity:
    fields: dict[str, Any] = {
        'session_id': 'session-1',
        'row': row,
        'number': number,
        'seat_id': f'{row}{number}',
        'seat_type': SeatType.STANDARD,
        'price': 3200,
    }
    fields.update(overrides)
    return SeatEntity(**fields)


class TestProjectSeatState:
    def test_sale_owner_wins_over_stored_status(self) -> None:
        seat = _seat(status=SeatStatus.AVAILABLE, sold_cart_id='cart-1', sold_at=NOW)

        view = project_seat_state(seat, NOW)

        assert view.status == SeatStatus.SOLD
        assert view.sold_cart_id == 'cart-1'
        assert view.held_until is None

    def test_stored_sold_without_owner_is_sold(self) -> None:
        assert project_seat_state(_seat(status=SeatStatus.SOLD), NOW).status == SeatStatus.SOLD

    def test_unexpired_hold_is_held(self) -> None:
        held_until = NOW + timedelta(minutes=5)
        seat = _seat(status=SeatStatus.HELD, held_by_cart_id='cart-1', held_until=held_until)

        view = project_seat_state(seat, NOW)

        assert view.status == SeatStatus.HELD
        assert view.held_until == held_until
        assert view.held_by_cart_id == 'cart-1'
        assert view.sold_at is None

    def test_expired_hold_reads_available_before_the_sweep(self) -> None:
        seat = _seat(
            status=SeatStatus.HELD, held_by_cart_id='cart-1', held_until=NOW - timedelta(seconds=1)
        )

        view = project_seat_state(seat, NOW)

        assert view.status == SeatStatus.AVAILABLE
        assert view.held_until is None
        assert view.held_by_cart_id is None

    def test_hold_expiring_exactly_now_is_available(self) -> None:
        seat = _seat(status=SeatStatus.HELD, held_by_cart_id='cart-1', held_until=NOW)

        assert project_seat_state(seat, NOW).status == SeatStatus.AVAILABLE

    @pytest.mark.parametrize(
        'overrides',
        [
            {'held_by_cart_id': None, 'held_until': NOW + timedelta(minutes=5)},
            {'held_by_cart_id': 'cart-1', 'held_until': None},
        ],
    )
    def test_incomplete_hold_is_available(self, overrides: dict[str, Any]) -> None:
        seat = _seat(status=SeatStatus.HELD, **overrides)

        assert project_seat_state(seat, NOW).status == SeatStatus.AVAILABLE

    def test_naive_timestamps_are_read_as_utc(self) -> None:
        naive_future = (NOW + timedelta(minutes=1)).replace(tzinfo=None)
        seat = _seat(status=SeatStatus.HELD, held_by_cart_id='cart-1', held_until=naive_future)

        view = project_seat_state(seat, NOW)

        assert view.status == SeatStatus.HELD
        assert view.held_until == NOW + timedelta(minutes=1)


class TestProjectSeatRows:
    def test_rows_sorted_by_label_and_seats_numerically(self) -> None:
        seats = [_seat('B', 1), _seat('A', 10), _seat('A', 2), _seat('A', 1)]

        rows = project_seat_rows(seats, NOW)

        assert [row.label for row in rows] == ['A', 'B']
        assert [seat.number for seat in rows[0].seats] == [1, 2, 10]

    def test_counts_cover_every_status_and_skip_gaps(self) -> None:
        seats = [
            _seat('A', 1),
            _seat('A', 2, seat_type=SeatType.GAP),
            _seat('A', 3, status=SeatStatus.SOLD),
            _seat(
                'A',
                4,
                status=SeatStatus.HELD,
                held_by_cart_id='cart-1',
                held_until=NOW + timedelta(minutes=1),
            ),
        ]

        counts = count_seat_statuses(project_seat_rows(seats, NOW))

        assert counts == {SeatStatus.AVAILABLE: 1, SeatStatus.HELD: 1, SeatStatus.SOLD: 1}

    def test_empty_session_has_zero_counts(self) -> None:
        assert count_seat_statuses(project_seat_rows([], NOW)) == {
            SeatStatus.AVAILABLE: 0,
            SeatStatus.HELD: 0,
            SeatStatus.SOLD: 0,
        }
