"""
Seat State Projector

Pure mapping from persisted seat columns plus an instant to the status shown
to buyers. The stored `status` column is only a hint: a hold whose
`held_until` has passed reads as AVAILABLE immediately, before the expiry
sweep has cleared it.

Rules, first match wins:
1. sold_cart_id or sold_at or stored SOLD          -> SOLD
2. stored HELD, held_by_cart_id and held_until > now -> HELD
3. anything else                                   -> AVAILABLE
"""

from collections import Counter, defaultdict
from collections.abc import Iterable
from datetime import datetime
from typing import Optional

import attrs

from src.service.seating.domain.entity.seat_entity import SeatEntity
from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.enum.seat_type import SeatType
from src.service.seating.domain.utc_clock import as_utc


@attrs.frozen
class SeatView:
    seat_id: str
    row: str
    number: int
    seat_type: SeatType
    price: int
    status: SeatStatus
    id: Optional[str] = None
    held_until: Optional[datetime] = None
    held_by_cart_id: Optional[str] = None
    sold_at: Optional[datetime] = None
    sold_cart_id: Optional[str] = None


@attrs.frozen
class SeatRowView:
    label: str
    seats: tuple[SeatView, ...]


def resolve_seat_status(seat: SeatEntity, now: datetime) -> SeatStatus:
    if seat.sold_cart_id or seat.sold_at or seat.status == SeatStatus.SOLD:
        return SeatStatus.SOLD

    held_until = as_utc(seat.held_until)
    if (
        seat.status == SeatStatus.HELD
        and seat.held_by_cart_id
        and held_until is not None
        and held_until > as_utc(now)  # type: ignore[operator]
    ):
        return SeatStatus.HELD

    return SeatStatus.AVAILABLE


def project_seat_state(seat: SeatEntity, now: datetime) -> SeatView:
    status = resolve_seat_status(seat, now)
    is_held = status == SeatStatus.HELD
    is_sold = status == SeatStatus.SOLD
    return SeatView(
        id=seat.id,
        seat_id=seat.seat_id,
        row=seat.row,
        number=seat.number,
        seat_type=seat.seat_type,
        price=seat.price,
        status=status,
        held_until=as_utc(seat.held_until) if is_held else None,
        held_by_cart_id=seat.held_by_cart_id if is_held else None,
        sold_at=as_utc(seat.sold_at) if is_sold else None,
        sold_cart_id=seat.sold_cart_id if is_sold else None,
    )


def project_seat_rows(seats: Iterable[SeatEntity], now: datetime) -> list[SeatRowView]:
    """Group projected seats by row: rows by label, seats by number (A2 before A10)"""
    by_row: defaultdict[str, list[SeatView]] = defaultdict(list)
    for seat in seats:
        by_row[seat.row].append(project_seat_state(seat, now))

    return [
        SeatRowView(label=label, seats=tuple(sorted(by_row[label], key=lambda view: view.number)))
        for label in sorted(by_row)
    ]


def count_seat_statuses(rows: Iterable[SeatRowView]) -> dict[SeatStatus, int]:
    # Gaps are layout filler, not inventory
    counter = Counter(
        seat.status for row in rows for seat in row.seats if seat.seat_type != SeatType.GAP
    )
    return {status: counter.get(status, 0) for status in SeatStatus}
