"""Results returned by the seat inventory use cases"""

from datetime import datetime

import attrs

from src.service.seating.domain.enum.queue_entry_status import QueueEntryStatus
from src.service.seating.domain.enum.seat_status import SeatStatus
from src.service.seating.domain.seat_state_projector import SeatRowView


@attrs.define(frozen=True)
class SeatGenerationResult:
    created: int
    skipped: int
    expected: int


@attrs.define(frozen=True)
class HoldSeatsResult:
    cart_id: str
    held_until: datetime
    held_seat_ids: list[str]


@attrs.define(frozen=True)
class ReleaseExpiredResult:
    released_seat_ids: list[str]
    expired_cart_count: int

    @property
    def released_count(self) -> int:
        return len(self.released_seat_ids)


@attrs.define(frozen=True)
class QueueAdmission:
    entry_id: str
    scope_key: str
    queue_number: int
    status: QueueEntryStatus
    people_in_queue: int


@attrs.define(frozen=True)
class SeatMap:
    session_id: str
    rows: list[SeatRowView]
    counts: dict[SeatStatus, int]
    generation: SeatGenerationResult
