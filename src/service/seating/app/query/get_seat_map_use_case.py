from datetime import datetime
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.command.ensure_seats_for_session_use_case import (
    EnsureSeatsForSessionUseCase,
)
from src.service.seating.app.dto.seat_inventory_dto import SeatMap
from src.service.seating.app.interface.i_seat_query_repo import ISeatQueryRepo
from src.service.seating.domain.seat_state_projector import (
    count_seat_statuses,
    project_seat_rows,
)
from src.service.seating.domain.utc_clock import as_utc, utc_now


class GetSeatMapUseCase:
    """
    Seat map as buyers see it.

    Seats are generated on first read, then every seat is projected at `now`,
    so an expired hold shows as AVAILABLE before the sweep clears it.
    """

    def __init__(
        self,
        *,
        ensure_seats_use_case: EnsureSeatsForSessionUseCase,
        seat_query_repo: ISeatQueryRepo,
    ) -> None:
        self.ensure_seats_use_case = ensure_seats_use_case
        self.seat_query_repo = seat_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        ensure_seats_use_case: EnsureSeatsForSessionUseCase = Depends(
            EnsureSeatsForSessionUseCase.depends
        ),
        seat_query_repo: ISeatQueryRepo = Depends(Provide[Container.seat_query_repo]),
    ) -> Self:
        return cls(ensure_seats_use_case=ensure_seats_use_case, seat_query_repo=seat_query_repo)

    @Logger.io(truncate_content=True)
    async def execute(self, *, session_id: str, now: Optional[datetime] = None) -> SeatMap:
        generation = await self.ensure_seats_use_case.execute(session_id=session_id)
        seats = await self.seat_query_repo.list_by_session(session_id=session_id)

        rows = project_seat_rows(seats, as_utc(now) or utc_now())
        return SeatMap(
            session_id=session_id,
            rows=rows,
            counts=count_seat_statuses(rows),
            generation=generation,
        )
