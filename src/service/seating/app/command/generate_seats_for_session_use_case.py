from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.dto.seat_inventory_dto import SeatGenerationResult
from src.service.seating.app.interface.i_cinema_session_query_repo import (
    ICinemaSessionQueryRepo,
)
from src.service.seating.app.interface.i_seat_generation_command_repo import (
    ISeatGenerationCommandRepo,
)
from src.service.seating.domain.seat_generation import expected_seats_for_session


class GenerateSeatsForSessionUseCase:
    """
    Plain batch insert of a freshly created session's seats.

    Not idempotent: a second call hits the uniqueness constraints. Use
    EnsureSeatsForSessionUseCase anywhere seats may already exist.
    """

    def __init__(
        self,
        *,
        cinema_session_query_repo: ICinemaSessionQueryRepo,
        seat_generation_command_repo: ISeatGenerationCommandRepo,
    ) -> None:
        self.cinema_session_query_repo = cinema_session_query_repo
        self.seat_generation_command_repo = seat_generation_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        cinema_session_query_repo: ICinemaSessionQueryRepo = Depends(
            Provide[Container.cinema_session_query_repo]
        ),
        seat_generation_command_repo: ISeatGenerationCommandRepo = Depends(
            Provide[Container.seat_generation_command_repo]
        ),
    ) -> Self:
        return cls(
            cinema_session_query_repo=cinema_session_query_repo,
            seat_generation_command_repo=seat_generation_command_repo,
        )

    @Logger.io
    async def execute(self, *, session_id: str) -> SeatGenerationResult:
        cinema_session = await self.cinema_session_query_repo.get_by_id(session_id=session_id)
        seats = expected_seats_for_session(session_id=session_id, cinema_session=cinema_session)
        created = await self.seat_generation_command_repo.insert_seats(seats=seats)
        return SeatGenerationResult(created=created, skipped=0, expected=len(seats))
