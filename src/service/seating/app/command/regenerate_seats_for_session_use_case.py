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


class RegenerateSeatsForSessionUseCase:
    """
    Admin action: throw away a session's seats and rebuild them from the layout.

    Refused with SeatsAlreadySoldError once anything was sold for the session.
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

        created = await self.seat_generation_command_repo.replace_session_seats(
            session_id=session_id, seats=seats
        )
        Logger.base.info(f'♻️  [REGENERATE] session={session_id} now has {created} seats')
        return SeatGenerationResult(
            created=created, skipped=len(seats) - created, expected=len(seats)
        )
