from abc import ABC, abstractmethod

from src.service.seating.domain.entity.seat_entity import SeatEntity


class ISeatQueryRepo(ABC):
    @abstractmethod
    async def list_by_session(self, *, session_id: str) -> list[SeatEntity]:
        pass
