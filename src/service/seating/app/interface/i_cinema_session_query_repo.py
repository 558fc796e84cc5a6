from abc import ABC, abstractmethod
from typing import Optional

from src.service.seating.domain.entity.cinema_session_entity import CinemaSession


class ICinemaSessionQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, session_id: str) -> Optional[CinemaSession]:
        """
        Load a session together with its auditorium layout

        Returns:
            The session, or None if it does not exist. `layout` is None when the
            session has no auditorium or the auditorium stores no layout.
        """
        pass
