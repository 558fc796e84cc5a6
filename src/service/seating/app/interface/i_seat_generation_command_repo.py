"""
Seat Generation Command Repository Interface

Inserts the seat rows derived from an auditorium layout. The uniqueness
constraints on (session_id, row, number) and (session_id, seat_id) are the
final race guard: losing an insert race is success, never an error.
"""

from abc import ABC, abstractmethod

from src.service.seating.domain.entity.seat_entity import SeatEntity


class ISeatGenerationCommandRepo(ABC):
    @abstractmethod
    async def insert_missing_seats(self, *, session_id: str, seats: list[SeatEntity]) -> int:
        """
        Insert the seats the session does not have yet

        Existing rows are never touched or deleted.

        Returns:
            Number of rows actually inserted by this call
        """
        pass

    @abstractmethod
    async def insert_seats(self, *, seats: list[SeatEntity]) -> int:
        """
        Plain batch insert for a session that has no seats yet

        Raises IntegrityError if any seat already exists.
        """
        pass

    @abstractmethod
    async def replace_session_seats(self, *, session_id: str, seats: list[SeatEntity]) -> int:
        """
        Delete every seat of the session and insert `seats`, in one transaction

        Raises:
            SeatsAlreadySoldError: a seat of the session is sold or a ticket exists for it
        """
        pass
