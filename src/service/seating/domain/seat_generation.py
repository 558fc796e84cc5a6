from typing import Optional

from src.service.seating.domain.entity.cinema_session_entity import CinemaSession
from src.service.seating.domain.entity.seat_entity import SeatEntity
from src.service.seating.domain.seating_errors import LayoutMissingError, SessionNotFoundError


def expected_seats_for_session(
    *, session_id: str, cinema_session: Optional[CinemaSession]
) -> list[SeatEntity]:
    """Expand the session's auditorium layout into the seats it must have"""
    if cinema_session is None:
        raise SessionNotFoundError(session_id)
    if cinema_session.auditorium_id is None:
        raise LayoutMissingError('Session has no auditorium')
    if cinema_session.layout is None:
        raise LayoutMissingError('Auditorium has no seat layout')

    return [
        SeatEntity(
            session_id=cinema_session.id,
            row=coordinate.row,
            number=coordinate.number,
            seat_id=coordinate.seat_id,
            seat_type=coordinate.seat_type,
            price=cinema_session.price_for(coordinate.seat_type),
        )
        for coordinate in cinema_session.layout.expand()
    ]
