from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.command.regenerate_seats_for_session_use_case import (
    RegenerateSeatsForSessionUseCase,
)
from src.service.seating.app.dto.seat_inventory_dto import SeatGenerationResult, SeatMap
from src.service.seating.app.query.get_seat_map_use_case import GetSeatMapUseCase
from src.service.seating.driving_adapter.schema.seat_schema import (
    SeatGenerationResponse,
    SeatMapResponse,
    SeatResponse,
    SeatRowResponse,
)


router = APIRouter()


def _to_generation_response(result: SeatGenerationResult) -> SeatGenerationResponse:
    return SeatGenerationResponse(
        created=result.created, skipped=result.skipped, expected=result.expected
    )


def _to_seat_map_response(seat_map: SeatMap) -> SeatMapResponse:
    return SeatMapResponse(
        session_id=seat_map.session_id,
        rows=[
            SeatRowResponse(
                label=row.label,
                seats=[
                    SeatResponse(
                        id=seat.seat_id,
                        row=seat.row,
                        number=seat.number,
                        seat_type=seat.seat_type.value,
                        price=seat.price,
                        status=seat.status.value,
                        held_until=seat.held_until,
                        held_by_cart_id=seat.held_by_cart_id,
                        sold_at=seat.sold_at,
                        sold_cart_id=seat.sold_cart_id,
                    )
                    for seat in row.seats
                ],
            )
            for row in seat_map.rows
        ],
        counts={seat_status.value: count for seat_status, count in seat_map.counts.items()},
        generation=_to_generation_response(seat_map.generation),
    )


@router.get('/{session_id}/seats')
@Logger.io(truncate_content=True)
async def get_session_seats(
    session_id: str,
    use_case: GetSeatMapUseCase = Depends(GetSeatMapUseCase.depends),
) -> SeatMapResponse:
    """Seat map of a session; seats are generated from the layout on first read."""
    seat_map = await use_case.execute(session_id=session_id)
    return _to_seat_map_response(seat_map)


@router.post('/{session_id}/seats/generate', status_code=status.HTTP_200_OK)
@Logger.io
async def regenerate_session_seats(
    session_id: str,
    use_case: RegenerateSeatsForSessionUseCase = Depends(RegenerateSeatsForSessionUseCase.depends),
) -> SeatGenerationResponse:
    """Rebuild a session's seats from its layout; 409 once anything was sold."""
    result = await use_case.execute(session_id=session_id)
    return _to_generation_response(result)
