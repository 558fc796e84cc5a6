from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.command.release_expired_reservations_use_case import (
    ReleaseExpiredReservationsUseCase,
)
from src.service.seating.domain.utc_clock import utc_now
from src.service.seating.driving_adapter.http_controller.auth.cron_auth import (
    require_cron_secret,
)
from src.service.seating.driving_adapter.schema.seat_schema import ReleaseExpiredSeatsResponse


router = APIRouter()


@router.post('/release-expired-seats', dependencies=[Depends(require_cron_secret)])
@Logger.io
@inject
async def release_expired_seats(
    use_case: ReleaseExpiredReservationsUseCase = Depends(
        Provide[Container.release_expired_reservations_use_case]
    ),
) -> ReleaseExpiredSeatsResponse:
    """Run one expiry sweep (external scheduler trigger)."""
    now = utc_now()
    result = await use_case.execute(now=now)
    return ReleaseExpiredSeatsResponse(
        released_count=result.released_count,
        expired_cart_count=result.expired_cart_count,
        timestamp=now,
    )


@router.get('/release-expired-seats')
async def release_expired_seats_status() -> dict[str, str]:
    return {'status': 'ok', 'job': 'release-expired-seats'}
