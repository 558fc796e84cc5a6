from fastapi import APIRouter, Depends, Request

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError, DomainError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.command.bind_queue_entry_to_cart_use_case import (
    BindQueueEntryToCartUseCase,
)
from src.service.seating.app.command.create_cart_use_case import CreateCartUseCase
from src.service.seating.app.command.expire_cart_use_case import ExpireCartUseCase
from src.service.seating.app.command.hold_seats_use_case import HoldSeatsUseCase
from src.service.seating.app.command.release_cart_seats_use_case import (
    ReleaseCartSeatsUseCase,
)
from src.service.seating.driving_adapter.schema.seat_schema import (
    SeatHoldRequest,
    SeatHoldResponse,
    SeatReleaseRequest,
    SeatReleaseResponse,
)


router = APIRouter()


@router.post('/hold')
@Logger.io
async def hold_seats(
    request: SeatHoldRequest,
    http_request: Request,
    hold_use_case: HoldSeatsUseCase = Depends(HoldSeatsUseCase.depends),
    create_cart_use_case: CreateCartUseCase = Depends(CreateCartUseCase.depends),
    expire_cart_use_case: ExpireCartUseCase = Depends(ExpireCartUseCase.depends),
    bind_queue_use_case: BindQueueEntryToCartUseCase = Depends(
        BindQueueEntryToCartUseCase.depends
    ),
) -> SeatHoldResponse:
    """
    Hold seats for a cart, all or nothing.

    Without `cart_id` a cart is opened for `session_id` first. A visitor who
    came through the queue (`rt_visit_id` cookie) gets their entry bound to
    the cart. A cart opened here is expired again when the hold fails.
    """
    cart_id = request.cart_id
    opened_cart = cart_id is None
    if cart_id is None:
        if request.session_id is None:
            raise DomainError('session_id is required when cart_id is omitted')
        cart = await create_cart_use_case.execute(
            session_id=request.session_id,
            user_id=request.user_id,
            ttl_minutes=request.ttl_minutes,
        )
        cart_id = cart.id

    try:
        result = await hold_use_case.execute(
            cart_id=cart_id, seat_ids=request.seat_ids, ttl_minutes=request.ttl_minutes
        )
    except CustomBaseError:
        if opened_cart:
            await expire_cart_use_case.execute(cart_id=cart_id)
        raise

    await bind_queue_use_case.execute(
        scope_key=settings.QUEUE_DEFAULT_SCOPE_KEY,
        visitor_token=http_request.cookies.get(settings.VISITOR_COOKIE_NAME),
        cart_id=cart_id,
    )

    return SeatHoldResponse(
        cart_id=result.cart_id,
        held_seat_ids=result.held_seat_ids,
        held_until=result.held_until,
    )


@router.post('/release')
@Logger.io
async def release_seats(
    request: SeatReleaseRequest,
    use_case: ReleaseCartSeatsUseCase = Depends(ReleaseCartSeatsUseCase.depends),
) -> SeatReleaseResponse:
    released = await use_case.execute(cart_id=request.cart_id, seat_ids=request.seat_ids)
    return SeatReleaseResponse(cart_id=request.cart_id, released_seat_ids=released)
