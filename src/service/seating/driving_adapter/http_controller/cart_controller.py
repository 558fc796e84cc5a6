from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.command.create_cart_use_case import CreateCartUseCase
from src.service.seating.domain.entity.cart_entity import Cart
from src.service.seating.driving_adapter.schema.cart_schema import (
    CartCreateRequest,
    CartResponse,
)


router = APIRouter()


def to_cart_response(cart: Cart) -> CartResponse:
    return CartResponse(
        id=cart.id,
        session_id=cart.session_id,
        status=cart.status.value,
        expires_at=cart.expires_at,
        user_id=cart.user_id,
    )


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_cart(
    request: CartCreateRequest,
    use_case: CreateCartUseCase = Depends(CreateCartUseCase.depends),
) -> CartResponse:
    cart = await use_case.execute(
        session_id=request.session_id,
        user_id=request.user_id,
        ttl_minutes=request.ttl_minutes,
    )
    return to_cart_response(cart)
