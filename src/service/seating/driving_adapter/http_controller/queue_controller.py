from fastapi import APIRouter, Depends, Request, Response
import uuid_utils as uuid

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.command.join_queue_use_case import JoinQueueUseCase
from src.service.seating.driving_adapter.schema.queue_schema import (
    QueueJoinRequest,
    QueueJoinResponse,
)


router = APIRouter()


@router.post('/join')
@Logger.io
async def join_queue(
    request: QueueJoinRequest,
    http_request: Request,
    response: Response,
    use_case: JoinQueueUseCase = Depends(JoinQueueUseCase.depends),
) -> QueueJoinResponse:
    """Take the next number in a queue; the visitor cookie ties later holds to this entry."""
    visitor_token = http_request.cookies.get(settings.VISITOR_COOKIE_NAME) or str(uuid.uuid7())

    admission = await use_case.execute(
        scope_key=request.scope_key,
        visitor_token=visitor_token,
        user_id=request.user_id,
        cart_id=request.cart_id,
    )

    response.set_cookie(
        key=settings.VISITOR_COOKIE_NAME,
        value=visitor_token,
        max_age=settings.VISITOR_COOKIE_MAX_AGE,
        httponly=True,
        secure=settings.VISITOR_COOKIE_SECURE,
        samesite='lax',
        path='/',
    )
    return QueueJoinResponse(
        queue_entry_id=admission.entry_id,
        scope_key=admission.scope_key,
        queue_number=admission.queue_number,
        people_in_queue=admission.people_in_queue,
        status=admission.status.value,
    )
