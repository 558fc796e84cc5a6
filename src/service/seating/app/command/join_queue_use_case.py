import re
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
import uuid_utils as uuid

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.dto.seat_inventory_dto import QueueAdmission
from src.service.seating.app.interface.i_queue_command_repo import IQueueCommandRepo


SCOPE_KEY_PATTERN = re.compile(r'^[A-Za-z0-9:_-]{1,120}$')


class JoinQueueUseCase:
    """
    Hand out the next queue number within a scope.

    Numbers are 1..N without gaps or repeats per scope, however many visitors
    join at once; the counter upsert and the entry insert commit together.
    """

    def __init__(self, *, queue_command_repo: IQueueCommandRepo) -> None:
        self.queue_command_repo = queue_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        queue_command_repo: IQueueCommandRepo = Depends(Provide[Container.queue_command_repo]),
    ) -> Self:
        return cls(queue_command_repo=queue_command_repo)

    @Logger.io
    async def execute(
        self,
        *,
        scope_key: str,
        visitor_token: Optional[str] = None,
        user_id: Optional[str] = None,
        cart_id: Optional[str] = None,
    ) -> QueueAdmission:
        if not SCOPE_KEY_PATTERN.fullmatch(scope_key):
            raise DomainError('Invalid scope_key')

        entry = await self.queue_command_repo.allocate(
            entry_id=str(uuid.uuid7()),
            scope_key=scope_key,
            visitor_token=visitor_token,
            user_id=user_id,
            cart_id=cart_id,
        )
        people_in_queue = await self.queue_command_repo.count_waiting(scope_key=scope_key)

        Logger.base.info(f'🎫 [QUEUE] scope={scope_key} issued #{entry.queue_number}')
        return QueueAdmission(
            entry_id=entry.id,
            scope_key=scope_key,
            queue_number=entry.queue_number,
            status=entry.status,
            people_in_queue=people_in_queue,
        )
