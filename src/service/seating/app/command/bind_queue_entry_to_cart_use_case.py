from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_queue_command_repo import IQueueCommandRepo
from src.service.seating.domain.entity.queue_entry_entity import QueueEntry


class BindQueueEntryToCartUseCase:
    """
    Attach a visitor's latest waiting or active queue entry to their cart.

    Best effort: a failure is logged and swallowed so it never breaks the
    hold that triggered it.
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

    @Logger.io(reraise=False)
    async def execute(
        self, *, scope_key: str, visitor_token: Optional[str], cart_id: str
    ) -> Optional[QueueEntry]:
        if not visitor_token:
            return None
        return await self.queue_command_repo.bind_to_cart(
            scope_key=scope_key, visitor_token=visitor_token, cart_id=cart_id
        )
