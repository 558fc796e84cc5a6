"""
Queue Command Repository Interface

Queue numbers come from a per-scope counter row bumped by a single
upsert-returning statement. The entry insert shares the transaction, so a
failed insert never burns a number.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.service.seating.domain.entity.queue_entry_entity import QueueEntry


class IQueueCommandRepo(ABC):
    @abstractmethod
    async def allocate(
        self,
        *,
        entry_id: str,
        scope_key: str,
        visitor_token: Optional[str] = None,
        user_id: Optional[str] = None,
        cart_id: Optional[str] = None,
    ) -> QueueEntry:
        """Assign the next number in the scope and record the entry"""
        pass

    @abstractmethod
    async def bind_to_cart(
        self, *, scope_key: str, visitor_token: str, cart_id: str
    ) -> Optional[QueueEntry]:
        """
        Attach the visitor's latest WAITING/ACTIVE entry to the cart and mark it ACTIVE

        Returns:
            The updated entry, or None when the visitor has no open entry
        """
        pass

    @abstractmethod
    async def count_waiting(self, *, scope_key: str) -> int:
        pass
