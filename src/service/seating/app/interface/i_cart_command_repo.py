from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from src.service.seating.domain.entity.cart_entity import Cart


class ICartCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, cart: Cart) -> Cart:
        pass

    @abstractmethod
    async def get_by_id(self, *, cart_id: str) -> Optional[Cart]:
        pass

    @abstractmethod
    async def expire(self, *, cart_id: str, now: datetime) -> bool:
        """ACTIVE -> EXPIRED. False when the cart was not active."""
        pass
