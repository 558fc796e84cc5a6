from datetime import datetime, timedelta
from typing import Optional

import attrs

from src.service.seating.domain.enum.cart_status import CartStatus


@attrs.define
class Cart:
    id: str
    session_id: str
    status: CartStatus
    expires_at: datetime
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def open(
        cls,
        *,
        id: str,
        session_id: str,
        now: datetime,
        ttl_minutes: int,
        user_id: Optional[str] = None,
    ) -> 'Cart':
        return cls(
            id=id,
            session_id=session_id,
            status=CartStatus.ACTIVE,
            expires_at=now + timedelta(minutes=ttl_minutes),
            user_id=user_id,
            created_at=now,
            updated_at=now,
        )

    def is_active_at(self, now: datetime) -> bool:
        return self.status == CartStatus.ACTIVE and self.expires_at > now
