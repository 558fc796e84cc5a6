from datetime import datetime
from typing import Optional

import attrs

from src.service.seating.domain.enum.queue_entry_status import QueueEntryStatus


@attrs.define
class QueueEntry:
    id: str
    scope_key: str
    queue_number: int
    status: QueueEntryStatus = QueueEntryStatus.WAITING
    visitor_token: Optional[str] = None
    user_id: Optional[str] = None
    cart_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
