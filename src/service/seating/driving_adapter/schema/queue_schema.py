from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.platform.config.core_setting import settings


class QueueJoinRequest(BaseModel):
    scope_key: str = Field(
        default=settings.QUEUE_DEFAULT_SCOPE_KEY, pattern=r'^[A-Za-z0-9:_-]{1,120}$'
    )
    user_id: Optional[str] = None
    cart_id: Optional[str] = None

    class Config:
        json_schema_extra = {'example': {'scope_key': 'the-odyssey-global'}}


class QueueJoinResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'queue_entry_id': '0192f1c6-77aa-7bbb-8ccc-ddeeff001122',
                'scope_key': 'the-odyssey-global',
                'queue_number': 42,
                'people_in_queue': 7,
                'status': 'WAITING',
            }
        }
    )

    queue_entry_id: str
    scope_key: str
    queue_number: int
    people_in_queue: int
    status: str
