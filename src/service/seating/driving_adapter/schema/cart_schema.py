from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CartCreateRequest(BaseModel):
    session_id: str
    user_id: Optional[str] = None
    ttl_minutes: Optional[int] = Field(default=None, ge=1)

    class Config:
        json_schema_extra = {
            'example': {'session_id': '0192f1c4-1c1e-7a3b-9f65-3a1c2b4d5e6f', 'ttl_minutes': 10}
        }


class CartResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': '0192f1c5-0a00-7c4d-8e9f-112233445566',
                'session_id': '0192f1c4-1c1e-7a3b-9f65-3a1c2b4d5e6f',
                'status': 'ACTIVE',
                'expires_at': '2026-01-10T10:40:00Z',
                'user_id': None,
            }
        }
    )

    id: str
    session_id: str
    status: str
    expires_at: datetime
    user_id: Optional[str] = None
