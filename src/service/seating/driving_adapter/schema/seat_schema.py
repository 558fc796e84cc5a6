from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SeatResponse(BaseModel):
    id: str  # display id, e.g. "A1"
    row: str
    number: int
    seat_type: str
    price: int
    status: str
    held_until: Optional[datetime] = None
    held_by_cart_id: Optional[str] = None
    sold_at: Optional[datetime] = None
    sold_cart_id: Optional[str] = None


class SeatRowResponse(BaseModel):
    label: str
    seats: List[SeatResponse]


class SeatGenerationResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={'example': {'created': 0, 'skipped': 18, 'expected': 18}}
    )

    created: int
    skipped: int
    expected: int


class SeatMapResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'session_id': '0192f1c4-1c1e-7a3b-9f65-3a1c2b4d5e6f',
                'rows': [
                    {
                        'label': 'A',
                        'seats': [
                            {
                                'id': 'A1',
                                'row': 'A',
                                'number': 1,
                                'seat_type': 'STANDARD',
                                'price': 3200,
                                'status': 'AVAILABLE',
                            }
                        ],
                    }
                ],
                'counts': {'AVAILABLE': 17, 'HELD': 1, 'SOLD': 0},
                'generation': {'created': 0, 'skipped': 18, 'expected': 18},
            }
        }
    )

    session_id: str
    rows: List[SeatRowResponse]
    counts: Dict[str, int]
    generation: SeatGenerationResponse


class SeatHoldRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'examples': [
                {
                    'cart_id': '0192f1c5-0a00-7c4d-8e9f-112233445566',
                    'seat_ids': ['A1', 'A2'],
                    'ttl_minutes': 10,
                },
                {
                    'session_id': '0192f1c4-1c1e-7a3b-9f65-3a1c2b4d5e6f',
                    'seat_ids': ['B3'],
                },
            ]
        }
    )

    cart_id: Optional[str] = None  # omitted: a new cart is opened for session_id
    session_id: Optional[str] = None
    seat_ids: List[str] = Field(min_length=1)
    ttl_minutes: Optional[int] = Field(default=None, ge=1)
    user_id: Optional[str] = None


class SeatHoldResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'cart_id': '0192f1c5-0a00-7c4d-8e9f-112233445566',
                'held_seat_ids': ['A1', 'A2'],
                'held_until': '2026-01-10T10:40:00Z',
            }
        }
    )

    cart_id: str
    held_seat_ids: List[str]
    held_until: datetime


class SeatReleaseRequest(BaseModel):
    cart_id: str
    seat_ids: Optional[List[str]] = None  # omitted: release everything the cart holds

    class Config:
        json_schema_extra = {
            'example': {'cart_id': '0192f1c5-0a00-7c4d-8e9f-112233445566', 'seat_ids': ['A2']}
        }


class SeatReleaseResponse(BaseModel):
    cart_id: str
    released_seat_ids: List[str]


class ReleaseExpiredSeatsResponse(BaseModel):
    released_count: int
    expired_cart_count: int
    timestamp: datetime

    class Config:
        json_schema_extra = {
            'example': {
                'released_count': 3,
                'expired_cart_count': 1,
                'timestamp': '2026-01-10T10:41:00Z',
            }
        }
