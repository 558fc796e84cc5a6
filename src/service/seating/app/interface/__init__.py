"""Application layer interfaces (Ports)"""

from src.service.seating.app.interface.i_cart_command_repo import ICartCommandRepo
from src.service.seating.app.interface.i_cinema_session_query_repo import (
    ICinemaSessionQueryRepo,
)
from src.service.seating.app.interface.i_queue_command_repo import IQueueCommandRepo
from src.service.seating.app.interface.i_seat_generation_command_repo import (
    ISeatGenerationCommandRepo,
)
from src.service.seating.app.interface.i_seat_hold_command_repo import ISeatHoldCommandRepo
from src.service.seating.app.interface.i_seat_query_repo import ISeatQueryRepo

__all__ = [
    'ICartCommandRepo',
    'ICinemaSessionQueryRepo',
    'IQueueCommandRepo',
    'ISeatGenerationCommandRepo',
    'ISeatHoldCommandRepo',
    'ISeatQueryRepo',
]
