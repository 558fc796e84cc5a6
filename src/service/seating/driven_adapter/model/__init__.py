"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.seating.driven_adapter.model.auditorium_model import AuditoriumModel
from src.service.seating.driven_adapter.model.cart_model import CartModel
from src.service.seating.driven_adapter.model.cinema_session_model import CinemaSessionModel
from src.service.seating.driven_adapter.model.queue_counter_model import QueueCounterModel
from src.service.seating.driven_adapter.model.queue_entry_model import QueueEntryModel
from src.service.seating.driven_adapter.model.seat_model import SeatModel
from src.service.seating.driven_adapter.model.ticket_model import TicketModel

__all__ = [
    'AuditoriumModel',
    'CartModel',
    'CinemaSessionModel',
    'QueueCounterModel',
    'QueueEntryModel',
    'SeatModel',
    'TicketModel',
]
