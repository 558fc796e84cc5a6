"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.seating.app.command import (
    bind_queue_entry_to_cart_use_case,
    create_cart_use_case,
    ensure_seats_for_session_use_case,
    expire_cart_use_case,
    generate_seats_for_session_use_case,
    hold_seats_use_case,
    join_queue_use_case,
    regenerate_seats_for_session_use_case,
    release_cart_seats_use_case,
    sell_held_seats_use_case,
)
from src.service.seating.app.query import get_seat_map_use_case
from src.service.seating.driving_adapter.http_controller import cron_controller


WIRE_MODULES: list[ModuleType] = [
    ensure_seats_for_session_use_case,
    generate_seats_for_session_use_case,
    regenerate_seats_for_session_use_case,
    create_cart_use_case,
    expire_cart_use_case,
    hold_seats_use_case,
    release_cart_seats_use_case,
    sell_held_seats_use_case,
    join_queue_use_case,
    bind_queue_entry_to_cart_use_case,
    get_seat_map_use_case,
    cron_controller,
]
