from enum import StrEnum


class SeatType(StrEnum):
    STANDARD = 'STANDARD'
    VIP = 'VIP'
    WHEELCHAIR = 'WHEELCHAIR'
    PREMIUM = 'PREMIUM'
    GAP = 'GAP'  # aisle / empty slot, persisted but never holdable
