from enum import StrEnum


class CartStatus(StrEnum):
    ACTIVE = 'ACTIVE'
    EXPIRED = 'EXPIRED'
    CONVERTED = 'CONVERTED'
