from enum import StrEnum


class QueueEntryStatus(StrEnum):
    WAITING = 'WAITING'
    ACTIVE = 'ACTIVE'
    COMPLETED = 'COMPLETED'
    EXPIRED = 'EXPIRED'
