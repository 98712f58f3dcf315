"""Track Kind Value Object"""

from enum import StrEnum


class TrackKind(StrEnum):
    """Occupancy representation used by every seat of a pool"""

    SEGMENT = 'segment'  # dense flag per segment
    INTERVAL = 'interval'  # sorted list of booked ranges
