"""Seat status DTO for per-seat introspection (display only)."""

from typing import List

import attrs

from src.service.seat_reservation.domain.station_range import StationRange
from src.service.seat_reservation.domain.track_kind import TrackKind


@attrs.define(frozen=True)
class SeatStatus:
    """Read-only snapshot of one seat's bookings"""

    seat_id: int
    track_kind: TrackKind
    occupied_ranges: List[StationRange]
    free_segments: int

    @property
    def is_fully_free(self) -> bool:
        return not self.occupied_ranges
