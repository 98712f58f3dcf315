import threading
from typing import TYPE_CHECKING

import attrs

from src.service.seat_reservation.domain.station_range import StationRange


if TYPE_CHECKING:
    from src.service.seat_reservation.app.interface.i_seat_track import ISeatTrack


@attrs.define
class Seat:
    """
    A bookable seat and the track it exclusively owns.

    The seat is the unit of mutual exclusion: book() runs its check-then-set
    under the seat lock, so two callers racing for overlapping ranges on the
    same seat can never both succeed.
    """

    seat_id: int = attrs.field(on_setattr=attrs.setters.frozen)
    track: 'ISeatTrack' = attrs.field(on_setattr=attrs.setters.frozen)
    _lock: threading.Lock = attrs.field(
        factory=threading.Lock, init=False, repr=False, eq=False
    )

    def is_available(self, station_range: StationRange) -> bool:
        with self._lock:
            return self.track.is_available(station_range)

    def book(self, station_range: StationRange) -> bool:
        with self._lock:
            return self.track.book(station_range)

    def snapshot(self) -> tuple[list[StationRange], int]:
        """(occupied ranges, free segment count) read under one lock hold"""
        with self._lock:
            return self.track.occupied_ranges(), self.track.free_segment_count()
