"""
Seat Track Interface

Occupancy contract shared by the segment and interval representations
"""

from abc import ABC, abstractmethod
from typing import List

from src.service.seat_reservation.domain.station_range import StationRange
from src.service.seat_reservation.domain.track_kind import TrackKind


class ISeatTrack(ABC):
    """
    One seat's occupancy over the station line.

    Implementations never validate ranges against the pool topology; the
    pool does that before calling in. Capacity only ever moves from free to
    booked.
    """

    kind: TrackKind

    @abstractmethod
    def is_available(self, station_range: StationRange) -> bool:
        """True iff no part of station_range is booked. Never mutates."""
        pass

    @abstractmethod
    def book(self, station_range: StationRange) -> bool:
        """
        Book station_range all-or-nothing.

        Returns:
            True if booked, False on conflict (state left untouched)
        """
        pass

    @abstractmethod
    def occupied_ranges(self) -> List[StationRange]:
        """Booked spans in ascending order, for display only"""
        pass

    @abstractmethod
    def free_segment_count(self) -> int:
        """Unbooked unit segments left on the line"""
        pass
