"""
Interval Seat Track

Sparse occupancy: only the booked ranges are stored, sorted by start station.
O(bookings) memory and conflict scan, O(log bookings) insertion point.
"""

import bisect
from typing import List

from src.service.seat_reservation.app.interface.i_seat_track import ISeatTrack
from src.service.seat_reservation.domain.station_range import StationRange
from src.service.seat_reservation.domain.track_kind import TrackKind


class IntervalSeatTrack(ISeatTrack):
    """
    Bookings are pairwise disjoint and ascending by start:
    for consecutive entries a, b: a.end <= b.start.
    """

    kind = TrackKind.INTERVAL

    def __init__(self, total_stations: int):
        self._segment_count = total_stations - 1
        self._bookings: List[StationRange] = []

    def has_conflict(self, station_range: StationRange) -> bool:
        return any(station_range.overlaps(booking) for booking in self._bookings)

    def add_booking(self, station_range: StationRange) -> bool:
        if self.has_conflict(station_range):
            return False

        # First position whose start >= new start; equal starts go before
        index = bisect.bisect_left(self._bookings, station_range.start, key=lambda b: b.start)
        self._bookings.insert(index, station_range)
        return True

    def is_available(self, station_range: StationRange) -> bool:
        return not self.has_conflict(station_range)

    def book(self, station_range: StationRange) -> bool:
        return self.add_booking(station_range)

    def occupied_ranges(self) -> List[StationRange]:
        return list(self._bookings)

    def free_segment_count(self) -> int:
        return self._segment_count - sum(booking.length for booking in self._bookings)
