"""
Segment Seat Track

Dense occupancy: one flag per unit segment between consecutive stations.
O(total_stations) memory, O(range length) check and book.
"""

from typing import List

from src.service.seat_reservation.app.interface.i_seat_track import ISeatTrack
from src.service.seat_reservation.domain.station_range import StationRange
from src.service.seat_reservation.domain.track_kind import TrackKind


class SegmentSeatTrack(ISeatTrack):
    """
    segment_occupied[i] is True iff an accepted booking covers [i, i + 1).

    For n stations there are n - 1 segments.
    """

    kind = TrackKind.SEGMENT

    def __init__(self, total_stations: int):
        self._segment_occupied: List[bool] = [False] * (total_stations - 1)

    def _check_capacity(self, station_range: StationRange) -> None:
        if station_range.end > len(self._segment_occupied):
            raise IndexError(
                f'station range {station_range} exceeds {len(self._segment_occupied)} segments'
            )

    def is_available(self, station_range: StationRange) -> bool:
        self._check_capacity(station_range)
        return not any(self._segment_occupied[i] for i in station_range.segments())

    def book(self, station_range: StationRange) -> bool:
        # Verify every segment first so a conflict leaves no partial booking
        if not self.is_available(station_range):
            return False

        for i in station_range.segments():
            self._segment_occupied[i] = True
        return True

    def segment_statuses(self) -> List[bool]:
        return list(self._segment_occupied)

    def occupied_ranges(self) -> List[StationRange]:
        ranges: List[StationRange] = []
        run_start = None
        for i, occupied in enumerate(self._segment_occupied):
            if occupied and run_start is None:
                run_start = i
            elif not occupied and run_start is not None:
                ranges.append(StationRange(run_start, i))
                run_start = None
        if run_start is not None:
            ranges.append(StationRange(run_start, len(self._segment_occupied)))
        return ranges

    def free_segment_count(self) -> int:
        return self._segment_occupied.count(False)
