"""
Seat Reservation

Books seats for contiguous station ranges without double-booking.
Responsibilities:
- Per-seat occupancy (segment flags or sorted intervals)
- Fleet-wide availability query
- Single-seat booking by id
"""

from src.service.seat_reservation.app.dto.seat_status_dto import SeatStatus
from src.service.seat_reservation.app.interface.i_seat_track import ISeatTrack
from src.service.seat_reservation.app.seat_pool import SeatPool
from src.service.seat_reservation.domain.seat_entity import Seat
from src.service.seat_reservation.domain.station_range import StationRange
from src.service.seat_reservation.domain.track_kind import TrackKind
from src.service.seat_reservation.driven_adapter.interval_seat_track import IntervalSeatTrack
from src.service.seat_reservation.driven_adapter.segment_seat_track import SegmentSeatTrack

__all__ = [
    'ISeatTrack',
    'IntervalSeatTrack',
    'Seat',
    'SeatPool',
    'SeatStatus',
    'SegmentSeatTrack',
    'StationRange',
    'TrackKind',
]
