from src.service.seat_reservation.app.interface.i_seat_track import ISeatTrack
from src.service.seat_reservation.domain.track_kind import TrackKind
from src.service.seat_reservation.driven_adapter.interval_seat_track import IntervalSeatTrack
from src.service.seat_reservation.driven_adapter.segment_seat_track import SegmentSeatTrack


def create_seat_track(track_kind: TrackKind, total_stations: int) -> ISeatTrack:
    """Build a fresh, all-free track of the requested representation"""
    match TrackKind(track_kind):
        case TrackKind.SEGMENT:
            return SegmentSeatTrack(total_stations)
        case TrackKind.INTERVAL:
            return IntervalSeatTrack(total_stations)
