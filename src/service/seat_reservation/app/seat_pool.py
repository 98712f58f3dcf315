"""
Seat Pool

Fleet of seats sharing one station line. Validates every request before it
reaches a track, answers fleet-wide availability queries and books single
seats by id.
"""

import time
from typing import List

from opentelemetry import trace

from src.platform.exception.exceptions import (
    DomainError,
    InvalidSeatIdError,
    InvalidStationRangeError,
)
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.reservation_metrics import metrics
from src.service.seat_reservation.app.dto.seat_status_dto import SeatStatus
from src.service.seat_reservation.domain.seat_entity import Seat
from src.service.seat_reservation.domain.station_range import StationRange
from src.service.seat_reservation.domain.track_kind import TrackKind
from src.service.seat_reservation.domain.validators import (
    SeatIdValidators,
    StationRangeValidators,
)
from src.service.seat_reservation.driven_adapter.seat_track_factory import create_seat_track


class SeatPool:
    """
    Seat Pool (aggregate root)

    Invariants:
    - seats[i].seat_id == i + 1 (dense, 1-based ids)
    - every seat uses the same track kind
    - a range reaching a track always satisfies 0 <= start < end <= total_stations - 1

    Invalid ranges and seat ids are reported (logged) and answered with an
    empty list / False; a conflicting booking is simply False.
    """

    def __init__(
        self,
        total_stations: int,
        total_seats: int,
        track_kind: TrackKind = TrackKind.SEGMENT,
    ):
        if total_stations < 2:
            raise DomainError(f'A train needs at least 2 stations, got {total_stations}')
        if total_seats < 1:
            raise DomainError(f'A train needs at least 1 seat, got {total_seats}')

        self._total_stations = total_stations
        self._track_kind = TrackKind(track_kind)
        self._seats: List[Seat] = [
            Seat(seat_id=seat_id, track=create_seat_track(self._track_kind, total_stations))
            for seat_id in range(1, total_seats + 1)
        ]
        self.tracer = trace.get_tracer(__name__)

    @property
    def total_stations(self) -> int:
        return self._total_stations

    @property
    def total_seats(self) -> int:
        return len(self._seats)

    @property
    def track_kind(self) -> TrackKind:
        return self._track_kind

    @property
    def seats(self) -> List[Seat]:
        return list(self._seats)

    def get_seat(self, seat_id: int) -> Seat:
        SeatIdValidators.validate_seat_id(seat_id, self.total_seats)
        return self._seats[seat_id - 1]

    # ========== Query ==========

    @Logger.io
    def check_availability(self, start_station: int, end_station: int) -> List[int]:
        """Seat ids free for the whole journey, ascending. [] on invalid stations."""
        try:
            station_range = StationRange(start_station, end_station)
        except InvalidStationRangeError as e:
            return self._reject_availability_query(e, started_at=time.perf_counter())
        return self.check_range_availability(station_range)

    @Logger.io
    def check_range_availability(self, station_range: StationRange) -> List[int]:
        started_at = time.perf_counter()
        with self.tracer.start_as_current_span(
            'seat_pool.check_availability',
            attributes={
                'track.kind': str(self._track_kind),
                'range.start': station_range.start,
                'range.end': station_range.end,
            },
        ):
            try:
                StationRangeValidators.validate_within_line(station_range, self._total_stations)
            except InvalidStationRangeError as e:
                return self._reject_availability_query(e, started_at=started_at)

            # Each seat is locked on its own; the answer is a hint, book_seat decides
            available_seat_ids = [
                seat.seat_id for seat in self._seats if seat.is_available(station_range)
            ]

            metrics.record_availability_query(
                track_kind=self._track_kind,
                result='ok',
                duration=time.perf_counter() - started_at,
            )
            Logger.base.debug(
                f'🔍 [AVAILABILITY] {len(available_seat_ids)} seat(s) free for {station_range}'
            )
            return available_seat_ids

    def _reject_availability_query(self, error: DomainError, *, started_at: float) -> List[int]:
        Logger.base.warning(f'⚠️ [AVAILABILITY] {error.message}')
        metrics.record_availability_query(
            track_kind=self._track_kind,
            result='invalid',
            duration=time.perf_counter() - started_at,
        )
        return []

    # ========== Command ==========

    @Logger.io
    def book_seat(self, seat_id: int, start_station: int, end_station: int) -> bool:
        """Book one seat for [start_station, end_station). False if invalid or taken."""
        try:
            station_range = StationRange(start_station, end_station)
        except InvalidStationRangeError as e:
            return self._reject_booking(e, started_at=time.perf_counter())
        return self.book_seat_range(seat_id, station_range)

    @Logger.io
    def book_seat_range(self, seat_id: int, station_range: StationRange) -> bool:
        started_at = time.perf_counter()
        with self.tracer.start_as_current_span(
            'seat_pool.book_seat',
            attributes={
                'track.kind': str(self._track_kind),
                'seat.id': str(seat_id),
                'range.start': station_range.start,
                'range.end': station_range.end,
            },
        ):
            try:
                seat = self.get_seat(seat_id)
                StationRangeValidators.validate_within_line(station_range, self._total_stations)
            except (InvalidSeatIdError, InvalidStationRangeError) as e:
                span = trace.get_current_span()
                span.set_attribute('error', True)
                span.set_attribute('error.type', type(e).__name__)
                return self._reject_booking(e, started_at=started_at)

            booked = seat.book(station_range)

            if booked:
                Logger.base.info(f'✅ [BOOK] Seat {seat_id} booked for stations {station_range}')
            else:
                Logger.base.warning(
                    f'⚠️ [BOOK] Seat {seat_id} not available for stations {station_range}'
                )
            metrics.record_booking(
                track_kind=self._track_kind,
                result='booked' if booked else 'conflict',
                duration=time.perf_counter() - started_at,
            )
            return booked

    def _reject_booking(self, error: DomainError, *, started_at: float) -> bool:
        Logger.base.warning(f'⚠️ [BOOK] {error.message}')
        metrics.record_booking(
            track_kind=self._track_kind,
            result='invalid',
            duration=time.perf_counter() - started_at,
        )
        return False

    # ========== Introspection ==========

    def seat_statuses(self) -> List[SeatStatus]:
        statuses = []
        for seat in self._seats:
            occupied_ranges, free_segments = seat.snapshot()
            statuses.append(
                SeatStatus(
                    seat_id=seat.seat_id,
                    track_kind=self._track_kind,
                    occupied_ranges=occupied_ranges,
                    free_segments=free_segments,
                )
            )
        return statuses
