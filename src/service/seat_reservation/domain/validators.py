"""Seat pool validation utilities."""

from src.platform.exception.exceptions import InvalidSeatIdError, InvalidStationRangeError
from src.service.seat_reservation.domain.station_range import StationRange


class StationRangeValidators:
    @staticmethod
    def build_within_line(start_station: int, end_station: int, total_stations: int) -> StationRange:
        """Build a StationRange and check it fits on a line of total_stations."""
        station_range = StationRange(start_station, end_station)
        StationRangeValidators.validate_within_line(station_range, total_stations)
        return station_range

    @staticmethod
    def validate_within_line(station_range: StationRange, total_stations: int) -> None:
        # end is a station index: n stations -> last station is n - 1
        last_station = total_stations - 1
        if station_range.end > last_station:
            raise InvalidStationRangeError(
                f'Invalid station numbers: {station_range} '
                f'(stations are numbered 0 to {last_station})'
            )


class SeatIdValidators:
    @staticmethod
    def validate_seat_id(seat_id: int, total_seats: int) -> None:
        if isinstance(seat_id, bool) or not isinstance(seat_id, int):
            raise InvalidSeatIdError(f'Invalid seat number: {seat_id!r}')
        if seat_id < 1 or seat_id > total_seats:
            raise InvalidSeatIdError(
                f'Invalid seat number: {seat_id} (seats are numbered 1 to {total_seats})'
            )
