"""Station Range Value Object"""

from typing import Any

import attrs

from src.platform.exception.exceptions import InvalidStationRangeError


def _validate_station_index(_instance: Any, attribute: attrs.Attribute, value: Any) -> None:
    # bool is an int subclass but never a station index
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidStationRangeError(
            f'{attribute.name} station must be an integer, got {type(value).__name__}'
        )
    if value < 0:
        raise InvalidStationRangeError(f'{attribute.name} station must be >= 0, got {value}')


@attrs.define(frozen=True)
class StationRange:
    """
    Half-open station span [start, end) (Value Object).

    Covers the unit segments start, start + 1, ..., end - 1. Touching ranges
    such as [0, 3) and [3, 5) share a station but no segment.
    """

    start: int = attrs.field(validator=_validate_station_index)
    end: int = attrs.field(validator=_validate_station_index)

    def __attrs_post_init__(self) -> None:
        if self.start >= self.end:
            raise InvalidStationRangeError(
                f'start station must be before end station, got {self.start} -> {self.end}'
            )

    @property
    def length(self) -> int:
        """Number of unit segments covered"""
        return self.end - self.start

    def segments(self) -> range:
        return range(self.start, self.end)

    def overlaps(self, other: 'StationRange') -> bool:
        return self.start < other.end and other.start < self.end

    def __str__(self) -> str:
        return f'{self.start}->{self.end}'
