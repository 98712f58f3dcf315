"""
Unit tests for Logger.io and logging setup

Test Coverage:
1. Return values pass through untouched
2. Exceptions are re-raised (or swallowed with reraise=False) and logged once
3. Seat id / station range of a call are bound into the log extras
4. Concurrent calls of one decorated function keep their own log context
5. Sinks are installed only by setup_logging(), never by import
"""

from concurrent.futures import ThreadPoolExecutor
import logging
import subprocess
import sys
import threading
from typing import Any

import pytest

from src.platform.config.core_setting import settings
from src.platform.constant.path import BASE_DIR
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_config import InterceptHandler, setup_logging
from src.platform.logging.loguru_io_utils import truncate_content
from src.service.seat_reservation.domain.station_range import StationRange


pytestmark = pytest.mark.unit


@Logger.io
def _add(a: int, b: int) -> int:
    return a + b


@Logger.io
def _fail() -> None:
    raise DomainError('seat is gone')


@Logger.io(reraise=False)
def _fail_quietly() -> None:
    raise ValueError('boom')


@Logger.io
def _reserve(seat_id: int, start_station: int, end_station: int) -> int:
    return seat_id


@Logger.io
def _reserve_range(seat_id: int, station_range: StationRange) -> bool:
    return True


@Logger.io
def _hold_seat(seat_id: int, barrier: threading.Barrier) -> int:
    barrier.wait()
    return seat_id


@pytest.fixture
def captured_records(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, 'DEBUG', True)
    records: list[dict[str, Any]] = []
    sink_id = Logger.base.add(lambda message: records.append(message.record), level='DEBUG')
    yield records
    Logger.base.remove(sink_id)


def _records_of(records: list[dict[str, Any]], func_name: str) -> list[dict[str, Any]]:
    return [r for r in records if f'::{func_name}:' in r['extra'].get('call_target', '')]


class TestLoggerIO:
    def test_return_value_passes_through(self):
        assert _add(2, 3) == 5
        assert _add(a=2, b=3) == 5

    def test_exception_is_reraised_and_marked_logged(self):
        with pytest.raises(DomainError) as exc_info:
            _fail()

        assert getattr(exc_info.value, '_has_logged', False) is True

    def test_reraise_false_returns_none(self):
        assert _fail_quietly() is None

    def test_wrapper_keeps_function_metadata(self):
        assert _add.__name__ == '_add'
        assert _add.__wrapped__(1, 1) == 2  # type: ignore[attr-defined]


class TestReservationContext:
    def test_station_pair_and_seat_are_bound(self, captured_records):
        # When
        _reserve(3, 2, 5)

        # Then: both the args and the return line carry the reservation
        lines = _records_of(captured_records, '_reserve')
        assert [r['message'].split(':')[0] for r in lines] == ['args', 'return']
        for record in lines:
            assert record['extra']['seat_id'] == '3'
            assert record['extra']['station_range'] == '2->5'

    def test_station_range_object_is_bound(self, captured_records):
        _reserve_range(seat_id=4, station_range=StationRange(1, 4))

        lines = _records_of(captured_records, '_reserve_range')
        assert lines
        assert all(r['extra']['seat_id'] == '4' for r in lines)
        assert all(r['extra']['station_range'] == '1->4' for r in lines)

    def test_unrelated_call_leaves_fields_blank(self, captured_records):
        _add(2, 3)

        lines = _records_of(captured_records, '_add')
        assert lines
        assert all(r['extra']['seat_id'] == '' for r in lines)
        assert all(r['extra']['station_range'] == '' for r in lines)

    def test_concurrent_calls_keep_their_own_context(self, captured_records):
        # Given: every call is inside the wrapper at the same time
        workers = 8
        barrier = threading.Barrier(workers)

        # When
        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = list(executor.map(lambda i: _hold_seat(i, barrier), range(1, workers + 1)))

        # Then: each return line is tagged with its own seat
        returns = [
            r for r in _records_of(captured_records, '_hold_seat')
            if r['message'].startswith('return: ')
        ]
        assert sorted(results) == list(range(1, workers + 1))
        assert len(returns) == workers
        for record in returns:
            assert record['extra']['seat_id'] == record['message'].removeprefix('return: ')

        # And: args and return of one call share a single chain start time
        chain_times: dict[str, set[Any]] = {}
        for record in _records_of(captured_records, '_hold_seat'):
            chain_times.setdefault(record['extra']['seat_id'], set()).add(
                record['extra']['chain_start_time']
            )
        assert all(len(times) == 1 for times in chain_times.values())


class TestLoggingSetup:
    def test_setup_logging_is_idempotent(self):
        setup_logging()
        setup_logging()

        handlers = logging.getLogger().handlers
        assert sum(isinstance(h, InterceptHandler) for h in handlers) == 1

    def test_import_leaves_host_logging_untouched(self):
        # loguru's default sink (id 0) must survive, and the root logger
        # must not be rerouted, until setup_logging() is called
        code = '\n'.join(
            (
                'import logging',
                'from loguru import logger',
                'import src.service.seat_reservation',
                'from src.platform.logging.loguru_io_config import InterceptHandler',
                'root_handlers = logging.getLogger().handlers',
                'assert not any(isinstance(h, InterceptHandler) for h in root_handlers)',
                'logger.remove(0)',
            )
        )

        result = subprocess.run(
            [sys.executable, '-c', code],
            cwd=BASE_DIR,
            capture_output=True,
            text=True,
            check=False,
        )

        assert result.returncode == 0, result.stderr


class TestLoggingUtils:
    def test_truncate_content_shortens_long_payloads(self):
        truncated = truncate_content('x' * 50, max_length=10)

        assert truncated.startswith('x' * 10)
        assert 'truncated 40 chars' in truncated

    def test_truncate_content_keeps_numbers(self):
        assert truncate_content(12345, max_length=2) == 12345
