"""
Test Configuration and Fixtures

This module provides:
- Test environment variables (set before any src module reads settings)
- Loguru sinks installed once for the whole session
- Marker defaulting: every test not marked unit is treated as integration
- Seat pool fixtures shared by unit and BDD tests
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time; logging sinks are installed below
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Exercise Logger.io argument/return tracing in tests
    os.environ.setdefault('DEBUG', 'true')
    os.environ.setdefault('LOG_TO_FILE', 'false')
    os.environ.setdefault('SERVICE_NAME', 'seat_reservation_test')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Callable  # noqa: E402

import pytest  # noqa: E402

from src.platform.logging.loguru_io_config import setup_logging  # noqa: E402
from src.service.seat_reservation.app.seat_pool import SeatPool  # noqa: E402
from src.service.seat_reservation.domain.track_kind import TrackKind  # noqa: E402


setup_logging()


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Seat Pool Fixtures
# =============================================================================
@pytest.fixture
def seat_pool_factory() -> Callable[..., SeatPool]:
    def _create(
        total_stations: int = 10, total_seats: int = 5, track_kind: TrackKind = TrackKind.SEGMENT
    ) -> SeatPool:
        return SeatPool(total_stations, total_seats, track_kind)

    return _create


@pytest.fixture(params=[TrackKind.SEGMENT, TrackKind.INTERVAL], ids=lambda kind: str(kind))
def track_kind(request: pytest.FixtureRequest) -> TrackKind:
    return request.param
