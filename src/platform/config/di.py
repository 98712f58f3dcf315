"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.logging.loguru_io_config import setup_logging
from src.service.seat_reservation.app.seat_pool import SeatPool


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # One pool per process; every seat shares the configured station line
    seat_pool: providers.Provider[SeatPool] = providers.Singleton(
        SeatPool,
        total_stations=config_service.provided.TOTAL_STATIONS,
        total_seats=config_service.provided.TOTAL_SEATS,
        track_kind=config_service.provided.TRACK_KIND,
    )


container = Container()


def setup() -> None:
    setup_logging()
    container.config_service()
    container.seat_pool()


def cleanup() -> None:
    container.reset_singletons()
