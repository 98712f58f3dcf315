"""
Loguru sinks, log format and the stdlib logging bridge.

Importing this module only builds the bound logger; sinks are installed by
setup_logging(), which the DI container's setup() calls.
"""

from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import os
import sys
import threading

from loguru import logger as loguru_logger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


# Use test log directory if in test environment
LOG_DIR = os.environ.get('TEST_LOG_DIR', LOG_DIR)

# Max characters of a single logged args/return payload
MAX_CONTENT_LENGTH = 1000

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'
    SEAT_ID = 'seat_id'
    STATION_RANGE = 'station_range'


custom_logger = loguru_logger.bind(
    **{
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
        ExtraField.SEAT_ID: '',
        ExtraField.STATION_RANGE: '',
    }
)


class InterceptHandler(logging.Handler):
    """Forward stdlib logging records to loguru, keeping the original caller."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        custom_logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        f'<m>seat:{{extra[{ExtraField.SEAT_ID}]}} range:{{extra[{ExtraField.STATION_RANGE}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


_setup_lock = threading.Lock()
_sink_ids: list[int] = []


def setup_logging() -> None:
    """Install the stdout (and optional file) sinks and intercept stdlib logging.

    Replaces loguru's default sink and the root logging handlers, so only the
    application entry point should call it. Later calls are no-ops.
    """
    with _setup_lock:
        if _sink_ids:
            return

        loguru_logger.remove()
        min_log_level = 'DEBUG' if settings.DEBUG else 'INFO'
        _sink_ids.append(
            loguru_logger.add(sys.stdout, format=io_log_format, level=min_log_level, enqueue=True)
        )

        if settings.LOG_TO_FILE:
            now = datetime.now().astimezone()
            prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
            _sink_ids.append(
                loguru_logger.add(
                    f'{LOG_DIR}/{prefix}{now.strftime("%Y-%m-%d_%H")}.log',
                    format=io_log_format,
                    rotation='1 hour',
                    retention='7 days',
                    compression='gz',
                    enqueue=True,
                    level=min_log_level,
                )
            )

        logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
