from functools import wraps
import inspect
import types
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io_config import (
    ExtraField,
    call_depth_var,
    custom_logger,
)
from src.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    build_reservation_context,
    get_chain_start_time,
    normalize_args_kwargs,
    reset_call_depth,
    truncate_content,
)

# TypeVar for preserving function type through decorator
_F = TypeVar('_F', bound=Callable[..., Any])


class LoguruIO:
    """
    Traces a function's arguments, return value and first exception.

    Every call gets its own bound logger carrying the call target, the chain
    start time and, for reservation calls, the seat id and station range, so
    concurrent callers of one decorated function never share log context.
    """

    def __init__(
        self, custom_logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = False
    ) -> None:
        self._custom_logger = custom_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.depth = 2  # Adjusted for wrapper functions

    def _payload(self, data: Any) -> Any:
        return truncate_content(data) if self.truncate_content else data

    def log_args_kwargs_content(self, logger: 'LoguruLogger', *args: Any, **kwargs: Any) -> None:
        if settings.DEBUG:
            logger.opt(depth=self.depth).debug(
                f'args: {self._payload(args)}, kwargs: {self._payload(kwargs)}'
            )

    def log_return_content(self, logger: 'LoguruLogger', return_value: Any) -> None:
        if settings.DEBUG:
            logger.opt(depth=self.depth).debug(f'return: {self._payload(return_value)}')

    def log_exception(self, logger: 'LoguruLogger', e: Exception) -> None:
        # Skip if already logged (avoid duplicate logs when exception bubbles up)
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]
        if isinstance(e, CustomBaseError):
            logger.opt(depth=self.depth).error(f'{type(e).__name__}: {e}')
        else:
            logger.opt(depth=self.depth).exception(f'{type(e).__name__}: {e}')

    def _hide_from_traceback(self, func: Callable[..., Any]) -> Callable[..., Any]:
        func.__code__ = func.__code__.replace(  # type: ignore[attr-defined]
            co_filename=cast(types.FunctionType, self._custom_logger.catch).__code__.co_filename
        )
        return func

    def __call__(self, func: _F) -> _F:
        call_target = build_call_target_func_path(func)
        signature = inspect.signature(func)

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            call_depth_var.set(call_depth_var.get() + 1)
            logger = self._custom_logger.bind(
                **{
                    ExtraField.CALL_TARGET: call_target,
                    ExtraField.CHAIN_START_TIME: get_chain_start_time(),
                    **build_reservation_context(signature, *args, **kwargs),
                }
            )
            try:
                self.log_args_kwargs_content(logger, *args, **kwargs)
                args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                return_value = func(*args, **kwargs)
                self.log_return_content(logger, return_value)
                return return_value
            except Exception as e:
                self.log_exception(logger, e)
                if self.reraise:
                    raise
                return None
            finally:
                reset_call_depth()

        return cast(_F, self._hide_from_traceback(sync_wrapper))


_P = ParamSpec('_P')
_T = TypeVar('_T')


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        io = LoguruIO(
            custom_logger=custom_logger, reraise=reraise, truncate_content=truncate_content
        )
        return io(func) if func else io
