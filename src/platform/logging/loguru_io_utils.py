from inspect import FullArgSpec, Signature, getfile, getfullargspec, getsourcelines
from os.path import basename
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    MAX_CONTENT_LENGTH,
    ExtraField,
    call_depth_var,
    chain_start_time_var,
)


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    target = getattr(func, '__func__', func)
    try:
        lineno = getsourcelines(target)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(target))}::{func.__qualname__}:{lineno}'


def reset_call_depth() -> None:
    layer = max(call_depth_var.get() - 1, 0)
    call_depth_var.set(layer)
    if not layer:
        chain_start_time_var.set(0)


def normalize_args_kwargs(
    func: Callable[..., Any], *args: Any, **kwargs: Any
) -> tuple[tuple[Any, ...], dict[Any, Any]]:
    if hasattr(func, '__wrapped__'):
        func = func.__wrapped__  # type: ignore
    full_arg_spec: FullArgSpec = getfullargspec(func)
    spec_args: list[str] = full_arg_spec.args

    if not full_arg_spec.varkw:
        kw_list: list[str] = spec_args + full_arg_spec.kwonlyargs
        kwargs = {k: v for k, v in kwargs.items() if k in kw_list}

    if not full_arg_spec.varargs:
        args = args[: len(spec_args)]

    return args, kwargs


def build_reservation_context(signature: Signature, *args: Any, **kwargs: Any) -> dict[str, str]:
    """Seat id and station range found among a call's arguments, as log extras.

    Recognises `seat_id`, `station_range` and the `start_station`/`end_station`
    pair; anything else leaves the fields at their blank defaults.
    """
    try:
        arguments = signature.bind_partial(*args, **kwargs).arguments
    except TypeError:
        return {}

    context: dict[str, str] = {}
    if 'seat_id' in arguments:
        context[ExtraField.SEAT_ID] = str(arguments['seat_id'])
    if 'station_range' in arguments:
        context[ExtraField.STATION_RANGE] = str(arguments['station_range'])
    elif 'start_station' in arguments and 'end_station' in arguments:
        context[ExtraField.STATION_RANGE] = (
            f'{arguments["start_station"]}->{arguments["end_station"]}'
        )
    return context


def truncate_content(data: Any, max_length: int = MAX_CONTENT_LENGTH) -> Any:
    if isinstance(data, (int, float, bool)) or data is None:
        return data
    data_str = str(data)
    if len(data_str) <= max_length:
        return data
    return f'{data_str[:max_length]}...(truncated {len(data_str) - max_length} chars)'
