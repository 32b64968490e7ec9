"""
Function tracing decorator.

Logs entry, return value and exceptions of the wrapped function through
a Logger's V-style gate (level 3 by default). The gate is checked on
every call, so raising the threshold at runtime turns tracing on.
"""

import functools
import inspect
from pathlib import Path

TRACE_LEVEL = 3

_MAX_STR = 50


def _short_repr(value):
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > _MAX_STR:
        return f"'{value[:_MAX_STR - 3]}...'"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def _format_args(func, args, kwargs):
    params = list(inspect.signature(func).parameters)
    parts = []
    for i, arg in enumerate(args):
        if i == 0 and params[:1] in (['self'], ['cls']):
            parts.append(params[0])
        else:
            parts.append(_short_repr(arg))
    parts.extend(f"{key}={_short_repr(value)}" for key, value in kwargs.items())
    return ", ".join(parts)


def trace(func=None, *, level=TRACE_LEVEL, logger=None):
    """Decorator tracing calls when ``logger.v(level)`` is enabled.

    Works bare (``@trace``) or with options (``@trace(level=2)``).
    ``logger`` defaults to the standard logger, looked up per call.
    """
    if func is None:
        return functools.partial(trace, level=level, logger=logger)

    module = inspect.getmodule(func)
    name = f"{module.__name__ if module else 'unknown'}.{func.__name__}"

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if logger is not None:
            log = logger
        else:
            # Lazy import to avoid circular dependency
            from .std import default
            log = default()

        gate = log.v(level)
        if not gate:
            return func(*args, **kwargs)

        gate.printf("[TRACE] >> %s(%s)", name, _format_args(func, args, kwargs))
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            gate.printf("[TRACE] !! %s raised: %s: %s", name, type(e).__name__, e)
            raise
        if result is not None:
            gate.printf("[TRACE] << %s returned: %s", name, _short_repr(result))
        return result

    return wrapper
