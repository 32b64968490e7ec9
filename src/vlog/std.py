"""
The standard logger and its module-level functions.

Every function here delegates to one process-wide Logger (stderr,
LSTDFLAGS, threshold 0). Applications configure it once at startup,
either through the ``-v`` flag (see vlog.cmdline) or explicitly::

    vlog.set_log_level(3)
    vlog.println("Prepare to repel boarders")
    vlog.fatalf("Initialization failed: %s", err)

    if vlog.v(2):
        vlog.print("Starting transaction...")
    vlog.v(2).println("Processed", n_items, "elements")

The function names deliberately follow the print/printf/println family,
so ``print`` here shadows the builtin inside this module only.
"""

import sys
from typing import Any, Optional, TextIO

from .logger import (
    Logger, PanicError, Verbose, sprint, sprintf, sprintln,
)

_std = Logger()


def default() -> Logger:
    """The standard logger used by the module-level functions."""
    return _std


def configure(level: Optional[int] = None, prefix: Optional[str] = None,
              flags: Optional[int] = None,
              file: Optional[TextIO] = None) -> Logger:
    """Configure the standard logger in one call.

    Call once at program startup after parsing CLI arguments. Arguments
    left as None keep their current value.

    Returns:
        The standard logger
    """
    if level is not None:
        _std.set_log_level(level)
    if prefix is not None:
        _std.set_prefix(prefix)
    if flags is not None:
        _std.set_flags(flags)
    if file is not None:
        _std.set_output(file)
    return _std


# =============================================================================
# Verbosity
# =============================================================================

def set_log_level(level: int) -> None:
    """Set the threshold; meant for the startup configuration phase."""
    _std.set_log_level(level)


def get_log_level() -> int:
    return _std.get_log_level()


def v(level: int) -> Verbose:
    """Whether a V-style call at ``level`` writes depends on the threshold."""
    return _std.v(level)


# =============================================================================
# Sink and header configuration
# =============================================================================

def set_output(file: Optional[TextIO]) -> None:
    """Set the output destination for the standard logger."""
    _std.set_output(file)


def writer() -> TextIO:
    """The output destination of the standard logger."""
    return _std.writer()


def flags() -> int:
    """The header flags of the standard logger."""
    return _std.flags()


def set_flags(flags: int) -> None:
    """Set the header flags of the standard logger."""
    _std.set_flags(flags)


def prefix() -> str:
    """The line prefix of the standard logger."""
    return _std.prefix()


def set_prefix(prefix: str) -> None:
    """Set the line prefix of the standard logger."""
    _std.set_prefix(prefix)


def output(calldepth: int, s: str) -> None:
    """Write a log event through the standard logger.

    ``calldepth`` counts frames above the caller of this function, so 1
    reports the caller's own file and line. Raises OutputError when the
    sink fails.
    """
    _std.output(calldepth + 1, s)


# =============================================================================
# Print-style calls
# =============================================================================

def print(*args: Any) -> None:
    _std._emit(2, sprint(*args))


def printf(fmt: str, *args: Any) -> None:
    _std._emit(2, sprintf(fmt, *args))


def println(*args: Any) -> None:
    _std._emit(2, sprintln(*args))


def fatal(*args: Any) -> None:
    """Equivalent to print() followed by sys.exit(1)."""
    _std._emit(2, sprint(*args))
    sys.exit(1)


def fatalf(fmt: str, *args: Any) -> None:
    """Equivalent to printf() followed by sys.exit(1)."""
    _std._emit(2, sprintf(fmt, *args))
    sys.exit(1)


def fatalln(*args: Any) -> None:
    """Equivalent to println() followed by sys.exit(1)."""
    _std._emit(2, sprintln(*args))
    sys.exit(1)


def panic(*args: Any) -> None:
    """Equivalent to print() followed by raising PanicError."""
    s = sprint(*args)
    _std._emit(2, s)
    raise PanicError(s)


def panicf(fmt: str, *args: Any) -> None:
    """Equivalent to printf() followed by raising PanicError."""
    s = sprintf(fmt, *args)
    _std._emit(2, s)
    raise PanicError(s)


def panicln(*args: Any) -> None:
    """Equivalent to println() followed by raising PanicError."""
    s = sprintln(*args)
    _std._emit(2, s)
    raise PanicError(s)

