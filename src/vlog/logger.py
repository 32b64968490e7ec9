"""
Logger — leveled output over a single text sink.

A Logger owns everything a log line depends on: the sink, the prefix,
the header flags and the verbosity threshold. The gate rule is:

    level <= threshold  →  V-style message is written

Unconditional print-style calls always write. Fatal-class calls write
and then exit with status 1; panic-class calls write and then raise
PanicError carrying the formatted message.

Only output() reports a failed write (as OutputError). The print-style
wrappers drop the message, report the first failure on stderr, and
carry on.

Usage::

    log = Logger(file=buf, prefix="app: ", flags=LSHORTFILE, level=2)
    log.println("starting", 3, "workers")
    log.v(2).printf("loaded %d items", 42)
    if log.v(3):
        log.print(expensive_dump())
"""

import operator
import sys
import threading
import time
from typing import Any, Optional, TextIO, Tuple

from .header import LLONGFILE, LSHORTFILE, LSTDFLAGS, format_header

# Patched by tests to pin header timestamps.
_clock = time.time


class OutputError(OSError):
    """The log sink rejected a write."""


class PanicError(RuntimeError):
    """Raised by panic-class calls after the message has been written.

    Attributes:
        message: The formatted log message
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# =============================================================================
# Formatting conventions
# =============================================================================

def sprint(*args: Any) -> str:
    """Concatenate operands, adding a space between two non-string neighbours."""
    parts = []
    prev_is_str = True
    for i, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if i > 0 and not is_str and not prev_is_str:
            parts.append(" ")
        parts.append(str(arg))
        prev_is_str = is_str
    return "".join(parts)


def sprintln(*args: Any) -> str:
    """Join operands with single spaces and append a newline."""
    return " ".join(str(arg) for arg in args) + "\n"


def sprintf(fmt: str, *args: Any) -> str:
    """Apply %-formatting, leaving fmt untouched when there are no args.

    A format that does not fit its arguments never raises; the text is
    written as-is followed by the arguments, e.g.
    ``"%d items" % ("many",)`` renders ``%d items %!(BADFORMAT ('many',))``.
    """
    if not args:
        return fmt
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError):
        return f"{fmt} %!(BADFORMAT {args!r})"


def check_level(level: Any) -> int:
    """Validate a verbosity threshold.

    Raises:
        TypeError: for bools and non-integers
        ValueError: for negative values
    """
    if isinstance(level, bool):
        raise TypeError("log level must be an integer, not bool")
    level = operator.index(level)
    if level < 0:
        raise ValueError(f"log level must be non-negative, got {level}")
    return level


def _caller(depth: int) -> Tuple[str, int]:
    """File and line of the frame ``depth`` levels above our caller."""
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return "???", 0
    return frame.f_code.co_filename, frame.f_lineno


# =============================================================================
# Gate value
# =============================================================================

class Verbose:
    """Result of Logger.v(): truthy when the requested level is enabled.

    The print methods write through the owning logger only when the gate
    is open; otherwise they return without side effects.
    """

    __slots__ = ("_logger", "_on")

    def __init__(self, logger: "Logger", on: bool):
        self._logger = logger
        self._on = bool(on)

    def __bool__(self) -> bool:
        return self._on

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Verbose):
            return self._on == other._on
        if isinstance(other, int):
            # bool is an int subclass: v(0) == True == 1
            return int(self._on) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._on)

    def __repr__(self) -> str:
        return f"Verbose({self._on})"

    def print(self, *args: Any) -> None:
        if self._on:
            self._logger._emit(2, sprint(*args))

    def printf(self, fmt: str, *args: Any) -> None:
        if self._on:
            self._logger._emit(2, sprintf(fmt, *args))

    def println(self, *args: Any) -> None:
        if self._on:
            self._logger._emit(2, sprintln(*args))


# =============================================================================
# Logger
# =============================================================================

class Logger:
    """A leveled logger writing formatted lines to one sink.

    All state is guarded: the write path and the header settings share
    one lock so concurrent lines never interleave, and the threshold has
    its own lock so gate checks never wait on a slow sink.

    Args:
        file: Sink with a ``write(str)`` method. None follows the
            current ``sys.stderr``.
        prefix: Text written at the start of every line
            (or before the message with LMSGPREFIX)
        flags: Header flag bits, see vlog.header
        level: Verbosity threshold for V-style calls
    """

    def __init__(
        self,
        file: Optional[TextIO] = None,
        prefix: str = "",
        flags: int = LSTDFLAGS,
        level: int = 0,
    ):
        self._mu = threading.Lock()
        self._level_mu = threading.Lock()
        self._file = file
        self._prefix = prefix
        self._flags = flags
        self._level = check_level(level)
        self._write_failed = False

    def __repr__(self) -> str:
        return (f"Logger(prefix={self._prefix!r}, flags={self._flags}, "
                f"level={self._level})")

    # -------------------------------------------------------------------------
    # Verbosity threshold
    # -------------------------------------------------------------------------

    def set_log_level(self, level: int) -> None:
        """Replace the verbosity threshold. Meant for startup configuration."""
        level = check_level(level)
        with self._level_mu:
            self._level = level

    def get_log_level(self) -> int:
        with self._level_mu:
            return self._level

    def enabled(self, level: int) -> bool:
        """True when a message at ``level`` passes the threshold (inclusive)."""
        with self._level_mu:
            return level <= self._level

    def v(self, level: int) -> Verbose:
        """Gate value for ``level``.

        Use it as a condition or call its print methods directly::

            if log.v(2):
                log.print("Starting transaction...")

            log.v(2).println("Processed", n, "elements")
        """
        return Verbose(self, self.enabled(level))

    # -------------------------------------------------------------------------
    # Sink and header configuration
    # -------------------------------------------------------------------------

    def set_output(self, file: Optional[TextIO]) -> None:
        """Redirect subsequent writes. None goes back to sys.stderr."""
        with self._mu:
            self._file = file
            self._write_failed = False

    def writer(self) -> TextIO:
        """The sink writes currently go to."""
        with self._mu:
            return self._sink()

    def flags(self) -> int:
        with self._mu:
            return self._flags

    def set_flags(self, flags: int) -> None:
        with self._mu:
            self._flags = flags

    def prefix(self) -> str:
        with self._mu:
            return self._prefix

    def set_prefix(self, prefix: str) -> None:
        with self._mu:
            self._prefix = prefix

    def _sink(self) -> TextIO:
        return self._file if self._file is not None else sys.stderr

    # -------------------------------------------------------------------------
    # Output primitive
    # -------------------------------------------------------------------------

    def output(self, calldepth: int, s: str) -> None:
        """Write one log event.

        The header selected by the flags is written before ``s``, and a
        newline is appended if ``s`` does not already end with one.

        Args:
            calldepth: Frames to skip when resolving file and line for
                LLONGFILE/LSHORTFILE; 1 names the caller of output()
            s: Message text

        Raises:
            OutputError: if the sink fails to accept the write
        """
        created = _clock()
        with self._mu:
            file, line = "???", 0
            if self._flags & (LSHORTFILE | LLONGFILE):
                file, line = _caller(calldepth)
            text = format_header(self._flags, self._prefix, created, file, line) + s
            if not s.endswith("\n"):
                text += "\n"
            sink = self._sink()
            try:
                sink.write(text)
                flush = getattr(sink, "flush", None)
                if flush is not None:
                    flush()
            except Exception as exc:
                raise OutputError(f"log write failed: {exc}") from exc

    def _emit(self, calldepth: int, s: str) -> None:
        # calldepth is relative to the method calling _emit
        try:
            self.output(calldepth + 1, s)
        except OutputError as exc:
            self._report_dropped(exc)

    def _report_dropped(self, exc: OutputError) -> None:
        with self._mu:
            if self._write_failed:
                return
            self._write_failed = True
        try:
            print(f"vlog: {exc}; dropping log output", file=sys.stderr)
        except (OSError, ValueError):
            # stderr itself is the broken sink
            pass

    # -------------------------------------------------------------------------
    # Print-style calls
    # -------------------------------------------------------------------------

    def print(self, *args: Any) -> None:
        """Write operands in the manner of sprint()."""
        self._emit(2, sprint(*args))

    def printf(self, fmt: str, *args: Any) -> None:
        """Write ``fmt % args``."""
        self._emit(2, sprintf(fmt, *args))

    def println(self, *args: Any) -> None:
        """Write operands separated by spaces."""
        self._emit(2, sprintln(*args))

    def fatal(self, *args: Any) -> None:
        """print() followed by sys.exit(1)."""
        self._emit(2, sprint(*args))
        sys.exit(1)

    def fatalf(self, fmt: str, *args: Any) -> None:
        """printf() followed by sys.exit(1)."""
        self._emit(2, sprintf(fmt, *args))
        sys.exit(1)

    def fatalln(self, *args: Any) -> None:
        """println() followed by sys.exit(1)."""
        self._emit(2, sprintln(*args))
        sys.exit(1)

    def panic(self, *args: Any) -> None:
        """print() followed by raising PanicError."""
        s = sprint(*args)
        self._emit(2, s)
        raise PanicError(s)

    def panicf(self, fmt: str, *args: Any) -> None:
        """printf() followed by raising PanicError."""
        s = sprintf(fmt, *args)
        self._emit(2, s)
        raise PanicError(s)

    def panicln(self, *args: Any) -> None:
        """println() followed by raising PanicError."""
        s = sprintln(*args)
        self._emit(2, s)
        raise PanicError(s)
