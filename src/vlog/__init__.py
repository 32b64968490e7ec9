"""
vlog — leveled logging on a plain text logger.

Print-style logging (print/printf/println, fatal*, panic*) plus one
extra concept: a numeric verbosity threshold, set with the ``-v`` flag
or set_log_level(), that gates V-style calls:

    vlog.v(2).println("Processed", n_items, "elements")

A V-style message is written when its level <= the threshold.

Public API:
    Logger             — leveled logger over one sink
    Verbose            — gate value returned by v()
    set_log_level, get_log_level, v
    print, printf, println, fatal, fatalf, fatalln, panic, panicf, panicln
    set_output, writer, flags, set_flags, prefix, set_prefix, output
    default, configure — standard logger access and startup setup
    add_verbosity_flag, flag_parser — argparse ``-v`` integration
    trace              — function tracing decorator
    OutputError, PanicError
    LDATE ... LSTDFLAGS, parse_flag_spec — header flags
"""

from vlog._version import __version__, __app_name__
from .header import (
    LDATE, LTIME, LMICROSECONDS, LLONGFILE, LSHORTFILE, LUTC, LMSGPREFIX,
    LSTDFLAGS, parse_flag_spec,
)
from .logger import Logger, Verbose, OutputError, PanicError
from .std import (
    default, configure,
    set_log_level, get_log_level, v,
    set_output, writer, flags, set_flags, prefix, set_prefix, output,
    print, printf, println,
    fatal, fatalf, fatalln,
    panic, panicf, panicln,
)
from .cmdline import add_verbosity_flag, flag_parser
from .trace import trace

__all__ = [
    '__version__', '__app_name__',
    'LDATE', 'LTIME', 'LMICROSECONDS', 'LLONGFILE', 'LSHORTFILE', 'LUTC',
    'LMSGPREFIX', 'LSTDFLAGS', 'parse_flag_spec',
    'Logger', 'Verbose', 'OutputError', 'PanicError',
    'default', 'configure',
    'set_log_level', 'get_log_level', 'v',
    'set_output', 'writer', 'flags', 'set_flags', 'prefix', 'set_prefix',
    'output',
    # 'print' is left out so star imports keep the builtin
    'printf', 'println',
    'fatal', 'fatalf', 'fatalln',
    'panic', 'panicf', 'panicln',
    'add_verbosity_flag', 'flag_parser',
    'trace',
]
