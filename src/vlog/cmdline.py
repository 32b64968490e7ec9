"""
The ``-v`` startup flag.

Registers the verbosity threshold on an argparse parser. The flag's
action sets the threshold while arguments are parsed, so an application
only has to parse its command line before the first V-style call::

    parser = argparse.ArgumentParser(parents=[vlog.flag_parser()])
    args = parser.parse_args()      # "-v 2" now gates vlog.v(2)

vlog never reads sys.argv on its own.
"""

import argparse
from typing import Optional

from . import std
from .logger import Logger

FLAG = "-v"
FLAG_HELP = "log level for V logs"


def non_negative_int(text: str) -> int:
    """argparse type for the threshold: a base-10 integer >= 0."""
    try:
        value = int(text, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid log level: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(
            f"log level must be non-negative: {value}")
    return value


class VerbosityAction(argparse.Action):
    """Store the parsed level and push it into the target logger.

    The logger is resolved when the flag is parsed; None means the
    standard logger at that moment.
    """

    def __init__(self, option_strings, dest, logger: Optional[Logger] = None,
                 **kwargs):
        self.logger = logger
        super().__init__(option_strings, dest, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        target = self.logger if self.logger is not None else std.default()
        target.set_log_level(values)


def add_verbosity_flag(parser: argparse.ArgumentParser,
                       logger: Optional[Logger] = None,
                       dest: str = "v") -> argparse.Action:
    """Register ``-v N`` on ``parser``.

    Args:
        parser: Parser or argument group to extend
        logger: Logger whose threshold the flag sets (default: standard logger)
        dest: Namespace attribute receiving the parsed level

    Returns:
        The registered argparse action
    """
    return parser.add_argument(
        FLAG, dest=dest, metavar="N", type=non_negative_int, default=0,
        action=VerbosityAction, logger=logger, help=FLAG_HELP,
    )


def flag_parser(logger: Optional[Logger] = None) -> argparse.ArgumentParser:
    """Build a parent parser carrying the ``-v`` flag.

    Intended for ``argparse.ArgumentParser(parents=[flag_parser()])``.
    """
    parent = argparse.ArgumentParser(add_help=False)
    add_verbosity_flag(parent, logger=logger)
    return parent
