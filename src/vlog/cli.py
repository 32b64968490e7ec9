"""Command-line entry point for vlog.

Writes a message through the standard logger, gated by its V level:

  vlog -v 2 --level 1 "Processed" 42 "elements"   # written (1 <= 2)
  vlog --level 3 "noisy detail"                    # dropped (3 > 0)
  vlog --fatal "cannot continue"                   # written, exit 1

Useful from shell scripts that want the same -v convention as the
Python programs around them.
"""

import argparse
import sys

from vlog import std
from vlog._version import BASE_VERSION, VERSION
from vlog.cmdline import flag_parser, non_negative_int
from vlog.header import format_flag_list, parse_flag_spec


def _build_parser():
    """Build the argparse parser; -v comes from the shared flag parser."""
    parser = argparse.ArgumentParser(
        prog="vlog",
        description="vlog — leveled log lines from the command line",
        parents=[flag_parser()],
        epilog=(
            "The message is written when --level <= -v.\n"
            "Run 'vlog --list-flags' to list header flag names."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"vlog {BASE_VERSION} ({VERSION})",
    )
    parser.add_argument("--level", "-l", metavar="L", type=non_negative_int,
                        default=0,
                        help="V level of the message (default: 0, always written)")
    parser.add_argument("--prefix", "-p", default="",
                        help="Text written at the start of the line")
    parser.add_argument("--flags", "-f", default="std", metavar="SPEC",
                        help="Header flags, e.g. 'date,time,utc' (default: std)")
    parser.add_argument("--list-flags", action="store_true", default=False,
                        help="List header flag names and exit")
    parser.add_argument("--stdout", action="store_true", default=False,
                        help="Write to stdout instead of stderr")
    parser.add_argument("--fatal", action="store_true", default=False,
                        help="Write the message regardless of level, then exit 1")
    parser.add_argument("message", nargs="*",
                        help="Message operands, joined by spaces")
    return parser


def main(argv=None):
    """Main entry point for the vlog CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success, 1 = --fatal).
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list_flags:
        print(format_flag_list())
        return 0

    if not args.message:
        parser.print_help()
        return 0

    try:
        header_flags = parse_flag_spec(args.flags)
    except ValueError as e:
        parser.error(str(e))

    std.configure(prefix=args.prefix, flags=header_flags,
                  file=sys.stdout if args.stdout else None)

    try:
        if args.fatal:
            std.fatalln(*args.message)
        std.v(args.level).println(*args.message)
    except KeyboardInterrupt:
        return 130
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
