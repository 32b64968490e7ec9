"""
Line header flags, flag spec parsing and header rendering.

Flags are bits or'ed together to control what is written in front of
each log line. There is no control over the order the fields appear
(the order listed here) or the format they present. For example,
LDATE | LTIME (or LSTDFLAGS) produce::

    2026/10/18 01:23:23 message

while LDATE | LTIME | LMICROSECONDS | LLONGFILE produce::

    2026/10/18 01:23:23.123123 /a/b/c/d.py:23: message

Flag spec syntax (CLI and configuration):
    date,time           # names joined by ',' or '|'
    std|shortfile       # 'std' expands to date|time
    3                   # a bare integer
    none                # no header at all (same as '0' or '')
"""

import datetime
import os
from typing import Dict, List

LDATE = 1 << 0            # the date in the local time zone: 2026/10/18
LTIME = 1 << 1            # the time in the local time zone: 01:23:23
LMICROSECONDS = 1 << 2    # microsecond resolution: 01:23:23.123123. assumes LTIME.
LLONGFILE = 1 << 3        # full file name and line number: /a/b/c/d.py:23
LSHORTFILE = 1 << 4       # final file name element and line number: d.py:23. overrides LLONGFILE
LUTC = 1 << 5             # if LDATE or LTIME is set, use UTC rather than the local time zone
LMSGPREFIX = 1 << 6       # move the prefix from the beginning of the line to before the message
LSTDFLAGS = LDATE | LTIME  # initial values for the standard logger

ALL_FLAGS = (LDATE | LTIME | LMICROSECONDS | LLONGFILE
             | LSHORTFILE | LUTC | LMSGPREFIX)

FLAG_NAMES: Dict[str, int] = {
    'date': LDATE,
    'time': LTIME,
    'microseconds': LMICROSECONDS,
    'longfile': LLONGFILE,
    'shortfile': LSHORTFILE,
    'utc': LUTC,
    'msgprefix': LMSGPREFIX,
    'std': LSTDFLAGS,
}

FLAG_DESCRIPTIONS = {
    'date':         'Date in the local time zone (2026/10/18)',
    'time':         'Time in the local time zone (01:23:23)',
    'microseconds': 'Microsecond resolution on the time field',
    'longfile':     'Full file name and line number of the caller',
    'shortfile':    'Base file name and line number (overrides longfile)',
    'utc':          'Use UTC for date and time fields',
    'msgprefix':    'Put the prefix before the message, not at line start',
    'std':          'Standard logger default: date|time',
}

_NO_FLAGS = {'', '0', 'none'}


def parse_flag_spec(spec: str) -> int:
    """Parse a flag spec string into a flag bit mask.

    Args:
        spec: Names separated by ',' or '|', or a bare integer

    Returns:
        The or'ed flag bits

    Raises:
        ValueError: on an unknown flag name or a negative integer
    """
    text = spec.strip().lower()
    if text in _NO_FLAGS:
        return 0
    if text.isdigit():
        return int(text)

    mask = 0
    for name in text.replace('|', ',').split(','):
        name = name.strip()
        if not name:
            continue
        try:
            mask |= FLAG_NAMES[name]
        except KeyError:
            raise ValueError(f"unknown log flag: {name!r}") from None
    return mask


def flag_names(flags: int) -> List[str]:
    """Name the individual bits set in ``flags`` (composite names excluded)."""
    return [name for name, bit in FLAG_NAMES.items()
            if name != 'std' and flags & bit]


def format_flag_list() -> str:
    """Format the list of known flag names for display.

    Returns:
        Formatted string listing all flags with descriptions.
    """
    lines = ["Available log flags:"]
    width = max(len(name) for name in FLAG_NAMES)
    for name, bit in FLAG_NAMES.items():
        desc = FLAG_DESCRIPTIONS.get(name, '')
        lines.append(f"  {name:<{width}}  {bit:>3}  {desc}")
    return "\n".join(lines)


def format_header(flags: int, prefix: str, created: float,
                  file: str = '???', line: int = 0) -> str:
    """Render the text written in front of a log message.

    Args:
        flags: Header flag bits
        prefix: Logger prefix
        created: Event time as a POSIX timestamp
        file: Caller file name (only used with LLONGFILE/LSHORTFILE)
        line: Caller line number

    Returns:
        The header, ending just before where the message starts.
    """
    parts = []
    if not flags & LMSGPREFIX:
        parts.append(prefix)
    if flags & (LDATE | LTIME | LMICROSECONDS):
        tz = datetime.timezone.utc if flags & LUTC else None
        t = datetime.datetime.fromtimestamp(created, tz)
        if flags & LDATE:
            parts.append(f"{t.year:04d}/{t.month:02d}/{t.day:02d} ")
        if flags & (LTIME | LMICROSECONDS):
            stamp = f"{t.hour:02d}:{t.minute:02d}:{t.second:02d}"
            if flags & LMICROSECONDS:
                stamp += f".{t.microsecond:06d}"
            parts.append(stamp + " ")
    if flags & (LSHORTFILE | LLONGFILE):
        if flags & LSHORTFILE:
            file = os.path.basename(file)
        parts.append(f"{file}:{line}: ")
    if flags & LMSGPREFIX:
        parts.append(prefix)
    return "".join(parts)
