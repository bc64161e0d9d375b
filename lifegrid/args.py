"""Command-line options for the window size and the grid dimensions."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass

_U32_MAX = 2**32 - 1
_NUMBER = re.compile(r"\+?[0-9]+")
_OPTIONS = {
    "-w": "width",
    "-h": "height",
    "-x": "cellx",
    "-y": "celly",
}


@dataclass
class Settings:
    """Window size in pixels and grid size in cells."""

    width: int = 1200
    height: int = 1000
    cellx: int = 20
    celly: int = 20


def parse_param(s: str) -> int | None:
    """Return the unsigned number that follows a two-character prefix, or None."""
    if len(s) < 3:
        return None
    text = s[2:]
    if not _NUMBER.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def read_command_line_args(argv: Iterable[str] | None = None) -> Settings:
    """Build settings from options such as '-w800'; bad options are reported and skipped."""
    args = sys.argv[1:] if argv is None else list(argv)
    settings = Settings()
    for arg in args:
        if len(arg) < 3:
            continue
        prefix = arg[:2]
        attribute = _OPTIONS.get(prefix)
        if attribute is None:
            print(f"'{arg}' is not a parameter!")
            continue
        value = parse_param(arg)
        if value is None:
            print(
                f"Parameter '{arg}' is poor and cannot be perceived in its entirety!\n"
                f"The argument has the following form: '{prefix}<NUMBER>'!"
            )
        else:
            setattr(settings, attribute, value)
    return settings