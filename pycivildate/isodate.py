"""A module for the ISO 8601 calendar date form (YYYY-MM-DD).

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

A string is an ISO date only if it has the exact shape and also names
a day that exists: 2024-02-29 is accepted, 2023-02-29 and 2025-02-30
are rejected even though they match the pattern.
"""

__all__ = ['ISO_REGEX', 'match_iso', 'format_iso', 'parse_iso']

import re

try:
    from typing import Optional, Tuple  # pylint: disable=unused-import
except ImportError:
    pass

from .exception import InterfaceError, CodeFormatError, CalendarValidityError
from .calendar import ymd2day, is_valid_ymd
from .datatype import LOCALZONE, wall_clock_fields

ISO_REGEX = re.compile(r'(\d{4})-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])',
                       re.ASCII)


def match_iso(value):
    # type: (str) -> Optional[Tuple[int, int, int]]
    """Return (year, month, day) if value has the ISO shape, else None.

    The day is not checked against the month.
    """
    if not isinstance(value, str):
        raise InterfaceError('ISO date must be a string, not %s'
                             % (type(value).__name__))
    match = ISO_REGEX.fullmatch(value)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2)), int(match.group(3))


def format_iso(moment, zoneinfo=LOCALZONE):
    """Return the local date of moment as YYYY-MM-DD."""
    y, m, d = wall_clock_fields(moment, zoneinfo)
    return '%04d-%02d-%02d' % (y, m, d)


def parse_iso(value):
    # type: (str) -> int
    """Convert a YYYY-MM-DD string to a day number."""
    ymd = match_iso(value)
    if ymd is None:
        raise CodeFormatError()
    if not is_valid_ymd(*ymd):
        raise CalendarValidityError()
    return ymd2day(*ymd)
