"""A module for converting between datetime values and day numbers.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Reading a datetime uses its local wall-clock fields; writing a day
number always produces midnight UTC of that day.  The two directions
only agree when local midnight and UTC midnight fall on the same date:
west of UTC the returned instant is still the previous day locally.

Exported Functions:
get_timezone -- Returns a tzinfo for an IANA zone name.
timezone_aware -- Attaches a zone to a naive wall-clock timestamp.
wall_clock_fields -- Returns the local (year, month, day) of a moment.
from_local -- Converts a moment to the day number of its local date.
to_utc_midnight -- Converts a day number or code to midnight UTC.
"""

__all__ = ['UTC', 'LOCALZONE', 'LOCALZONE_NAME', 'TICKSDAY',
           'get_timezone', 'timezone_aware', 'wall_clock_fields',
           'from_local', 'to_utc_midnight']

from datetime import datetime as Timestamp, date as Date
from datetime import timedelta as TimeDelta, timezone
from datetime import tzinfo  # pylint: disable=unused-import
from zoneinfo import ZoneInfo

try:
    from typing import Tuple, Union  # pylint: disable=unused-import
except ImportError:
    pass

from pytz.tzinfo import BaseTzInfo
import tzlocal

from .exception import InterfaceError, RangeError
from .calendar import ymd2day
from .codec import check_number, decode

UTC = timezone.utc
TICKSDAY = 86400
EPOCH = Timestamp(1970, 1, 1, tzinfo=UTC)

LOCALZONE = tzlocal.get_localzone()
LOCALZONE_NAME = getattr(LOCALZONE, 'key', None) or str(LOCALZONE)


def get_timezone(name):
    # type: (str) -> tzinfo
    """Return the tzinfo for an IANA zone name such as 'America/Chicago'."""
    try:
        return ZoneInfo(name)
    except (LookupError, ValueError):
        # ZoneInfoNotFoundError is a KeyError
        raise InterfaceError('Invalid TimeZone ' + str(name))


def timezone_aware(tstamp, tz_info):
    # type: (Timestamp, tzinfo) -> Timestamp
    """Attach tz_info to a naive timestamp without moving its wall clock."""
    if isinstance(tz_info, BaseTzInfo):
        return tz_info.localize(tstamp, is_dst=False)
    return tstamp.replace(tzinfo=tz_info)


def wall_clock_fields(moment, zoneinfo=LOCALZONE):
    # type: (Union[Date, Timestamp], tzinfo) -> Tuple[int, int, int]
    """Return the (year, month, day) an observer in zoneinfo sees.

    A naive datetime or a date is already a wall-clock value and is read
    as is.  An aware datetime is converted to zoneinfo first.
    """
    if isinstance(moment, Timestamp):
        if moment.tzinfo is not None and moment.utcoffset() is not None:
            moment = moment.astimezone(zoneinfo)
    elif not isinstance(moment, Date):
        raise InterfaceError('Expected a date or datetime, not %s'
                             % (type(moment).__name__))
    return moment.year, moment.month, moment.day


def from_local(moment, zoneinfo=LOCALZONE):
    # type: (Union[Date, Timestamp], tzinfo) -> int
    """Convert a moment to the day number of its local calendar date.

    Every moment on the same local date gives the same day number,
    whatever its time of day or UTC offset.
    """
    y, m, d = wall_clock_fields(moment, zoneinfo)
    return ymd2day(y, m, d)


def to_utc_midnight(value):
    # type: (Union[int, float, str]) -> Timestamp
    """Convert a day number or code to a datetime at midnight UTC.

    A fractional day number keeps its fraction as a time of day.
    """
    days = decode(value) if isinstance(value, str) else value
    check_number(days)
    try:
        if not isinstance(days, int):
            days = float(days)
        return EPOCH + TimeDelta(seconds=days * TICKSDAY)
    except (OverflowError, ValueError):
        # beyond what datetime can hold, or NaN
        raise RangeError()
