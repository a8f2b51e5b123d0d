"""A module for the CivilDate value type.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
CivilDate -- A calendar day independent of time of day and time zone.
"""

__all__ = ['CivilDate']

import functools
from datetime import datetime as Timestamp, date as Date

try:
    from typing import Optional, Union  # pylint: disable=unused-import
except ImportError:
    pass

from .exception import CalendarValidityError
from .calendar import ymd2day, is_valid_ymd
from .codec import check_days, encode, decode
from .datatype import LOCALZONE, from_local, timezone_aware, to_utc_midnight
from .isodate import match_iso, format_iso
from .clock import Clock, SYSTEM_CLOCK  # pylint: disable=unused-import


@functools.total_ordering
class CivilDate(object):
    """A calendar day, stored as the number of days since 1970-01-01.

    CivilDate() -- today, according to clock.
    CivilDate(date or datetime) -- the local date of the value.
    CivilDate(days) -- a day number, stored as given.
    CivilDate('2025-12-23') -- an ISO 8601 date.
    CivilDate('FRX') -- a 3 character radix 36 code, in either case.

    A string is tried as an ISO date first and only read as a code if it
    does not have the ISO shape at all.  Whatever the source, the day
    number must be between 1296 (1973-07-20) and 46655 (2097-09-26).

    Public Functions:
    to_date -- The day as a datetime at midnight UTC.
    date -- The day as a datetime.date.
    isoformat -- The day as YYYY-MM-DD.

    Special Function:
    value (getter) -- The day number.
    str() -- The 3 character code.
    """

    __slots__ = ('__value',)

    def __init__(self, value=None, clock=None):
        # type: (Optional[Union[int, float, str, Date]], Optional[Clock]) -> None
        if clock is None:
            clock = SYSTEM_CLOCK

        if value is None:
            days = from_local(clock.now(), clock.zone)
        elif isinstance(value, Date):
            days = from_local(value, clock.zone)
        elif isinstance(value, str):
            days = self._parse(value)
        else:
            # not floored: CivilDate(20445.5).value is 20445.5
            days = value

        self.__value = check_days(days)

    @staticmethod
    def _parse(value):
        # type: (str) -> int
        ymd = match_iso(value)
        if ymd is None:
            return decode(value)
        if not is_valid_ymd(*ymd):
            raise CalendarValidityError()
        return ymd2day(*ymd)

    @property
    def value(self):
        # type: () -> Union[int, float]
        """The number of days since 1970-01-01."""
        return self.__value

    def to_date(self):
        # type: () -> Timestamp
        """Return the day as an aware datetime at midnight UTC."""
        return to_utc_midnight(self.__value)

    def date(self):
        # type: () -> Date
        return self.to_date().date()

    def isoformat(self):
        # type: () -> str
        """Return the day as YYYY-MM-DD.

        The UTC fields of to_date() are reused as local wall-clock fields,
        so the result does not depend on the host time zone.
        """
        midnight = self.to_date()
        local = timezone_aware(Timestamp(midnight.year, midnight.month,
                                         midnight.day), LOCALZONE)
        return format_iso(local, LOCALZONE)

    def __str__(self):
        return encode(self.__value)

    def __repr__(self):
        return 'CivilDate(%r)' % (self.__value,)

    def __eq__(self, other):
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self.__value == other.__value

    def __lt__(self, other):
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self.__value < other.__value

    def __hash__(self):
        return hash(self.__value)
