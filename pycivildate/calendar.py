"""A module to calculate date from number of days from 1/1/1970.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Calendar functions for computing year,month,day relative to number
of days from unix epoch (1/1/1970), using the proleptic Gregorian
calendar for every date, the same calendar python datetime uses.

ymd2day() does not reject a day of month that is too large for the
month: the Julian Day arithmetic simply rolls it forward, so
2023-02-30 becomes 2023-03-02.  Use is_valid_ymd() to find out
whether a triple names a day that exists.
"""
from typing import Tuple  # pylint: disable=unused-import
import jdcal

JD_EPOCH = sum(jdcal.gcal2jd(1970, 1, 1))


def ymd2day(year, month, day):
    # type: (int, int, int) -> int
    """
    Converts given year, month, day to number of days since unix EPOCH.
      year  - any year, 0000-9999 for ISO strings
      month - 1 - 12
      day   - 1 - 31, overflow rolls into the following month
    """
    jd = sum(jdcal.gcal2jd(year, month, day))
    return int(jd - JD_EPOCH)


def day2ymd(daynum):
    # type: (int) -> Tuple[int, int, int]
    """
    Converts given day number relative to 1970-01-01 to a tuple (year,month,day).

       +----------------------------+
       |  daynum | (year,month,day) |
       |---------+------------------|
       |       0 | (1970,1,1)       |
       |    1296 | (1973,7,20)      |
       |   20445 | (2025,12,23)     |
       |   46655 | (2097,9,26)      |
       +----------------------------+
    """
    y, m, d, _ = jdcal.jd2gcal(daynum, JD_EPOCH)
    return y, m, d


def is_valid_ymd(year, month, day):
    # type: (int, int, int) -> bool
    """Return True if (year, month, day) survives a round trip unchanged."""
    return day2ymd(ymd2day(year, month, day)) == (year, month, day)
