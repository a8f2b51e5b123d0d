"""A module for the compact radix 36 form of a civil date.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

A day number is written as exactly three radix 36 digits, upper case,
zero filled.  Three digits give the range:
  - 1296  (base 36 "100") 1973-07-20
  - 46655 (base 36 "ZZZ") 2097-09-26
so codes of the same length sort in the same order as the days.

Exported Functions:
encode -- Converts a day number to a code.
decode -- Converts a code to a day number.
check_days -- Raises RangeError if a day number is not encodable.
"""

__all__ = ['MIN_DAYS', 'MAX_DAYS', 'CODE_LENGTH', 'encode', 'decode',
           'check_days']

import decimal
import math
import numbers
import re

from .exception import InterfaceError, RangeError, CodeFormatError

MIN_DAYS = 1296
MAX_DAYS = 46655
CODE_LENGTH = 3

DIGITS = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ'
CODE_REGEX = re.compile(r'[0-9A-Za-z]{3}', re.ASCII)


def check_number(days):
    # bool is an int, but True is not a day
    if isinstance(days, bool) or \
            not isinstance(days, (numbers.Real, decimal.Decimal)):
        raise InterfaceError('Day number must be a real number, not %s'
                             % (type(days).__name__))


def _is_finite(days):
    # math.isfinite() overflows on very large ints
    if isinstance(days, numbers.Integral):
        return True
    if isinstance(days, decimal.Decimal):
        return days.is_finite()
    return math.isfinite(days)


def check_days(days):
    """Raise RangeError unless MIN_DAYS <= days <= MAX_DAYS.

    NaN is never in range.
    """
    check_number(days)
    if not _is_finite(days) or not MIN_DAYS <= days <= MAX_DAYS:
        raise RangeError()
    return days


def encode(days):
    # type: (float) -> str
    """Encode a day number as a 3 character radix 36 string.

    A fractional day number is floored before it is range checked,
    so 20445.9 encodes the same as 20445.
    """
    check_number(days)
    if not _is_finite(days):
        raise RangeError()
    days = check_days(int(math.floor(days)))

    digits = []
    while days:
        days, rem = divmod(days, 36)
        digits.append(DIGITS[rem])
    return ''.join(reversed(digits)).rjust(CODE_LENGTH, '0')


def decode(code):
    # type: (str) -> int
    """Decode a 3 character radix 36 string, in either case, to a day number.

    Only the shape of the code is checked: "000" through "0ZZ" decode to
    day numbers below MIN_DAYS without error.
    """
    if not isinstance(code, str):
        raise InterfaceError('Civil-date code must be a string, not %s'
                             % (type(code).__name__))
    if CODE_REGEX.fullmatch(code) is None:
        raise CodeFormatError()
    return int(code, 36)
