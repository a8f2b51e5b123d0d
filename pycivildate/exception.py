"""Classes containing the exceptions for reporting errors.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__all__ = ['Error', 'InterfaceError', 'DataError', 'RangeError',
           'CodeFormatError', 'CalendarValidityError']


class Error(Exception):
    def __init__(self, value):
        Exception.__init__(self, value)
        self.__value = value

    def __str__(self):
        return str(self.__value)


class InterfaceError(Error, TypeError):
    def __init__(self, value):
        Error.__init__(self, value)


class DataError(Error, ValueError):
    def __init__(self, value):
        Error.__init__(self, value)


class RangeError(DataError):
    def __init__(self, value='Days out of range'):
        DataError.__init__(self, value)


class CodeFormatError(DataError):
    def __init__(self, value='Invalid civil-date code'):
        DataError.__init__(self, value)


class CalendarValidityError(DataError):
    def __init__(self, value='Invalid date'):
        DataError.__init__(self, value)
