"""Sources of the current moment.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

"Today" depends on both the current instant and the local time zone.
A Clock carries both so that CivilDate() can be given a fixed one in
tests instead of reading the host's.
"""

__all__ = ['Clock', 'FixedClock', 'SYSTEM_CLOCK']

import logging
from datetime import datetime as Timestamp
from datetime import tzinfo

try:
    from typing import Optional, Union  # pylint: disable=unused-import
except ImportError:
    pass

from .exception import InterfaceError
from .datatype import LOCALZONE, LOCALZONE_NAME, get_timezone, timezone_aware

_log = logging.getLogger("pycivildate")


class Clock(object):
    """The host clock, read in a given time zone.

    :param timezone: None for the host zone, an IANA zone name, or a tzinfo.
    """

    __zone = None       # type: tzinfo
    __zone_name = None  # type: str

    def __init__(self, timezone=None):
        # type: (Optional[Union[str, tzinfo]]) -> None
        if timezone is None:
            self.__zone = LOCALZONE
            self.__zone_name = LOCALZONE_NAME
        elif isinstance(timezone, str):
            self.__zone = get_timezone(timezone)
            self.__zone_name = timezone
        elif isinstance(timezone, tzinfo):
            self.__zone = timezone
            self.__zone_name = (getattr(timezone, 'key', None)
                                or getattr(timezone, 'zone', None)
                                or str(timezone))
        else:
            raise InterfaceError('Invalid TimeZone ' + repr(timezone))
        _log.debug("clock time zone: %s", self.__zone_name)

    @property
    def zone(self):
        # type: () -> tzinfo
        """The tzinfo local dates are read in."""
        return self.__zone

    @property
    def zone_name(self):
        # type: () -> str
        return self.__zone_name

    def now(self):
        # type: () -> Timestamp
        """Return the current moment as an aware datetime in zone."""
        return Timestamp.now(self.__zone)

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self.__zone_name)


class FixedClock(Clock):
    """A clock that is stopped at one moment.

    A naive moment is taken to be wall-clock time in the clock's zone.
    """

    def __init__(self, moment, timezone=None):
        # type: (Timestamp, Optional[Union[str, tzinfo]]) -> None
        super(FixedClock, self).__init__(timezone)
        if not isinstance(moment, Timestamp):
            raise InterfaceError('FixedClock needs a datetime, not %s'
                                 % (type(moment).__name__))
        if moment.tzinfo is None:
            moment = timezone_aware(moment, self.zone)
        self.__moment = moment

    def now(self):
        # type: () -> Timestamp
        return self.__moment


SYSTEM_CLOCK = Clock()
