"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import datetime
import logging

import pytest

from pycivildate import civildate, FixedClock

from .mock_tzs import Chicago

_log = logging.getLogger("pycivildatetest")


@pytest.fixture
def chicago_clock():
    # type: () -> FixedClock
    """A clock stopped at 2023-03-14 22:15:37 in Chicago (CDT, UTC-5)."""
    return FixedClock(datetime.datetime(2023, 3, 14, 22, 15, 37), Chicago)


@pytest.fixture
def system_clock(monkeypatch, chicago_clock):
    """Replace the default clock CivilDate() reads."""
    _log.info("Using %r as the system clock", chicago_clock)
    monkeypatch.setattr(civildate, 'SYSTEM_CLOCK', chicago_clock)
    return chicago_clock
