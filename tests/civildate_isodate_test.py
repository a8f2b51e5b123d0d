"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import datetime

import pytest

from pycivildate import format_iso, parse_iso, match_iso
from pycivildate.exception import (InterfaceError, CodeFormatError,
                                   CalendarValidityError)

from .mock_tzs import UTC, Chicago, Tokyo


class TestFormatIso(object):

    def test_local_fields(self):
        instant = datetime.datetime(2025, 12, 24, 3, 0, 0, tzinfo=UTC)

        assert format_iso(instant, UTC) == '2025-12-24'
        assert format_iso(instant, Chicago) == '2025-12-23'
        assert format_iso(instant, Tokyo) == '2025-12-24'

    def test_zero_padding(self):
        assert format_iso(datetime.date(2025, 1, 5)) == '2025-01-05'
        assert format_iso(datetime.datetime(1973, 7, 20, 23, 59)) == '1973-07-20'

    def test_leap_day(self):
        assert format_iso(datetime.date(2024, 2, 29)) == '2024-02-29'

    def test_not_a_moment(self):
        with pytest.raises(InterfaceError):
            format_iso('2025-12-23')


class TestParseIso(object):

    def test_valid(self):
        assert parse_iso('2025-12-23') == 20445
        assert parse_iso('1973-07-20') == 1296
        assert parse_iso('1970-01-01') == 0

    def test_leap_years(self):
        assert parse_iso('2024-02-29') == 19782
        assert parse_iso('2000-02-29') == 11016
        with pytest.raises(CalendarValidityError, match="Invalid date"):
            parse_iso('2023-02-29')
        with pytest.raises(CalendarValidityError, match="Invalid date"):
            parse_iso('1900-02-29')

    def test_early_years(self):
        """Years below 100 are not shifted into the 1900s."""
        assert parse_iso('0000-02-29') == -719469
        assert parse_iso('0001-01-01') == -719162
        epoch = datetime.date(1970, 1, 1)
        assert parse_iso('0099-01-01') == (datetime.date(99, 1, 1) - epoch).days
        with pytest.raises(CalendarValidityError):
            parse_iso('0001-02-29')

    def test_day_past_end_of_month(self):
        for value in ['2025-02-30', '2025-04-31', '2025-06-31', '2025-11-31']:
            with pytest.raises(CalendarValidityError, match="Invalid date"):
                parse_iso(value)

    def test_wrong_shape(self):
        for value in ['invalid', '2025/01/01', '2025-1-01', '25-01-01',
                      '2025-13-01', '2025-00-10', '2025-01-32', '2025-01-00',
                      '2025-12-23\n', ' 2025-12-23', '2025-12-23T00:00',
                      '٢٠٢٥-١٢-٢٣', '']:
            with pytest.raises(CodeFormatError, match="Invalid civil-date code"):
                parse_iso(value)

    def test_match_iso(self):
        assert match_iso('2025-02-30') == (2025, 2, 30)
        assert match_iso('FRX') is None
        with pytest.raises(InterfaceError):
            match_iso(20445)
