import unittest
from datetime import date, datetime, time, timezone

import pytest

from tputils.model.local_month_day_time import LocalMonthDayTime, TemporalUnit


class TestLocalMonthDayTime:
    def test_invalid_day_raises(self):
        with pytest.raises(ValueError):
            LocalMonthDayTime.of(2, 30, 0, 0)

    def test_february_29_is_valid(self):
        value = LocalMonthDayTime.of(2, 29, 12, 0)

        assert value.day == 29

    def test_from_datetime(self):
        value = LocalMonthDayTime.from_datetime(datetime(2023, 7, 4, 12, 30))

        assert value == LocalMonthDayTime.of(7, 4, 12, 30)

    def test_of_date_time(self):
        value = LocalMonthDayTime.of_date_time(date(2020, 2, 29), time(1, 2))

        assert value == LocalMonthDayTime.of(2, 29, 1, 2)

    def test_of_timestamp(self):
        value = LocalMonthDayTime.of_timestamp(0, timezone.utc)

        assert value == LocalMonthDayTime.of(1, 1, 0, 0)

    def test_now_is_not_none(self):
        assert LocalMonthDayTime.now() is not None
        assert LocalMonthDayTime.from_datetime(None) is not None

    class TestFormatting:
        def test_str_with_seconds(self):
            assert str(LocalMonthDayTime.of(12, 3, 10, 15, 30)) == '--12-03T10:15:30'

        def test_str_without_seconds(self):
            assert str(LocalMonthDayTime.of(1, 5, 9, 0)) == '--01-05T09:00'

        def test_str_with_microseconds(self):
            value = LocalMonthDayTime.of(1, 5, 9, 0, 0, 500)

            assert str(value) == '--01-05T09:00:00.000500'

    class TestParse:
        def test_parse_with_prefix(self):
            assert LocalMonthDayTime.parse('--12-03T10:15:30') == LocalMonthDayTime.of(12, 3, 10, 15, 30)

        def test_parse_without_prefix(self):
            assert LocalMonthDayTime.parse('12-03T10:15') == LocalMonthDayTime.of(12, 3, 10, 15)

        def test_parse_single_dash(self):
            assert LocalMonthDayTime.parse('-12-03T10:15') == LocalMonthDayTime.of(12, 3, 10, 15)

        def test_round_trip_through_str(self):
            value = LocalMonthDayTime.of(6, 15, 23, 59, 58, 123456)

            assert LocalMonthDayTime.parse(str(value)) == value

        def test_blank_is_now(self):
            assert LocalMonthDayTime.parse('  ') is not None
            assert LocalMonthDayTime.parse(None) is not None

        def test_utc_offset_is_rejected(self):
            with pytest.raises(ValueError, match='UTC offset'):
                LocalMonthDayTime.parse('--12-03T10:15+01:00')

        @pytest.mark.parametrize(
            'text', ['---12-03T10:15', '12/03T10:15', '12-03 10:15', '12-03T', 'xx-03T10:15']
        )
        def test_invalid_text_raises(self, text):
            with pytest.raises(ValueError):
                LocalMonthDayTime.parse(text)

    class TestArithmetic:
        def test_plus_hours_wraps_year(self):
            value = LocalMonthDayTime.of(12, 31, 23, 0)

            assert value.plus_hours(2) == LocalMonthDayTime.of(1, 1, 1, 0)

        def test_minus_days_depends_on_leap(self):
            value = LocalMonthDayTime.of(3, 1, 0, 0)

            assert value.minus_days(1) == LocalMonthDayTime.of(2, 28, 0, 0)
            assert value.minus_days(1, leap=True) == LocalMonthDayTime.of(2, 29, 0, 0)

        def test_february_29_needs_leap_year(self):
            value = LocalMonthDayTime.of(2, 29, 12, 0)

            assert value.plus_days(1, leap=True) == LocalMonthDayTime.of(3, 1, 12, 0)
            with pytest.raises(ValueError):
                value.plus_days(1)

        def test_plus_months_clamps_day(self):
            value = LocalMonthDayTime.of(1, 31, 8, 0)

            assert value.plus_months(1) == LocalMonthDayTime.of(2, 28, 8, 0)
            assert value.plus_months(1, leap=True) == LocalMonthDayTime.of(2, 29, 8, 0)
            assert value.plus_months(13) == LocalMonthDayTime.of(2, 28, 8, 0)

        def test_minus_months(self):
            value = LocalMonthDayTime.of(3, 31, 8, 0)

            assert value.minus_months(1) == LocalMonthDayTime.of(2, 28, 8, 0)
            assert value.minus_months(3) == LocalMonthDayTime.of(12, 31, 8, 0)

        def test_minus_weeks_and_minutes(self):
            value = LocalMonthDayTime.of(1, 10, 0, 30)

            assert value.minus_weeks(1) == LocalMonthDayTime.of(1, 3, 0, 30)
            assert value.minus_minutes(31) == LocalMonthDayTime.of(1, 9, 23, 59)

        def test_plus_units(self):
            value = LocalMonthDayTime.of(1, 1, 6, 0)

            assert value.plus(1, TemporalUnit.HALF_DAYS) == LocalMonthDayTime.of(1, 1, 18, 0)
            assert value.plus(1500, TemporalUnit.MILLIS) == LocalMonthDayTime.of(1, 1, 6, 0, 1, 500000)
            assert value.plus_seconds(3600) == LocalMonthDayTime.of(1, 1, 7, 0)
            assert value.minus(1, TemporalUnit.MICROS) == LocalMonthDayTime.of(1, 1, 5, 59, 59, 999999)

        @pytest.mark.parametrize(
            'unit', [TemporalUnit.YEARS, TemporalUnit.CENTURIES, TemporalUnit.FOREVER]
        )
        def test_year_units_leave_value_unchanged(self, unit):
            value = LocalMonthDayTime.of(5, 5, 5, 5)

            assert value.plus(3, unit) == value

        def test_none_unit_raises(self):
            with pytest.raises(TypeError):
                LocalMonthDayTime.of(1, 1, 0, 0).plus(1, None)

    class TestComparison:
        def test_is_after_and_before(self):
            march = LocalMonthDayTime.of(3, 1, 0, 0)
            february = LocalMonthDayTime.of(2, 28, 23, 59)

            assert march.is_after(february)
            assert february.is_before(march)
            assert not march.is_before(february)

        def test_is_equal(self):
            value = LocalMonthDayTime.of(4, 1, 12, 0)

            assert value.is_equal(LocalMonthDayTime.of(4, 1, 12, 0))
            assert not value.is_equal(LocalMonthDayTime.of(4, 1, 12, 0), first_leap=True)

    def test_to_datetime(self):
        value = LocalMonthDayTime.of(12, 3, 10, 15, 30)

        assert value.to_datetime(2020) == datetime(2020, 12, 3, 10, 15, 30)
        assert value.to_date(2021) == date(2021, 12, 3)
        assert value.to_date().year == date.today().year


if __name__ == '__main__':
    unittest.main()
