import calendar
import logging
from datetime import date, datetime, time, timedelta, tzinfo
from enum import Enum

logger = logging.getLogger(__name__)

DEFAULT_LEAP_YEAR = 2024
DEFAULT_NON_LEAP_YEAR = 2025


class TemporalUnit(Enum):
    MICROS = 'micros'
    MILLIS = 'millis'
    SECONDS = 'seconds'
    MINUTES = 'minutes'
    HOURS = 'hours'
    HALF_DAYS = 'half_days'
    DAYS = 'days'
    WEEKS = 'weeks'
    MONTHS = 'months'
    YEARS = 'years'
    DECADES = 'decades'
    CENTURIES = 'centuries'
    MILLENNIA = 'millennia'
    ERAS = 'eras'
    FOREVER = 'forever'


# A month and a day carry no year, so these units leave the value unchanged
_YEAR_OR_LONGER = {
    TemporalUnit.YEARS,
    TemporalUnit.DECADES,
    TemporalUnit.CENTURIES,
    TemporalUnit.MILLENNIA,
    TemporalUnit.ERAS,
    TemporalUnit.FOREVER,
}

_TIMEDELTA_UNITS = {
    TemporalUnit.MICROS: 'microseconds',
    TemporalUnit.MILLIS: 'milliseconds',
    TemporalUnit.SECONDS: 'seconds',
    TemporalUnit.MINUTES: 'minutes',
    TemporalUnit.HOURS: 'hours',
    TemporalUnit.DAYS: 'days',
    TemporalUnit.WEEKS: 'weeks',
}


def _reference_year(leap: bool) -> int:
    return DEFAULT_LEAP_YEAR if leap else DEFAULT_NON_LEAP_YEAR


class LocalMonthDayTime:
    """A date without a year plus a time of day, e.g. ``--12-03T10:15:30``.

    Arithmetic and comparisons place the value on a reference year, a leap
    one (2024) when ``leap`` is set and 2025 otherwise, so February 29 only
    exists for leap computations.
    """

    def __init__(self, month: int, day: int, local_time: time):
        # Validates the month and day against the leap reference year
        date(DEFAULT_LEAP_YEAR, month, day)
        self.month = month
        self.day = day
        self.local_time = local_time

    @classmethod
    def of(
        cls,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int = 0,
        microsecond: int = 0,
    ) -> 'LocalMonthDayTime':
        return cls(month, day, time(hour, minute, second, microsecond))

    @classmethod
    def now(cls) -> 'LocalMonthDayTime':
        return cls.from_datetime(datetime.now())

    @classmethod
    def from_datetime(cls, value: datetime | None) -> 'LocalMonthDayTime':
        if value is None:
            return cls.now()
        return cls(value.month, value.day, value.time())

    @classmethod
    def of_date_time(cls, local_date: date | None, local_time: time | None) -> 'LocalMonthDayTime':
        local_date = local_date or date.today()
        local_time = local_time or datetime.now().time()
        return cls(local_date.month, local_date.day, local_time)

    @classmethod
    def of_timestamp(cls, timestamp: float | None, tz: tzinfo | None = None) -> 'LocalMonthDayTime':
        if timestamp is None:
            return cls.from_datetime(datetime.now(tz))
        return cls.from_datetime(datetime.fromtimestamp(timestamp, tz))

    @classmethod
    def parse(cls, text: str | None) -> 'LocalMonthDayTime':
        if text is None or text.strip() == '':
            logger.debug('Empty month-day-time, using current time')
            return cls.now()

        body = text.lstrip('-')
        if len(text) - len(body) > 2 or len(body) < 7 or body[5] != 'T':
            raise ValueError(f'Invalid month-day-time: {text!r}')

        month, day = body[0:2], body[3:5]
        if body[2] != '-' or not (month.isdecimal() and day.isdecimal()):
            raise ValueError(f'Invalid month-day-time: {text!r}')
        local_time = time.fromisoformat(body[6:])
        if local_time.tzinfo is not None:
            raise ValueError(f'Month-day-time cannot carry a UTC offset: {text!r}')
        return cls(int(month), int(day), local_time)

    def _on_year(self, leap: bool) -> datetime:
        return datetime.combine(date(_reference_year(leap), self.month, self.day), self.local_time)

    def _with(self, value: datetime) -> 'LocalMonthDayTime':
        return LocalMonthDayTime(value.month, value.day, value.time())

    def plus(self, amount: int, unit: TemporalUnit, leap: bool = False) -> 'LocalMonthDayTime':
        if unit is None:
            raise TypeError('Unit cannot be None')

        if unit in _YEAR_OR_LONGER:
            return self
        if unit == TemporalUnit.MONTHS:
            return self.plus_months(amount, leap)
        if unit == TemporalUnit.HALF_DAYS:
            return self._with(self._on_year(leap) + timedelta(hours=12 * amount))
        return self._with(self._on_year(leap) + timedelta(**{_TIMEDELTA_UNITS[unit]: amount}))

    def minus(self, amount: int, unit: TemporalUnit, leap: bool = False) -> 'LocalMonthDayTime':
        return self.plus(-amount, unit, leap)

    def plus_microseconds(self, amount: int, leap: bool = False) -> 'LocalMonthDayTime':
        return self.plus(amount, TemporalUnit.MICROS, leap)

    def plus_seconds(self, amount: int, leap: bool = False) -> 'LocalMonthDayTime':
        return self.plus(amount, TemporalUnit.SECONDS, leap)

    def plus_minutes(self, amount: int, leap: bool = False) -> 'LocalMonthDayTime':
        return self.plus(amount, TemporalUnit.MINUTES, leap)

    def plus_hours(self, amount: int, leap: bool = False) -> 'LocalMonthDayTime':
        return self.plus(amount, TemporalUnit.HOURS, leap)

    def plus_days(self, amount: int, leap: bool = False) -> 'LocalMonthDayTime':
        return self.plus(amount, TemporalUnit.DAYS, leap)

    def plus_weeks(self, amount: int, leap: bool = False) -> 'LocalMonthDayTime':
        return self.plus(amount, TemporalUnit.WEEKS, leap)

    def plus_months(self, amount: int, leap: bool = False) -> 'LocalMonthDayTime':
        months = _reference_year(leap) * 12 + (self.month - 1) + amount
        year, month = divmod(months, 12)
        month += 1
        # Day is clamped to the end of a shorter month
        day = min(self.day, calendar.monthrange(year, month)[1])
        return LocalMonthDayTime(month, day, self.local_time)

    def minus_microseconds(self, amount: int, leap: bool = False) -> 'LocalMonthDayTime':
        return self.plus_microseconds(-amount, leap)

    def minus_seconds(self, amount: int, leap: bool = False) -> 'LocalMonthDayTime':
        return self.plus_seconds(-amount, leap)

    def minus_minutes(self, amount: int, leap: bool = False) -> 'LocalMonthDayTime':
        return self.plus_minutes(-amount, leap)

    def minus_hours(self, amount: int, leap: bool = False) -> 'LocalMonthDayTime':
        return self.plus_hours(-amount, leap)

    def minus_days(self, amount: int, leap: bool = False) -> 'LocalMonthDayTime':
        return self.plus_days(-amount, leap)

    def minus_weeks(self, amount: int, leap: bool = False) -> 'LocalMonthDayTime':
        return self.plus_weeks(-amount, leap)

    def minus_months(self, amount: int, leap: bool = False) -> 'LocalMonthDayTime':
        return self.plus_months(-amount, leap)

    def _compare_with(self, other: 'LocalMonthDayTime | None', first_leap: bool, second_leap: bool):
        if other is None:
            other = LocalMonthDayTime.now()
        return self._on_year(first_leap), other._on_year(second_leap)

    def is_after(self, other: 'LocalMonthDayTime | None', first_leap: bool = False, second_leap: bool = False) -> bool:
        first, second = self._compare_with(other, first_leap, second_leap)
        return first > second

    def is_before(self, other: 'LocalMonthDayTime | None', first_leap: bool = False, second_leap: bool = False) -> bool:
        first, second = self._compare_with(other, first_leap, second_leap)
        return first < second

    def is_equal(self, other: 'LocalMonthDayTime | None', first_leap: bool = False, second_leap: bool = False) -> bool:
        first, second = self._compare_with(other, first_leap, second_leap)
        return first == second

    def to_datetime(self, year: int | None = None) -> datetime:
        return datetime.combine(self.to_date(year), self.local_time)

    def to_date(self, year: int | None = None) -> date:
        return date(year if year is not None else date.today().year, self.month, self.day)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LocalMonthDayTime):
            return NotImplemented
        return (self.month, self.day, self.local_time) == (other.month, other.day, other.local_time)

    def __hash__(self) -> int:
        return hash((self.month, self.day, self.local_time))

    def __str__(self) -> str:
        t = self.local_time
        if t.microsecond:
            clock = t.isoformat(timespec='microseconds')
        elif t.second:
            clock = t.isoformat(timespec='seconds')
        else:
            clock = t.isoformat(timespec='minutes')
        return f'--{self.month:02d}-{self.day:02d}T{clock}'

    def __repr__(self) -> str:
        return f'LocalMonthDayTime({str(self)!r})'
