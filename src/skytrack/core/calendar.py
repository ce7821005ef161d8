import datetime
from math import floor

from skytrack.util.constants import GREGORIAN_REFORM, GREGORIAN_REFORM_JD, SECONDS_PER_DAY, J2000, JULIAN_CENTURY
from skytrack.util.helpers import splitIntFrac


def _monthShift(year: int, month: int) -> (int, int):
    # January and February are counted as months 13 and 14 of the previous year.
    if month == 1 or month == 2:
        return year - 1, month + 12
    return year, month


def jdFromGregorianCalendar(year: int, month: int, day: float) -> float:
    """Converts a proleptic Gregorian calendar date to a Julian day number. The day may have a fractional part.
    Negative years are valid back to JD 0, the result is not valid before JD 0."""

    y, m = _monthShift(year, month)
    a = floor(y / 100)
    b = 2 - a + floor(a / 4)

    # (7.1) p. 61
    return floor(36525 * (y + 4716) / 100) + floor(306 * (m + 1) / 10) + b + day - 1524.5


def jdFromJulianCalendar(year: int, month: int, day: float) -> float:
    """Converts a Julian calendar date to a Julian day number. The day may have a fractional part. Negative years are
    valid back to JD 0, the result is not valid before JD 0."""

    y, m = _monthShift(year, month)

    return floor(36525 * (y + 4716) / 100) + floor(306 * (m + 1) / 10) + day - 1524.5


def jdFromTimestamp(timestamp: datetime.datetime) -> float:
    """Converts a datetime to a Julian day number. Instants at or after 1582 October 15 00:00 UTC are read as Gregorian
    calendar dates, earlier instants as Julian calendar dates. Naive datetimes are treated as UTC."""

    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=datetime.timezone.utc)
    else:
        timestamp = timestamp.astimezone(datetime.timezone.utc)

    seconds = timestamp.hour * 3600 + timestamp.minute * 60 + timestamp.second + timestamp.microsecond / 1e6
    day = timestamp.day + seconds / SECONDS_PER_DAY

    if timestamp < GREGORIAN_REFORM:
        return jdFromJulianCalendar(timestamp.year, timestamp.month, day)
    return jdFromGregorianCalendar(timestamp.year, timestamp.month, day)


def calendarFromJd(jd: float) -> (int, int, float):
    """Converts a Julian day number to a calendar date as (year, month, fractional day). The date is in the Julian
    calendar before the Gregorian reform and in the Gregorian calendar after it."""

    z, f = splitIntFrac(jd + 0.5)
    z = int(z)

    # (7) p. 63
    a = z
    if z >= GREGORIAN_REFORM_JD:
        alpha = floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - floor(alpha / 4)
    b = a + 1524
    c = floor((b - 122.1) / 365.25)
    d = floor(365.25 * c)
    e = floor((b - d) / 30.6001)

    day = b - d - floor(30.6001 * e) + f
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    return year, month, day


def timestampFromJd(jd: float) -> datetime.datetime:
    """Converts a Julian day number to an aware UTC datetime, rounded to the microsecond. Dates before the Gregorian
    reform carry Julian calendar fields, the inverse of jdFromTimestamp()."""

    year, month, day = calendarFromJd(jd)
    whole, fraction = splitIntFrac(day)

    # Round to whole microseconds first, so that a fraction like 0.9999999999 doesn't produce 86400 seconds.
    micros = round(fraction * SECONDS_PER_DAY * 1e6)
    extraDays, micros = divmod(micros, int(SECONDS_PER_DAY * 1e6))
    seconds, micros = divmod(micros, 1000000)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)

    base = datetime.datetime(year, month, int(whole), hours, minutes, seconds, micros, datetime.timezone.utc)
    return base + datetime.timedelta(days=extraDays)


def isLeapYearGregorian(year: int) -> bool:
    """Returns True if the year is a leap year in the Gregorian calendar."""

    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def isLeapYearJulian(year: int) -> bool:
    """Returns True if the year is a leap year in the Julian calendar."""

    return year % 4 == 0


def dayOfYear(year: int, month: int, day: int, leap: bool = None) -> int:
    """Computes the day number within a year. If leap is None, the year is tested with the Gregorian calendar rule."""

    if leap is None:
        leap = isLeapYearGregorian(year)
    k = 1 if leap else 2

    # (7) p. 65
    return int(275 * month / 9) - k * int((month + 9) / 12) + day - 30


def julianCentury(value: float) -> float:
    """Returns the number of Julian centuries since J2000 of a Julian day (or Julian ephemeris day) value. This
    quantity appears as T in most of the time series."""

    # (12.1) p. 87, (22.1) p. 143, (25.1) p. 163
    return (value - J2000) / JULIAN_CENTURY
