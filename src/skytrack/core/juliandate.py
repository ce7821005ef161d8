import json
import datetime
from math import floor

from skytrack.core.calendar import (jdFromGregorianCalendar, jdFromJulianCalendar, jdFromTimestamp, calendarFromJd,
                                    timestampFromJd, julianCentury)
from skytrack.core.deltat import estimateDeltaT, jdeToJd
from skytrack.util.constants import SECONDS_PER_DAY


class Moment:
    """A Moment represents an instant as a Julian day number in universal time (jd) together with the delta T offset
    in seconds to dynamical time. The Julian ephemeris day (jde) is always jd + deltaT / 86400. If deltaT is omitted it
    is estimated from jd, an explicit value of 0 is kept as is. Instances are immutable, every derived moment is a new
    object."""

    __slots__ = '_jd', '_deltaT', '_jde'

    def __init__(self, jd: float, deltaT: float = None):
        if deltaT is None:
            deltaT = estimateDeltaT(jd)

        self._jd = jd
        self._deltaT = deltaT
        self._jde = jd + deltaT / SECONDS_PER_DAY

    @classmethod
    def fromGregorian(cls, year: int, month: int, day: float, deltaT: float = None) -> 'Moment':
        """Creates a Moment from a proleptic Gregorian calendar date, the day may be fractional."""

        return cls(jdFromGregorianCalendar(year, month, day), deltaT)

    @classmethod
    def fromJulian(cls, year: int, month: int, day: float, deltaT: float = None) -> 'Moment':
        """Creates a Moment from a Julian calendar date, the day may be fractional."""

        return cls(jdFromJulianCalendar(year, month, day), deltaT)

    @classmethod
    def fromJde(cls, jde: float, deltaT: float = None) -> 'Moment':
        """Creates a Moment from a Julian ephemeris day. If deltaT is None it is estimated from jde."""

        if deltaT is None:
            deltaT = estimateDeltaT(jde)
        return cls(jdeToJd(jde, deltaT), deltaT)

    @classmethod
    def fromDatetime(cls, date: datetime.datetime, deltaT: float = None) -> 'Moment':
        """Creates a Moment from a Python datetime.datetime instance. Naive datetimes are treated as UTC."""

        return cls(jdFromTimestamp(date), deltaT)

    def __str__(self) -> str:
        year, month, day = calendarFromJd(self._jd)
        return f'{round(self._jd, 6)} --- {year}/{month:02}/{day:09.6f} UT'

    def __repr__(self) -> str:
        return f'Moment({self._jd}, {self._deltaT})'

    def toDict(self) -> dict:
        """Returns a dictionary of the Moment to create json formats of other types containing a Moment."""

        return {"jd": self._jd, "deltaT": self._deltaT}

    def toJson(self) -> str:
        """Returns a string of the Moment in json format."""

        return json.dumps(self, default=lambda o: o.toDict())

    # Moments are ordered and compared by their universal time.
    def __sub__(self, other: 'Moment') -> float:
        if isinstance(other, Moment):
            return self._jd - other._jd
        return NotImplemented

    def __eq__(self, other: 'Moment') -> bool:
        if isinstance(other, Moment):
            return self._jd == other._jd and self._deltaT == other._deltaT
        return NotImplemented

    def __ne__(self, other: 'Moment') -> bool:
        if isinstance(other, Moment):
            return not self == other
        return NotImplemented

    def __lt__(self, other: 'Moment') -> bool:
        if isinstance(other, Moment):
            return self._jd < other._jd
        return NotImplemented

    def __le__(self, other: 'Moment') -> bool:
        if isinstance(other, Moment):
            return self._jd <= other._jd
        return NotImplemented

    def __gt__(self, other: 'Moment') -> bool:
        if isinstance(other, Moment):
            return self._jd > other._jd
        return NotImplemented

    def __ge__(self, other: 'Moment') -> bool:
        if isinstance(other, Moment):
            return self._jd >= other._jd
        return NotImplemented

    def __hash__(self):
        return hash((self._jd, self._deltaT))

    def __reduce__(self):
        return self.__class__, (self._jd, self._deltaT)

    # read-only properties
    @property
    def jd(self) -> float:
        return self._jd

    @property
    def deltaT(self) -> float:
        return self._deltaT

    @property
    def jde(self) -> float:
        return self._jde

    def jdJ2000Century(self) -> float:
        """Julian centuries of universal time since J2000."""

        return julianCentury(self._jd)

    def jdeJ2000Century(self) -> float:
        """Julian centuries of dynamical time since J2000."""

        return julianCentury(self._jde)

    def startOfDay(self) -> 'Moment':
        """Returns a new Moment at 0h of the day containing the ephemeris time, keeping deltaT."""

        return Moment(floor(self._jde - 0.5) + 0.5, self._deltaT)

    def future(self, days: int | float) -> 'Moment':
        """Create a new Moment in the future or past relative to the calling instance in solar days. A positive value
        moves forward in time, negative is backward. The delta T value is kept."""

        return Moment(self._jd + days, self._deltaT)

    def dayFraction(self) -> float:
        """Fraction of the universal time day elapsed since 0h."""

        return (self._jd - 0.5) - floor(self._jd - 0.5)

    def toCalendar(self) -> (int, int, float):
        """Returns the (year, month, fractional day) calendar date of the universal time."""

        return calendarFromJd(self._jd)

    def toDatetime(self) -> datetime.datetime:
        """Converts the Moment to an aware UTC datetime.datetime object."""

        return timestampFromJd(self._jd)


def now() -> Moment:
    """Create a Moment with the current time and an estimated delta T."""

    return Moment.fromDatetime(datetime.datetime.now(datetime.timezone.utc))
