"""Rise, transit and set times of a body for an observer on the Earth, (15) p. 101.

All times are in seconds of universal time. The functions don't take the day of interest itself, only values computed
from it: the apparent sidereal time at Greenwich at 0h UT (Th0) and the positions of the body at 0h dynamical time."""

import logging
from dataclasses import dataclass
from math import sin, cos, acos, asin, floor, pi

from skytrack.core.coordinates import EclipticCoordinate, EquatorialCoordinate
from skytrack.core.interpolation import newLen3, interpolateByX
from skytrack.core.juliandate import Moment
from skytrack.exceptions import InvalidArgument
from skytrack.util.constants import SECONDS_PER_DAY, SIDEREAL_DEGREES_PER_DAY, MEAN_REFRACTION, TWOPI
from skytrack.util.helpers import positiveMod, radiansToSeconds, secondsToRadians

logger = logging.getLogger(__name__)

_HALF_DAY = SECONDS_PER_DAY / 2
_SIDEREAL_RATIO = SIDEREAL_DEGREES_PER_DAY / 360


@dataclass(frozen=True)
class EventTime:
    """An event at seconds in [0, 86400) of the day dayOffset days from the day of interest."""
    seconds: float
    dayOffset: int


@dataclass(frozen=True)
class RiseSetTimes:
    transit: EventTime
    rise: EventTime
    set: EventTime


@dataclass(frozen=True)
class NoEvent:
    """Result for a body that doesn't cross the standard altitude on the day of interest. The transit still occurs
    and is kept."""
    cosH0: float
    transit: EventTime

    @property
    def alwaysAbove(self) -> bool:
        return self.cosH0 < -1

    @property
    def alwaysBelow(self) -> bool:
        return self.cosH0 > 1


def standardAltitudeLunar(parallax: float) -> float:
    """Standard altitude of the Moon in radians for its horizontal parallax."""

    return 0.7275 * parallax - MEAN_REFRACTION


def dynamicalMidnight(day: Moment, offset: int = 0) -> Moment:
    """Returns the Moment at 0h dynamical time of the day offset days from the day starting at the 0h UT Moment
    day. Body positions for the solver are taken at these instants."""

    return Moment.fromJde(day.jd + offset, day.deltaT)


def _cosHourAngle(lat: float, h0: float, dec: float) -> float:
    # (15.1) p. 102
    return (sin(h0) - sin(lat) * sin(dec)) / (cos(lat) * cos(dec))


def circumpolar(lat: float, h0: float, dec: float) -> float | None:
    """Returns the cosine of the local hour angle of rising or setting, or None if the body doesn't cross the standard
    altitude h0. Exactly ±1 is a grazing crossing and is returned."""

    cosH0 = _cosHourAngle(lat, h0, dec)
    if cosH0 < -1 or cosH0 > 1:
        return None
    return cosH0


def _eventTime(m: float) -> EventTime:
    return EventTime(positiveMod(m, SECONDS_PER_DAY), floor(m / SECONDS_PER_DAY))


def _reducedEventTime(m: float) -> EventTime:
    # Approximate times are angles in disguise, only their value modulo a day is meaningful.
    return EventTime(positiveMod(m, SECONDS_PER_DAY), 0)


def approxTransit(observer: EclipticCoordinate, Th0: float, eq: EquatorialCoordinate) -> float:
    """Approximate transit time in seconds. The value is not reduced, a negative value means the transit was the day
    before."""

    # (15.2) p. 102
    return radiansToSeconds(eq.ra + observer.lng) - Th0


def approxTimes(observer: EclipticCoordinate, h0: float, Th0: float,
                eq: EquatorialCoordinate) -> RiseSetTimes | NoEvent:
    """Approximate transit, rise and set times from the position of the body at 0h dynamical time. Each time is reduced
    into the day of interest, so every day offset is 0.

    Args:
        observer: Location of the observer, longitude positive westward.
        h0: Standard altitude of the body in radians.
        Th0: Apparent sidereal time at 0h UT at Greenwich in seconds.
        eq: Right ascension and declination of the body.

    Returns:
        The three event times, or NoEvent if the body doesn't rise or set."""

    mt = approxTransit(observer, Th0, eq)
    cosH0 = _cosHourAngle(observer.lat, h0, eq.dec)

    if cosH0 < -1 or cosH0 > 1:
        logger.debug('circumpolar body, cos H0 = %s', cosH0)
        return NoEvent(cosH0, _reducedEventTime(mt))

    H0 = radiansToSeconds(acos(cosH0))

    return RiseSetTimes(_reducedEventTime(mt), _reducedEventTime(mt - H0), _reducedEventTime(mt + H0))


def _unwrapRightAscension(ra) -> list:
    # Keeps consecutive samples continuous when the right ascension passes 0h.
    unwrapped = [ra[0]]
    for value in ra[1:]:
        diff = value - unwrapped[-1]
        if diff > pi:
            value -= TWOPI
        elif diff < -pi:
            value += TWOPI
        unwrapped.append(value)

    if unwrapped != list(ra):
        logger.debug('right ascension samples unwrapped from %s to %s', ra, unwrapped)

    return unwrapped


def times(observer: EclipticCoordinate, deltaT: float, h0: float, Th0: float,
          eq3: list[EquatorialCoordinate]) -> RiseSetTimes | NoEvent:
    """Transit, rise and set times with a higher accuracy than approxTimes(). Each approximate time is corrected
    once with the body's position interpolated at that time.

    Args:
        observer: Location of the observer, longitude positive westward.
        deltaT: Delta T in seconds.
        h0: Standard altitude of the body in radians.
        Th0: Apparent sidereal time at 0h UT at Greenwich in seconds.
        eq3: Positions of the body at 0h dynamical time of the day before, the day of interest and the day after.

    Returns:
        The three event times, or NoEvent if the body doesn't rise or set."""

    if len(eq3) != 3:
        raise InvalidArgument(f'three positions are required, not {len(eq3)}')

    approx = approxTimes(observer, h0, Th0, eq3[1])
    if isinstance(approx, NoEvent):
        return approx

    raTable = newLen3(-SECONDS_PER_DAY, SECONDS_PER_DAY, _unwrapRightAscension([eq.ra for eq in eq3]))
    decTable = newLen3(-SECONDS_PER_DAY, SECONDS_PER_DAY, [eq.dec for eq in eq3])

    sLat, cLat = sin(observer.lat), cos(observer.lat)

    def correctTransit(event: EventTime) -> EventTime:
        m = event.dayOffset * SECONDS_PER_DAY + event.seconds
        th0 = Th0 + m * _SIDEREAL_RATIO
        ra = interpolateByX(raTable, m + deltaT)
        # hour angle in seconds within [-43200, 43200)
        H = positiveMod(th0 - radiansToSeconds(observer.lng + ra) + _HALF_DAY, SECONDS_PER_DAY) - _HALF_DAY
        return _eventTime(m - H)

    def correctRiseSet(event: EventTime) -> EventTime:
        m = event.dayOffset * SECONDS_PER_DAY + event.seconds
        th0 = positiveMod(Th0 + m * _SIDEREAL_RATIO, SECONDS_PER_DAY)
        ut = m + deltaT
        ra = interpolateByX(raTable, ut)
        dec = interpolateByX(decTable, ut)
        H = secondsToRadians(th0) - (observer.lng + ra)
        sDec, cDec = sin(dec), cos(dec)

        h = asin(sLat * sDec + cLat * cDec * cos(H))
        denominator = cDec * cLat * sin(H)
        # a grazing body at its meridian has no altitude gradient to correct with
        if denominator == 0:
            return event
        deltaM = (h - h0) / denominator
        return _eventTime(m + radiansToSeconds(deltaM))

    return RiseSetTimes(correctTransit(approx.transit), correctRiseSet(approx.rise), correctRiseSet(approx.set))

