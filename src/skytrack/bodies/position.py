from math import sin, cos, radians, floor

from skytrack.bodies._tables import NUTATION
from skytrack.core.calendar import julianCentury
from skytrack.core.juliandate import Moment
from skytrack.util.constants import ARCSEC_TO_RAD, SECONDS_PER_DAY, SIDEREAL_RATE, TWOPI
from skytrack.util.helpers import hornerEval, positiveMod, radiansToSeconds, secondsToRadians

# Fundamental arguments of the nutation series in degrees, (22) p. 144.
_MEAN_ELONGATION = (297.85036, 445267.111480, -0.0019142, 1 / 189474)
_SUN_MEAN_ANOMALY = (357.52772, 35999.050340, -0.0001603, -1 / 300000)
_MOON_MEAN_ANOMALY = (134.96298, 477198.867398, 0.0086972, 1 / 56250)
_MOON_ARGUMENT_LATITUDE = (93.27191, 483202.017538, -0.0036825, 1 / 327270)
_MOON_ASCENDING_NODE = (125.04452, -1934.136261, 0.0020708, 1 / 450000)

# (22.2) p. 147, arc seconds
_OBLIQUITY_IAU1980 = (84381.448, -46.815, -0.00059, 0.001813)
# (22.3) p. 147, arc seconds in units of 10000 Julian years
_OBLIQUITY_LASKAR = (84381.448, -4680.93, -1.55, 1999.25, -51.38, -249.67, -39.05, 7.12, 27.87, 5.79, 2.45)

# IAU 1982 mean sidereal time at 0h UT in seconds of time, (12.2) p. 87.
_SIDEREAL_IAU1982 = (24110.54841, 8640184.812866, 0.093104, -0.0000062)


def nutation(moment: Moment) -> (float, float):
    """Computes the nutation in longitude and the nutation in obliquity in radians. Computation is by the 1980 IAU
    theory with terms < 0.0003" neglected."""

    T = moment.jdeJ2000Century()
    D = radians(hornerEval(T, _MEAN_ELONGATION))
    M = radians(hornerEval(T, _SUN_MEAN_ANOMALY))
    N = radians(hornerEval(T, _MOON_MEAN_ANOMALY))
    F = radians(hornerEval(T, _MOON_ARGUMENT_LATITUDE))
    omega = radians(hornerEval(T, _MOON_ASCENDING_NODE))

    deltaLongitude = 0.0
    deltaObliquity = 0.0

    # Smallest terms are accumulated first.
    for d, m, n, f, o, s0, s1, c0, c1 in reversed(NUTATION):
        arg = d * D + m * M + n * N + f * F + o * omega
        deltaLongitude += sin(arg) * (s0 + s1 * T)
        deltaObliquity += cos(arg) * (c0 + c1 * T)

    # units of 0.0001"
    return deltaLongitude * 1e-4 * ARCSEC_TO_RAD, deltaObliquity * 1e-4 * ARCSEC_TO_RAD


def meanObliquity(moment: Moment) -> float:
    """Mean obliquity of the ecliptic in radians by the IAU 1980 polynomial. Accuracy is 1" over the years 1000 to 3000
    and 10" over the years 0 to 4000."""

    return hornerEval(moment.jdeJ2000Century(), _OBLIQUITY_IAU1980) * ARCSEC_TO_RAD


def meanObliquityLaskar(moment: Moment) -> float:
    """Mean obliquity of the ecliptic in radians by the Laskar 1986 polynomial. Accuracy is 0.01" over the years 1000 to
    3000 and a few arc seconds over the valid range of -8000 to 12000."""

    return hornerEval(moment.jdeJ2000Century() * 0.01, _OBLIQUITY_LASKAR) * ARCSEC_TO_RAD


def trueObliquity(moment: Moment) -> float:
    # returns in radians

    _, deltaObliquity = nutation(moment)
    return meanObliquityLaskar(moment) + deltaObliquity


def nutationInRightAscension(moment: Moment) -> float:
    """The nutation in right ascension, or equation of the equinoxes, in radians."""

    deltaLongitude, deltaObliquity = nutation(moment)
    return deltaLongitude * cos(meanObliquityLaskar(moment) + deltaObliquity)


def _splitAt0UT(jd: float) -> (float, float):
    # Returns the Julian day at 0h UT of the day containing jd, and the fraction of the day after 0h.
    number = floor(jd + 0.5)
    return number - 0.5, jd + 0.5 - number


def _meanSidereal(moment: Moment) -> (float, float):
    # Mean sidereal time at 0h UT in seconds, not reduced, and the fraction of the day after 0h.
    jd0, fraction = _splitAt0UT(moment.jd)
    return hornerEval(julianCentury(jd0), _SIDEREAL_IAU1982), fraction


def meanSiderealTimeGreenwich(moment: Moment) -> float:
    """Mean sidereal time at Greenwich in seconds of time in the range [0, 86400)."""

    s, fraction = _meanSidereal(moment)
    return positiveMod(s + fraction * SIDEREAL_RATE * SECONDS_PER_DAY, SECONDS_PER_DAY)


def meanSiderealTime0UT(moment: Moment) -> float:
    """Mean sidereal time at Greenwich at 0h UT of the moment's day in seconds of time in the range [0, 86400)."""

    s, _ = _meanSidereal(moment)
    return positiveMod(s, SECONDS_PER_DAY)


def apparentSiderealTimeGreenwich(moment: Moment) -> float:
    """Apparent sidereal time at Greenwich in seconds of time in the range [0, 86400). Apparent is mean plus the
    nutation in right ascension."""

    s, fraction = _meanSidereal(moment)
    mean = s + fraction * SIDEREAL_RATE * SECONDS_PER_DAY

    return positiveMod(mean + radiansToSeconds(nutationInRightAscension(moment)), SECONDS_PER_DAY)


def apparentSiderealTimeGreenwichRadians(moment: Moment) -> float:
    """Apparent sidereal time at Greenwich as an angle in radians in the range [0, 2π)."""

    s, fraction = _meanSidereal(moment)
    mean = secondsToRadians(s) + fraction * SIDEREAL_RATE * TWOPI

    return positiveMod(mean + nutationInRightAscension(moment), TWOPI)


def apparentSiderealTimeLocal(moment: Moment, lng: float) -> float:
    """Apparent local sidereal time in seconds of time in the range [0, 86400). The longitude is in radians and measured
    positively westward."""

    return positiveMod(apparentSiderealTimeGreenwich(moment) - radiansToSeconds(lng), SECONDS_PER_DAY)


def apparentSiderealTime0UT(moment: Moment) -> float:
    """Apparent sidereal time at Greenwich at 0h UT of the moment's day in seconds of time in the range [0, 86400).
    The nutation is evaluated at 0h UT as well."""

    jd0, _ = _splitAt0UT(moment.jd)
    s = hornerEval(julianCentury(jd0), _SIDEREAL_IAU1982)
    n = nutationInRightAscension(Moment(jd0, moment.deltaT))

    return positiveMod(s + radiansToSeconds(n), SECONDS_PER_DAY)
