from enum import Enum
from math import sin, cos, asin, radians

from pyevspace import Vector

from skytrack.bodies.position import meanObliquityLaskar, apparentSiderealTimeGreenwichRadians, \
    apparentSiderealTime0UT
from skytrack.bodies.refraction import atmosphericRefractionBennett2
from skytrack.bodies.rise import RiseSetTimes, NoEvent, approxTransit, approxTimes, times, dynamicalMidnight
from skytrack.bodies.topocentric import ApparentPosition, TopocentricPosition, topocentricParallaxSimplified
from skytrack.core.coordinates import EclipticCoordinate, EquatorialCoordinate, HorizontalCoordinate, \
    equatorialToHorizontal, parallaxConstants
from skytrack.core.juliandate import Moment
from skytrack.util.constants import AU, SOLAR_PARALLAX, TWOPI, STANDARD_ALTITUDE_SOLAR, CIVIL_TWILIGHT, \
    NAUTICAL_TWILIGHT, ASTRONOMICAL_TWILIGHT
from skytrack.util.helpers import hornerEval, positiveMod, atan3

# (25.2) p. 163
_MEAN_LONGITUDE = (280.46646, 36000.76983, 0.0003032)
# (25.3) p. 163
_MEAN_ANOMALY = (357.52911, 35999.05029, -0.0001537)
# (25.4) p. 163
_ECCENTRICITY = (0.016708634, -0.000042037, -0.0000001267)
_CENTER_1 = (1.914602, -0.004817, -0.000014)
_CENTER_2 = (0.019993, -0.000101)


def computeSunMeanAnomaly(T: float) -> float:
    # returns in radians, not normalized

    return radians(hornerEval(T, _MEAN_ANOMALY))


def computeSunTrueLongitude(T: float) -> (float, float):
    """Computes the true geometric longitude and the true anomaly of the Sun in radians, referred to the mean equinox
    of date. T is the number of Julian centuries since J2000."""

    L0 = radians(hornerEval(T, _MEAN_LONGITUDE))
    M = computeSunMeanAnomaly(T)
    # equation of the center
    C = radians(hornerEval(T, _CENTER_1) * sin(M) + hornerEval(T, _CENTER_2) * sin(2 * M) + 0.000289 * sin(3 * M))

    return positiveMod(L0 + C, TWOPI), positiveMod(M + C, TWOPI)


def computeSunRadiusVector(T: float) -> float:
    """Distance between the centers of the Sun and the Earth in AU."""

    _, v = computeSunTrueLongitude(T)
    e = hornerEval(T, _ECCENTRICITY)

    # (25.5) p. 164
    return 1.000001018 * (1 - e * e) / (1 + e * cos(v))


def computeSunNode(T: float) -> float:
    # returns in radians

    return radians(125.04 - 1934.136 * T)


def computeSunApparentLongitude(T: float, omega: float = None) -> float:
    """Apparent longitude of the Sun in radians referred to the true equinox of date, corrected for nutation and
    aberration."""

    if omega is None:
        omega = computeSunNode(T)
    s, _ = computeSunTrueLongitude(T)

    return s - radians(0.00569) - radians(0.00478) * sin(omega)


def computeSunApparentEquatorial(moment: Moment) -> ApparentPosition:
    """Apparent geocentric right ascension and declination of the Sun and its distance in km, (25) p. 165."""

    T = moment.jdeJ2000Century()
    omega = computeSunNode(T)
    lng = computeSunApparentLongitude(T, omega)

    # (25.8) p. 165
    obliquity = meanObliquityLaskar(moment) + radians(0.00256) * cos(omega)

    sLng, cLng = sin(lng), cos(lng)
    eq = EquatorialCoordinate(atan3(cos(obliquity) * sLng, cLng), asin(sin(obliquity) * sLng))

    return ApparentPosition(eq, computeSunRadiusVector(T) * AU)


def computeSunApparentTopocentric(moment: Moment, observer: EclipticCoordinate,
                                  apparent0: float = None) -> ApparentPosition:
    """Apparent topocentric right ascension and declination of the Sun for an observer. apparent0 is the apparent
    sidereal time at Greenwich in radians, it's computed from moment if None."""

    ae = computeSunApparentEquatorial(moment)
    rhoSinLat, rhoCosLat = parallaxConstants(observer.lat, observer.h)

    if apparent0 is None:
        apparent0 = apparentSiderealTimeGreenwichRadians(moment)

    eq = topocentricParallaxSimplified(ae.eq, SOLAR_PARALLAX, rhoSinLat, rhoCosLat, observer.lng, apparent0)
    return ApparentPosition(eq, ae.distance)


def computeSunTopocentricPosition(moment: Moment, observer: EclipticCoordinate,
                                  withRefraction: bool = False) -> TopocentricPosition:
    """Computes the position of the Sun as seen by an observer. If withRefraction is True, atmospheric refraction is
    added to the altitude."""

    st0 = apparentSiderealTimeGreenwichRadians(moment)
    aet = computeSunApparentTopocentric(moment, observer, st0)

    hz = equatorialToHorizontal(aet.eq, observer, st0)
    if withRefraction:
        hz = HorizontalCoordinate(hz.az, hz.alt + atmosphericRefractionBennett2(hz.alt))

    return TopocentricPosition(hz, aet.eq, aet.distance)


def computeSunPosition(moment: Moment) -> Vector:
    # Compute the Sun's geocentric equatorial position vector in km.

    ae = computeSunApparentEquatorial(moment)
    ra, dec = ae.eq.ra, ae.eq.dec

    zTerm = ae.distance * sin(dec)
    projection = ae.distance * cos(dec)
    xTerm = projection * cos(ra)
    yTerm = projection * sin(ra)

    return Vector(xTerm, yTerm, zTerm)


def computeSunApproxTransit(moment: Moment, observer: EclipticCoordinate) -> float:
    """Approximate transit time of the Sun in seconds of UT for the day of the moment. A negative value means the
    transit was the day before."""

    day = moment.startOfDay()
    aet = computeSunApparentTopocentric(dynamicalMidnight(day), observer)

    return approxTransit(observer, apparentSiderealTime0UT(day), aet.eq)


def _computeSunTimes(moment: Moment, observer: EclipticCoordinate, h0: float) -> RiseSetTimes | NoEvent:
    day = moment.startOfDay()
    positions = [computeSunApparentTopocentric(dynamicalMidnight(day, offset), observer) for offset in (-1, 0, 1)]

    return times(observer, day.deltaT, h0, apparentSiderealTime0UT(day), [p.eq for p in positions])


def computeSunApproxTimes(moment: Moment, observer: EclipticCoordinate) -> RiseSetTimes | NoEvent:
    """Approximate transit, sunrise and sunset times in seconds of UT for the day of the moment."""

    day = moment.startOfDay()
    aet = computeSunApparentTopocentric(dynamicalMidnight(day), observer)

    return approxTimes(observer, STANDARD_ALTITUDE_SOLAR, apparentSiderealTime0UT(day), aet.eq)


def computeSunTimes(moment: Moment, observer: EclipticCoordinate) -> RiseSetTimes | NoEvent:
    """Transit, sunrise and sunset times in seconds of UT for the day of the moment. This has a higher accuracy than
    computeSunApproxTimes()."""

    return _computeSunTimes(moment, observer, STANDARD_ALTITUDE_SOLAR)


class Twilight(Enum):
    Day = 0
    Civil = 1
    Nautical = 2
    Astronomical = 3
    Night = 4


_TWILIGHT_ALTITUDES = {
    Twilight.Day: STANDARD_ALTITUDE_SOLAR,
    Twilight.Civil: CIVIL_TWILIGHT,
    Twilight.Nautical: NAUTICAL_TWILIGHT,
    Twilight.Astronomical: ASTRONOMICAL_TWILIGHT,
}


def computeSunTwilightTimes(moment: Moment, observer: EclipticCoordinate,
                            twilight: Twilight) -> RiseSetTimes | NoEvent:
    """Computes when the Sun crosses the depression angle of a twilight type. The rise time is the start of morning
    twilight and the set time is the end of evening twilight. Twilight.Day gives sunrise and sunset, Twilight.Night
    isn't a boundary and is treated as astronomical twilight."""

    if twilight is Twilight.Night:
        twilight = Twilight.Astronomical

    return _computeSunTimes(moment, observer, _TWILIGHT_ALTITUDES[twilight])


def computeTwilightType(moment: Moment, observer: EclipticCoordinate) -> Twilight:
    """Classifies the moment by the geometric altitude of the Sun for an observer."""

    altitude = computeSunTopocentricPosition(moment, observer).hz.alt

    if altitude < ASTRONOMICAL_TWILIGHT:
        return Twilight.Night
    elif altitude < NAUTICAL_TWILIGHT:
        return Twilight.Astronomical
    elif altitude < CIVIL_TWILIGHT:
        return Twilight.Nautical
    elif altitude < STANDARD_ALTITUDE_SOLAR:
        return Twilight.Civil
    else:
        return Twilight.Day
