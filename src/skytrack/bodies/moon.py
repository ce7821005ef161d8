import logging
from dataclasses import dataclass
from math import sin, cos, tan, asin, atan2, radians

from pyevspace import Vector

from skytrack.bodies._tables import MOON_LONGITUDE_DISTANCE, MOON_LATITUDE
from skytrack.bodies.position import nutation, meanObliquityLaskar, apparentSiderealTimeGreenwichRadians, \
    apparentSiderealTime0UT
from skytrack.bodies.refraction import atmosphericRefractionBennett2
from skytrack.bodies.rise import RiseSetTimes, NoEvent, standardAltitudeLunar, approxTransit, approxTimes, times, \
    dynamicalMidnight
from skytrack.bodies.topocentric import ApparentPosition, TopocentricPosition, topocentricParallax
from skytrack.core.coordinates import EclipticCoordinate, HorizontalCoordinate, eclipticToEquatorial, \
    equatorialToHorizontal, parallaxConstants
from skytrack.core.juliandate import Moment
from skytrack.exceptions import DataTableError
from skytrack.util.constants import EARTH_EQUATORIAL_RADIUS, MOON_MEAN_DISTANCE, TWOPI
from skytrack.util.helpers import hornerEval, positiveMod

logger = logging.getLogger(__name__)

# Fundamental arguments in degrees, (47.1) to (47.5) p. 338.
_MEAN_LONGITUDE = (218.3164477, 481267.88123421, -0.0015786, 1 / 538841, -1 / 65194000)
_MEAN_ELONGATION = (297.8501921, 445267.1114034, -0.0018819, 1 / 545868, -1 / 113065000)
_SUN_MEAN_ANOMALY = (357.5291092, 35999.0502909, -0.0001536, 1 / 24490000)
_MEAN_ANOMALY = (134.9633964, 477198.8675055, 0.0087414, 1 / 69699, -1 / 14712000)
_ARGUMENT_LATITUDE = (93.2720950, 483202.0175233, -0.0036539, -1 / 3526000, 1 / 863310000)
# Eccentricity of the Earth's orbit, (47.6) p. 338.
_ECCENTRICITY = (1, -0.002516, -0.0000074)


@dataclass(frozen=True)
class LunarPosition:
    """Geocentric ecliptic longitude and latitude in radians referred to the mean equinox of date, and the distance
    between the centers of the Earth and the Moon in km."""
    lng: float
    lat: float
    distance: float


def _eccentricityFactor(row: tuple, E: float) -> float:
    # Terms containing the Sun's mean anomaly M are multiplied by E for each multiple of M.
    multiple = abs(row[1])
    if multiple == 0:
        return 1.0
    if multiple == 1:
        return E
    if multiple == 2:
        return E * E

    logger.error('lunar series row %s has an unsupported mean anomaly multiplier', row)
    raise DataTableError(f'unsupported multiple of M in lunar series row {row}', row)


def computeMoonGeocentricPosition(moment: Moment) -> LunarPosition:
    """Computes the geocentric position of the Moon, (47) p. 337. The position is referred to the mean equinox of date
    and doesn't include nutation."""

    T = moment.jdeJ2000Century()
    Lp = positiveMod(radians(hornerEval(T, _MEAN_LONGITUDE)), TWOPI)
    D = positiveMod(radians(hornerEval(T, _MEAN_ELONGATION)), TWOPI)
    M = positiveMod(radians(hornerEval(T, _SUN_MEAN_ANOMALY)), TWOPI)
    Mp = positiveMod(radians(hornerEval(T, _MEAN_ANOMALY)), TWOPI)
    F = positiveMod(radians(hornerEval(T, _ARGUMENT_LATITUDE)), TWOPI)

    # action of Venus, Jupiter and the flattening of the Earth
    A1 = radians(119.75 + 131.849 * T)
    A2 = radians(53.09 + 479264.29 * T)
    A3 = radians(313.45 + 481266.484 * T)
    E = hornerEval(T, _ECCENTRICITY)

    sumL = 3958 * sin(A1) + 1962 * sin(Lp - F) + 318 * sin(A2)
    sumR = 0.0
    sumB = -2235 * sin(Lp) + 382 * sin(A3) + 175 * sin(A1 - F) + 175 * sin(A1 + F) + 127 * sin(Lp - Mp) \
        - 115 * sin(Lp + Mp)

    for row in MOON_LONGITUDE_DISTANCE:
        d, m, mp, f, coeffL, coeffR = row
        arg = d * D + m * M + mp * Mp + f * F
        factor = _eccentricityFactor(row, E)
        sumL += coeffL * sin(arg) * factor
        sumR += coeffR * cos(arg) * factor

    for row in MOON_LATITUDE:
        d, m, mp, f, coeffB = row
        arg = d * D + m * M + mp * Mp + f * F
        sumB += coeffB * sin(arg) * _eccentricityFactor(row, E)

    # sums are in 0.000001 degrees and 0.001 km
    lng = positiveMod(Lp + radians(sumL * 1e-6), TWOPI)
    lat = radians(sumB * 1e-6)
    distance = MOON_MEAN_DISTANCE + sumR * 1e-3

    return LunarPosition(lng, lat, distance)


def computeMoonParallax(distance: float) -> float:
    """Equatorial horizontal parallax of the Moon in radians for a distance in km."""

    # p. 337
    return asin(EARTH_EQUATORIAL_RADIUS / distance)


def computeMoonApparentEquatorial(moment: Moment) -> ApparentPosition:
    """Apparent geocentric right ascension and declination of the Moon, corrected for nutation, and its distance."""

    position = computeMoonGeocentricPosition(moment)
    deltaLongitude, deltaObliquity = nutation(moment)
    obliquity = meanObliquityLaskar(moment) + deltaObliquity

    apparent = EclipticCoordinate(position.lat, position.lng + deltaLongitude)
    return ApparentPosition(eclipticToEquatorial(apparent, obliquity), position.distance)


def computeMoonApparentTopocentric(moment: Moment, observer: EclipticCoordinate,
                                   apparent0: float = None) -> ApparentPosition:
    """Apparent topocentric right ascension and declination of the Moon for an observer. apparent0 is the apparent
    sidereal time at Greenwich in radians, it's computed from moment if None."""

    ae = computeMoonApparentEquatorial(moment)
    rhoSinLat, rhoCosLat = parallaxConstants(observer.lat, observer.h)
    parallax = computeMoonParallax(ae.distance)

    if apparent0 is None:
        apparent0 = apparentSiderealTimeGreenwichRadians(moment)

    eq = topocentricParallax(ae.eq, parallax, rhoSinLat, rhoCosLat, observer.lng, apparent0)
    return ApparentPosition(eq, ae.distance)


def computeParallacticAngle(lat: float, H: float, dec: float) -> float:
    """Parallactic angle in radians of a body at hour angle H and declination dec, for an observer at latitude lat."""

    # (14.1) p. 98
    return atan2(sin(H), tan(lat) * cos(dec) - sin(dec) * cos(H))


def computeMoonTopocentricPosition(moment: Moment, observer: EclipticCoordinate,
                                   withRefraction: bool = False) -> TopocentricPosition:
    """Computes the position of the Moon as seen by an observer, including the parallactic angle. If withRefraction
    is True, atmospheric refraction is added to the altitude."""

    st0 = apparentSiderealTimeGreenwichRadians(moment)
    aet = computeMoonApparentTopocentric(moment, observer, st0)

    hz = equatorialToHorizontal(aet.eq, observer, st0)
    if withRefraction:
        hz = HorizontalCoordinate(hz.az, hz.alt + atmosphericRefractionBennett2(hz.alt))

    H = st0 - (observer.lng + aet.eq.ra)
    q = computeParallacticAngle(observer.lat, H, aet.eq.dec)

    return TopocentricPosition(hz, aet.eq, aet.distance, q)


def computeMoonPosition(moment: Moment) -> Vector:
    """Geocentric equatorial position vector of the Moon in km."""

    ae = computeMoonApparentEquatorial(moment)
    ra, dec = ae.eq.ra, ae.eq.dec

    zTerm = ae.distance * sin(dec)
    projection = ae.distance * cos(dec)
    xTerm = projection * cos(ra)
    yTerm = projection * sin(ra)

    return Vector(xTerm, yTerm, zTerm)


def computeMoonApproxTransit(moment: Moment, observer: EclipticCoordinate) -> float:
    """Approximate transit time of the Moon in seconds of UT for the day of the moment. A negative value means the
    transit was the day before."""

    day = moment.startOfDay()
    ae = computeMoonApparentEquatorial(dynamicalMidnight(day))

    return approxTransit(observer, apparentSiderealTime0UT(day), ae.eq)


def computeMoonApproxTimes(moment: Moment, observer: EclipticCoordinate) -> RiseSetTimes | NoEvent:
    """Approximate transit, rise and set times of the Moon in seconds of UT for the day of the moment."""

    day = moment.startOfDay()
    ae = computeMoonApparentEquatorial(dynamicalMidnight(day))
    h0 = standardAltitudeLunar(computeMoonParallax(ae.distance))

    return approxTimes(observer, h0, apparentSiderealTime0UT(day), ae.eq)


def computeMoonTimes(moment: Moment, observer: EclipticCoordinate) -> RiseSetTimes | NoEvent:
    """Transit, rise and set times of the Moon in seconds of UT for the day of the moment. This has a higher accuracy
    than computeMoonApproxTimes()."""

    day = moment.startOfDay()
    positions = [computeMoonApparentEquatorial(dynamicalMidnight(day, offset)) for offset in (-1, 0, 1)]
    h0 = standardAltitudeLunar(computeMoonParallax(positions[1].distance))

    return times(observer, day.deltaT, h0, apparentSiderealTime0UT(day), [p.eq for p in positions])
