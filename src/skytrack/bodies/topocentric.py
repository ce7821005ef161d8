from dataclasses import dataclass
from math import sin, cos, atan2

from skytrack.core.coordinates import EquatorialCoordinate, HorizontalCoordinate
from skytrack.util.constants import SOLAR_PARALLAX, TWOPI
from skytrack.util.helpers import positiveMod


@dataclass(frozen=True)
class ApparentPosition:
    """Apparent geocentric or topocentric equatorial coordinates of a body and its distance in km."""
    eq: EquatorialCoordinate
    distance: float


@dataclass(frozen=True)
class TopocentricPosition:
    """Position of a body as seen by an observer. q is the parallactic angle in radians, or None if it isn't
    computed."""
    hz: HorizontalCoordinate
    eq: EquatorialCoordinate
    distance: float
    q: float | None = None


def horizontalParallax(distance: float) -> float:
    """Equatorial horizontal parallax in radians of a body at a distance in AU."""

    # (40.1) p. 279
    return SOLAR_PARALLAX / distance


def topocentricParallax(eq: EquatorialCoordinate, parallax: float, rhoSinLat: float, rhoCosLat: float, lng: float,
                        apparentSidereal: float) -> EquatorialCoordinate:
    """Corrects geocentric equatorial coordinates for the observer's displacement from the center of the Earth. This
    is the rigorous correction used for the Moon.

    Args:
        eq: Geocentric right ascension and declination.
        parallax: Equatorial horizontal parallax of the body in radians.
        rhoSinLat: Parallax constant ρ sin φ' of the observer.
        rhoCosLat: Parallax constant ρ cos φ' of the observer.
        lng: Longitude of the observer in radians, positive westward.
        apparentSidereal: Apparent sidereal time at Greenwich in radians.

    Returns:
        The topocentric right ascension in [0, 2π) and declination."""

    hourAngle = positiveMod(apparentSidereal - lng - eq.ra, TWOPI)
    sPar = sin(parallax)
    sH, cH = sin(hourAngle), cos(hourAngle)
    sDec, cDec = sin(eq.dec), cos(eq.dec)

    # (40.2) p. 279
    denominator = cDec - rhoCosLat * sPar * cH
    deltaRa = atan2(-rhoCosLat * sPar * sH, denominator)
    # (40.3) p. 279
    dec = atan2((sDec - rhoSinLat * sPar) * cos(deltaRa), denominator)

    return EquatorialCoordinate(positiveMod(eq.ra + deltaRa, TWOPI), dec)


def topocentricParallaxSimplified(eq: EquatorialCoordinate, parallax: float, rhoSinLat: float, rhoCosLat: float,
                                  lng: float, apparentSidereal: float) -> EquatorialCoordinate:
    """The linearized form of topocentricParallax(), valid for distant bodies with a small parallax like the Sun. The
    arguments are the same."""

    hourAngle = positiveMod(apparentSidereal - lng - eq.ra, TWOPI)
    sH, cH = sin(hourAngle), cos(hourAngle)
    sDec, cDec = sin(eq.dec), cos(eq.dec)

    # (40.4) p. 280
    deltaRa = -parallax * rhoCosLat * sH / cDec
    # (40.5) p. 280
    deltaDec = -parallax * (rhoSinLat * cDec - rhoCosLat * cH * sDec)

    return EquatorialCoordinate(positiveMod(eq.ra + deltaRa, TWOPI), eq.dec + deltaDec)
