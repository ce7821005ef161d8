"""Illuminated fraction of the Moon's disk and the position angle of its bright limb, (48) p. 345."""

from math import sin, cos, acos, atan2

from pyevspace import vang

from skytrack.bodies.moon import computeMoonPosition
from skytrack.bodies.sun import computeSunPosition
from skytrack.core.coordinates import EquatorialCoordinate
from skytrack.core.juliandate import Moment
from skytrack.util.constants import TWOPI
from skytrack.util.helpers import positiveMod


def _cosElongation(eqMoon: EquatorialCoordinate, eqSun: EquatorialCoordinate) -> float:
    # (48.2) p. 345
    return sin(eqSun.dec) * sin(eqMoon.dec) + cos(eqSun.dec) * cos(eqMoon.dec) * cos(eqSun.ra - eqMoon.ra)


def _phaseAngle(elongation: float, distanceMoon: float, distanceSun: float) -> float:
    # (48.3) p. 346
    return atan2(distanceSun * sin(elongation), distanceMoon - distanceSun * cos(elongation))


def computePhaseAngle(eqMoon: EquatorialCoordinate, distanceMoon: float, eqSun: EquatorialCoordinate,
                      distanceSun: float) -> float:
    """Phase angle of the Moon in radians from geocentric equatorial coordinates of the Moon and the Sun. The distances
    must be in the same units."""

    return _phaseAngle(acos(_cosElongation(eqMoon, eqSun)), distanceMoon, distanceSun)


def computePhaseAngleApprox(eqMoon: EquatorialCoordinate, eqSun: EquatorialCoordinate) -> float:
    """Phase angle of the Moon in radians, less accurate than computePhaseAngle() since the distances are ignored."""

    return acos(-_cosElongation(eqMoon, eqSun))


def computeIlluminatedFraction(i: float) -> float:
    """Ratio of the illuminated area of the disk to the total area for a phase angle i."""

    # (48.1) p. 345
    return (1 + cos(i)) / 2


def computeBrightLimbAngle(eqMoon: EquatorialCoordinate, eqSun: EquatorialCoordinate) -> float:
    """Position angle of the midpoint of the Moon's bright limb in radians in the range [0, 2π), reckoned eastward
    from the north point of the disk."""

    sDecMoon, cDecMoon = sin(eqMoon.dec), cos(eqMoon.dec)
    sDecSun, cDecSun = sin(eqSun.dec), cos(eqSun.dec)
    deltaRa = eqSun.ra - eqMoon.ra

    # (48.5) p. 346
    chi = atan2(cDecSun * sin(deltaRa), sDecSun * cDecMoon - cDecSun * sDecMoon * cos(deltaRa))
    return positiveMod(chi, TWOPI)


def computeMoonIllumination(moment: Moment) -> float:
    """Illuminated fraction of the Moon's disk at a moment."""

    moonPosition = computeMoonPosition(moment)
    sunPosition = computeSunPosition(moment)
    elongation = vang(sunPosition, moonPosition)

    i = _phaseAngle(elongation, moonPosition.mag(), sunPosition.mag())
    return computeIlluminatedFraction(i)
