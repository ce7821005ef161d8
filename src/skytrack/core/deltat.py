"""Delta-T, the difference between dynamical time (TD) and universal time (UT), deltaT = jde - jd.

The estimate is based on Espenak and Meeus, "Five Millennium Canon of Solar Eclipses: -1999 to +3000"
(NASA/TP-2006-214141), see http://eclipse.gsfc.nasa.gov/SEcat5/deltatpoly.html.
"""

import logging

from skytrack.core.calendar import calendarFromJd
from skytrack.util.constants import SECONDS_PER_DAY
from skytrack.util.helpers import hornerEval

logger = logging.getLogger(__name__)

# Each row is (upper bound, origin, scale, coefficients). A row applies to decimal years in [previous upper, upper)
# and evaluates the polynomial in (year - origin) / scale. Rows must stay in ascending order.
_DELTAT_TABLE = (
    (500.0, 0.0, 100.0,
     (10583.6, -1014.41, 33.78311, -5.952053, -0.1798452, 0.022174192, 0.0090316521)),
    (1600.0, 1000.0, 100.0,
     (1574.2, -556.01, 71.23472, 0.319781, -0.8503463, -0.005050998, 0.0083572073)),
    (1700.0, 1600.0, 1.0,
     (120.0, -0.9808, -0.01532, 1 / 7129)),
    (1800.0, 1700.0, 1.0,
     (8.83, 0.1603, -0.0059285, 0.00013336, -1 / 1174000)),
    (1860.0, 1800.0, 1.0,
     (13.72, -0.332447, 0.0068612, 0.0041116, -0.00037436, 0.0000121272, -0.0000001699, 0.000000000875)),
    (1900.0, 1860.0, 1.0,
     (7.62, 0.5737, -0.251754, 0.01680668, -0.0004473624, 1 / 233174)),
    (1920.0, 1900.0, 1.0,
     (-2.79, 1.494119, -0.0598939, 0.0061966, -0.000197)),
    (1941.0, 1920.0, 1.0,
     (21.20, 0.84493, -0.076100, 0.0020936)),
    (1961.0, 1950.0, 1.0,
     (29.07, 0.407, -1 / 233, 1 / 2547)),
    (1986.0, 1975.0, 1.0,
     (45.45, 1.067, -1 / 260, -1 / 718)),
    (2005.0, 2000.0, 1.0,
     (63.86, 0.3345, -0.060374, 0.0017275, 0.000651814, 0.00002373599)),
    (2050.0, 2000.0, 1.0,
     (62.92, 0.32217, 0.005589)),
)

_LOWER_BOUND = -500.0
_UPPER_BOUND = 2150.0


def _longTermParabola(year: float) -> float:
    u = (year - 1820) / 100
    return -20 + 32 * u * u


def estimateDeltaTForYear(year: float) -> float:
    """Estimates delta T in seconds for a decimal year."""

    if year < _LOWER_BOUND:
        logger.debug('year %s precedes the delta T table, using the long term parabola', year)
        return _longTermParabola(year)

    for upper, origin, scale, coeffs in _DELTAT_TABLE:
        if year < upper:
            return hornerEval((year - origin) / scale, coeffs)

    if year < _UPPER_BOUND:
        # Blends the 2005-2050 polynomial into the long term parabola.
        return _longTermParabola(year) - 0.5628 * (_UPPER_BOUND - year)

    logger.debug('year %s follows the delta T table, using the long term parabola', year)
    return _longTermParabola(year)


def decimalYear(jd: float) -> float:
    """Returns the decimal year of a Julian day, taking the middle of the calendar month."""

    year, month, _ = calendarFromJd(jd)
    return year + (month - 0.5) / 12


def estimateDeltaT(jd: float) -> float:
    """Estimates delta T in seconds for a Julian day."""

    return estimateDeltaTForYear(decimalYear(jd))


def jdToJde(jd: float, deltaT: float = None) -> float:
    """Converts a Julian day to a Julian ephemeris day. If deltaT is None it is estimated from jd."""

    if deltaT is None:
        deltaT = estimateDeltaT(jd)
    return jd + deltaT / SECONDS_PER_DAY


def jdeToJd(jde: float, deltaT: float = None) -> float:
    """Converts a Julian ephemeris day to a Julian day. If deltaT is None it is estimated from jde, which differs
    from the estimate at the resulting jd by a negligible amount."""

    if deltaT is None:
        deltaT = estimateDeltaT(jde)
    return jde - deltaT / SECONDS_PER_DAY
