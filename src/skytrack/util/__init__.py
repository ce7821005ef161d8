from .constants import (
    J2000,
    JULIAN_CENTURY,
    SECONDS_PER_DAY,
    TWOPI,
    SIDEREAL_RATE,
    EARTH_EQUATORIAL_RADIUS,
    EARTH_FLATTENING,
    AU,
    SOLAR_PARALLAX,
    GREGORIAN_REFORM_JD,
    GREGORIAN_REFORM,
    MEAN_REFRACTION,
    STANDARD_ALTITUDE_STELLAR,
    STANDARD_ALTITUDE_SOLAR,
)

from .helpers import (
    positiveMod,
    splitIntFrac,
    hornerEval,
    roundTo,
    atan3,
    secondsToRadians,
    radiansToSeconds,
)

__all__ = (
    # constants.py
    'J2000',
    'JULIAN_CENTURY',
    'SECONDS_PER_DAY',
    'TWOPI',
    'SIDEREAL_RATE',
    'EARTH_EQUATORIAL_RADIUS',
    'EARTH_FLATTENING',
    'AU',
    'SOLAR_PARALLAX',
    'GREGORIAN_REFORM_JD',
    'GREGORIAN_REFORM',
    'MEAN_REFRACTION',
    'STANDARD_ALTITUDE_STELLAR',
    'STANDARD_ALTITUDE_SOLAR',

    # helpers.py
    'positiveMod',
    'splitIntFrac',
    'hornerEval',
    'roundTo',
    'atan3',
    'secondsToRadians',
    'radiansToSeconds',
)
