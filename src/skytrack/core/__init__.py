from .calendar import (
    jdFromGregorianCalendar,
    jdFromJulianCalendar,
    jdFromTimestamp,
    calendarFromJd,
    timestampFromJd,
    isLeapYearGregorian,
    isLeapYearJulian,
    dayOfYear,
    julianCentury,
)

from .coordinates import (
    EclipticCoordinate,
    EquatorialCoordinate,
    HorizontalCoordinate,
    eclipticToEquatorial,
    equatorialToEcliptic,
    equatorialToHorizontal,
    parallaxConstants,
)

from .deltat import (
    estimateDeltaT,
    estimateDeltaTForYear,
    decimalYear,
    jdToJde,
    jdeToJd,
)

from .interpolation import (
    Len3,
    newLen3,
    interpolateByFactor,
    interpolateByX,
)

from .juliandate import (
    Moment,
    now,
)

__all__ = (
    # calendar.py
    'jdFromGregorianCalendar',
    'jdFromJulianCalendar',
    'jdFromTimestamp',
    'calendarFromJd',
    'timestampFromJd',
    'isLeapYearGregorian',
    'isLeapYearJulian',
    'dayOfYear',
    'julianCentury',

    # coordinates.py
    'EclipticCoordinate',
    'EquatorialCoordinate',
    'HorizontalCoordinate',
    'eclipticToEquatorial',
    'equatorialToEcliptic',
    'equatorialToHorizontal',
    'parallaxConstants',

    # deltat.py
    'estimateDeltaT',
    'estimateDeltaTForYear',
    'decimalYear',
    'jdToJde',
    'jdeToJd',

    # interpolation.py
    'Len3',
    'newLen3',
    'interpolateByFactor',
    'interpolateByX',

    # juliandate.py
    'Moment',
    'now',
)
