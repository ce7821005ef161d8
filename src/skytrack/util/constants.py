import datetime
from math import pi, radians

# Epochs and time units.
J2000 = 2451545.0
JULIAN_CENTURY = 36525.0
SECONDS_PER_DAY = 86400.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_MINUTE = 60.0

TWOPI = 2 * pi
# Seconds of time per radian of hour angle, 86400 / 2π.
RAD_TO_SECONDS = 43200.0 / pi
SECONDS_TO_RAD = pi / 43200.0
ARCSEC_TO_RAD = radians(1.0 / 3600.0)

# Ratio of a sidereal day to a solar day, (12.4) p. 88.
SIDEREAL_RATE = 1.00273790935
# Degrees of sidereal rotation per solar day, used by the rise/set refinement.
SIDEREAL_DEGREES_PER_DAY = 360.985647

# IAU 1976 figure of the Earth.
EARTH_EQUATORIAL_RADIUS = 6378.14   # km
EARTH_FLATTENING = 1 / 298.257

AU = 149597870.0    # km
# Equatorial horizontal parallax of the Sun at 1 AU.
SOLAR_PARALLAX = 8.794 * ARCSEC_TO_RAD
# Mean distance from the centers of the Earth and Moon in km, (47) p. 342.
MOON_MEAN_DISTANCE = 385000.56

# Calendar reform. The first Gregorian day, 1582 October 15, starts at JD 2299160.5, so every JD whose
# day number (floor(jd + 0.5)) is at least 2299161 falls in the Gregorian calendar.
GREGORIAN_REFORM_JD = 2299161
GREGORIAN_REFORM = datetime.datetime(1582, 10, 15, tzinfo=datetime.timezone.utc)

# Standard altitudes, the geometric altitude of a body's center at apparent rising or setting.
MEAN_REFRACTION = radians(0.5667)
STANDARD_ALTITUDE_STELLAR = radians(-0.5667)
STANDARD_ALTITUDE_SOLAR = radians(-0.8333)
STANDARD_ALTITUDE_LUNAR_MEAN = radians(0.125)

# Solar depression angles for twilight.
CIVIL_TWILIGHT = radians(-6.0)
NAUTICAL_TWILIGHT = radians(-12.0)
ASTRONOMICAL_TWILIGHT = radians(-18.0)
