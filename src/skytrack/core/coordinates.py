import json
from math import sin, cos, tan, asin, atan, atan2, radians, degrees, isnan

from skytrack.exceptions import InvalidArgument
from skytrack.util.constants import EARTH_FLATTENING, EARTH_EQUATORIAL_RADIUS
from skytrack.util.helpers import atan3


def _checkNan(**components):
    for name, value in components.items():
        if isnan(value):
            raise InvalidArgument(f'{name} must be a number, not NaN')


class EclipticCoordinate:
    """Ecliptic latitude and longitude in radians. The same type describes an observer on the Earth, where lat is the
    geographic latitude, lng the geographic longitude measured positively westward and h the height above the
    ellipsoid in meters."""

    __slots__ = '_lat', '_lng', '_h'

    def __init__(self, lat: float, lng: float, h: float = None):
        _checkNan(lat=lat, lng=lng)
        if h is not None:
            _checkNan(h=h)

        self._lat = lat
        self._lng = lng
        self._h = h

    @classmethod
    def fromGeographic(cls, latitude: float, longitude: float, height: float = None) -> 'EclipticCoordinate':
        """Creates an observer location from a geographic latitude and an east positive longitude in degrees."""

        return cls(radians(latitude), -radians(longitude), height)

    def toGeographic(self) -> (float, float):
        """Returns the latitude and the east positive longitude in degrees."""

        return degrees(self._lat), -degrees(self._lng)

    def __str__(self):
        return f'latitude: {degrees(self._lat)}, longitude: {degrees(self._lng)}, height: {self._h}'

    def __repr__(self):
        return f'EclipticCoordinate({self._lat}, {self._lng}, {self._h})'

    def toDict(self) -> dict:
        return {"lat": self._lat, "lng": self._lng, "h": self._h}

    def toJson(self) -> str:
        return json.dumps(self, default=lambda o: o.toDict())

    @property
    def lat(self) -> float:
        return self._lat

    @property
    def lng(self) -> float:
        return self._lng

    @property
    def h(self) -> float:
        return self._h


class EquatorialCoordinate:
    """Right ascension and declination in radians."""

    __slots__ = '_ra', '_dec'

    def __init__(self, ra: float, dec: float):
        _checkNan(ra=ra, dec=dec)

        self._ra = ra
        self._dec = dec

    def __str__(self):
        return f'ra: {degrees(self._ra)}, dec: {degrees(self._dec)}'

    def __repr__(self):
        return f'EquatorialCoordinate({self._ra}, {self._dec})'

    def toDict(self) -> dict:
        return {"ra": self._ra, "dec": self._dec}

    def toJson(self) -> str:
        return json.dumps(self, default=lambda o: o.toDict())

    @property
    def ra(self) -> float:
        return self._ra

    @property
    def dec(self) -> float:
        return self._dec


class HorizontalCoordinate:
    """Azimuth and altitude in radians. The azimuth is measured westward from the south."""

    __slots__ = '_az', '_alt'

    def __init__(self, az: float, alt: float):
        _checkNan(az=az, alt=alt)

        self._az = az
        self._alt = alt

    def __str__(self):
        return f'azimuth: {degrees(self._az)}, altitude: {degrees(self._alt)}'

    def __repr__(self):
        return f'HorizontalCoordinate({self._az}, {self._alt})'

    def toDict(self) -> dict:
        return {"az": self._az, "alt": self._alt}

    def toJson(self) -> str:
        return json.dumps(self, default=lambda o: o.toDict())

    @property
    def az(self) -> float:
        return self._az

    @property
    def alt(self) -> float:
        return self._alt


def eclipticToEquatorial(ecl: EclipticCoordinate, obliquity: float) -> EquatorialCoordinate:
    """Converts ecliptic coordinates to equatorial coordinates. The right ascension is in the range [0, 2π)."""

    sLat, cLat = sin(ecl.lat), cos(ecl.lat)
    sLng, cLng = sin(ecl.lng), cos(ecl.lng)
    sEps, cEps = sin(obliquity), cos(obliquity)

    # (13.3) p. 93
    ra = atan3(sLng * cEps - (sLat / cLat) * sEps, cLng)
    # (13.4) p. 93
    dec = asin(sLat * cEps + cLat * sEps * sLng)

    return EquatorialCoordinate(ra, dec)


def equatorialToEcliptic(eq: EquatorialCoordinate, obliquity: float) -> EclipticCoordinate:
    """Converts equatorial coordinates to ecliptic coordinates. The longitude is in the range [0, 2π)."""

    sRa, cRa = sin(eq.ra), cos(eq.ra)
    sDec, cDec = sin(eq.dec), cos(eq.dec)
    sEps, cEps = sin(obliquity), cos(obliquity)

    # (13.1) p. 93
    lng = atan3(sRa * cEps + (sDec / cDec) * sEps, cRa)
    # (13.2) p. 93
    lat = asin(sDec * cEps - cDec * sEps * sRa)

    return EclipticCoordinate(lat, lng)


def equatorialToHorizontal(eq: EquatorialCoordinate, observer: EclipticCoordinate,
                           siderealTime: float) -> HorizontalCoordinate:
    """Computes horizontal coordinates of a body for an observer. The sidereal time is the Greenwich sidereal time in
    radians and must be consistent with the coordinates, apparent coordinates need apparent sidereal time."""

    hourAngle = siderealTime - observer.lng - eq.ra

    sH, cH = sin(hourAngle), cos(hourAngle)
    sLat, cLat = sin(observer.lat), cos(observer.lat)
    sDec, cDec = sin(eq.dec), cos(eq.dec)

    # (13.5) p. 93
    az = atan2(sH, cH * sLat - (sDec / cDec) * cLat)
    # (13.6) p. 93
    alt = asin(sLat * sDec + cLat * cDec * cH)

    return HorizontalCoordinate(az, alt)


def parallaxConstants(lat: float, height: float = 0) -> (float, float):
    """Computes the parallax constants ρ sin φ' and ρ cos φ' of a geographic latitude in radians and a height in
    meters above the ellipsoid."""

    if height is None:
        height = 0

    # (11) p. 82
    boa = 1 - EARTH_FLATTENING
    u = atan(boa * tan(lat))
    hoa = height * 1e-3 / EARTH_EQUATORIAL_RADIUS

    return boa * sin(u) + hoa * sin(lat), cos(u) + hoa * cos(lat)
