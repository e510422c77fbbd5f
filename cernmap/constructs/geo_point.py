from __future__ import annotations

from typing import NamedTuple, Sequence, Union

from shapely.geometry import Point


class GeoPoint(NamedTuple):
    """
    A geographic position in WGS84 (EPSG:4326) decimal degrees.

    GeoPoint is immutable. Latitude is expected to lie in [-90, 90] but this is not
    enforced; longitude is unconstrained.

    Attributes:
        lat: The latitude in decimal degrees
        lng: The longitude in decimal degrees

    Examples:
        >>> from cernmap.constructs.geo_point import GeoPoint
        >>> cern = GeoPoint(46.2725, 6.0659)
        >>> cern.to_point().x
        6.0659
    """

    lat: float
    lng: float

    @classmethod
    def from_lat_lng(cls, lat: float, lng: float) -> GeoPoint:
        return cls(float(lat), float(lng))

    @classmethod
    def coerce(cls, value: Union[GeoPoint, Sequence[float]]) -> GeoPoint:
        """
        Build a GeoPoint from either a GeoPoint or a (lat, lng) pair.

        Args:
            value: A GeoPoint, or any two-item sequence ordered latitude first

        Returns:
            A GeoPoint instance
        """
        if isinstance(value, GeoPoint):
            return value
        lat, lng = value
        return cls.from_lat_lng(lat, lng)

    def to_point(self) -> Point:
        """Get the position as a shapely Point in (lng, lat) axis order."""
        return Point(self.lng, self.lat)


class PlanarPoint(NamedTuple):
    """
    A position in meters within a projection zone.

    The values are only meaningful together with the zone identifier they were
    projected into.

    Attributes:
        x: The easting in meters
        y: The northing in meters
    """

    x: float
    y: float

    def offset(self, dx: float, dy: float) -> PlanarPoint:
        return PlanarPoint(self.x + dx, self.y + dy)
