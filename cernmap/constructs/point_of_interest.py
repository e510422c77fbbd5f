from __future__ import annotations

from typing import Any, Dict, NamedTuple

from cernmap.constructs.geo_point import GeoPoint


class PointOfInterest(NamedTuple):
    """
    A named location attached to an accelerator, such as a detector site or access point.

    Points of interest are templates: translating an accelerator produces new
    PointOfInterest instances via moved_to and never alters the original.

    Attributes:
        name: The display name of the point (e.g. 'ATLAS')
        position: The geographic position of the point

    Examples:
        >>> from cernmap.constructs.geo_point import GeoPoint
        >>> from cernmap.constructs.point_of_interest import PointOfInterest
        >>> atlas = PointOfInterest('ATLAS', GeoPoint(46.2350, 6.0536))
        >>> moved = atlas.moved_to(GeoPoint(51.5, -0.12))
        >>> print(moved.name, moved.position.lat)
        ATLAS 51.5
    """

    name: str
    position: GeoPoint

    @classmethod
    def from_lat_lng(cls, name: str, lat: float, lng: float) -> PointOfInterest:
        return cls(name, GeoPoint.from_lat_lng(lat, lng))

    def moved_to(self, position: GeoPoint) -> PointOfInterest:
        """
        Create a copy of this point of interest at a different position.

        Args:
            position: The new position

        Returns:
            A new PointOfInterest with the same name
        """
        return self._replace(position=position)

    def to_flat_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "lat": self.position.lat, "lng": self.position.lng}
