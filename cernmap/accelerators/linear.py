from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from cernmap.accelerators.accelerator_interface import AcceleratorInterface
from cernmap.constructs.geo_point import GeoPoint
from cernmap.constructs.point_of_interest import PointOfInterest
from cernmap.constructs.shape import TranslatedShape
from cernmap.utils.crs import utm_zone
from cernmap.utils.projection import DEFAULT_PROJECTOR, Projector


@dataclass(frozen=True)
class LinearAccelerator(AcceleratorInterface):
    """
    A straight accelerator represented by a line segment.

    The segment is described by its midpoint, its length and its compass direction.
    When translating, the two endpoints are built directly in the target location's
    planar frame rather than by moving precomputed endpoints, so long segments do not
    pick up the distortion of the source zone.

    Args:
        name: The display name, e.g. 'LINAC4'
        midpoint: The real-world midpoint of the segment
        length: The segment length in meters. Not validated.
        direction: The compass direction of the segment in degrees, 0 is north and
            angles grow clockwise
        points_of_interest: Named sites attached to the accelerator
        color: An optional display color

    Examples:
        >>> from cernmap.constructs.geo_point import GeoPoint
        >>> linac = LinearAccelerator('Test Linac', GeoPoint(46.233, 6.05), 1000.0, 0.0)
        >>> shape = linac.translated_path(GeoPoint(40.7128, -74.006))
        >>> len(shape.points)
        2
    """

    name: str
    midpoint: GeoPoint
    length: float
    direction: float
    points_of_interest: Tuple[PointOfInterest, ...] = ()
    color: Optional[str] = None

    @property
    def reference_point(self) -> GeoPoint:
        return self.midpoint

    def translated_path(
        self,
        reference: GeoPoint,
        rotation: float = 0.0,
        projector: Optional[Projector] = None,
    ) -> TranslatedShape:
        projector = projector or DEFAULT_PROJECTOR
        reference = GeoPoint.coerce(reference)
        zone = utm_zone(reference)
        center = projector.forward(reference, zone)

        theta = math.radians(self.direction + rotation)
        half = self.length / 2
        dx = half * math.sin(theta)
        dy = half * math.cos(theta)

        endpoints = projector.inverse_many(
            [center.x - dx, center.x + dx], [center.y - dy, center.y + dy], zone
        )
        return TranslatedShape.polyline(endpoints, self.name, color=self.color)
