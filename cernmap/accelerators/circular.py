from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from cernmap.accelerators.accelerator_interface import AcceleratorInterface
from cernmap.constructs.geo_point import GeoPoint
from cernmap.constructs.point_of_interest import PointOfInterest
from cernmap.constructs.shape import TranslatedShape
from cernmap.utils.projection import Projector


@dataclass(frozen=True)
class CircularCollider(AcceleratorInterface):
    """
    A ring-shaped accelerator represented by a circle.

    Translating a circle only moves its center: the radius is a ground distance in
    meters and is carried over unchanged.

    Args:
        name: The display name, e.g. 'Large Hadron Collider'
        center: The real-world center of the ring
        radius: The ring radius in meters. Not validated.
        points_of_interest: Named sites attached to the ring
        color: An optional display color

    Examples:
        >>> from cernmap.constructs.geo_point import GeoPoint
        >>> ring = CircularCollider('Test Ring', GeoPoint(46.233, 6.05), 1000.0)
        >>> shape = ring.translated_path(GeoPoint(40.7128, -74.006))
        >>> shape.points[0], shape.radius
        (GeoPoint(lat=40.7128, lng=-74.006), 1000.0)
    """

    name: str
    center: GeoPoint
    radius: float
    points_of_interest: Tuple[PointOfInterest, ...] = ()
    color: Optional[str] = None

    @property
    def reference_point(self) -> GeoPoint:
        return self.center

    def translated_path(
        self,
        reference: GeoPoint,
        rotation: float = 0.0,
        projector: Optional[Projector] = None,
    ) -> TranslatedShape:
        return TranslatedShape.circle(
            GeoPoint.coerce(reference), self.radius, self.name, color=self.color
        )
