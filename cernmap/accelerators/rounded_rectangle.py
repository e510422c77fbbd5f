from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from cernmap.accelerators.accelerator_interface import AcceleratorInterface
from cernmap.constructs.geo_point import GeoPoint
from cernmap.constructs.point_of_interest import PointOfInterest
from cernmap.constructs.shape import TranslatedShape
from cernmap.utils.crs import utm_zone
from cernmap.utils.defaults import DEFAULT_CORNER_RADIUS, DEFAULT_STEPS_PER_CORNER
from cernmap.utils.projection import DEFAULT_PROJECTOR, Projector


def rounded_rectangle_ring(
    half_width: float,
    half_height: float,
    radius: float,
    steps_per_corner: int = DEFAULT_STEPS_PER_CORNER,
) -> np.ndarray:
    """
    Build the outline of a rounded rectangle centered on the origin, in local meters.

    Each corner is a quarter circle split into steps_per_corner straight segments, so
    every corner contributes steps_per_corner + 1 vertices. The straight edges are the
    segments joining consecutive corners. The ring is not closed (the first vertex is
    not repeated).

    Args:
        half_width: Half the rectangle width in meters
        half_height: Half the rectangle height in meters
        radius: The corner radius in meters
        steps_per_corner: The number of segments per corner. Default is 6.

    Returns:
        An array of shape (4 * (steps_per_corner + 1), 2) of (x, y) offsets

    Examples:
        >>> ring = rounded_rectangle_ring(10.0, 10.0, 3.0)
        >>> ring.shape
        (28, 2)
    """
    corners = [
        (half_width - radius, -half_height + radius, -math.pi / 2, 0.0),
        (half_width - radius, half_height - radius, 0.0, math.pi / 2),
        (-half_width + radius, half_height - radius, math.pi / 2, math.pi),
        (-half_width + radius, -half_height + radius, math.pi, 1.5 * math.pi),
    ]

    t = np.linspace(0.0, 1.0, steps_per_corner + 1)
    arcs = []
    for cx, cy, start, end in corners:
        angles = start + (end - start) * t
        arcs.append(
            np.column_stack((cx + radius * np.cos(angles), cy + radius * np.sin(angles)))
        )

    return np.vstack(arcs)


def rotate_clockwise(points: np.ndarray, degrees: float) -> np.ndarray:
    """
    Rotate local (x, y) offsets clockwise around the origin.

    With x pointing east and y pointing north this matches compass bearings: a point
    due north rotated by 90 degrees ends up due east.

    Args:
        points: An array of shape (n, 2)
        degrees: The rotation angle in degrees. Not normalized.

    Returns:
        A new array of the rotated offsets
    """
    theta = math.radians(degrees)
    cos, sin = math.cos(theta), math.sin(theta)
    rotation = np.array([[cos, -sin], [sin, cos]])
    return points @ rotation


@dataclass(frozen=True)
class RoundedRectangleAccelerator(AcceleratorInterface):
    """
    A compact accelerator represented by a rectangle with rounded corners.

    The outline is built in local meters around the center, rotated, and placed in the
    target location's planar frame before being converted to geographic coordinates.
    Corner tessellation is fixed rather than adaptive.

    Args:
        name: The display name, e.g. 'LEIR'
        center: The real-world center of the rectangle
        width: The east-west extent in meters before rotation
        height: The north-south extent in meters before rotation
        rotation: The clockwise rotation of the rectangle in degrees
        points_of_interest: Named sites attached to the accelerator
        color: An optional display color
        corner_radius: The corner radius in meters. Default is 3 m.
        steps_per_corner: The number of segments per corner. Default is 6.

    Examples:
        >>> from cernmap.constructs.geo_point import GeoPoint
        >>> leir = RoundedRectangleAccelerator('LEIR', GeoPoint(46.2316, 6.0480), 20.0, 20.0, 54.0)
        >>> shape = leir.translated_path(GeoPoint(51.5074, -0.1278))
        >>> len(shape.points)
        28
    """

    name: str
    center: GeoPoint
    width: float
    height: float
    rotation: float = 0.0
    points_of_interest: Tuple[PointOfInterest, ...] = ()
    color: Optional[str] = None
    corner_radius: float = DEFAULT_CORNER_RADIUS
    steps_per_corner: int = DEFAULT_STEPS_PER_CORNER

    @property
    def reference_point(self) -> GeoPoint:
        return self.center

    def local_ring(self, rotation: float = 0.0) -> np.ndarray:
        """
        Get the rotated outline in local meters around the center.

        Args:
            rotation: An additional clockwise rotation in degrees on top of the
                accelerator's own rotation

        Returns:
            An array of shape (n, 2) of (x, y) offsets in meters
        """
        ring = rounded_rectangle_ring(
            self.width / 2, self.height / 2, self.corner_radius, self.steps_per_corner
        )
        return rotate_clockwise(ring, self.rotation + rotation)

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

        ring = self.local_ring(rotation)
        vertices = projector.inverse_many(
            center.x + ring[:, 0], center.y + ring[:, 1], zone
        )
        return TranslatedShape.polygon(vertices, self.name, color=self.color)
