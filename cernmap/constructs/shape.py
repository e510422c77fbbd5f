from __future__ import annotations

import json
import re
from enum import Enum
from typing import Any, Dict, Iterable, NamedTuple, Optional, Tuple

from shapely.geometry import LineString, Point, Polygon, mapping
from shapely.geometry.base import BaseGeometry

from cernmap.constructs.geo_point import GeoPoint
from cernmap.utils.defaults import ACCELERATOR_CLASS

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9-]")


def slugify(name: str) -> str:
    """
    Turn a display name into a class name slug.

    The name is lowercased, spaces become hyphens and every character outside
    [a-z0-9-] is removed.

    Examples:
        >>> slugify('Large Hadron Collider')
        'large-hadron-collider'
        >>> slugify('LINAC4 (H-)')
        'linac4-h-'
    """
    return _NON_SLUG_CHARS.sub("", name.lower().replace(" ", "-"))


class ShapeKind(Enum):
    """
    The closed set of output geometry kinds.

    Values:
        CIRCLE: A center point with a radius in meters
        POLYLINE: An ordered list of points forming an open line
        POLYGON: An ordered ring of points forming a closed outline
    """

    CIRCLE = "circle"
    POLYLINE = "polyline"
    POLYGON = "polygon"


class TranslatedShape(NamedTuple):
    """
    The footprint of an accelerator moved to a target location, in geographic coordinates.

    TranslatedShape is a tagged value: kind decides how points and radius are read.
    Circles hold a single center point and a radius in meters; polylines and polygons
    hold their vertices in order and no radius. Polygon rings are not repeated at the
    end; the shapely geometry closes them.

    Attributes:
        kind: The geometry kind
        points: The center (circles) or the ordered vertices (polylines, polygons)
        name: The display name of the accelerator the shape belongs to
        radius: The radius in meters for circles, None otherwise
        color: An optional display color such as '#FF0000'

    Examples:
        >>> from cernmap.accelerators.cern import LHC
        >>> shape = LHC.translated_path(GeoPoint(51.5, -0.12))
        >>> shape.kind, shape.radius, shape.class_name
        (<ShapeKind.CIRCLE: 'circle'>, 4300.0, 'large-hadron-collider')
    """

    kind: ShapeKind
    points: Tuple[GeoPoint, ...]
    name: str
    radius: Optional[float] = None
    color: Optional[str] = None

    @classmethod
    def circle(
        cls, center: GeoPoint, radius: float, name: str, color: Optional[str] = None
    ) -> TranslatedShape:
        return cls(ShapeKind.CIRCLE, (center,), name, radius=radius, color=color)

    @classmethod
    def polyline(
        cls, points: Iterable[GeoPoint], name: str, color: Optional[str] = None
    ) -> TranslatedShape:
        return cls(ShapeKind.POLYLINE, tuple(points), name, color=color)

    @classmethod
    def polygon(
        cls, points: Iterable[GeoPoint], name: str, color: Optional[str] = None
    ) -> TranslatedShape:
        return cls(ShapeKind.POLYGON, tuple(points), name, color=color)

    @property
    def center(self) -> GeoPoint:
        """
        Get the center of the shape.

        For circles this is the stored center. For polylines it is the midpoint of the
        first and last vertex, and for polygons the center of the bounding box.
        """
        if self.kind is ShapeKind.CIRCLE:
            return self.points[0]
        if self.kind is ShapeKind.POLYLINE:
            first, last = self.points[0], self.points[-1]
            return GeoPoint((first.lat + last.lat) / 2, (first.lng + last.lng) / 2)
        min_lng, min_lat, max_lng, max_lat = self.geometry.bounds
        return GeoPoint((min_lat + max_lat) / 2, (min_lng + max_lng) / 2)

    @property
    def class_name(self) -> str:
        return slugify(self.name)

    @property
    def css_classes(self) -> str:
        """The full class attribute for rendering, e.g. 'accelerator accelerator-circle lhc'."""
        kind = "rounded-rectangle" if self.kind is ShapeKind.POLYGON else self.kind.value
        return f"{ACCELERATOR_CLASS} {ACCELERATOR_CLASS}-{kind} {self.class_name}"

    @property
    def geometry(self) -> BaseGeometry:
        """
        Get the shape as a shapely geometry in (lng, lat) axis order.

        Circles are returned as their center Point since the radius is in meters and
        cannot be expressed in degrees without distortion.
        """
        coords = [(p.lng, p.lat) for p in self.points]
        if self.kind is ShapeKind.CIRCLE:
            return Point(coords[0])
        if self.kind is ShapeKind.POLYLINE:
            return LineString(coords)
        return Polygon(coords)

    def properties(self) -> Dict[str, Any]:
        props: Dict[str, Any] = {
            "name": self.name,
            "kind": self.kind.value,
            "class_name": self.class_name,
            "color": self.color,
        }
        if self.radius is not None:
            props["radius"] = self.radius
        return props

    def to_feature(self) -> Dict[str, Any]:
        return {
            "type": "Feature",
            "geometry": mapping(self.geometry),
            "properties": self.properties(),
        }

    def to_geojson(self) -> str:
        """
        Convert the shape to a GeoJSON Feature string.

        The geometry comes from the geometry property; the name, kind, class name,
        color and (for circles) radius are stored as feature properties.

        Returns:
            A GeoJSON string

        Examples:
            >>> shape = LHC.translated_path(GeoPoint(51.5, -0.12))
            >>> with open('lhc.geojson', 'w') as f:
            ...     f.write(shape.to_geojson())
        """
        return json.dumps(self.to_feature())
