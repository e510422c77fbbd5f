from __future__ import annotations

import logging
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence, TypeVar, Union

from cernmap.constructs.geo_point import GeoPoint, PlanarPoint
from cernmap.constructs.point_of_interest import PointOfInterest
from cernmap.utils.crs import utm_zone
from cernmap.utils.projection import DEFAULT_PROJECTOR, Projector

log = logging.getLogger(__name__)

Translatable = TypeVar("Translatable", GeoPoint, PointOfInterest)


class ZoneStrategy(Enum):
    """
    How the projection zones of the points in a single translation are chosen.

    Values:
        SHARED: Every point (origin and all translated points) is projected into the
            one zone resolved from the reference point. This is the default.
        NATIVE: The origin and every translated point are projected into their own
            natural zone, the reference into its zone, and the results are converted
            back from the reference zone. This reproduces the older behavior and
            diverges from SHARED by up to a few meters near zone boundaries.
    """

    SHARED = "shared"
    NATIVE = "native"


class Translation(NamedTuple):
    """
    A planar offset between two geographic points.

    Attributes:
        dx: The easting offset in meters
        dy: The northing offset in meters
        zone: The zone the offset was computed in (the reference point's zone)
    """

    dx: float
    dy: float
    zone: str


def translate(
    reference: GeoPoint,
    origin: GeoPoint,
    strategy: ZoneStrategy = ZoneStrategy.SHARED,
    projector: Optional[Projector] = None,
) -> Translation:
    """
    Compute the planar offset that moves an origin point onto a reference point.

    With the SHARED strategy both points are projected into the reference point's zone
    so the offset is expressed in a single planar frame. With NATIVE the origin is
    projected into its own zone instead.

    Args:
        reference: The target point
        origin: The point being moved
        strategy: How zones are chosen for the origin. Default is ZoneStrategy.SHARED.
        projector: The projector to use. Default is the module-level projector.

    Returns:
        A Translation holding dx, dy in meters and the reference zone

    Raises:
        ProjectionError: If either point cannot be projected

    Examples:
        >>> from cernmap.constructs.geo_point import GeoPoint
        >>> t = translate(GeoPoint(46.2044, 6.1432), GeoPoint(46.233, 6.05))
        >>> t.zone
        'EPSG:32632'
    """
    projector = projector or DEFAULT_PROJECTOR
    reference, origin = GeoPoint.coerce(reference), GeoPoint.coerce(origin)
    zone = utm_zone(reference)
    origin_zone = zone if strategy is ZoneStrategy.SHARED else utm_zone(origin)

    ref_xy = projector.forward(reference, zone)
    origin_xy = projector.forward(origin, origin_zone)

    translation = Translation(ref_xy.x - origin_xy.x, ref_xy.y - origin_xy.y, zone)
    log.debug(
        "translation from %s to %s: %s (%s zones)",
        origin,
        reference,
        translation,
        strategy.value,
    )
    return translation


def _position(point: Union[GeoPoint, PointOfInterest]) -> GeoPoint:
    if isinstance(point, PointOfInterest):
        return point.position
    return point


def translate_points(
    reference: GeoPoint,
    origin: GeoPoint,
    points: Sequence[Translatable],
    strategy: ZoneStrategy = ZoneStrategy.SHARED,
    projector: Optional[Projector] = None,
) -> List[Translatable]:
    """
    Rigidly move a set of points by the offset between an origin and a reference point.

    Every point keeps its planar offset from the origin: it is projected, shifted by
    (dx, dy) and converted back to geographic coordinates from the reference zone.
    With the SHARED strategy (default) all points are projected into the reference
    point's zone. With NATIVE each point uses its own natural zone.

    Translating with reference equal to origin returns the input positions within
    projection round-trip tolerance.

    Args:
        reference: The target point the origin is moved onto
        origin: The anchor the points are positioned relative to
        points: GeoPoints or PointOfInterest values to move. The inputs are not modified.
        strategy: How zones are chosen for the moved points. Default is ZoneStrategy.SHARED.
        projector: The projector to use. Default is the module-level projector.

    Returns:
        New points of the same types as the inputs, in input order. Points of interest
        keep their names.

    Raises:
        ProjectionError: If any point cannot be projected into its zone

    Examples:
        >>> from cernmap.constructs.geo_point import GeoPoint
        >>> from cernmap.constructs.point_of_interest import PointOfInterest
        >>> center = GeoPoint(46.2726, 6.0660)
        >>> pois = [PointOfInterest.from_lat_lng('ATLAS', 46.2350, 6.0536)]
        >>> moved = translate_points(GeoPoint(46.2044, 6.1432), center, pois)
        >>> moved[0].name
        'ATLAS'
    """
    projector = projector or DEFAULT_PROJECTOR
    if not points:
        return []

    reference, origin = GeoPoint.coerce(reference), GeoPoint.coerce(origin)

    dx, dy, zone = translate(reference, origin, strategy, projector)
    positions = [_position(p) for p in points]

    if strategy is ZoneStrategy.SHARED:
        xs, ys = projector.forward_many(positions, zone)
    else:
        planar = [projector.forward(p, utm_zone(p)) for p in positions]
        xs = [xy.x for xy in planar]
        ys = [xy.y for xy in planar]

    shifted = [PlanarPoint(x, y).offset(dx, dy) for x, y in zip(xs, ys)]
    moved = projector.inverse_many(
        [p.x for p in shifted], [p.y for p in shifted], zone
    )

    return [
        p.moved_to(new) if isinstance(p, PointOfInterest) else new
        for p, new in zip(points, moved)
    ]
