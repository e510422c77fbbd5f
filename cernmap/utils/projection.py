from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Iterable, List, Tuple

import numpy as np
from pyproj import CRS, Transformer
from pyproj.exceptions import ProjError

from cernmap.constructs.geo_point import GeoPoint, PlanarPoint
from cernmap.utils.crs import LATLON_CRS, ZONE_COUNT
from cernmap.utils.exceptions import ProjectionError

log = logging.getLogger(__name__)

_ZONE_PATTERN = re.compile(r"^EPSG:32[67](\d{2})$")


def validate_zone(zone: str) -> str:
    """
    Check that a zone identifier names a WGS84 / UTM zone.

    Args:
        zone: The zone identifier, e.g. 'EPSG:32632'

    Returns:
        The zone identifier, unchanged

    Raises:
        ProjectionError: If the identifier is not of the form EPSG:326NN or EPSG:327NN
            with NN between 01 and 60
    """
    match = _ZONE_PATTERN.match(zone) if isinstance(zone, str) else None
    if match is None or not 1 <= int(match.group(1)) <= ZONE_COUNT:
        raise ProjectionError(f"{zone!r} is not a valid UTM projection zone")
    return zone


@lru_cache(maxsize=None)
def _transformers(zone: str) -> Tuple[Transformer, Transformer]:
    validate_zone(zone)
    try:
        zone_crs = CRS(zone)
    except ProjError as e:
        raise ProjectionError(f"Could not build a CRS for zone {zone}") from e

    log.debug("building transformers for zone %s", zone)
    to_zone = Transformer.from_crs(LATLON_CRS, zone_crs, always_xy=True)
    from_zone = Transformer.from_crs(zone_crs, LATLON_CRS, always_xy=True)
    return to_zone, from_zone


def _check_finite(xs: np.ndarray, ys: np.ndarray, zone: str, direction: str):
    if not (np.all(np.isfinite(xs)) and np.all(np.isfinite(ys))):
        raise ProjectionError(
            f"Unable to {direction} project coordinates in zone {zone}: "
            "the projection produced non-finite coordinates"
        )


class Projector:
    """
    Converts between WGS84 geographic coordinates and planar meters within a UTM zone.

    The projection is the ellipsoidal transverse Mercator used by the WGS84 / UTM zones
    (via pyproj). Round trips are sub-meter accurate within roughly 500 km of a zone's
    central meridian; accuracy degrades further out, and points too far away cannot be
    projected at all.

    Transformers are built once per zone and shared between all projectors.

    Examples:
        >>> from cernmap.constructs.geo_point import GeoPoint
        >>> from cernmap.utils.projection import Projector
        >>> projector = Projector()
        >>> planar = projector.forward(GeoPoint(46.23, 6.05), 'EPSG:32632')
        >>> back = projector.inverse(planar, 'EPSG:32632')
    """

    def forward(self, point: GeoPoint, zone: str) -> PlanarPoint:
        """
        Project a geographic point into a zone.

        Args:
            point: The geographic point
            zone: The target zone identifier

        Returns:
            The planar position in meters

        Raises:
            ProjectionError: If the zone is invalid or the point cannot be projected
        """
        xs, ys = self.forward_many([point], zone)
        return PlanarPoint(float(xs[0]), float(ys[0]))

    def inverse(self, planar: PlanarPoint, zone: str) -> GeoPoint:
        """
        Convert a planar position within a zone back to geographic coordinates.

        Args:
            planar: The planar position in meters
            zone: The zone the position belongs to

        Returns:
            The geographic point

        Raises:
            ProjectionError: If the zone is invalid or the position cannot be converted
        """
        points = self.inverse_many([planar.x], [planar.y], zone)
        return points[0]

    def forward_many(
        self, points: Iterable[GeoPoint], zone: str
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Project many geographic points into the same zone at once.

        Args:
            points: The geographic points
            zone: The target zone identifier

        Returns:
            Two arrays holding the x and y values in meters
        """
        to_zone, _ = _transformers(zone)
        points = list(points)
        lngs = np.array([p.lng for p in points], dtype=float)
        lats = np.array([p.lat for p in points], dtype=float)
        xs, ys = to_zone.transform(lngs, lats)
        xs, ys = np.asarray(xs, dtype=float), np.asarray(ys, dtype=float)
        _check_finite(xs, ys, zone, "forward")
        return xs, ys

    def inverse_many(
        self, xs: Iterable[float], ys: Iterable[float], zone: str
    ) -> List[GeoPoint]:
        """
        Convert many planar positions within the same zone to geographic points.

        Args:
            xs: The x values in meters
            ys: The y values in meters
            zone: The zone the positions belong to

        Returns:
            The geographic points, in input order
        """
        _, from_zone = _transformers(zone)
        lngs, lats = from_zone.transform(
            np.asarray(list(xs), dtype=float), np.asarray(list(ys), dtype=float)
        )
        lngs, lats = np.asarray(lngs, dtype=float), np.asarray(lats, dtype=float)
        _check_finite(lngs, lats, zone, "inverse")
        return [GeoPoint(float(lat), float(lng)) for lat, lng in zip(lats, lngs)]


DEFAULT_PROJECTOR = Projector()


def forward(point: GeoPoint, zone: str) -> PlanarPoint:
    """Project a geographic point into a zone with the default projector."""
    return DEFAULT_PROJECTOR.forward(point, zone)


def inverse(planar: PlanarPoint, zone: str) -> GeoPoint:
    """Convert a planar position in a zone to a geographic point with the default projector."""
    return DEFAULT_PROJECTOR.inverse(planar, zone)
