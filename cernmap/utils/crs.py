"""Coordinate Reference System (CRS) constants and projection zone resolution.

This module defines the geographic CRS used for all inputs and outputs, and the
functions that pick the WGS84 / UTM zone a geographic point belongs to:
- LATLON_CRS: WGS84 geographic coordinates (EPSG:4326)
- utm_zone: the EPSG code of the UTM zone containing a point, e.g. 'EPSG:32632'
"""

from __future__ import annotations

import logging
import math

from pyproj import CRS

from cernmap.constructs.geo_point import GeoPoint

log = logging.getLogger(__name__)

# WGS84 latitude/longitude coordinate system (EPSG:4326)
# Standard GPS coordinates in decimal degrees
LATLON_CRS = CRS(4326)

# EPSG code prefixes for the WGS84 / UTM zone families
NORTHERN_ZONE_PREFIX = "EPSG:326"
SOUTHERN_ZONE_PREFIX = "EPSG:327"

# UTM zones are 6 degrees wide, numbered from 1 to 60
ZONE_WIDTH_DEGREES = 6
ZONE_COUNT = 60


def zone_number(lng: float) -> int:
    """
    Get the UTM zone number (1 to 60) for a longitude.

    Longitudes outside [-180, 180) are wrapped first, so 180 resolves to zone 1
    together with -180 rather than to a nonexistent zone 61.

    Args:
        lng: The longitude in decimal degrees

    Returns:
        The zone number

    Examples:
        >>> zone_number(6.05)
        32
        >>> zone_number(180.0)
        1
    """
    wrapped = (lng + 180.0) % 360.0
    return int(math.floor(wrapped / ZONE_WIDTH_DEGREES)) + 1


def utm_zone(point: GeoPoint) -> str:
    """
    Resolve the projection zone identifier for a geographic point.

    The identifier is the EPSG code of the matching WGS84 / UTM zone. Points with a
    latitude of zero or more use the northern family (EPSG:326NN), the others use the
    southern family (EPSG:327NN).

    UTM is only defined between 80S and 84N; points closer to the poles still resolve
    to a zone but project with growing distortion.

    Args:
        point: The geographic point

    Returns:
        The zone identifier, e.g. 'EPSG:32632'

    Examples:
        >>> utm_zone(GeoPoint(46.23, 6.05))
        'EPSG:32632'
        >>> utm_zone(GeoPoint(-46.4, 168.35))
        'EPSG:32759'
    """
    prefix = NORTHERN_ZONE_PREFIX if point.lat >= 0 else SOUTHERN_ZONE_PREFIX
    zone = f"{prefix}{zone_number(point.lng):02d}"
    log.debug("resolved %s to zone %s", point, zone)
    return zone


def utm_zone_from_longitude(lng: float) -> str:
    """
    Resolve a zone identifier from a longitude alone.

    This always returns the northern zone family and therefore ignores the hemisphere;
    it exists for callers relying on the older longitude-only lookup. Prefer utm_zone.

    Args:
        lng: The longitude in decimal degrees

    Returns:
        The northern zone identifier for the longitude's band
    """
    return f"{NORTHERN_ZONE_PREFIX}{zone_number(lng):02d}"
