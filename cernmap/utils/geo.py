import math

from cernmap.constructs.geo_point import GeoPoint
from cernmap.utils.defaults import EARTH_RADIUS


def compute_destination(
    origin: GeoPoint,
    bearing: float,
    distance: float,
    radius: float = EARTH_RADIUS,
) -> GeoPoint:
    """
    Compute the point reached by travelling from an origin along a bearing on a sphere.

    This is the spherical forward geodesic. It is a deliberately simpler model than the
    ellipsoidal projection used for translating shapes and is used to place markers at
    fixed angular offsets around a center.

    Args:
        origin: The starting point
        bearing: The initial bearing in degrees clockwise from north
        distance: The distance to travel in meters
        radius: The sphere radius in meters. Default is the WGS84 equatorial radius.

    Returns:
        The destination point. The longitude is not wrapped into [-180, 180].

    Examples:
        >>> dest = compute_destination(GeoPoint(0.0, 0.0), 90.0, 111320.0)
        >>> print(f"{dest.lat:.4f}, {dest.lng:.4f}")
        0.0000, 1.0000
    """
    delta = distance / radius
    theta = math.radians(bearing)
    phi1 = math.radians(origin.lat)
    lambda1 = math.radians(origin.lng)

    phi2 = math.asin(
        math.sin(phi1) * math.cos(delta)
        + math.cos(phi1) * math.sin(delta) * math.cos(theta)
    )
    lambda2 = lambda1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(phi1),
        math.cos(delta) - math.sin(phi1) * math.sin(phi2),
    )

    return GeoPoint(math.degrees(phi2), math.degrees(lambda2))
