"""Placement of the LHC access point markers around a chosen location.

The ring is anchored so that its first marker (ATLAS) sits exactly on the chosen
location. The ring center lies one ring radius away from it along the rotation bearing,
and every other marker is placed on the circle around that center at a fixed angular
offset, turned along with the rotation.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence

from cernmap.constructs.geo_point import GeoPoint
from cernmap.constructs.point_of_interest import PointOfInterest
from cernmap.utils.defaults import DEFAULT_RING_RADIUS, EARTH_RADIUS
from cernmap.utils.geo import compute_destination


class RingMarker(NamedTuple):
    """
    A marker on the ring.

    Attributes:
        name: The marker label
        angle: The marker's angular offset on the ring in degrees
    """

    name: str
    angle: float


class Venue(NamedTuple):
    """
    A named location the ring can be placed on.

    Attributes:
        name: The venue name
        location: Where the first marker of the ring is pinned
        angle: The rotation used when rotation is not allowed, in degrees
        allow_rotation: Whether callers may choose the rotation freely
    """

    name: str
    location: GeoPoint
    angle: float = 0.0
    allow_rotation: bool = True

    def effective_rotation(self, rotation: Optional[float] = None) -> float:
        if not self.allow_rotation or rotation is None:
            return self.angle
        return rotation


class RingPlacement(NamedTuple):
    """
    The result of placing a ring.

    Attributes:
        center: The center of the ring
        radius: The ring radius in meters
        rotation: The rotation the ring was placed with, in degrees
        markers: The placed markers, in ring order
    """

    center: GeoPoint
    radius: float
    rotation: float
    markers: List[PointOfInterest]


LHC_RING_MARKERS = (
    RingMarker("PT1 - ATLAS", 0.0),
    RingMarker("PT2", 45.0),
    RingMarker("PT3", 88.0),
    RingMarker("PT4", 140.0),
    RingMarker("PT5 - CMS", 186.0),
    RingMarker("PT6", 226.0),
    RingMarker("PT7", 269.0),
    RingMarker("PT8", 312.0),
)

DEFAULT_VENUES = (
    Venue(
        "PT1 - ATLAS",
        GeoPoint(46.23497502511518, 6.0536309870679235),
        angle=10.0,
        allow_rotation=False,
    ),
    Venue("WOMAD", GeoPoint(51.602270, -2.082470)),
    Venue("Latitude", GeoPoint(52.335003, 1.592255)),
    Venue("ROTOTOM Sunsplash", GeoPoint(40.048134, 0.046666)),
    Venue("Sonorama", GeoPoint(41.668949, -3.683864)),
)


def place_ring(
    location: GeoPoint,
    rotation: float,
    markers: Sequence[RingMarker] = LHC_RING_MARKERS,
    radius: float = DEFAULT_RING_RADIUS,
    earth_radius: float = EARTH_RADIUS,
) -> RingPlacement:
    """
    Place a ring of markers so that its first marker sits on a location.

    The ring center is the destination point one ring radius from the location along
    the rotation bearing. Marker i (i > 0) is placed one ring radius from the center
    along the bearing (angle_i + rotation + 180) mod 360.

    Args:
        location: Where the first marker is pinned
        rotation: The ring rotation in degrees clockwise
        markers: The markers to place. Default is the eight LHC access points.
        radius: The ring radius in meters. Default is the LHC radius of 4300 m.
        earth_radius: The sphere radius used for the destination points

    Returns:
        A RingPlacement with the ring center and the placed markers

    Examples:
        >>> placement = place_ring(GeoPoint(51.602270, -2.082470), rotation=30.0)
        >>> placement.markers[0].position
        GeoPoint(lat=51.60227, lng=-2.08247)
    """
    center = compute_destination(location, rotation, radius, earth_radius)

    placed = []
    for i, marker in enumerate(markers):
        if i == 0:
            position = location
        else:
            bearing = (marker.angle + rotation + 180) % 360
            position = compute_destination(center, bearing, radius, earth_radius)
        placed.append(PointOfInterest(marker.name, position))

    return RingPlacement(center, radius, rotation, placed)


def place_venue(
    venue: Venue,
    rotation: Optional[float] = None,
    markers: Sequence[RingMarker] = LHC_RING_MARKERS,
    radius: float = DEFAULT_RING_RADIUS,
) -> RingPlacement:
    """
    Place a ring of markers on a venue.

    Venues that do not allow rotation always use their own angle; the others use the
    requested rotation, falling back to their angle when none is given.

    Args:
        venue: The venue to place the ring on
        rotation: The requested rotation in degrees, or None
        markers: The markers to place
        radius: The ring radius in meters

    Returns:
        The RingPlacement for the venue
    """
    return place_ring(
        venue.location, venue.effective_rotation(rotation), markers, radius
    )
