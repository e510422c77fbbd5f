import math
from unittest import TestCase

from cernmap.constructs.geo_point import GeoPoint
from cernmap.overlay.marker_ring import (
    DEFAULT_VENUES,
    LHC_RING_MARKERS,
    RingMarker,
    Venue,
    place_ring,
    place_venue,
)
from cernmap.utils.defaults import DEFAULT_RING_RADIUS, EARTH_RADIUS
from cernmap.utils.geo import compute_destination

WOMAD = GeoPoint(51.602270, -2.082470)


def _great_circle_m(a: GeoPoint, b: GeoPoint) -> float:
    lat1, lat2 = math.radians(a.lat), math.radians(b.lat)
    dlat = lat2 - lat1
    dlng = math.radians(b.lng - a.lng)
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
    return 2 * EARTH_RADIUS * math.asin(math.sqrt(h))


class TestPlaceRing(TestCase):
    def test_first_marker_is_pinned(self):
        placement = place_ring(WOMAD, 30.0)

        self.assertEqual(placement.markers[0].position, WOMAD)
        self.assertEqual(placement.markers[0].name, "PT1 - ATLAS")

    def test_center_is_one_radius_along_the_rotation(self):
        placement = place_ring(WOMAD, 30.0)

        self.assertEqual(placement.center, compute_destination(WOMAD, 30.0, 4300.0))
        self.assertEqual(placement.radius, DEFAULT_RING_RADIUS)
        self.assertEqual(placement.rotation, 30.0)

    def test_zero_rotation_places_center_north(self):
        placement = place_ring(WOMAD, 0.0)

        self.assertGreater(placement.center.lat, WOMAD.lat)
        self.assertAlmostEqual(placement.center.lng, WOMAD.lng, places=12)

    def test_markers_lie_on_the_ring(self):
        placement = place_ring(WOMAD, 75.0)

        self.assertEqual(len(placement.markers), len(LHC_RING_MARKERS))
        for marker in placement.markers:
            with self.subTest(marker=marker.name):
                self.assertAlmostEqual(
                    _great_circle_m(placement.center, marker.position), 4300.0, delta=0.01
                )

    def test_marker_bearings(self):
        markers = [RingMarker("a", 0.0), RingMarker("b", 90.0)]
        placement = place_ring(WOMAD, 10.0, markers=markers, radius=1000.0)

        expected = compute_destination(placement.center, 280.0, 1000.0)
        self.assertEqual(placement.markers[1].position, expected)

    def test_rotation_is_not_normalized(self):
        a = place_ring(WOMAD, 10.0)
        b = place_ring(WOMAD, 370.0)

        for p, q in zip(a.markers, b.markers):
            self.assertAlmostEqual(p.position.lat, q.position.lat, places=9)
            self.assertAlmostEqual(p.position.lng, q.position.lng, places=9)


class TestPlaceVenue(TestCase):
    def test_fixed_venue_ignores_rotation(self):
        atlas = DEFAULT_VENUES[0]
        self.assertFalse(atlas.allow_rotation)

        placement = place_venue(atlas, rotation=120.0)

        self.assertEqual(placement.rotation, 10.0)
        self.assertEqual(placement.markers[0].position, atlas.location)

    def test_rotating_venue_uses_requested_rotation(self):
        venue = Venue("WOMAD", WOMAD)

        self.assertEqual(place_venue(venue, rotation=120.0).rotation, 120.0)
        self.assertEqual(place_venue(venue).rotation, 0.0)

    def test_default_venues(self):
        self.assertEqual(
            [v.name for v in DEFAULT_VENUES],
            ["PT1 - ATLAS", "WOMAD", "Latitude", "ROTOTOM Sunsplash", "Sonorama"],
        )
