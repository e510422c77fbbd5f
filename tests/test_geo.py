import math
from unittest import TestCase

from cernmap.constructs.geo_point import GeoPoint
from cernmap.utils.defaults import EARTH_RADIUS
from cernmap.utils.geo import compute_destination


class TestComputeDestination(TestCase):
    def test_one_degree_east_at_the_equator(self):
        dest = compute_destination(GeoPoint(0.0, 0.0), 90.0, 111320.0)

        self.assertAlmostEqual(dest.lat, 0.0, places=9)
        self.assertAlmostEqual(dest.lng, 1.0, places=4)

    def test_due_north_moves_along_the_meridian(self):
        distance = 10000.0
        dest = compute_destination(GeoPoint(46.0, 6.0), 0.0, distance)

        self.assertAlmostEqual(dest.lng, 6.0, places=12)
        self.assertAlmostEqual(
            dest.lat, 46.0 + math.degrees(distance / EARTH_RADIUS), places=10
        )

    def test_zero_distance(self):
        origin = GeoPoint(46.2725, 6.0659)
        dest = compute_destination(origin, 123.0, 0.0)

        self.assertAlmostEqual(dest.lat, origin.lat, places=12)
        self.assertAlmostEqual(dest.lng, origin.lng, places=12)

    def test_matches_formula_exactly(self):
        lat, lng, bearing, distance = 51.60227, -2.08247, 226.0, 4300.0
        delta = distance / EARTH_RADIUS
        theta = math.radians(bearing)
        phi1 = math.radians(lat)
        lambda1 = math.radians(lng)
        phi2 = math.asin(
            math.sin(phi1) * math.cos(delta)
            + math.cos(phi1) * math.sin(delta) * math.cos(theta)
        )
        lambda2 = lambda1 + math.atan2(
            math.sin(theta) * math.sin(delta) * math.cos(phi1),
            math.cos(delta) - math.sin(phi1) * math.sin(phi2),
        )

        dest = compute_destination(GeoPoint(lat, lng), bearing, distance)

        self.assertEqual(dest, GeoPoint(math.degrees(phi2), math.degrees(lambda2)))

    def test_custom_radius(self):
        dest = compute_destination(GeoPoint(0.0, 0.0), 90.0, 1000.0, radius=1000.0)

        self.assertAlmostEqual(dest.lng, math.degrees(1.0), places=9)
