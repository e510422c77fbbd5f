from unittest import TestCase

from cernmap.constructs.geo_point import GeoPoint
from cernmap.utils.crs import utm_zone, utm_zone_from_longitude, zone_number


class TestZoneResolution(TestCase):
    def test_northern_zone(self):
        self.assertEqual(utm_zone(GeoPoint(46.23, 6.05)), "EPSG:32632")
        self.assertEqual(utm_zone(GeoPoint(40.7128, -74.006)), "EPSG:32618")

    def test_southern_zone(self):
        self.assertEqual(utm_zone(GeoPoint(-46.4, 168.35)), "EPSG:32759")
        self.assertEqual(utm_zone(GeoPoint(-0.1807, -78.4678)), "EPSG:32717")

    def test_equator_is_northern(self):
        self.assertEqual(utm_zone(GeoPoint(0.0, 0.0)), "EPSG:32631")

    def test_zone_numbers_are_zero_padded(self):
        self.assertEqual(utm_zone(GeoPoint(10.0, -177.0)), "EPSG:32601")
        self.assertEqual(utm_zone(GeoPoint(-10.0, -140.0)), "EPSG:32707")

    def test_zone_number_bands(self):
        self.assertEqual(zone_number(-180.0), 1)
        self.assertEqual(zone_number(-174.0), 2)
        self.assertEqual(zone_number(5.999), 31)
        self.assertEqual(zone_number(6.0), 32)
        self.assertEqual(zone_number(179.999), 60)

    def test_longitude_wraps_around(self):
        """180 degrees shares the band of -180 instead of producing zone 61"""
        self.assertEqual(zone_number(180.0), 1)
        self.assertEqual(zone_number(366.05), zone_number(6.05))
        self.assertEqual(zone_number(-353.95), zone_number(6.05))

    def test_longitude_only_lookup_ignores_hemisphere(self):
        self.assertEqual(utm_zone_from_longitude(168.35), "EPSG:32659")
        self.assertEqual(utm_zone_from_longitude(6.05), "EPSG:32632")
