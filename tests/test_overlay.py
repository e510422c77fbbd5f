import json
import warnings
from unittest import TestCase

from cernmap.accelerators.registry import build_cern_registry
from cernmap.constructs.geo_point import GeoPoint
from cernmap.overlay.overlay import build_overlay
from cernmap.utils.exceptions import UnknownAcceleratorWarning
from cernmap.utils.translate import ZoneStrategy

MILAN = GeoPoint(45.4642, 9.19)


class TestBuildOverlay(TestCase):
    def setUp(self):
        self.registry = build_cern_registry()

    def test_build_from_names(self):
        result = build_overlay(self.registry, ["LHC", "SPS", "LEIR"], MILAN)

        self.assertEqual(
            [s.name for s in result.shapes],
            ["Large Hadron Collider", "Super Proton Synchrotron", "LEIR"],
        )
        self.assertEqual(list(result.points_of_interest), ["Large Hadron Collider"])
        self.assertEqual(len(result.points_of_interest["Large Hadron Collider"]), 8)

    def test_build_from_attribute_string(self):
        result = build_overlay(self.registry, "lhc, linac4", MILAN)

        self.assertEqual([s.class_name for s in result.shapes], ["large-hadron-collider", "linac4"])

    def test_unknown_names_do_not_abort(self):
        with self.assertWarns(UnknownAcceleratorWarning):
            result = build_overlay(self.registry, "lhc, tevatron, ps", MILAN)

        self.assertEqual(len(result.shapes), 2)

    def test_native_strategy_far_away(self):
        invercargill = GeoPoint(-46.4, 168.35)
        result = build_overlay(
            self.registry, ["LHC"], invercargill, strategy=ZoneStrategy.NATIVE
        )

        pois = result.points_of_interest["Large Hadron Collider"]
        lat = sum(p.position.lat for p in pois) / len(pois)
        self.assertLess(abs(lat - invercargill.lat), 0.01)

    def test_empty_selection(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = build_overlay(self.registry, "", MILAN)

        self.assertEqual(result.shapes, [])
        self.assertEqual(result.points_of_interest, {})


class TestOverlayResult(TestCase):
    def setUp(self):
        self.result = build_overlay(
            build_cern_registry(), ["LHC", "LINAC4", "LEIR"], MILAN
        )

    def test_shapes_to_geodataframe(self):
        gdf = self.result.shapes_to_geodataframe()

        self.assertEqual(len(gdf), 3)
        self.assertEqual(list(gdf["kind"]), ["circle", "polyline", "polygon"])
        self.assertEqual(gdf.crs.to_epsg(), 4326)
        self.assertEqual(list(gdf.geometry.geom_type), ["Point", "LineString", "Polygon"])

    def test_pois_to_dataframe(self):
        df = self.result.pois_to_dataframe()

        self.assertEqual(list(df.columns), ["accelerator", "name", "lat", "lng"])
        self.assertEqual(len(df), 8)
        self.assertEqual(df["name"].iloc[0], "ATLAS")

    def test_pois_to_geodataframe(self):
        gdf = self.result.pois_to_geodataframe()

        self.assertEqual(len(gdf), 8)
        self.assertAlmostEqual(gdf.geometry.iloc[0].x, gdf["lng"].iloc[0])

    def test_to_geojson(self):
        collection = json.loads(self.result.to_geojson())

        self.assertEqual(collection["type"], "FeatureCollection")
        self.assertEqual(len(collection["features"]), 3 + 8)
        self.assertEqual(collection["features"][-1]["properties"]["name"], "Point 8")
