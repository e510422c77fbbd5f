import json
from dataclasses import dataclass, field
from typing import Dict, List

import geopandas as gpd
import pandas as pd

from cernmap.constructs.point_of_interest import PointOfInterest
from cernmap.constructs.shape import TranslatedShape
from cernmap.utils.crs import LATLON_CRS


@dataclass
class OverlayResult:
    shapes: List[TranslatedShape] = field(default_factory=list)
    points_of_interest: Dict[str, List[PointOfInterest]] = field(default_factory=dict)

    def shapes_to_geodataframe(self) -> gpd.GeoDataFrame:
        """
        Convert the translated shapes to a GeoDataFrame.

        Each row is one accelerator footprint. Circles are stored as their center point
        with the radius in meters in the radius column.

        Returns:
            A GeoDataFrame in EPSG:4326 with the columns name, kind, class_name, color,
            radius and geometry

        Examples:
            >>> result = build_overlay(registry, ['LHC', 'SPS'], GeoPoint(51.5, -0.12))
            >>> gdf = result.shapes_to_geodataframe()
            >>> gdf.to_file('overlay.geojson', driver='GeoJSON')
        """
        rows = [
            {
                "name": s.name,
                "kind": s.kind.value,
                "class_name": s.class_name,
                "color": s.color,
                "radius": s.radius,
            }
            for s in self.shapes
        ]
        frame = pd.DataFrame(
            rows, columns=["name", "kind", "class_name", "color", "radius"]
        )
        return gpd.GeoDataFrame(
            frame, geometry=[s.geometry for s in self.shapes], crs=LATLON_CRS
        )

    def pois_to_dataframe(self) -> pd.DataFrame:
        """
        Convert the translated points of interest to a pandas DataFrame.

        Returns:
            A DataFrame with one row per point and the columns accelerator, name, lat, lng
        """
        rows = [
            {"accelerator": accelerator, **poi.to_flat_dict()}
            for accelerator, pois in self.points_of_interest.items()
            for poi in pois
        ]
        return pd.DataFrame(rows, columns=["accelerator", "name", "lat", "lng"])

    def pois_to_geodataframe(self) -> gpd.GeoDataFrame:
        df = self.pois_to_dataframe()
        return gpd.GeoDataFrame(
            df, geometry=gpd.points_from_xy(df["lng"], df["lat"]), crs=LATLON_CRS
        )

    def to_geojson(self) -> str:
        """
        Convert the whole overlay to a GeoJSON FeatureCollection string.

        Shapes come first, followed by one Point feature per point of interest with its
        accelerator and name as properties.
        """
        features = [s.to_feature() for s in self.shapes]
        for accelerator, pois in self.points_of_interest.items():
            for poi in pois:
                features.append(
                    {
                        "type": "Feature",
                        "geometry": {
                            "type": "Point",
                            "coordinates": [poi.position.lng, poi.position.lat],
                        },
                        "properties": {"accelerator": accelerator, "name": poi.name},
                    }
                )
        return json.dumps({"type": "FeatureCollection", "features": features})
