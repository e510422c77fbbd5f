"""
# Overlay Example

An example of putting the CERN accelerator complex, at true scale, on top of another city
"""


def main():
    """
    First, we build the accelerator registry.
    The registry is a read-only table of the accelerators at CERN, keyed by short name:
    """

    from cernmap.accelerators.registry import build_cern_registry

    registry = build_cern_registry()
    print(registry)

    """
    Every accelerator has a reference point at its real-world location.
    For ring-shaped accelerators like the LHC this is the center of the ring:
    """

    lhc = registry.lookup("lhc")
    print(lhc.name, lhc.reference_point)

    """
    Now, let's pick a target location. Any latitude and longitude on Earth will do.
    Here we use the center of London:
    """

    from cernmap.constructs.geo_point import GeoPoint

    london = GeoPoint(51.5074, -0.1278)

    """
    Translating an accelerator gives us its footprint moved onto the target location.
    The shape keeps its true size in meters; the LHC stays a 4.3 km radius circle:
    """

    shape = lhc.translated_path(london)
    print(shape.kind, shape.center, shape.radius)

    """
    The eight LHC access points move together with the ring.
    Each point keeps its offset in meters from the ring center:
    """

    for poi in lhc.translated_points_of_interest(london):
        print(poi.name, poi.position)

    """
    By default every point of a translation is projected into the UTM zone of the target location.
    That is accurate when the target is close to CERN but degrades far away.
    For a target on the other side of the planet, project each point in its own zone instead:
    """

    from cernmap.utils.translate import ZoneStrategy

    invercargill = GeoPoint(-46.4, 168.35)
    far_pois = lhc.translated_points_of_interest(
        invercargill, strategy=ZoneStrategy.NATIVE
    )
    print(far_pois[0])

    """
    Usually we want several accelerators at once.
    `build_overlay` accepts the same comma separated list a map component would, and warns about unknown names instead of failing:
    """

    from cernmap.overlay.overlay import build_overlay

    result = build_overlay(registry, "lhc, sps, ps, linac4, leir", london, rotation=15.0)

    """
    The result converts to GeoJSON or to a GeoDataFrame for plotting or saving to file:
    """

    gdf = result.shapes_to_geodataframe()
    gdf.head()

    pois_df = result.pois_to_dataframe()
    pois_df.head()

    with open("overlay.geojson", "w") as f:
        f.write(result.to_geojson())

    """
    Lastly, the LHC access points can be placed as a ring of markers around a venue,
    with the first marker pinned on the venue and the ring turned by a rotation angle:
    """

    from cernmap.overlay.marker_ring import DEFAULT_VENUES, place_venue

    womad = DEFAULT_VENUES[1]
    placement = place_venue(womad, rotation=45.0)
    for marker in placement.markers:
        print(marker.name, marker.position)


if __name__ == "__main__":
    main()
