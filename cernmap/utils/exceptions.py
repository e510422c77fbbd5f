class ProjectionError(Exception):
    """
    Raised when a coordinate cannot be projected into, or out of, a projection zone.

    This covers zone identifiers that are not a valid WGS84 / UTM zone, CRS definitions
    that pyproj cannot build, and transformations that produce non-finite coordinates
    (typically a point much too far from the zone's central meridian).
    """


class UnknownAcceleratorWarning(UserWarning):
    """Issued when an accelerator name is not present in a registry."""
