"""Default parameters used throughout cernmap.

These values can be overridden per call; they are collected here so that the shape
generators, the destination point calculator and the marker ring agree on them.
"""

# WGS84 equatorial radius in meters, used as the sphere radius for forward geodesics
EARTH_RADIUS = 6378137.0

# Radius in meters of the rounded corners of a rounded rectangle footprint
DEFAULT_CORNER_RADIUS = 3.0

# Number of straight segments used to tessellate each rounded corner
DEFAULT_STEPS_PER_CORNER = 6

# Radius in meters of the LHC marker ring
DEFAULT_RING_RADIUS = 4300.0

# Class name attached to every translated shape
ACCELERATOR_CLASS = "accelerator"
