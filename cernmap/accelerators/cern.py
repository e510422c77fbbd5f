"""The accelerator complex at CERN, at true scale and real-world position.

Positions are WGS84 decimal degrees, dimensions are meters. The linear accelerators
and LEIR are approximate.
"""

from cernmap.accelerators.circular import CircularCollider
from cernmap.accelerators.linear import LinearAccelerator
from cernmap.accelerators.rounded_rectangle import RoundedRectangleAccelerator
from cernmap.constructs.geo_point import GeoPoint
from cernmap.constructs.point_of_interest import PointOfInterest

LHC_CENTER = GeoPoint(46.2725593743487, 6.065987083678201)
LHC_RADIUS = 4300.0

# the eight LHC access points, clockwise from ATLAS
LHC_POINTS = (
    PointOfInterest.from_lat_lng("ATLAS", 46.23497502511518, 6.0536309870679235),
    PointOfInterest.from_lat_lng("Point 2", 46.251544268663615, 6.021434048433471),
    PointOfInterest.from_lat_lng("Point 3", 46.277518302316, 6.012012123858463),
    PointOfInterest.from_lat_lng("Point 4", 46.30445011831323, 6.037082600001055),
    PointOfInterest.from_lat_lng("CMS", 46.31026650910126, 6.078887140749957),
    PointOfInterest.from_lat_lng("Point 6", 46.29351162288481, 6.111756560082773),
    PointOfInterest.from_lat_lng("Point 7", 46.266418692548335, 6.115151115340182),
    PointOfInterest.from_lat_lng("Point 8", 46.2417904558472, 6.097942093891781),
)

LHC = CircularCollider("Large Hadron Collider", LHC_CENTER, LHC_RADIUS, LHC_POINTS)

SPS = CircularCollider("Super Proton Synchrotron", GeoPoint(46.2447, 6.056), 1100.0)

PS = CircularCollider(
    "Proton Synchrotron", GeoPoint(46.232129436307034, 6.048649235698542), 100.0
)

PSB = CircularCollider("Booster", GeoPoint(46.232875, 6.04718), 25.0)

FCC = CircularCollider(
    "Future Circular Collider", GeoPoint(46.12280614864221, 6.131499400104788), 14500.0
)

LINAC3 = LinearAccelerator(
    "LINAC3",
    GeoPoint(46.23163551273157, 6.046979545777202),
    length=10.0,
    direction=20.0,
    color="#C71585",
)

LINAC4 = LinearAccelerator(
    "LINAC4",
    GeoPoint(46.23121030223552, 6.046594519834996),
    length=78.0,
    direction=-12.0,
    color="#FF0000",
)

LEIR = RoundedRectangleAccelerator(
    "LEIR",
    GeoPoint(46.231557004669, 6.047967826365111),
    width=20.0,
    height=20.0,
    rotation=54.0,
    color="#ff6b6b",
)

CERN_ACCELERATORS = {
    "LHC": LHC,
    "SPS": SPS,
    "PS": PS,
    "PSB": PSB,
    "FCC": FCC,
    "LINAC3": LINAC3,
    "LINAC4": LINAC4,
    "LEIR": LEIR,
}
