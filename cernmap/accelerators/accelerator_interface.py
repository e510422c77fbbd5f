from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import List, Optional, Tuple

from cernmap.constructs.geo_point import GeoPoint
from cernmap.constructs.point_of_interest import PointOfInterest
from cernmap.constructs.shape import TranslatedShape, slugify
from cernmap.utils.projection import Projector
from cernmap.utils.translate import ZoneStrategy, translate_points


class AcceleratorInterface(metaclass=ABCMeta):
    """
    Abstract base class defining the interface shared by all accelerator footprints.

    The implementations form a closed set: CircularCollider, LinearAccelerator and
    RoundedRectangleAccelerator. Each one knows its real-world reference point and can
    produce its footprint and its points of interest moved onto any other point on
    Earth at true scale.

    Implementations are immutable and every method is a pure function of its arguments.

    Examples:
        >>> from cernmap.accelerators.cern import LHC
        >>> from cernmap.constructs.geo_point import GeoPoint
        >>> london = GeoPoint(51.5074, -0.1278)
        >>> shape = LHC.translated_path(london)
        >>> pois = LHC.translated_points_of_interest(london)
    """

    name: str
    points_of_interest: Tuple[PointOfInterest, ...]
    color: Optional[str]

    @property
    @abstractmethod
    def reference_point(self) -> GeoPoint:
        """
        Get the native location of the accelerator.

        This is the point that is moved onto the target location when translating: the
        center for circular and rounded rectangle footprints, the midpoint for linear ones.

        Returns:
            The accelerator's reference point
        """

    @abstractmethod
    def translated_path(
        self,
        reference: GeoPoint,
        rotation: float = 0.0,
        projector: Optional[Projector] = None,
    ) -> TranslatedShape:
        """
        Compute the accelerator footprint moved onto a target location.

        Args:
            reference: The target location the reference point is moved onto
            rotation: An additional clockwise rotation in degrees. Ignored by circles.
            projector: The projector to use. Default is the module-level projector.

        Returns:
            The translated footprint in geographic coordinates

        Raises:
            ProjectionError: If the target location cannot be projected
        """

    @property
    def class_name(self) -> str:
        return slugify(self.name)

    def translated_points_of_interest(
        self,
        reference: GeoPoint,
        strategy: ZoneStrategy = ZoneStrategy.SHARED,
        projector: Optional[Projector] = None,
    ) -> List[PointOfInterest]:
        """
        Move the accelerator's points of interest onto a target location.

        Each point keeps its planar offset from the accelerator's reference point.

        Args:
            reference: The target location
            strategy: How projection zones are chosen. Default is ZoneStrategy.SHARED.
            projector: The projector to use. Default is the module-level projector.

        Returns:
            New PointOfInterest values, in the accelerator's order. The accelerator's own
            points of interest are left untouched.
        """
        return translate_points(
            reference,
            self.reference_point,
            self.points_of_interest,
            strategy=strategy,
            projector=projector,
        )
