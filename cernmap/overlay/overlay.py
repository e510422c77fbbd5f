import logging
from typing import Iterable, Optional, Union

from cernmap.accelerators.registry import AcceleratorRegistry, parse_accelerator_names
from cernmap.constructs.geo_point import GeoPoint
from cernmap.overlay.overlay_result import OverlayResult
from cernmap.utils.projection import Projector
from cernmap.utils.translate import ZoneStrategy

log = logging.getLogger(__name__)


def build_overlay(
    registry: AcceleratorRegistry,
    names: Union[str, Iterable[str]],
    reference: GeoPoint,
    rotation: float = 0.0,
    strategy: ZoneStrategy = ZoneStrategy.SHARED,
    projector: Optional[Projector] = None,
) -> OverlayResult:
    """
    Translate a selection of accelerators onto a target location.

    Every accelerator is centered on the same reference point. Unknown names issue an
    UnknownAcceleratorWarning and are left out; the remaining accelerators are still
    translated.

    Args:
        registry: The registry to look names up in
        names: The accelerator names, either as an iterable or as a comma separated
            string such as 'lhc, sps'
        reference: The target location
        rotation: An additional clockwise rotation in degrees for non-circular shapes
        strategy: How projection zones are chosen for points of interest.
            Default is ZoneStrategy.SHARED.
        projector: The projector to use. Default is the module-level projector.

    Returns:
        An OverlayResult holding one shape per known accelerator and the translated
        points of interest keyed by accelerator name

    Raises:
        ProjectionError: If the reference point or a point of interest cannot be projected

    Examples:
        >>> from cernmap.accelerators.registry import build_cern_registry
        >>> registry = build_cern_registry()
        >>> result = build_overlay(registry, 'lhc, leir', GeoPoint(51.5074, -0.1278))
        >>> [s.class_name for s in result.shapes]
        ['large-hadron-collider', 'leir']
    """
    if isinstance(names, str):
        names = parse_accelerator_names(names)

    reference = GeoPoint.coerce(reference)
    result = OverlayResult()

    for accelerator in registry.resolve(names):
        log.debug("translating %s to %s", accelerator.name, reference)
        result.shapes.append(
            accelerator.translated_path(reference, rotation, projector=projector)
        )
        pois = accelerator.translated_points_of_interest(
            reference, strategy=strategy, projector=projector
        )
        if pois:
            result.points_of_interest[accelerator.name] = pois

    return result
