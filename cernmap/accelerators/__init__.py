from cernmap.accelerators.accelerator_interface import AcceleratorInterface
from cernmap.accelerators.circular import CircularCollider
from cernmap.accelerators.linear import LinearAccelerator
from cernmap.accelerators.registry import AcceleratorRegistry, build_cern_registry
from cernmap.accelerators.rounded_rectangle import RoundedRectangleAccelerator

__all__ = [
    "AcceleratorInterface",
    "AcceleratorRegistry",
    "CircularCollider",
    "LinearAccelerator",
    "RoundedRectangleAccelerator",
    "build_cern_registry",
]
