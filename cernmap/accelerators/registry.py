from __future__ import annotations

import logging
import warnings
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Optional

from cernmap.accelerators.accelerator_interface import AcceleratorInterface
from cernmap.accelerators.cern import CERN_ACCELERATORS
from cernmap.utils.exceptions import UnknownAcceleratorWarning

log = logging.getLogger(__name__)


def parse_accelerator_names(value: str) -> List[str]:
    """
    Parse a comma separated list of accelerator names.

    Entries are trimmed and uppercased; empty entries are dropped.

    Args:
        value: The raw list, e.g. 'lhc, sps,'

    Returns:
        The canonical names in input order

    Examples:
        >>> parse_accelerator_names(' lhc, Sps ,,linac4 ')
        ['LHC', 'SPS', 'LINAC4']
    """
    names = (name.strip().upper() for name in value.split(","))
    return [name for name in names if name]


class AcceleratorRegistry(Mapping[str, AcceleratorInterface]):
    """
    A read-only table of named accelerators.

    Keys are canonical uppercase short names (e.g. 'LHC', 'LINAC4'). Lookups through
    lookup and resolve are case-insensitive, and unknown names produce an
    UnknownAcceleratorWarning instead of an error so that one bad name does not stop
    the others from being shown.

    The registry is built once and passed to whatever needs it; it cannot be modified
    after construction.

    Args:
        accelerators: A mapping of names to accelerators. Names are uppercased.

    Examples:
        >>> from cernmap.accelerators.registry import build_cern_registry
        >>> registry = build_cern_registry()
        >>> registry.lookup('lhc').name
        'Large Hadron Collider'
        >>> [a.name for a in registry.resolve(['ps', 'nope'])]  # warns about 'NOPE'
        ['Proton Synchrotron']
    """

    def __init__(self, accelerators: Mapping[str, AcceleratorInterface]):
        self._accelerators = MappingProxyType(
            {name.upper(): acc for name, acc in accelerators.items()}
        )

    def __getitem__(self, name: str) -> AcceleratorInterface:
        return self._accelerators[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._accelerators)

    def __len__(self) -> int:
        return len(self._accelerators)

    def __repr__(self):
        return f"AcceleratorRegistry({', '.join(self._accelerators)})"

    def lookup(self, name: str) -> Optional[AcceleratorInterface]:
        """
        Find an accelerator by name, ignoring case.

        Args:
            name: The accelerator short name

        Returns:
            The accelerator, or None if the name is unknown. Unknown names issue an
            UnknownAcceleratorWarning listing the available names.
        """
        key = name.strip().upper()
        accelerator = self._accelerators.get(key)
        if accelerator is None:
            available = ", ".join(self._accelerators)
            warnings.warn(
                f"Unknown accelerator: {key}. Available accelerators: {available}",
                UnknownAcceleratorWarning,
                stacklevel=2,
            )
        return accelerator

    def resolve(self, names: Iterable[str]) -> List[AcceleratorInterface]:
        """
        Find many accelerators by name, skipping unknown ones.

        Args:
            names: The accelerator short names, in any case

        Returns:
            The known accelerators in input order. Each unknown name issues a warning.
        """
        accelerators = []
        for name in names:
            accelerator = self.lookup(name)
            if accelerator is not None:
                accelerators.append(accelerator)
            else:
                log.debug("skipping unknown accelerator %s", name)
        return accelerators


def build_cern_registry() -> AcceleratorRegistry:
    """
    Build the registry of the CERN accelerator complex.

    Returns:
        A registry holding LHC, SPS, PS, PSB, FCC, LINAC3, LINAC4 and LEIR
    """
    return AcceleratorRegistry(CERN_ACCELERATORS)
