# scissor_lift/presets.py
"""
CONSTRAINT PRESETS
==================

A preset names which rail ends of a stage are grounded and which slide.
Two separate lookups are derived from the preset name:

1. ``end_labels(preset)`` - the per-end fixed/slide table shown to the user
   and used for the over-constraint warnings in checks.py.

2. ``grounded_pair(preset)`` - which diagonal pair of pins the solver pins
   to the rail ends. Only two layouts exist:

       GroundedPair.AC : A at base-left, C at top-left (B, D slide)
       GroundedPair.BD : B at base-right, D at top-right (A, C slide)

The two lookups do not agree for every preset. "bothBaseFixed" and
"bothTopFixed" are solved with the AC layout (same pins as "classic") while
their label tables still report two fixed ends on one rail. Keep them apart.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict


PRESETS = ("classic", "mirrored", "bothBaseFixed", "bothTopFixed")
DEFAULT_PRESET = "classic"


class EndMode(Enum):
    """How a rail end is held."""
    FIXED = "fixed"    # x and y pinned to the rail endpoint
    SLIDE = "slide"    # y fixed, x free along the rail


class GroundedPair(Enum):
    """Diagonal pin pair held at rail endpoints by the solver."""
    AC = "AC"
    BD = "BD"


@dataclass(frozen=True)
class EndLabels:
    base_left: EndMode
    base_right: EndMode
    top_left: EndMode
    top_right: EndMode

    @property
    def base_fixed_count(self) -> int:
        return (self.base_left is EndMode.FIXED) + (self.base_right is EndMode.FIXED)

    @property
    def top_fixed_count(self) -> int:
        return (self.top_left is EndMode.FIXED) + (self.top_right is EndMode.FIXED)

    def as_dict(self) -> Dict[str, str]:
        return {k: v.value for k, v in asdict(self).items()}


F, S = EndMode.FIXED, EndMode.SLIDE

END_LABELS = {
    "classic":       EndLabels(base_left=F, base_right=S, top_left=S, top_right=F),
    "mirrored":      EndLabels(base_left=S, base_right=F, top_left=F, top_right=S),
    "bothBaseFixed": EndLabels(base_left=F, base_right=F, top_left=S, top_right=F),
    "bothTopFixed":  EndLabels(base_left=F, base_right=S, top_left=F, top_right=F),
}

GROUNDED_PAIRS = {
    "classic": GroundedPair.AC,
    "mirrored": GroundedPair.BD,
    "bothBaseFixed": GroundedPair.AC,
    "bothTopFixed": GroundedPair.AC,
}


def normalize_preset(preset) -> str:
    """Return ``preset`` if it is a known name, else the default preset."""
    if isinstance(preset, str) and preset in END_LABELS:
        return preset
    return DEFAULT_PRESET


def end_labels(preset) -> EndLabels:
    return END_LABELS[normalize_preset(preset)]


def grounded_pair(preset) -> GroundedPair:
    return GROUNDED_PAIRS[normalize_preset(preset)]
