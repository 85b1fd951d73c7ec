# scissor_lift/checks.py
"""
FEASIBILITY WARNINGS
====================

Two independent sources of warnings are produced for every stage:

1. Symbolic over-constraint: read from the preset's per-end label table
   (presets.end_labels). Fires when a rail has both ends fixed.

2. Out-of-range sliders: a solved slider pin whose x falls outside its
   rail. The coordinate is reported, never clamped.

``aggregate_warnings`` joins them in a fixed order: symbolic messages first
(base, top, overconstrained), then slider messages in the order the solver
evaluated them (base slider, then top slider).
"""

from typing import Iterable, List, Optional, Tuple

from .config import DEFAULTS
from .model import Rail
from .presets import EndLabels
from .units import fmt

BASE_BOTH_FIXED = "Both base ends fixed: can bind unless the top has sufficient sliding freedom."
TOP_BOTH_FIXED = "Both top ends fixed: can bind unless the base has sufficient sliding freedom."
OVERCONSTRAINED = "Overconstrained: likely impossible without flex/compliance."


def over_constraint_warnings(labels: EndLabels) -> List[str]:
    warns = []
    base_fixed = labels.base_fixed_count == 2
    top_fixed = labels.top_fixed_count == 2
    if base_fixed:
        warns.append(BASE_BOTH_FIXED)
    if top_fixed:
        warns.append(TOP_BOTH_FIXED)
    if base_fixed and top_fixed:
        warns.append(OVERCONSTRAINED)
    return warns


def slider_range_warning(
    pin_label: str,
    x: float,
    rail: Rail,
    rail_name: str,
    tol: float = DEFAULTS.rail_tolerance,
) -> Optional[str]:
    """
    Message for a slider pin outside its rail, or None if it fits.

    The remedy names the rail length that would just reach the pin
    (2*|x| for a centred rail).
    """
    if rail.contains(x, tol=tol):
        return None
    needed = 2 * abs(x)
    return (
        f"{rail_name.capitalize()} slider {pin_label} at x={fmt(x)} mm is outside the "
        f"{rail_name} rail [{fmt(rail.left)}, {fmt(rail.right)}]: lengthen the {rail_name} "
        f"rail to at least {fmt(needed)} mm or adjust the opening angle."
    )


def out_of_range_warnings(sliders: Iterable[Tuple[str, float, Rail, str]]) -> List[str]:
    """Check (pin_label, x, rail, rail_name) tuples in the given order."""
    warns = []
    for pin_label, x, rail, rail_name in sliders:
        msg = slider_range_warning(pin_label, x, rail, rail_name)
        if msg is not None:
            warns.append(msg)
    return warns


def aggregate_warnings(symbolic: Iterable[str], numeric: Iterable[str]) -> Tuple[str, ...]:
    return tuple(symbolic) + tuple(numeric)
