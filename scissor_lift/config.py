# scissor_lift/config.py
"""
Default inputs and fixed limits for the scissor-lift solver.

All lengths are millimetres, the internal unit of the package. Display
units are handled separately in units.py.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LiftDefaults:
    """Starting configuration and solver limits."""

    # Default configuration (matches the first screen of the design tool)
    arm_length: float = 600.0
    base_rail_length: float = 1200.0
    top_rail_length: float = 1200.0
    angle_deg: float = 25.0
    stage_count: int = 1
    preset: str = "classic"
    units: str = "mm"

    # Stage count is clamped by callers before it reaches the solver
    stage_count_range: Tuple[int, int] = (1, 6)

    # Slack (mm) allowed when testing a slider pin against its rail extent
    rail_tolerance: float = 1e-9


DEFAULTS = LiftDefaults()
