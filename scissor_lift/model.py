# Pin, Rail, LiftConfig, StageGeometry, StackedAssembly

from dataclasses import dataclass, field
from typing import Tuple

from .config import DEFAULTS
from .geometry import centered_extent
from .presets import GroundedPair


@dataclass(frozen=True)
class Pin:
    """Revolute joint in the plane of the linkage (mm)."""
    x: float
    y: float

    def translated(self, dx: float = 0.0, dy: float = 0.0) -> "Pin":
        return Pin(self.x + dx, self.y + dy)

    def as_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Rail:
    """
    Rigid rail segment centred on the vertical symmetry axis.

    Pins may be grounded at an endpoint or slide along it; the rail itself
    never changes length.
    """
    length: float
    y: float = 0.0

    @property
    def left(self) -> float:
        return centered_extent(self.length)[0]

    @property
    def right(self) -> float:
        return centered_extent(self.length)[1]

    def contains(self, x: float, tol: float = DEFAULTS.rail_tolerance) -> bool:
        # Rails with a negative length still span [min, max] of their ends
        lo, hi = min(self.left, self.right), max(self.left, self.right)
        return lo - tol <= x <= hi + tol


@dataclass(frozen=True)
class LiftConfig:
    """
    One immutable configuration snapshot (lengths in mm).

    stage_count is expected to be clamped already (see clamp_stage_count);
    preset names outside the known set are solved as "classic".
    """
    arm_length: float = DEFAULTS.arm_length
    base_rail_length: float = DEFAULTS.base_rail_length
    top_rail_length: float = DEFAULTS.top_rail_length
    angle_deg: float = DEFAULTS.angle_deg
    stage_count: int = DEFAULTS.stage_count
    preset: str = DEFAULTS.preset


def clamp_stage_count(n) -> int:
    lo, hi = DEFAULTS.stage_count_range
    return max(lo, min(hi, int(n)))


@dataclass(frozen=True)
class StageGeometry:
    """
    Solved geometry of a single scissor stage.

    A and B sit on the base rail (y = 0), C and D on the top rail (y = h).
    Arm 1 joins A-D, arm 2 joins B-C.
    """
    h: float
    s: float
    A: Pin
    B: Pin
    C: Pin
    D: Pin
    base_span: float
    top_span: float
    warnings: Tuple[str, ...] = ()
    preset: str = DEFAULTS.preset
    grounded: GroundedPair = GroundedPair.AC
    out_of_range: Tuple[str, ...] = ()  # labels of slider pins off their rail

    @property
    def feasible(self) -> bool:
        return not self.out_of_range

    @property
    def pins(self) -> dict:
        return {"A": self.A, "B": self.B, "C": self.C, "D": self.D}


@dataclass(frozen=True)
class StackedStage:
    index: int  # 1-based stage number, bottom stage is 1
    A: Pin
    B: Pin
    C: Pin
    D: Pin
    h: float
    s: float

    @property
    def pins(self) -> dict:
        return {"A": self.A, "B": self.B, "C": self.C, "D": self.D}


@dataclass(frozen=True)
class StackedAssembly:
    stages: Tuple[StackedStage, ...]
    total_height: float
    base_rail: Rail
    top_rail: Rail

    @property
    def stage_count(self) -> int:
        return len(self.stages)


@dataclass(frozen=True)
class LiftResult:
    """Everything produced by one recomputation pass."""
    config: LiftConfig
    stage: StageGeometry
    assembly: StackedAssembly = field(repr=False)
