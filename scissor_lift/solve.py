# Single-stage scissor solve: grounded pins, slider pins, warnings

import logging

from .checks import aggregate_warnings, out_of_range_warnings, over_constraint_warnings
from .geometry import arm_projection
from .model import Pin, Rail, StageGeometry
from .presets import GroundedPair, end_labels, grounded_pair, normalize_preset

logger = logging.getLogger(__name__)


def solve_stage(
    arm_length: float,
    base_rail_length: float,
    top_rail_length: float,
    angle_deg: float,
    preset: str = "classic",
) -> StageGeometry:
    """
    Solve the four pins of one scissor stage.

    Base rail at y = 0, top rail at y = h, both centred on x = 0:

        C ------------ D      y = h
           \\        /
             \\    /          arm 1: A-D, arm 2: B-C
             /    \\
           /        \\
        A ------------ B      y = 0

    The grounded diagonal pair sits on its rail endpoints and the other two
    pins are placed one projection ``s`` away, so each arm spans exactly
    (+/-s, h) and keeps its length:

        AC (classic and all other names): A = base left, C = top left,
                                          D = A + s, B = C + s
        BD (mirrored):                    B = base right, D = top right,
                                          A = D - s, C = B - s

    Nothing is rejected. Slider pins that leave their rail are reported in
    ``warnings`` and returned unclamped.
    """
    preset = normalize_preset(preset)
    h, s = arm_projection(arm_length, angle_deg)

    base = Rail(base_rail_length, 0.0)
    top = Rail(top_rail_length, h)

    pair = grounded_pair(preset)
    if pair is GroundedPair.BD:
        B = Pin(base.right, 0.0)
        D = Pin(top.right, h)
        A = Pin(D.x - s, 0.0)
        C = Pin(B.x - s, h)
        sliders = [("A", A.x, base, "base"), ("C", C.x, top, "top")]
    else:
        A = Pin(base.left, 0.0)
        C = Pin(top.left, h)
        D = Pin(A.x + s, h)
        B = Pin(C.x + s, 0.0)
        sliders = [("B", B.x, base, "base"), ("D", D.x, top, "top")]

    out_of_range = tuple(label for label, x, rail, _ in sliders if not rail.contains(x))
    warnings = aggregate_warnings(
        over_constraint_warnings(end_labels(preset)),
        out_of_range_warnings(sliders),
    )
    logger.debug(
        "solved stage preset=%s pair=%s h=%.6g s=%.6g warnings=%d",
        preset, pair.value, h, s, len(warnings),
    )

    return StageGeometry(
        h=h,
        s=s,
        A=A,
        B=B,
        C=C,
        D=D,
        base_span=base_rail_length,
        top_span=top_rail_length,
        warnings=warnings,
        preset=preset,
        grounded=pair,
        out_of_range=out_of_range,
    )
