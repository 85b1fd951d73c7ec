# Full recompute pass: config -> stage -> stack

import logging
from dataclasses import replace

from .geometry import is_finite_pin
from .model import LiftConfig, LiftResult
from .presets import normalize_preset
from .solve import solve_stage
from .stack import build_stack

logger = logging.getLogger(__name__)


def compute_lift(config: LiftConfig) -> LiftResult:
    """
    Solve one stage and stack it. The preset is normalised first, so
    ``result.config.preset`` is always a known preset name.
    """
    preset = normalize_preset(config.preset)
    if preset != config.preset:
        logger.debug("unknown preset %r solved as %r", config.preset, preset)
        config = replace(config, preset=preset)

    stage = solve_stage(
        config.arm_length,
        config.base_rail_length,
        config.top_rail_length,
        config.angle_deg,
        config.preset,
    )
    assembly = build_stack(stage, config.stage_count)

    if not all(is_finite_pin(p) for p in stage.pins.values()):
        logger.warning("non-finite pin coordinates for %s", config)
    logger.debug(
        "computed lift N=%d H=%.6g warnings=%d",
        config.stage_count, assembly.total_height, len(stage.warnings),
    )
    return LiftResult(config=config, stage=stage, assembly=assembly)
