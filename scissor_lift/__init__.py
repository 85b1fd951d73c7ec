# scissor_lift - Planar kinematics of stacked scissor lifts
"""
SCISSOR-LIFT: Stage Solver and Stack Builder
============================================

This package provides:
- Closed-form pin layout of one scissor stage for a given arm length,
  rail lengths, opening angle and constraint preset
- Feasibility warnings (over-constrained presets, sliders off their rails)
- Vertical stacking of N identical stages
- Unit conversion, export payloads and plots for the app and API layers

ARCHITECTURE:
-------------
    config.py       Defaults and fixed limits
    model.py        Pin, Rail, LiftConfig, StageGeometry, StackedAssembly
    presets.py      Preset -> per-end labels, preset -> grounded pin pair
    geometry.py     Trig and point helpers
    checks.py       Over-constraint / out-of-range warnings and their order
    solve.py        solve_stage()
    stack.py        build_stack()
    lift.py         compute_lift(): full pass over one LiftConfig
    units.py        mm <-> inch display conversion and number formatting
    export.py       JSON payload, design sheet, pin table
    explore.py      Angle sweep into a DataFrame
    viz.py          matplotlib elevation plot
    log.py          Logging setup
"""

from .model import LiftConfig, LiftResult, Pin, Rail, StageGeometry, StackedAssembly, clamp_stage_count
from .presets import PRESETS, EndMode, GroundedPair, end_labels, grounded_pair
from .solve import solve_stage
from .stack import build_stack
from .lift import compute_lift

__version__ = "0.1.0"
