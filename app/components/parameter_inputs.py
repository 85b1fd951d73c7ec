# app/components/parameter_inputs.py
"""
Sidebar input components: read display-unit values and store millimetres.
"""

import streamlit as st
import sys
from pathlib import Path

# Add app directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from config import CONFIG
from state.session import LiftBrief
from scissor_lift.model import clamp_stage_count
from scissor_lift.units import display_seed, read_back_mm


def render_length_input(label: str, value_mm: float, units: str, key: str) -> float:
    """
    Number input shown in ``units``; returns the entered value in mm.
    
    The widget key includes the units so a unit switch re-seeds the field
    from the stored millimetre value instead of reusing the old number.
    An untouched field leaves the stored value as it is.
    """
    shown = st.number_input(
        f"{label} ({units})",
        min_value=0.0,
        value=float(display_seed(value_mm, units)),
        step=CONFIG.length_steps[units],
        format="%.3f",
        key=f"{key}_{units}",
    )
    return read_back_mm(shown, value_mm, units)


def render_lift_inputs(brief: LiftBrief) -> LiftBrief:
    """
    Render all lift inputs into the current container and return the
    updated brief (lengths in mm, stage count clamped).
    """
    units = st.radio(
        "Units",
        options=CONFIG.units,
        index=CONFIG.units.index(brief.units),
        horizontal=True,
        key="units",
    )
    brief.units = units
    
    stage_count = st.slider(
        "Stages (N)",
        min_value=CONFIG.stage_range[0],
        max_value=CONFIG.stage_range[1],
        value=clamp_stage_count(brief.stage_count),
        key="stage_count",
    )
    brief.stage_count = clamp_stage_count(stage_count)
    
    brief.arm_mm = render_length_input("Arm", brief.arm_mm, units, "arm")
    brief.base_mm = render_length_input("Base rail", brief.base_mm, units, "base")
    brief.top_mm = render_length_input("Top rail", brief.top_mm, units, "top")
    
    brief.angle_deg = st.slider(
        "Opening angle α (deg)",
        min_value=CONFIG.angle_range[0],
        max_value=CONFIG.angle_range[1],
        value=float(brief.angle_deg),
        step=CONFIG.angle_step,
        key="angle_deg",
        help="Arm angle from horizontal"
    )
    
    brief.preset = st.selectbox(
        "Constraint preset",
        options=CONFIG.presets,
        index=CONFIG.presets.index(brief.preset) if brief.preset in CONFIG.presets else 0,
        format_func=lambda p: f"{p} - {CONFIG.preset_help[p]}",
        key="preset",
    )
    
    return brief
