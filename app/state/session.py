# app/state/session.py
"""
Session state management for Streamlit.

The current configuration lives in session state as a LiftBrief with all
lengths in millimetres. Widgets show display units; conversion happens
only when reading a widget back, so switching units never rescales the
stored values.
"""

import streamlit as st
from typing import Any, Dict
from dataclasses import dataclass, asdict
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from scissor_lift.config import DEFAULTS
from scissor_lift.model import LiftConfig, clamp_stage_count


@dataclass
class LiftBrief:
    """User inputs (lengths in mm)."""
    units: str = DEFAULTS.units
    stage_count: int = DEFAULTS.stage_count
    arm_mm: float = DEFAULTS.arm_length
    base_mm: float = DEFAULTS.base_rail_length
    top_mm: float = DEFAULTS.top_rail_length
    angle_deg: float = DEFAULTS.angle_deg
    preset: str = DEFAULTS.preset
    
    def to_config(self) -> LiftConfig:
        """Immutable snapshot for one recomputation."""
        return LiftConfig(
            arm_length=self.arm_mm,
            base_rail_length=self.base_mm,
            top_rail_length=self.top_mm,
            angle_deg=self.angle_deg,
            stage_count=clamp_stage_count(self.stage_count),
            preset=self.preset,
        )
    
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ============================================================================
# Brief State
# ============================================================================

def get_brief() -> LiftBrief:
    """Get the current brief from session state."""
    if 'brief' not in st.session_state:
        st.session_state.brief = LiftBrief()
    return st.session_state.brief


def update_brief(**kwargs) -> LiftBrief:
    """Update specific fields of the brief."""
    brief = get_brief()
    for key, value in kwargs.items():
        if hasattr(brief, key):
            setattr(brief, key, value)
    st.session_state.brief = brief
    return brief


def reset_brief() -> LiftBrief:
    """Back to the default configuration."""
    st.session_state.brief = LiftBrief()
    return st.session_state.brief
