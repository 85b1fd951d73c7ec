# app/config.py
"""
Application configuration and defaults.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from scissor_lift.config import DEFAULTS
from scissor_lift.presets import PRESETS
from scissor_lift.units import UNITS


@dataclass
class AppConfig:
    """Global application configuration."""
    
    # App metadata
    app_name: str = "Scissor Lift Designer"
    app_subtitle: str = "Stacked scissor-linkage kinematics"
    version: str = "0.1.0"
    
    # Input ranges (angle in degrees, stage count)
    angle_range: Tuple[float, float] = (0.0, 90.0)
    angle_step: float = 0.5
    stage_range: Tuple[int, int] = DEFAULTS.stage_count_range
    
    # Number-input steps per display unit
    length_steps: Dict[str, float] = None
    
    # Available options
    units: List[str] = None
    presets: List[str] = None
    preset_help: Dict[str, str] = None
    
    def __post_init__(self):
        if self.length_steps is None:
            self.length_steps = {'mm': 10.0, 'in': 0.5}
        if self.units is None:
            self.units = list(UNITS)
        if self.presets is None:
            self.presets = list(PRESETS)
        if self.preset_help is None:
            self.preset_help = {
                'classic': 'Base left + top right fixed, others slide',
                'mirrored': 'Base right + top left fixed, others slide',
                'bothBaseFixed': 'Both base ends fixed (can bind)',
                'bothTopFixed': 'Both top ends fixed (can bind)',
            }


# Global config instance
CONFIG = AppConfig()
