# app/services/lift_service.py
"""
Lift service: one recomputation pass for the live preview.
"""

import sys
from pathlib import Path
from typing import Dict, Any

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from scissor_lift.lift import compute_lift
from scissor_lift.model import LiftConfig, LiftResult
from scissor_lift.units import to_display


class LiftService:
    """Solves and stacks the current configuration."""
    
    @staticmethod
    def compute(config: LiftConfig) -> LiftResult:
        return compute_lift(config)
    
    @staticmethod
    def summary_metrics(result: LiftResult, units: str) -> Dict[str, Any]:
        """Headline numbers for the metrics column, in display units."""
        stage = result.stage
        return {
            'stage_height': to_display(stage.h, units),
            'stage_projection': to_display(stage.s, units),
            'total_height': to_display(result.assembly.total_height, units),
            'n_stages': result.assembly.stage_count,
            'n_warnings': len(stage.warnings),
            'feasible': stage.feasible,
        }
