# app/services/export_service.py
"""
Export service: handles file exports (JSON, CSV, text design sheet).
"""

from typing import Dict
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from scissor_lift.export import build_export_payload, design_sheet, pin_table, to_json
from scissor_lift.model import LiftResult


class ExportService:
    """Service for exporting lift data to various formats."""
    
    FILENAMES: Dict[str, str] = {
        'json': 'scissor_lift.json',
        'csv': 'scissor_lift_pins.csv',
        'text': 'scissor_lift_design_sheet.txt',
    }
    
    @staticmethod
    def generate_payload_json(result: LiftResult, units: str) -> str:
        """Export payload as pretty-printed JSON."""
        return to_json(build_export_payload(result, units))
    
    @staticmethod
    def generate_pins_csv(result: LiftResult) -> str:
        """All stacked pin coordinates (mm), one row per pin."""
        return pin_table(result).to_csv(index=False)
    
    @staticmethod
    def generate_design_sheet(result: LiftResult, units: str) -> str:
        return design_sheet(result, units)
