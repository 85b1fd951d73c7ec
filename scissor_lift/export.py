# scissor_lift/export.py
"""
Export payload, design sheet and pin table for a computed lift.

Nothing here solves geometry: every value is read from a LiftResult.
Input lengths and heights are given in the display units; rail endpoints
and pin coordinates stay in millimetres so they can be pasted into CAD as
centre points.
"""

import json
from typing import Any, Dict

import pandas as pd

from .model import LiftResult, Rail
from .presets import end_labels
from .units import fmt, to_display


def _rail_dict(rail: Rail) -> Dict[str, float]:
    return {"left": rail.left, "right": rail.right, "y": rail.y}


def build_export_payload(result: LiftResult, units: str = "mm") -> Dict[str, Any]:
    cfg = result.config
    stage = result.stage
    assembly = result.assembly

    return {
        "units": units,
        "inputs": {
            "stage_count": cfg.stage_count,
            "arm": to_display(cfg.arm_length, units),
            "base_rail": to_display(cfg.base_rail_length, units),
            "top_rail": to_display(cfg.top_rail_length, units),
            "angle_deg": cfg.angle_deg,
            "preset": stage.preset,
            "constraints": end_labels(stage.preset).as_dict(),
        },
        "outputs": {
            "stage_height": to_display(stage.h, units),
            "stage_span_projection": to_display(stage.s, units),
            "total_height": to_display(assembly.total_height, units),
            "rails_mm": {
                "base": _rail_dict(assembly.base_rail),
                "top": _rail_dict(assembly.top_rail),
            },
            "pin_coords_mm": {name: pin.as_dict() for name, pin in stage.pins.items()},
        },
        "warnings": list(stage.warnings),
    }


def to_json(payload: Dict[str, Any]) -> str:
    return json.dumps(payload, indent=2)


def design_sheet(result: LiftResult, units: str = "mm") -> str:
    """Plain-text summary of inputs, constraints, outputs and stage-1 pins."""
    cfg = result.config
    stage = result.stage
    labels = end_labels(stage.preset)

    def d(mm):
        return f"{fmt(to_display(mm, units))} {units}"

    lines = [
        f"Inputs ({units}):",
        f"  N = {cfg.stage_count}",
        f"  arm = {d(cfg.arm_length)}  (pin-to-pin)",
        f"  base rail = {d(cfg.base_rail_length)}",
        f"  top rail  = {d(cfg.top_rail_length)}",
        f"  angle = {fmt(cfg.angle_deg)} deg",
        "",
        f"Constraints ({stage.preset}):",
        f"  base left  = {labels.base_left.value}",
        f"  base right = {labels.base_right.value}",
        f"  top left   = {labels.top_left.value}",
        f"  top right  = {labels.top_right.value}",
        "",
        f"Outputs ({units}):",
        f"  stage height h = {d(stage.h)}",
        f"  stage projection s = {d(stage.s)}",
        f"  total height H = {d(result.assembly.total_height)}",
        "",
        "Pin coordinates (mm, stage 1):",
    ]
    for name, pin in stage.pins.items():
        lines.append(f"  {name} ({fmt(pin.x)}, {fmt(pin.y)})")

    if stage.warnings:
        lines.append("")
        lines.append("Warnings:")
        lines.extend(f"  - {w}" for w in stage.warnings)

    return "\n".join(lines) + "\n"


def pin_table(result: LiftResult) -> pd.DataFrame:
    """One row per pin per stacked stage (mm)."""
    rows = []
    for st in result.assembly.stages:
        for name, pin in st.pins.items():
            rows.append({"stage": st.index, "pin": name, "x_mm": pin.x, "y_mm": pin.y})
    return pd.DataFrame(rows, columns=["stage", "pin", "x_mm", "y_mm"])
