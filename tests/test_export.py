"""
Test the export payload, design sheet and pin table (export.py).

The export must be re-derivable from the configuration and the solver
output alone: every number in it is compared with the LiftResult.
"""

import json

import pytest

from scissor_lift.export import build_export_payload, design_sheet, pin_table, to_json
from scissor_lift.lift import compute_lift
from scissor_lift.model import LiftConfig
from scissor_lift.units import MM_PER_IN


@pytest.fixture
def result():
    return compute_lift(LiftConfig(stage_count=3))


def test_payload_structure(result):
    payload = build_export_payload(result, "mm")

    assert set(payload) == {"units", "inputs", "outputs", "warnings"}
    assert payload["units"] == "mm"
    assert payload["inputs"] == {
        "stage_count": 3,
        "arm": 600.0,
        "base_rail": 1200.0,
        "top_rail": 1200.0,
        "angle_deg": 25.0,
        "preset": "classic",
        "constraints": {
            "base_left": "fixed",
            "base_right": "slide",
            "top_left": "slide",
            "top_right": "fixed",
        },
    }
    assert payload["warnings"] == []


def test_payload_outputs_match_result(result):
    out = build_export_payload(result, "mm")["outputs"]

    assert out["stage_height"] == result.stage.h
    assert out["stage_span_projection"] == result.stage.s
    assert out["total_height"] == result.assembly.total_height
    assert out["pin_coords_mm"]["A"] == {"x": -600.0, "y": 0.0}
    assert out["pin_coords_mm"]["D"] == {"x": result.stage.D.x, "y": result.stage.D.y}
    assert out["rails_mm"]["base"] == {"left": -600.0, "right": 600.0, "y": 0.0}
    assert out["rails_mm"]["top"]["y"] == result.assembly.total_height


def test_payload_in_inches_keeps_pins_in_mm(result):
    payload = build_export_payload(result, "in")

    assert payload["units"] == "in"
    assert payload["inputs"]["arm"] == pytest.approx(600.0 / MM_PER_IN)
    assert payload["outputs"]["total_height"] == pytest.approx(result.assembly.total_height / MM_PER_IN)
    assert payload["outputs"]["pin_coords_mm"]["A"]["x"] == -600.0


def test_payload_carries_ordered_warnings():
    result = compute_lift(LiftConfig(base_rail_length=200.0, top_rail_length=200.0, preset="bothBaseFixed"))
    payload = build_export_payload(result)
    assert payload["warnings"] == list(result.stage.warnings)
    assert len(payload["warnings"]) == 3


def test_to_json_round_trip(result):
    text = to_json(build_export_payload(result, "mm"))
    assert json.loads(text)["inputs"]["stage_count"] == 3
    assert text.startswith("{\n  ")


def test_design_sheet_text(result):
    sheet = design_sheet(result, "mm")

    assert "Inputs (mm):" in sheet
    assert "  N = 3" in sheet
    assert "  arm = 600 mm  (pin-to-pin)" in sheet
    assert "  base left  = fixed" in sheet
    assert "  stage height h = 253.571 mm" in sheet
    assert "  total height H = 760.713 mm" in sheet
    assert "  A (-600, 0)" in sheet
    assert "  C (-600, 253.571)" in sheet
    assert "Warnings:" not in sheet


def test_design_sheet_lists_warnings():
    result = compute_lift(LiftConfig(base_rail_length=200.0, top_rail_length=200.0))
    sheet = design_sheet(result, "in")
    assert "Inputs (in):" in sheet
    assert "Warnings:" in sheet
    assert "  - Base slider B" in sheet


def test_pin_table(result):
    df = pin_table(result)
    assert list(df.columns) == ["stage", "pin", "x_mm", "y_mm"]
    assert len(df) == 12
    third = df[(df["stage"] == 3) & (df["pin"] == "A")].iloc[0]
    assert third["y_mm"] == pytest.approx(2 * result.stage.h)
