# File: demos/run_scissor_lift.py
"""
DEMO: THREE-STAGE SCISSOR LIFT
==============================

PURPOSE:
--------
Solve one scissor stage, stack it three times and write the results the
way the design tool does: a text design sheet, the JSON export payload and
an elevation plot. A second run with short rails shows how infeasible
sliders are reported without stopping the solve, and an angle sweep finds
the window of angles where both sliders stay on their rails.

PHYSICAL PROBLEM:
-----------------
- Arms 600 mm pin-to-pin, opened 25 degrees from horizontal
- Base and top rails 1200 mm, centred under the lift
- "classic" preset: A held at the base-left end, C at the top-left end

Each stage rises h = 600 sin(25) = 253.6 mm, so three stages give ~760.7 mm.
"""

import os

from scissor_lift.explore import feasible_angle_windows, sweep_angles
from scissor_lift.export import build_export_payload, design_sheet, to_json
from scissor_lift.lift import compute_lift
from scissor_lift.log import setup_logging
from scissor_lift.model import LiftConfig
from scissor_lift.viz import save_lift_plot


def main():
    setup_logging("DEBUG")
    os.makedirs("artifacts", exist_ok=True)

    # ------------------------------------------------------------------
    # STEP 1: feasible three-stage lift
    # ------------------------------------------------------------------
    config = LiftConfig(
        arm_length=600.0,
        base_rail_length=1200.0,
        top_rail_length=1200.0,
        angle_deg=25.0,
        stage_count=3,
        preset="classic",
    )
    result = compute_lift(config)

    print(design_sheet(result, units="mm"))
    print(to_json(build_export_payload(result, units="in")))
    save_lift_plot(result, "artifacts/scissor_lift_3_stage.png")
    print("✓ Saved artifacts/scissor_lift_3_stage.png")

    # ------------------------------------------------------------------
    # STEP 2: same lift on 200 mm rails (both sliders leave their rails)
    # ------------------------------------------------------------------
    short = LiftConfig(arm_length=600.0, base_rail_length=200.0, top_rail_length=200.0,
                       angle_deg=25.0, stage_count=1)
    short_result = compute_lift(short)
    print(f"\nShort rails: {len(short_result.stage.warnings)} warning(s)")
    for w in short_result.stage.warnings:
        print(f"  ⚠ {w}")
    save_lift_plot(short_result, "artifacts/scissor_lift_short_rails.png")

    # ------------------------------------------------------------------
    # STEP 3: angle window for the 200 mm rails
    # ------------------------------------------------------------------
    df = sweep_angles(short)
    windows = feasible_angle_windows(df)
    if not windows:
        print("\nNo feasible angle for these rails")
    for start, end in windows:
        print(f"\nFeasible angles for 200 mm rails: {start:.0f}° - {end:.0f}°")


if __name__ == "__main__":
    main()
