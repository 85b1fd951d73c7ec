import logging
import math

import pytest

from scissor_lift.lift import compute_lift
from scissor_lift.model import LiftConfig
from scissor_lift.solve import solve_stage
from scissor_lift.stack import build_stack

H25 = 600.0 * math.sin(math.radians(25.0))


def test_three_stage_scenario():
    """
    Three 25° stages of 600 mm arms: total height 3h ≈ 760.713 mm and the
    third stage starts at 2h ≈ 507.142 mm.
    """
    stage = solve_stage(600.0, 1200.0, 1200.0, 25.0, "classic")
    assembly = build_stack(stage, 3)

    assert assembly.stage_count == 3
    assert assembly.total_height == pytest.approx(3 * H25)
    assert assembly.total_height == pytest.approx(760.713, abs=1e-3)
    assert assembly.stages[2].A.y == pytest.approx(507.142, abs=1e-3)
    assert [st.index for st in assembly.stages] == [1, 2, 3]
    print(f"✓ Total height = {assembly.total_height:.3f} mm")


def test_stacking_invariant():
    """Stage i (0-based) is stage 0 shifted up by i*h; x never changes."""
    stage = solve_stage(500.0, 900.0, 700.0, 37.0, "mirrored")
    assembly = build_stack(stage, 6)

    for i, st in enumerate(assembly.stages):
        for name, pin in st.pins.items():
            base_pin = stage.pins[name]
            assert pin.x == base_pin.x
            assert pin.y == pytest.approx(base_pin.y + i * stage.h)
        assert st.h == stage.h
        assert st.s == stage.s
    assert assembly.total_height == pytest.approx(6 * stage.h)


def test_single_stage_is_unshifted_copy():
    stage = solve_stage(600.0, 1200.0, 1200.0, 25.0, "classic")
    assembly = build_stack(stage, 1)

    assert len(assembly.stages) == 1
    assert assembly.stages[0].pins == stage.pins
    assert assembly.total_height == stage.h


def test_rails_at_bottom_and_top():
    stage = solve_stage(600.0, 1000.0, 800.0, 25.0, "classic")
    assembly = build_stack(stage, 4)

    assert (assembly.base_rail.left, assembly.base_rail.right, assembly.base_rail.y) == (-500.0, 500.0, 0.0)
    assert (assembly.top_rail.left, assembly.top_rail.right) == (-400.0, 400.0)
    assert assembly.top_rail.y == pytest.approx(assembly.total_height)


def test_flat_stack_has_zero_height():
    stage = solve_stage(600.0, 1200.0, 1200.0, 0.0, "classic")
    assembly = build_stack(stage, 5)
    assert assembly.total_height == 0.0
    assert all(st.A.y == 0.0 for st in assembly.stages)


def test_compute_lift_runs_full_pass():
    result = compute_lift(LiftConfig(stage_count=3))
    assert result.stage.h == pytest.approx(H25)
    assert result.assembly.stage_count == 3
    assert result.config.stage_count == 3


def test_compute_lift_does_not_clamp_stage_count():
    """Clamping belongs to the caller; the builder stacks what it is given."""
    result = compute_lift(LiftConfig(stage_count=8))
    assert result.assembly.stage_count == 8


def test_compute_lift_normalizes_preset():
    result = compute_lift(LiftConfig(preset="bogus"))
    assert result.config.preset == "classic"
    assert result.stage.preset == "classic"

    result = compute_lift(LiftConfig(preset="mirrored"))
    assert result.config.preset == "mirrored"


def test_compute_lift_logs(caplog):
    with caplog.at_level(logging.DEBUG, logger="scissor_lift"):
        compute_lift(LiftConfig(stage_count=2, preset="bogus"))
    messages = [r.getMessage() for r in caplog.records if r.name == "scissor_lift.lift"]
    assert any("unknown preset 'bogus'" in m for m in messages)
    assert any(m.startswith("computed lift N=2") for m in messages)


def test_compute_lift_warns_on_non_finite_pins(caplog):
    with caplog.at_level(logging.WARNING, logger="scissor_lift"):
        compute_lift(LiftConfig(arm_length=float("inf")))
    assert any("non-finite pin coordinates" in r.getMessage() for r in caplog.records)
