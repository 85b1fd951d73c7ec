"""
Test the warning sources and their aggregation order (checks.py).
"""

from scissor_lift.checks import (
    BASE_BOTH_FIXED,
    OVERCONSTRAINED,
    TOP_BOTH_FIXED,
    aggregate_warnings,
    out_of_range_warnings,
    over_constraint_warnings,
    slider_range_warning,
)
from scissor_lift.model import Rail
from scissor_lift.presets import EndLabels, EndMode, end_labels

F, S = EndMode.FIXED, EndMode.SLIDE


def test_no_over_constraint_for_classic_and_mirrored():
    assert over_constraint_warnings(end_labels("classic")) == []
    assert over_constraint_warnings(end_labels("mirrored")) == []


def test_base_and_top_over_constraint():
    assert over_constraint_warnings(end_labels("bothBaseFixed")) == [BASE_BOTH_FIXED]
    assert over_constraint_warnings(end_labels("bothTopFixed")) == [TOP_BOTH_FIXED]


def test_all_three_over_constraint_messages_in_order():
    """A label table with all four ends fixed fires every message."""
    labels = EndLabels(base_left=F, base_right=F, top_left=F, top_right=F)
    assert over_constraint_warnings(labels) == [BASE_BOTH_FIXED, TOP_BOTH_FIXED, OVERCONSTRAINED]


def test_all_sliding_has_no_over_constraint():
    labels = EndLabels(base_left=S, base_right=S, top_left=S, top_right=S)
    assert over_constraint_warnings(labels) == []


def test_slider_inside_rail():
    rail = Rail(200.0)
    assert slider_range_warning("B", 0.0, rail, "base") is None
    assert slider_range_warning("B", 100.0, rail, "base") is None
    assert slider_range_warning("B", -100.0, rail, "base") is None


def test_slider_outside_rail_message():
    msg = slider_range_warning("D", 443.7846, Rail(200.0), "top")
    assert msg == (
        "Top slider D at x=443.785 mm is outside the top rail [-100, 100]: "
        "lengthen the top rail to at least 887.569 mm or adjust the opening angle."
    )


def test_slider_just_past_tolerance():
    rail = Rail(200.0)
    assert slider_range_warning("B", 100.0 + 1e-12, rail, "base") is None
    assert slider_range_warning("B", 100.001, rail, "base") is not None


def test_out_of_range_keeps_evaluation_order():
    rail = Rail(100.0)
    msgs = out_of_range_warnings([
        ("B", 60.0, rail, "base"),
        ("D", 10.0, rail, "top"),
        ("X", -70.0, rail, "top"),
    ])
    assert len(msgs) == 2
    assert msgs[0].startswith("Base slider B")
    assert msgs[1].startswith("Top slider X")


def test_aggregate_puts_symbolic_first():
    merged = aggregate_warnings(["sym1", "sym2"], ["num1"])
    assert merged == ("sym1", "sym2", "num1")
    assert aggregate_warnings([], []) == ()
