import pytest

from scissor_lift.units import MM_PER_IN, display_seed, fmt, read_back_mm, to_display, to_mm


def test_mm_is_identity():
    assert to_display(600.0, "mm") == 600.0
    assert to_mm(600.0, "mm") == 600.0


def test_inch_conversion():
    assert MM_PER_IN == 25.4
    assert to_display(25.4, "in") == pytest.approx(1.0)
    assert to_mm(2.0, "in") == pytest.approx(50.8)
    assert to_mm(to_display(1234.5, "in"), "in") == pytest.approx(1234.5)


def test_unknown_units_rejected():
    with pytest.raises(ValueError, match="Unknown units"):
        to_display(1.0, "cm")
    with pytest.raises(ValueError, match="Unknown units"):
        to_mm(1.0, "ft")


@pytest.mark.parametrize("value, text", [
    (253.5709570, "253.571"),
    (600.0, "600"),
    (1.5, "1.5"),
    (-56.21510, "-56.215"),
    (-0.0001, "0"),
    (0.0, "0"),
    (23.62204724, "23.622"),
])
def test_fmt(value, text):
    assert fmt(value) == text


def test_display_seed_rounds_to_three_places():
    assert display_seed(600.0, "in") == 23.622
    assert display_seed(600.0, "mm") == 600.0


def test_untouched_field_keeps_stored_length():
    """Showing 600 mm in inches and reading it back must not drift it."""
    seed = display_seed(600.0, "in")
    assert to_mm(seed, "in") != 600.0
    assert read_back_mm(seed, 600.0, "in") == 600.0
    assert read_back_mm(600.0, 600.0, "mm") == 600.0


def test_edited_field_is_converted():
    assert read_back_mm(10.0, 600.0, "in") == pytest.approx(254.0)
    assert read_back_mm(450.0, 600.0, "mm") == 450.0
