# scissor_lift/units.py
"""
Display-unit conversion.

Lengths are stored and solved in millimetres. The UI and exports show
either millimetres or inches; this module converts at that boundary and
formats numbers for display.
"""

MM_PER_IN = 25.4
UNITS = ("mm", "in")


def _check_units(units: str) -> None:
    if units not in UNITS:
        raise ValueError(f"Unknown units {units!r}; expected one of {UNITS}")


def to_display(mm: float, units: str) -> float:
    """Millimetres -> display units."""
    _check_units(units)
    return mm if units == "mm" else mm / MM_PER_IN


def to_mm(value: float, units: str) -> float:
    """Display units -> millimetres."""
    _check_units(units)
    return value if units == "mm" else value * MM_PER_IN


def fmt(value: float) -> str:
    """
    Round to 3 decimals and drop trailing zeros.

    >>> fmt(253.57685), fmt(600.0), fmt(-0.0001)
    ('253.577', '600', '0')
    """
    r = round(float(value), 3)
    if r == 0:
        return "0"
    text = f"{r:.3f}".rstrip("0").rstrip(".")
    return text


def display_seed(mm: float, units: str, places: int = 3) -> float:
    """Value shown in an input field for a stored millimetre length."""
    return round(to_display(mm, units), places)


def read_back_mm(shown: float, stored_mm: float, units: str, places: int = 3) -> float:
    """
    Millimetre value for an input field after a rerun.

    If the field still holds the rounded seed the stored value is kept, so
    switching units never drifts the length (600 mm -> 23.622 in -> 599.9988 mm).
    """
    if shown == display_seed(stored_mm, units, places):
        return stored_mm
    return to_mm(shown, units)
