# Shared trig and point helpers

import math
from typing import Tuple

import numpy as np


def rad(deg: float) -> float:
    return deg * math.pi / 180.0


def arm_projection(arm_length: float, angle_deg: float) -> Tuple[float, float]:
    """
    Rise and horizontal projection of one arm opened to ``angle_deg``.

    Returns (h, s) with h = L sin(a), s = L cos(a), so h**2 + s**2 == L**2.
    Any angle is accepted; outside (0, 90) degrees h or s turns negative.
    """
    a = rad(angle_deg)
    return arm_length * math.sin(a), arm_length * math.cos(a)


def centered_extent(length: float) -> Tuple[float, float]:
    """(left, right) x of a rail of ``length`` centred on x = 0."""
    return -length / 2, length / 2


def distance(p, q) -> float:
    """Euclidean distance between two pins (anything with .x and .y)."""
    return float(np.hypot(q.x - p.x, q.y - p.y))


def is_finite_pin(p) -> bool:
    return bool(np.isfinite(p.x) and np.isfinite(p.y))
