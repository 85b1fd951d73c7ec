# scissor_lift/explore.py
"""
ANGLE SWEEP
===========

Evaluates one configuration over a list of opening angles and collects the
results in a DataFrame, one row per angle. Useful for finding the window of
angles where every slider pin stays on its rail for the chosen rail lengths.

Columns:
    angle_deg, h, s, total_height    geometry (mm)
    n_warnings                       all warnings for that angle
    n_out_of_range                   slider pins off their rail
    feasible                         True when no slider left its rail
"""

from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd

from .lift import compute_lift
from .model import LiftConfig

COLUMNS = ["angle_deg", "h", "s", "total_height", "n_warnings", "n_out_of_range", "feasible"]


def sweep_angles(config: LiftConfig, angles: Optional[Iterable[float]] = None) -> pd.DataFrame:
    if angles is None:
        angles = np.linspace(0.0, 90.0, 91)

    rows = []
    for angle in angles:
        result = compute_lift(replace(config, angle_deg=float(angle)))
        stage = result.stage
        rows.append({
            "angle_deg": float(angle),
            "h": stage.h,
            "s": stage.s,
            "total_height": result.assembly.total_height,
            "n_warnings": len(stage.warnings),
            "n_out_of_range": len(stage.out_of_range),
            "feasible": stage.feasible,
        })
    return pd.DataFrame(rows, columns=COLUMNS)


def feasible_angle_windows(df: pd.DataFrame) -> List[Tuple[float, float]]:
    """
    Contiguous runs of feasible rows as (first, last) angle pairs.

    Rows are taken in sweep order, so a run never spans an infeasible row.
    Returns an empty list when no angle is feasible.
    """
    if df.empty:
        return []
    feasible = df["feasible"].astype(bool)
    run_id = feasible.ne(feasible.shift()).cumsum()
    windows = []
    for _, run in df[feasible].groupby(run_id[feasible], sort=False):
        windows.append((float(run["angle_deg"].iloc[0]), float(run["angle_deg"].iloc[-1])))
    return windows


def feasible_angle_range(df: pd.DataFrame, angle: float) -> Optional[Tuple[float, float]]:
    """The feasible window containing ``angle``, or None if ``angle`` is in none."""
    for start, end in feasible_angle_windows(df):
        if min(start, end) <= angle <= max(start, end):
            return start, end
    return None
