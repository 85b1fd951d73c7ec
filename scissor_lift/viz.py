"""
VISUALIZATION: SCISSOR LIFT ELEVATION
=====================================

Draws a computed lift as a 2-D elevation with matplotlib:

- base rail at y = 0 and top rail at the total height (thick gray bars)
- both arms of every stacked stage (A-D and B-C)
- a joint marker at every pin
- a header line with angle, stage count and total height, and the
  warnings underneath it in red

Coordinates are solved in millimetres and plotted in the chosen display
units. The figure is returned so callers can save it or embed it.
"""

from typing import Optional, Tuple

import matplotlib.pyplot as plt

from .model import LiftResult
from .units import fmt, to_display

COLORS = {
    'background': '#FAFAFA',
    'rail': '#95A5A6',          # Gray (rigid rails)
    'arm': '#3498DB',           # Sky blue (scissor arms)
    'joint_face': '#ECF0F1',
    'joint_edge': '#2C3E50',
    'text': '#2C3E50',
    'warning': '#E74C3C',       # Coral red
}

FONT_TITLE = {'family': 'sans-serif', 'weight': 'bold', 'size': 12}
FONT_ANNOTATION = {'family': 'sans-serif', 'weight': 'normal', 'size': 9}

# Padding around the drawing, in mm (matches the original design sheet view)
PAD_X = 150.0
PAD_BELOW = 120.0
PAD_ABOVE = 180.0


def plot_lift(
    result: LiftResult,
    units: str = "mm",
    ax: Optional[plt.Axes] = None,
    show_labels: bool = True,
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Plot the stacked linkage of ``result``.

    Parameters:
    -----------
    result : LiftResult
        Output of compute_lift()
    units : str
        "mm" or "in" for the axes and header
    ax : plt.Axes, optional
        Axes to draw into; a new figure is created when omitted
    show_labels : bool
        Write pin names next to the stage-1 joints

    Returns:
    --------
    (fig, ax)
    """
    stage = result.stage
    assembly = result.assembly

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))
    else:
        fig = ax.figure
    ax.set_facecolor(COLORS['background'])

    def u(mm):
        return to_display(mm, units)

    # ========================================================================
    # RAILS
    # ========================================================================
    for rail in (assembly.base_rail, assembly.top_rail):
        ax.plot([u(rail.left), u(rail.right)], [u(rail.y), u(rail.y)],
                color=COLORS['rail'], linewidth=6, solid_capstyle='round', zorder=1)

    # ========================================================================
    # ARMS AND JOINTS
    # ========================================================================
    for st in assembly.stages:
        for p, q in ((st.A, st.D), (st.B, st.C)):
            ax.plot([u(p.x), u(q.x)], [u(p.y), u(q.y)],
                    color=COLORS['arm'], linewidth=3, solid_capstyle='round', zorder=2)
        xs = [u(pin.x) for pin in st.pins.values()]
        ys = [u(pin.y) for pin in st.pins.values()]
        ax.scatter(xs, ys, s=40, facecolor=COLORS['joint_face'],
                   edgecolor=COLORS['joint_edge'], linewidth=1.5, zorder=3)

    if show_labels:
        for name, pin in stage.pins.items():
            ax.annotate(name, (u(pin.x), u(pin.y)), textcoords="offset points",
                        xytext=(6, 6), color=COLORS['text'], **FONT_ANNOTATION)

    # ========================================================================
    # EXTENTS
    # ========================================================================
    xs_mm = [pin.x for pin in stage.pins.values()]
    xs_mm += [assembly.base_rail.left, assembly.base_rail.right,
              assembly.top_rail.left, assembly.top_rail.right]
    y_top = max(assembly.total_height, 0.0)
    y_bottom = min(assembly.total_height, 0.0)
    ax.set_xlim(u(min(xs_mm) - PAD_X), u(max(xs_mm) + PAD_X))
    ax.set_ylim(u(y_bottom - PAD_BELOW), u(y_top + PAD_ABOVE))
    ax.set_aspect('equal', adjustable='datalim')

    ax.set_xlabel(f"x ({units})")
    ax.set_ylabel(f"y ({units})")
    ax.grid(True, alpha=0.3)

    # ========================================================================
    # HEADER AND WARNINGS
    # ========================================================================
    header = (f"α = {fmt(result.config.angle_deg)}°  |  "
              f"N = {assembly.stage_count}  |  "
              f"H = {fmt(u(assembly.total_height))} {units}")
    ax.set_title(header, fontdict=FONT_TITLE, color=COLORS['text'], loc='left')

    if stage.warnings:
        ax.text(0.01, 0.98, "\n".join(f"⚠ {w}" for w in stage.warnings),
                transform=ax.transAxes, va='top', ha='left', wrap=True,
                fontdict=FONT_ANNOTATION, color=COLORS['warning'])

    return fig, ax


def save_lift_plot(result: LiftResult, outpath: str, units: str = "mm") -> None:
    """Render ``result`` and write it to ``outpath`` (.png, .pdf, .svg)."""
    fig, _ = plot_lift(result, units=units)
    fig.tight_layout()
    fig.savefig(outpath, dpi=150)
    plt.close(fig)
