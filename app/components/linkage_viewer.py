# app/components/linkage_viewer.py
"""
2D linkage viewer component using Plotly.
"""

import plotly.graph_objects as go
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from scissor_lift.model import LiftResult
from scissor_lift.units import to_display


RAIL_COLOR = 'rgba(149,165,166,0.9)'
ARM_COLOR = 'rgba(52,152,219,0.95)'
JOINT_COLOR = '#ECF0F1'


def render_linkage(result: LiftResult, units: str = 'mm', height: int = 560) -> go.Figure:
    """
    Create a 2D elevation of the stacked lift.
    
    Parameters:
    -----------
    result : LiftResult
        Output of compute_lift()
    units : str
        Display units for the axes ('mm' or 'in')
    height : int
        Figure height in pixels
    
    Returns:
    --------
    go.Figure
        Plotly figure
    """
    fig = go.Figure()
    assembly = result.assembly
    
    def u(mm):
        return to_display(mm, units)
    
    # Rails
    for name, rail in (('Base rail', assembly.base_rail), ('Top rail', assembly.top_rail)):
        fig.add_trace(go.Scatter(
            x=[u(rail.left), u(rail.right)],
            y=[u(rail.y), u(rail.y)],
            mode='lines',
            line=dict(color=RAIL_COLOR, width=8),
            name=name,
            hoverinfo='name',
        ))
    
    # Arms, one trace per arm so each can be hovered
    for st in assembly.stages:
        for arm_name, p, q in (('A-D', st.A, st.D), ('B-C', st.B, st.C)):
            fig.add_trace(go.Scatter(
                x=[u(p.x), u(q.x)],
                y=[u(p.y), u(q.y)],
                mode='lines',
                line=dict(color=ARM_COLOR, width=5),
                name=f'Stage {st.index} arm {arm_name}',
                showlegend=False,
                hoverinfo='name',
            ))
    
    # Joints
    xs, ys, labels = [], [], []
    for st in assembly.stages:
        for pin_name, pin in st.pins.items():
            xs.append(u(pin.x))
            ys.append(u(pin.y))
            labels.append(f'Stage {st.index} {pin_name}')
    fig.add_trace(go.Scatter(
        x=xs,
        y=ys,
        mode='markers',
        marker=dict(size=10, color=JOINT_COLOR, line=dict(color='#2C3E50', width=2)),
        text=labels,
        hovertemplate='%{text}<br>x=%{x:.3f}<br>y=%{y:.3f}<extra></extra>',
        name='Pins',
    ))
    
    fig.update_layout(
        height=height,
        margin=dict(l=20, r=20, t=30, b=20),
        xaxis=dict(title=f'x ({units})', zeroline=False),
        yaxis=dict(title=f'y ({units})', scaleanchor='x', scaleratio=1, zeroline=False),
        plot_bgcolor='#FAFAFA',
        legend=dict(orientation='h', y=1.05),
    )
    
    return fig
