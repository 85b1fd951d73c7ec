# app/components - Reusable UI components
from .linkage_viewer import render_linkage
from .parameter_inputs import render_lift_inputs, render_length_input

__all__ = [
    'render_linkage',
    'render_lift_inputs',
    'render_length_input',
]
