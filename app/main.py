# app/main.py
"""
Scissor Lift Designer - Real-Time Live Interface

Inputs in the sidebar; every change re-solves the stage, restacks and
redraws. Lengths are stored in millimetres and shown in the chosen units.

Run with:
    streamlit run app/main.py
"""

import streamlit as st
import sys
from pathlib import Path

# Add app directory to path
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import CONFIG
from services import LiftService, ExportService
from state import get_brief, update_brief, reset_brief
from components import render_linkage, render_lift_inputs
from scissor_lift.presets import end_labels
from scissor_lift.units import fmt

# Page configuration - must be first Streamlit command
st.set_page_config(
    page_title=CONFIG.app_name,
    page_icon="🛗",
    layout="wide",
    initial_sidebar_state="expanded",
)


# =============================================================================
# SIDEBAR - All Parameter Controls
# =============================================================================

with st.sidebar:
    st.title(f"🛗 {CONFIG.app_name}")
    st.caption(CONFIG.app_subtitle)
    
    st.divider()
    
    brief = render_lift_inputs(get_brief())
    update_brief(**brief.to_dict())
    
    st.divider()
    
    if st.button("↺ Reset to defaults", use_container_width=True):
        reset_brief()
        for key in list(st.session_state.keys()):
            if key != 'brief':
                del st.session_state[key]
        st.rerun()
    
    with st.expander("ℹ️ Help", expanded=False):
        st.markdown("""
        **Pins:**
        - *A, B*: base rail (left, right role)
        - *C, D*: top rail (left, right role)
        - Arm 1 joins A-D, arm 2 joins B-C
        
        **Presets:**
        - *classic*: A and C held at the left rail ends
        - *mirrored*: B and D held at the right rail ends
        - *bothBaseFixed / bothTopFixed*: solved like classic, flagged as
          possibly binding
        
        **Warnings** never stop the solve: a slider pin that leaves its
        rail is still drawn where the arm puts it.
        """)


# =============================================================================
# COMPUTE
# =============================================================================

units = brief.units
result = LiftService.compute(brief.to_config())
metrics = LiftService.summary_metrics(result, units)
stage = result.stage


# =============================================================================
# MAIN AREA - Elevation + Metrics
# =============================================================================

col_title, col_status = st.columns([3, 1])
with col_title:
    st.title("Live Design Preview")
with col_status:
    if metrics['feasible']:
        st.success("✓ Sliders on rails", icon="✅")
    else:
        st.error("✗ Slider off rail", icon="❌")

for warning in stage.warnings:
    st.warning(warning, icon="⚠️")

col_plot, col_metrics = st.columns([2, 1])

with col_plot:
    fig = render_linkage(result, units=units)
    st.plotly_chart(fig, use_container_width=True, key="linkage")

with col_metrics:
    st.metric("Stage height h", f"{fmt(metrics['stage_height'])} {units}")
    st.metric("Stage projection s", f"{fmt(metrics['stage_projection'])} {units}")
    st.metric("Total height H", f"{fmt(metrics['total_height'])} {units}")
    
    col_n, col_w = st.columns(2)
    with col_n:
        st.metric("Stages", metrics['n_stages'])
    with col_w:
        st.metric("Warnings", metrics['n_warnings'])
    
    labels = end_labels(stage.preset)
    st.markdown("**Constraints**")
    st.markdown(
        f"- base left: `{labels.base_left.value}`\n"
        f"- base right: `{labels.base_right.value}`\n"
        f"- top left: `{labels.top_left.value}`\n"
        f"- top right: `{labels.top_right.value}`"
    )


# =============================================================================
# DESIGN SHEET + EXPORT
# =============================================================================

st.divider()
st.subheader("Design Sheet")

sheet = ExportService.generate_design_sheet(result, units)
st.code(sheet, language=None)

col1, col2, col3 = st.columns(3)
with col1:
    st.download_button(
        "⬇️ JSON",
        data=ExportService.generate_payload_json(result, units),
        file_name=ExportService.FILENAMES['json'],
        mime="application/json",
        use_container_width=True,
    )
with col2:
    st.download_button(
        "⬇️ Pins CSV",
        data=ExportService.generate_pins_csv(result),
        file_name=ExportService.FILENAMES['csv'],
        mime="text/csv",
        use_container_width=True,
    )
with col3:
    st.download_button(
        "⬇️ Design sheet",
        data=sheet,
        file_name=ExportService.FILENAMES['text'],
        mime="text/plain",
        use_container_width=True,
    )
