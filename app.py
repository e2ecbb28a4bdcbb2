"""
LRU Page Replacement Visualizer

This application steps a page reference string through a fixed number of
frames under the Least-Recently-Used replacement policy and animates the
result:
    - One column per reference with the frame contents after the step
    - Hit / Miss status per step with changed frames highlighted
    - Running totals, a frame table heatmap and a hits vs misses chart

The simulation itself runs to completion before playback starts; the UI only
iterates over the precomputed steps.

Built with Streamlit for the web interface and Plotly for visualizations.
"""

# =============================================================================
# IMPORTS
# =============================================================================

import html                                  # Escaping user supplied page names
import logging
import time                                  # For pacing the playback
from typing import List, Optional, Sequence

import plotly.graph_objects as go            # Interactive plotting library
import streamlit as st                       # Web application framework

from config import VisualizerConfig, load_config
from engine import SimulationRun, StepResult, run
from errors import VisualizerError
from references import parse_capacity, parse_references
from log_config import setup_logging
from utils import (
    EMPTY_FRAME, FRAME_COLORS, STATUS_CODES,
    frame_grid, frame_labels, frame_statuses, format_token, get_color, recent_events,
)

logger = logging.getLogger(__name__)


# =============================================================================
# RENDERING HELPERS
# =============================================================================

# Frames fade in one after another inside a column
COLUMN_CSS = """
<style>
.lru-row { display: flex; gap: 10px; overflow-x: auto; padding: 8px 2px; }
.lru-col { min-width: 72px; border: 1px solid #d5d8dc; border-radius: 8px;
           padding: 6px; text-align: center; background: #ffffff; }
.lru-col.active { border: 2px solid #2e86c1; box-shadow: 0 0 6px #85c1e9; }
.lru-col.placeholder { opacity: 0.5; }
.lru-ref { font-size: 0.85rem; margin-bottom: 4px; color: #1b2631; }
.lru-frame { margin: 3px 0; padding: 4px 0; border-radius: 4px; color: #1b2631;
             opacity: 0; animation: lru-show 0.3s ease forwards; }
.lru-status { margin-top: 4px; font-weight: bold; color: #1b2631; }
@keyframes lru-show { to { opacity: 1; } }
</style>
"""


def frame_cell_html(label: str, status: str, position: int, stagger_ms: int) -> str:
    """
    Build the HTML for a single frame cell.

    Args:
        label (str): Page shown in the frame, or the empty marker
        status (str): One of the frame statuses from utils.frame_statuses
        position (int): Frame index, used to stagger the fade-in
        stagger_ms (int): Delay between consecutive frames appearing

    Returns:
        str: HTML snippet for the cell
    """
    style = f"background: {get_color(status)}; animation-delay: {position * stagger_ms}ms;"
    if status == "empty":
        style += " color: #7b7d7d;"
    return f'<div class="lru-frame" style="{style}">{html.escape(label)}</div>'


def step_column_html(step: StepResult, capacity: int, active: bool, stagger_ms: int) -> str:
    """HTML for one processed reference: title, frames top to bottom, status."""
    cells = "".join(
        frame_cell_html(label, status, i, stagger_ms)
        for i, (label, status) in enumerate(zip(frame_labels(step, capacity),
                                                frame_statuses(step, capacity)))
    )
    status_color = get_color("hit" if step.is_hit else "miss")
    classes = "lru-col active" if active else "lru-col"
    return (
        f'<div class="{classes}">'
        f'<div class="lru-ref">Ref: <b>{html.escape(format_token(step.reference))}</b></div>'
        f"{cells}"
        f'<div class="lru-status" style="background: {status_color};">{step.status}</div>'
        f"</div>"
    )


def pending_column_html(reference) -> str:
    """HTML for a reference that has not been played back yet."""
    return (
        '<div class="lru-col">'
        f'<div class="lru-ref">Ref: <b>{html.escape(format_token(reference))}</b></div>'
        '<div class="lru-status"></div>'
        "</div>"
    )


def placeholder_row_html(count: int) -> str:
    """Empty columns shown before any simulation has been run."""
    col = (
        '<div class="lru-col placeholder">'
        f'<div class="lru-ref">Ref: {EMPTY_FRAME}</div>'
        f'<div class="lru-status">{EMPTY_FRAME}</div>'
        "</div>"
    )
    return f'<div class="lru-row">{col * count}</div>'


def row_html(steps: Sequence[StepResult], shown: int, capacity: int,
             active: Optional[int], stagger_ms: int) -> str:
    """The whole row of columns with the first `shown` steps filled in."""
    cols: List[str] = []
    for step in steps:
        if step.index < shown:
            cols.append(step_column_html(step, capacity, step.index == active, stagger_ms))
        else:
            cols.append(pending_column_html(step.reference))
    return f'<div class="lru-row">{"".join(cols)}</div>'


def totals_html(hits: int, misses: int) -> str:
    return (
        f"<p><b>Total Hits:</b> {hits} <br>"
        f"<b>Total Misses:</b> {misses} <br>"
        f"<b>Total Streams:</b> {hits + misses}</p>"
    )


def frame_table_figure(result: SimulationRun, capacity: int) -> go.Figure:
    """Heatmap with one row per frame and one column per step."""
    labels, codes = frame_grid(result.steps, capacity)

    # Discrete color scale, one band per status code
    ordered = sorted(STATUS_CODES, key=STATUS_CODES.get)
    top = len(ordered) - 1
    colorscale = []
    for status in ordered:
        lo = max(STATUS_CODES[status] - 0.5, 0) / top
        hi = min(STATUS_CODES[status] + 0.5, top) / top
        colorscale += [[lo, FRAME_COLORS[status]], [hi, FRAME_COLORS[status]]]

    fig = go.Figure()
    fig.add_trace(go.Heatmap(
        z=codes,
        x=[f"{s.index}: {format_token(s.reference)}" for s in result.steps],
        y=[f"F{i}" for i in range(capacity)],
        text=labels,
        texttemplate="%{text}",
        zmin=0,
        zmax=top,
        colorscale=colorscale,
        showscale=False,
        hoverinfo="text",
        xgap=2,
        ygap=2,
    ))
    fig.update_layout(
        height=80 + 40 * capacity,
        margin=dict(l=10, r=10, t=10, b=10),
        yaxis=dict(autorange="reversed"),
        xaxis=dict(side="top"),
    )
    return fig


def hit_miss_figure(result: SimulationRun) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=["Hits", "Misses"],
        y=[result.totals.hits, result.totals.misses],
        marker_color=[FRAME_COLORS["hit"], FRAME_COLORS["miss"]],
    ))
    fig.update_layout(height=300, title="Hits vs Misses")
    return fig


# =============================================================================
# PLAYBACK
# =============================================================================

def play(result: SimulationRun, capacity: int, cfg: VisualizerConfig,
         row_slot, totals_slot, delay_s: float):
    """
    Animate a precomputed run: reveal one column per step, then count the
    totals up. Nothing here touches simulator state.
    """
    for step in result.steps:
        row_slot.markdown(
            row_html(result.steps, step.index + 1, capacity, step.index, cfg.frame_stagger_ms),
            unsafe_allow_html=True,
        )
        time.sleep(delay_s)

    display_hits = display_misses = 0
    while display_hits < result.totals.hits or display_misses < result.totals.misses:
        if display_hits < result.totals.hits:
            display_hits += 1
        if display_misses < result.totals.misses:
            display_misses += 1
        totals_slot.markdown(totals_html(display_hits, display_misses), unsafe_allow_html=True)
        time.sleep(cfg.totals_tick_s)


def show_static(result: SimulationRun, capacity: int, cfg: VisualizerConfig,
                row_slot, totals_slot):
    """Render a finished run without animation (used on Streamlit reruns)."""
    last = len(result.steps)
    row_slot.markdown(
        row_html(result.steps, last, capacity, last - 1, 0),
        unsafe_allow_html=True,
    )
    totals_slot.markdown(
        totals_html(result.totals.hits, result.totals.misses), unsafe_allow_html=True
    )


# =============================================================================
# STREAMLIT UI - Web Application Interface
# =============================================================================

cfg = load_config()
setup_logging(cfg.log_level)

st.set_page_config(page_title="LRU Page Replacement Visualizer", layout="wide")
st.title("LRU Page Replacement Visualizer")
st.markdown(COLUMN_CSS, unsafe_allow_html=True)

# -----------------------------------------------------------------------------
# SIDEBAR - Simulation Settings
# -----------------------------------------------------------------------------

st.sidebar.header("Simulation Settings")

# A form so pressing Enter in a field submits the simulation
with st.sidebar.form("simulation"):
    raw_refs = st.text_input(
        "Reference string (numbers or names, space or comma separated)",
        value=cfg.default_references,
    )
    raw_frames = st.text_input("Number of pages (frames)", value=str(cfg.default_capacity))
    delay_s = st.slider(
        "Delay between steps (s)",
        min_value=0.0,
        max_value=3.0,
        value=min(float(cfg.step_delay_s), 3.0),
        step=0.1,
    )
    submitted = st.form_submit_button("Simulate")

if st.sidebar.button("Reset"):
    st.session_state.pop("last_run", None)

# -----------------------------------------------------------------------------
# MAIN CONTENT AREA
# -----------------------------------------------------------------------------

row_slot = st.empty()
totals_slot = st.empty()

if submitted:
    try:
        refs = parse_references(raw_refs)
        capacity = parse_capacity(raw_frames)
    except VisualizerError as e:
        # Invalid input: nothing was simulated
        logger.info("Rejected input: %s", e)
        st.error(str(e))
        st.session_state.pop("last_run", None)
    else:
        result = run(refs, capacity)
        st.session_state.last_run = (result, capacity)
        play(result, capacity, cfg, row_slot, totals_slot, delay_s)

last_run = st.session_state.get("last_run")

if last_run is None:
    row_slot.markdown(placeholder_row_html(cfg.placeholder_columns), unsafe_allow_html=True)
else:
    result, capacity = last_run
    if not submitted:
        show_static(result, capacity, cfg, row_slot, totals_slot)

    col1, col2 = st.columns([2, 1])

    with col1:
        st.subheader("Frame Table")
        st.plotly_chart(frame_table_figure(result, capacity), use_container_width=True)

    with col2:
        st.subheader("Statistics")
        st.metric("References", result.totals.total)
        st.metric("Misses", result.totals.misses)
        st.metric("Hit Ratio", result.totals.hit_ratio)
        st.plotly_chart(hit_miss_figure(result), use_container_width=True)

    # Event log (most recent first)
    st.subheader("Event Log")
    # Plain text: page names are user input
    for ev in recent_events(result.events, cfg.event_log_size):
        st.text(ev)

# =============================================================================
# FOOTER - Usage Tips
# =============================================================================

st.markdown("---")
st.markdown(
    "**Usage tips**:\n"
    "- Enter page references separated by spaces or commas and press **Enter** or **Simulate**.\n"
    "- References may be numbers or names; `A` and `a` are different pages.\n"
    "- On a hit every occupied frame is highlighted; on a miss only the frame that changed.\n"
    "- A replaced page's frame is reused in place, so frame positions stay stable."
)
