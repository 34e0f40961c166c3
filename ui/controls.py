"""
controls.py — UI Control Panels
=================================
Every panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls   – run / prev / next / play / stop / speed
  • start_picker        – start vertex selector
  • pseudocode_viewer   – DFS pseudocode, one div per line
  • adjacency_panel     – adjacency list of the fixed graph

The page's script toggles classes on the markup these return; the
element ids here are what it looks up.
"""

from typing import Dict, List, Optional

from graph import Graph


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    speed_presets: Dict[str, float],
    speed: str = "medium",
) -> str:
    options = []
    for name, seconds in speed_presets.items():
        sel = "selected" if name == speed else ""
        # the page's timer works in milliseconds
        options.append(
            f'<option value="{round(seconds * 1000)}" {sel}>{name.capitalize()}</option>'
        )

    return f"""
    <div class="panel playback-controls">
      <h3>Playback</h3>
      <div class="button-row">
        <button id="btn-prev" title="Previous step">◀ Prev</button>
        <button id="btn-next" title="Next step">Next ▶</button>
        <button id="btn-play" title="Play">▶ Play</button>
        <button id="btn-stop" title="Stop">■ Stop</button>
      </div>
      <div class="step-info">
        Step <span id="current-step">0</span> / <span id="total-steps">0</span>
      </div>
      <div class="speed-control">
        <label>Speed:</label>
        <select id="speed-selector">
          {''.join(options)}
        </select>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Start Picker
# ---------------------------------------------------------------------------
def start_picker(vertex_ids: List[int], start: Optional[int] = None) -> str:
    options = []
    for v in vertex_ids:
        sel = "selected" if v == start else ""
        options.append(f'<option value="{v}" {sel}>{v}</option>')

    last = vertex_ids[-1] if vertex_ids else 0
    return f"""
    <div class="panel start-picker">
      <h3>Start vertex (0..{last})</h3>
      <select id="start-selector">
        {''.join(options)}
      </select>
      <button id="btn-run" class="btn-primary">Run DFS</button>
      <p class="hint">Or click a vertex on the canvas.</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str], current_line: int = -1) -> str:
    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = "highlight" if i == current_line else ""
        lines_html.append(
            f'<div class="code-line {highlight}" data-line="{i}">{_escape(line)}</div>'
        )

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Adjacency Panel
# ---------------------------------------------------------------------------
def adjacency_panel(graph: Graph) -> str:
    rows = []
    for v in graph.vertex_ids():
        nbrs = ", ".join(str(u) for u in graph.neighbours_of(v))
        rows.append(f'<div class="adj-row" data-id="{v}">{v}: [{nbrs}]</div>')

    return f"""
    <div class="panel adjacency-panel">
      <h3>Adjacency list</h3>
      {''.join(rows)}
    </div>
    """
