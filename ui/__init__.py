"""
ui/
---
Presentation layer.

    from ui import render_canvas
    from ui import playback_controls, start_picker, …
    from ui import adjacency_text, trace_text
"""

from ui.canvas import render_canvas, circle_layout, CanvasConfig

from ui.controls import (
    playback_controls,
    start_picker,
    pseudocode_viewer,
    adjacency_panel,
)

from ui.text import adjacency_text, trace_text, step_line

__all__ = [
    "render_canvas",
    "circle_layout",
    "CanvasConfig",
    "playback_controls",
    "start_picker",
    "pseudocode_viewer",
    "adjacency_panel",
    "adjacency_text",
    "trace_text",
    "step_line",
]
