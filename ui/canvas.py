"""
canvas.py — SVG Graph Renderer
================================
Pure rendering function: Graph + Step → SVG string.

Vertices have no stored coordinates, so they are laid out evenly on a
circle in id order.  Every node group carries `data-id` so the page
script can recolour it per step without re-rendering.

Node states, in priority order:
  • current   – the vertex the step acted on
  • on-stack  – somewhere in the step's stack snapshot
  • visited   – visited flag set in the snapshot
  • unvisited – everything else
"""

import math
from typing import Dict, Optional, Tuple

from graph import Graph
from algorithms.step import Step


# ---------------------------------------------------------------------------
# Visual Config
# ---------------------------------------------------------------------------
class CanvasConfig:
    width:  int = 560
    height: int = 420
    bg:     str = "#0d1117"

    node_colors: Dict[str, str] = {
        "unvisited": "#1c2128",
        "on-stack":  "#0ea5e9",
        "visited":   "#10b981",
        "current":   "#f59e0b",
    }

    edge_color:        str = "#30363d"
    edge_width:        int = 2

    node_radius:       int = 20
    node_stroke:       str = "#484f58"
    node_stroke_width: int = 2
    node_label_color:  str = "#e6edf3"
    node_label_size:   int = 14

    layout_radius_ratio: float = 0.38

    overlay_bg:     str = "#161b22"
    overlay_border: str = "#30363d"
    overlay_text:   str = "#7d8590"
    overlay_accent: str = "#0ea5e9"


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
def circle_layout(graph: Graph, config: CanvasConfig = CONFIG) -> Dict[int, Tuple[float, float]]:
    """{vertex: (x, y)} evenly spaced on a circle, vertex 0 at the top."""
    n  = graph.vertex_count
    cx = config.width / 2
    cy = config.height / 2
    radius = min(config.width, config.height) * config.layout_radius_ratio
    if n == 1:
        return {0: (cx, cy)}

    positions = {}
    for v in range(n):
        angle = 2 * math.pi * v / n - math.pi / 2
        positions[v] = (
            round(cx + radius * math.cos(angle), 1),
            round(cy + radius * math.sin(angle), 1),
        )
    return positions


def node_state(v: int, step: Optional[Step]) -> str:
    if step is None:
        return "unvisited"
    if v == step.node and step.stack and step.stack[0] == v:
        return "current"
    if v in step.stack:
        return "on-stack"
    if step.visited and step.visited[v]:
        return "visited"
    return "unvisited"


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    graph: Graph,
    step: Optional[Step] = None,
    config: CanvasConfig = CONFIG,
    show_overlays: bool = False,
) -> str:
    """
    Returns an SVG string.

    Args:
        graph         : The graph to render.
        step          : Step whose snapshot colours the vertices (or None).
        config        : Visual config.
        show_overlays : If True and a step is given, draw the stack panel.
    """
    pos = circle_layout(graph, config)

    svg_parts = [
        f'<svg id="canvas-svg" width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    # edges first so vertices sit on top
    for u, v in graph.edges():
        svg_parts.append(_render_edge(pos[u], pos[v], u, v, config))

    for v in graph.vertex_ids():
        svg_parts.append(_render_node(v, pos[v], node_state(v, step), config))

    if show_overlays and step is not None:
        svg_parts.append(_render_stack_panel(step, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Pieces
# ---------------------------------------------------------------------------
def _render_node(v: int, xy: Tuple[float, float], state: str, config: CanvasConfig) -> str:
    x, y = xy
    fill = config.node_colors.get(state, config.node_colors["unvisited"])
    return "\n".join([
        f'<g class="node {state}" data-id="{v}">',
        f'  <circle cx="{x}" cy="{y}" r="{config.node_radius}" '
        f'fill="{fill}" stroke="{config.node_stroke}" stroke-width="{config.node_stroke_width}"/>',
        f'  <text x="{x}" y="{y + 5}" text-anchor="middle" '
        f'font-size="{config.node_label_size}" fill="{config.node_label_color}" '
        f'font-weight="600">{v}</text>',
        '</g>',
    ])


def _render_edge(
    a: Tuple[float, float],
    b: Tuple[float, float],
    u: int,
    v: int,
    config: CanvasConfig,
) -> str:
    (x1, y1), (x2, y2) = a, b
    if u == v:
        # self-loop: small circle above the vertex
        r = config.node_radius
        return (
            f'<circle class="edge" data-u="{u}" data-v="{v}" cx="{x1}" cy="{y1 - r}" '
            f'r="{r / 2}" fill="none" stroke="{config.edge_color}" '
            f'stroke-width="{config.edge_width}"/>'
        )
    return (
        f'<line class="edge" data-u="{u}" data-v="{v}" '
        f'x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" '
        f'stroke="{config.edge_color}" stroke-width="{config.edge_width}"/>'
    )


def _render_stack_panel(step: Step, config: CanvasConfig) -> str:
    x, y = 12, 12
    parts = [
        f'<g class="stack-panel" transform="translate({x},{y})">',
        f'  <rect width="120" height="{40 + 16 * min(len(step.stack), 8)}" '
        f'fill="{config.overlay_bg}" stroke="{config.overlay_border}" rx="8" opacity="0.95"/>',
        f'  <text x="10" y="22" font-size="12" font-weight="700" '
        f'fill="{config.overlay_accent}">STACK</text>',
    ]
    for i, v in enumerate(step.stack[:8]):
        parts.append(
            f'  <text x="14" y="{42 + i * 16}" font-size="12" '
            f'font-family="monospace" fill="{config.overlay_text}">{v}</text>'
        )
    if len(step.stack) > 8:
        parts.append(
            f'  <text x="14" y="{42 + 8 * 16}" font-size="11" '
            f'fill="{config.overlay_text}">… +{len(step.stack) - 8} more</text>'
        )
    parts.append("</g>")
    return "\n".join(parts)
