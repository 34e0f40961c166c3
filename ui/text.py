"""
text.py — Plain-text transcript
================================
The old `/dfs?start=N` output, kept for clients that still read it.
One block per loop iteration of the engine: an optional VISIT line
followed by the PUSH or POP line, then a blank line.
"""

from typing import Iterable

from graph import Graph
from algorithms.step import Action, Trace


def _fmt(values: Iterable) -> str:
    return "[" + ", ".join(str(v) for v in values) + "]"


def adjacency_text(graph: Graph) -> str:
    lines = ["Adjacency list (undirected graph):"]
    for v in graph.vertex_ids():
        lines.append(f"{v}: {_fmt(graph.neighbours_of(v))}")
    return "\n".join(lines) + "\n"


def trace_text(trace: Trace) -> str:
    first = trace.steps[0]
    out = [
        f"Starting DFS from vertex {trace.start}\n",
        f"Initial stack: {_fmt(first.stack)}\n\n",
    ]

    for step in trace.steps[1:]:
        if step.action is Action.VISIT:
            out.append(f"{step.explanation}\n")
        else:
            out.append(f"{step.explanation}. Stack: {_fmt(step.stack)}\n\n")

    out.append(f"DFS complete. Visited order: {', '.join(str(v) for v in trace.visited_order)}\n")
    return "".join(out)


def step_line(step) -> str:
    """One-line summary used by the CLI replay."""
    return (
        f"{step.step_number + 1:>3}. {step.action.value:<5} {step.node}"
        f"  | stack: {_fmt(step.stack)}"
    )
