"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete DFS run (all Steps) into a Trace, computes a few
run metrics, and serialises the result into the wire payload the page
consumes.

Usage:
    rec = Recorder()
    rec.start(graph, start=0)
    rec.run_to_completion()          # exhausts the generator → rec.trace
    metrics = rec.get_metrics()
    rec.export()                     # {"adj", "start", "steps", "visitedOrder"}

Or in one call:
    trace = run_trace(graph, 0)

Every Recorder (and every Trace) belongs to the request that made it;
only the Graph is shared.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

from graph import Graph
from algorithms import Action, Trace, dfs
from engine.stepper import Stepper

logger = logging.getLogger("dfs-visualizer.engine")


# ---------------------------------------------------------------------------
# Metrics dataclass
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    start:            int   = 0
    total_steps:      int   = 0
    pushes:           int   = 0
    visits:           int   = 0
    pops:             int   = 0
    max_stack_depth:  int   = 0
    vertices_reached: int   = 0
    wall_time_ms:     float = 0.0


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        trace   : The finished Trace (available after run_to_completion).
        metrics : Computed RunMetrics (available after run_to_completion).
        stepper : The underlying Stepper driving the generator.
    """

    def __init__(self):
        self.trace:   Optional[Trace]      = None
        self.metrics: Optional[RunMetrics] = None
        self.stepper: Optional[Stepper]    = None

        self._graph:      Optional[Graph] = None
        self._start:      int             = 0
        self._start_time: float           = 0.0

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, graph: Graph, start: int) -> None:
        """
        Prepare a run.  Raises OutOfRangeVertex straight away for a bad
        start vertex, before anything is recorded.
        """
        graph.check_vertex(start)

        self._graph   = graph
        self._start   = start
        self.trace    = None
        self.metrics  = None
        self._start_time = time.monotonic()

        self.stepper = Stepper()
        self.stepper.load(dfs(graph, start))

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, freeze the Trace, compute metrics."""
        if self.stepper is None:
            raise RuntimeError("Call start() first.")

        self.stepper.jump_to_end()
        self.trace = Trace.from_steps(self._start, self.stepper.steps)

        wall_ms = (time.monotonic() - self._start_time) * 1000
        self.metrics = self._compute_metrics(wall_ms)
        logger.debug("recorded %d steps from vertex %d", len(self.trace), self._start)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        if self.trace is None or self._graph is None:
            raise RuntimeError("Nothing recorded yet; call run_to_completion().")
        return trace_to_dict(self._graph, self.trace)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        steps = self.trace.steps
        return RunMetrics(
            start=self._start,
            total_steps=len(steps),
            pushes=sum(1 for s in steps if s.action is Action.PUSH),
            visits=sum(1 for s in steps if s.action is Action.VISIT),
            pops=sum(1 for s in steps if s.action is Action.POP),
            max_stack_depth=max((len(s.stack) for s in steps), default=0),
            vertices_reached=len(self.trace.visited_order),
            wall_time_ms=round(wall_ms, 2),
        )


# ---------------------------------------------------------------------------
# One-shot helpers
# ---------------------------------------------------------------------------
def run_trace(graph: Graph, start: int) -> Trace:
    """Run DFS from `start` and return the full Trace."""
    rec = Recorder()
    rec.start(graph, start)
    rec.run_to_completion()
    return rec.trace


def trace_to_dict(graph: Graph, trace: Trace) -> Dict[str, Any]:
    """Wire payload for the page: adjacency, start, steps, visited order."""
    return {
        "adj":          graph.to_dict(),
        "start":        trace.start,
        "steps":        [s.to_dict() for s in trace.steps],
        "visitedOrder": list(trace.visited_order),
    }
