"""
step.py — Traversal Step Snapshot
==================================
The DFS generator yields Step objects.  A Step is a frozen-in-time
picture of everything the visualizer needs to render one frame:

    • What happened (PUSH / VISIT / POP) and to which vertex
    • The whole stack right after it happened (top first)
    • The visited flag of every vertex right after it happened
    • A plain-English sentence describing the action

Design decisions:
  - Step is a frozen dataclass holding tuples only.  It is a SNAPSHOT:
    the generator keeps mutating its own stack and visited list, and
    nothing it does afterwards can reach back into a recorded Step.
  - Trace is the finished run.  It is built once by the recorder and
    handed to exactly one caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Tuple


class Action(Enum):
    PUSH  = "PUSH"
    VISIT = "VISIT"
    POP   = "POP"


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        action      : What the engine did.
        node        : Vertex the action applied to.
        stack       : Stack contents after the action, top of stack first.
        visited     : Visited flag per vertex id after the action.
        step_number : 0-based index of this step in the run.
        explanation : Human-readable text (legacy transcript, step list).
    """

    action:      Action
    node:        int
    stack:       Tuple[int, ...]  = ()
    visited:     Tuple[bool, ...] = ()
    step_number: int              = 0
    explanation: str              = ""

    def to_dict(self) -> dict:
        return {
            "action":  self.action.value,
            "node":    self.node,
            "stack":   list(self.stack),
            "visited": list(self.visited),
        }


# ---------------------------------------------------------------------------
# Snapshot helper so the generator never hands out its live structures
# ---------------------------------------------------------------------------
def snapshot(
    action: Action,
    node: int,
    stack: List[int],
    visited: List[bool],
    step_number: int,
    explanation: str = "",
) -> Step:
    """
    Freeze the live state into a Step.

    `stack` is the engine's list with the top at the END; the snapshot
    flips it so the top comes first.
    """
    return Step(
        action=action,
        node=node,
        stack=tuple(reversed(stack)),
        visited=tuple(visited),
        step_number=step_number,
        explanation=explanation,
    )


@dataclass(frozen=True)
class Trace:
    """
    Attributes:
        start         : Vertex the traversal began from.
        steps         : Every Step in traversal order.
        visited_order : Vertices in the order they were first visited.
    """

    start:         int
    steps:         Tuple[Step, ...] = field(default_factory=tuple)
    visited_order: Tuple[int, ...]  = field(default_factory=tuple)

    @classmethod
    def from_steps(cls, start: int, steps: Iterable[Step]) -> "Trace":
        steps = tuple(steps)
        return cls(
            start=start,
            steps=steps,
            visited_order=tuple(s.node for s in steps if s.action is Action.VISIT),
        )

    def __len__(self) -> int:
        return len(self.steps)
