"""
dfs.py — Depth-First Search
=============================
Generator-based DFS using an explicit stack (no Python recursion, so
every intermediate stack state is observable from outside).

Yields a Step at:
  1. Push the start vertex onto the stack
  2. First time the top of the stack is seen  →  VISIT
  3. Lowest unvisited neighbour not already on the stack  →  PUSH
  4. No such neighbour  →  POP

Unlike the textbook "mark on pop" loop, the top of the stack is only
peeked, and a neighbour is pushed only if it is not on the stack yet.
Each vertex is therefore on the stack at most once, pushed at most
once and popped exactly once.
"""

from typing import Dict, Generator, List, Set

from graph import Graph
from algorithms.step import Action, Step, snapshot


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def DFS(graph, start):",                              # 0
    "    stack ← [start]",                                  # 1
    "    visited ← {}",                                     # 2
    "    while stack is not empty:",                        # 3
    "        v ← stack.peek()",                             # 4
    "        if v not visited:",                            # 5
    "            visited.add(v)",                           # 6
    "        next ← first u in adj(v)",                     # 7
    "               with u not visited and u not in stack", # 8
    "        if next exists: stack.push(next)",             # 9
    "        else: stack.pop()",                            # 10
]

# which pseudocode line each action executes; the page highlights it
ACTION_LINES: Dict[str, int] = {
    Action.PUSH.value:  9,
    Action.VISIT.value: 6,
    Action.POP.value:   10,
}


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs(graph: Graph, start: int) -> Generator[Step, None, None]:
    """
    Iterative DFS over `graph` from `start`.

    Raises OutOfRangeVertex on the first `next()` if `start` is not a
    vertex of `graph`; no Step is produced in that case.
    """
    graph.check_vertex(start)

    step_no  = 0
    visited: List[bool] = [False] * graph.vertex_count
    stack:   List[int]  = [start]          # top is stack[-1]
    on_stack: Set[int]  = {start}

    yield snapshot(Action.PUSH, start, stack, visited, step_no,
                   f"PUSH {start} (start vertex)")
    step_no += 1

    while stack:
        v = stack[-1]

        if not visited[v]:
            visited[v] = True
            yield snapshot(Action.VISIT, v, stack, visited, step_no,
                           f"VISIT {v} (marked visited)")
            step_no += 1

        nxt = None
        for u in graph.neighbours_of(v):
            if not visited[u] and u not in on_stack:
                nxt = u
                break

        if nxt is not None:
            stack.append(nxt)
            on_stack.add(nxt)
            yield snapshot(Action.PUSH, nxt, stack, visited, step_no,
                           f"PUSH {nxt} (neighbour of {v})")
        else:
            popped = stack.pop()
            on_stack.discard(popped)
            yield snapshot(Action.POP, popped, stack, visited, step_no,
                           f"POP {popped} (no unvisited neighbour left)")
        step_no += 1
