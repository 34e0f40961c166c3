"""
algorithms/
-----------
The traversal itself.

    from algorithms import dfs, Step, Trace, Action
"""

from algorithms.step import Action, Step, Trace, snapshot
from algorithms.dfs  import dfs, PSEUDOCODE, ACTION_LINES

__all__ = [
    "Action",
    "Step",
    "Trace",
    "snapshot",
    "dfs",
    "PSEUDOCODE",
    "ACTION_LINES",
]
