import pytest

from graph import Graph, OutOfRangeVertex
from algorithms import Action, dfs


def test_first_step_pushes_start(graph):
    first = next(dfs(graph, 4))
    assert first.action is Action.PUSH
    assert first.node == 4
    assert first.stack == (4,)
    assert first.visited == (False,) * 9
    assert first.step_number == 0


def test_default_graph_from_zero(graph):
    steps = list(dfs(graph, 0))

    assert len(steps) == 27
    assert [s.action for s in steps[:4]] == [Action.PUSH, Action.VISIT, Action.PUSH, Action.VISIT]
    assert [s.node for s in steps if s.action is Action.VISIT] == list(range(9))
    assert [s.node for s in steps if s.action is Action.POP] == [8, 7, 6, 5, 4, 3, 2, 1, 0]
    assert steps[16].action is Action.PUSH
    assert steps[16].stack == (8, 7, 6, 5, 4, 3, 2, 1, 0)
    assert steps[-1].action is Action.POP
    assert steps[-1].stack == ()


def test_stack_snapshot_is_top_first(graph):
    steps = list(dfs(graph, 0))
    push_1 = steps[2]
    assert push_1.action is Action.PUSH
    assert push_1.node == 1
    assert push_1.stack == (1, 0)
    assert push_1.explanation == "PUSH 1 (neighbour of 0)"


def test_lowest_unvisited_neighbour_wins(graph):
    # from 5 the neighbours are 2, 3, 4, 6; 2 is tried first
    steps = list(dfs(graph, 5))
    assert steps[2].action is Action.PUSH
    assert steps[2].node == 2


def test_step_numbers_are_consecutive(graph):
    steps = list(dfs(graph, 3))
    assert [s.step_number for s in steps] == list(range(len(steps)))


@pytest.mark.parametrize("start", range(9))
def test_invariants_for_every_start(graph, start):
    steps = list(dfs(graph, start))

    assert steps[0].action is Action.PUSH and steps[0].node == start
    assert steps[-1].action is Action.POP and steps[-1].stack == ()

    seen_visited = set()
    for s in steps:
        assert 0 <= s.node < 9
        assert all(0 <= v < 9 for v in s.stack)
        # no vertex twice on the stack
        assert len(set(s.stack)) == len(s.stack)
        # once visited, always visited
        now_visited = {v for v, flag in enumerate(s.visited) if flag}
        assert seen_visited <= now_visited
        seen_visited = now_visited

    pushes = [s.node for s in steps if s.action is Action.PUSH]
    pops   = [s.node for s in steps if s.action is Action.POP]
    assert sorted(pushes) == sorted(pops) == list(range(9))


def test_isolated_vertex_never_visited(island_graph):
    steps = list(dfs(island_graph, 0))
    visits = [s.node for s in steps if s.action is Action.VISIT]
    assert visits == [0, 1, 2]
    assert all(not s.visited[3] for s in steps)
    assert all(3 not in s.stack for s in steps)


def test_isolated_start_vertex(island_graph):
    steps = list(dfs(island_graph, 3))
    assert [(s.action, s.node) for s in steps] == [
        (Action.PUSH, 3), (Action.VISIT, 3), (Action.POP, 3),
    ]


def test_single_vertex_graph():
    steps = list(dfs(Graph(1), 0))
    assert [s.action for s in steps] == [Action.PUSH, Action.VISIT, Action.POP]
    assert steps[-1].visited == (True,)


def test_self_loop_is_harmless():
    steps = list(dfs(Graph(2, [(0, 0), (0, 1)]), 0))
    assert [s.node for s in steps if s.action is Action.VISIT] == [0, 1]


@pytest.mark.parametrize("start", [-1, 9])
def test_out_of_range_start(graph, start):
    gen = dfs(graph, start)
    with pytest.raises(OutOfRangeVertex):
        next(gen)


def test_recorded_steps_are_independent_snapshots(graph):
    gen = dfs(graph, 0)
    first = next(gen)
    second = next(gen)
    rest = list(gen)

    assert first.visited == (False,) * 9
    assert first.stack == (0,)
    assert second.visited[0] is True
    assert rest[-1].stack == ()
    assert isinstance(first.stack, tuple)
    assert isinstance(first.visited, tuple)
    with pytest.raises(AttributeError):
        first.node = 5
