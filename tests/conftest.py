import pytest

from graph import Graph


@pytest.fixture
def graph():
    return Graph.default()


@pytest.fixture
def island_graph():
    # 0-1-2 path plus an isolated vertex 3
    return Graph(4, [(0, 1), (1, 2)])
