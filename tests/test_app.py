import json

import pytest

import main
from main import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def test_index_page(client):
    res = client.get("/")
    assert res.status_code == 200
    body = res.get_data(as_text=True)
    assert "<svg" in body
    assert 'id="start-selector"' in body
    assert "/dfs?start=" in body


def test_usage_without_start(client):
    res = client.get("/dfs")
    assert res.status_code == 200
    assert res.mimetype == "text/plain"
    assert res.get_data(as_text=True) == "Usage: /dfs?start=<vertex 0..8>&format=json\n"


@pytest.mark.parametrize("raw", ["abc", "", "1.5"])
def test_non_integer_start(client, raw):
    res = client.get("/dfs", query_string={"start": raw})
    assert res.status_code == 400
    assert res.get_data(as_text=True) == "Error: start must be an integer 0..8\n"


@pytest.mark.parametrize("start", [-1, 9])
def test_out_of_range_start(client, start):
    res = client.get(f"/dfs?start={start}&format=json")
    assert res.status_code == 400
    assert res.mimetype == "text/plain"
    assert res.get_data(as_text=True) == "Error: start out of range 0..8\n"


def test_json_trace(client):
    res = client.get("/dfs?start=0&format=json")
    assert res.status_code == 200
    assert res.mimetype == "application/json"

    data = res.get_json()
    assert data["start"] == 0
    assert data["visitedOrder"] == list(range(9))
    assert data["adj"]["2"] == [1, 3, 5, 8]
    assert len(data["steps"]) == 27
    assert data["steps"][0] == {"action": "PUSH", "node": 0, "stack": [0], "visited": [False] * 9}
    assert data["steps"][-1]["stack"] == []


def test_format_is_case_insensitive(client):
    res = client.get("/dfs?start=3&format=JSON")
    assert res.mimetype == "application/json"
    assert res.get_json()["start"] == 3


def test_json_is_deterministic(client):
    a = client.get("/dfs?start=0&format=json").get_data()
    b = client.get("/dfs?start=0&format=json").get_data()
    assert a == b
    assert json.loads(a)["visitedOrder"] == list(range(9))


def test_plain_text_transcript(client):
    res = client.get("/dfs?start=0")
    assert res.status_code == 200
    assert res.mimetype == "text/plain"
    body = res.get_data(as_text=True)
    assert body.startswith("Adjacency list (undirected graph):\n0: [1, 7]\n")
    assert "\n\nStarting DFS from vertex 0\n" in body
    assert body.endswith("DFS complete. Visited order: 0, 1, 2, 3, 4, 5, 6, 7, 8\n\n")


def test_cli_transcript():
    runner = app.test_cli_runner()
    result = runner.invoke(args=["trace", "0"])
    assert result.exit_code == 0
    assert "Starting DFS from vertex 0" in result.output
    assert "DFS complete. Visited order: 0, 1, 2, 3, 4, 5, 6, 7, 8" in result.output


def test_cli_replay():
    runner = app.test_cli_runner()
    result = runner.invoke(args=["trace", "0", "--play", "--speed", "turbo"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0].startswith("  1. PUSH  0")
    assert sum(1 for line in lines if "| stack:" in line) == 27
    assert lines[-1] == "DFS order: 0 → 1 → 2 → 3 → 4 → 5 → 6 → 7 → 8"


def test_cli_rejects_out_of_range():
    runner = app.test_cli_runner()
    result = runner.invoke(args=["trace", "9"])
    assert result.exit_code != 0
    assert "out of range" in result.output


@pytest.mark.parametrize("env, expected", [(None, 8080), ("9090", 9090), ("nope", 8080)])
def test_get_port(monkeypatch, env, expected):
    if env is None:
        monkeypatch.delenv("PORT", raising=False)
    else:
        monkeypatch.setenv("PORT", env)
    assert main.get_port() == expected
