"""
main.py — DFS Trace Visualizer Flask App
==========================================
The web server that serves the visualizer page and the traces it replays.

Routes:
  GET  /                               – main UI
  GET  /dfs?start=<v>&format=json      – full DFS trace as JSON
  GET  /dfs?start=<v>                  – legacy plain-text transcript

CLI (via Flask's click integration):
  flask --app main trace 0                   – print the transcript
  flask --app main trace 0 --play --speed fast

State management:
  The graph is built once at import and only ever read.  Every request
  runs its own Recorder and gets its own Trace; nothing about a run is
  kept between requests.  Step-by-step replay happens in the browser.

Configuration (environment, or a .env file):
  PORT       – listening port, default 8080
  HOST       – bind address, default 0.0.0.0
  LOG_LEVEL  – logging level, default INFO
"""

import logging
import os
import sys
import time

import click
from dotenv import load_dotenv
from flask import Flask, Response, jsonify, render_template_string, request

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from graph import Graph, OutOfRangeVertex
from algorithms import PSEUDOCODE, ACTION_LINES
from engine import Recorder, Stepper, SPEED_PRESETS, run_trace
from ui import (
    render_canvas,
    playback_controls,
    start_picker,
    pseudocode_viewer,
    adjacency_panel,
    adjacency_text,
    trace_text,
    step_line,
)


DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"

TEXT_PLAIN = "text/plain; charset=utf-8"


# ---------------------------------------------------------------------------
# Logging & config
# ---------------------------------------------------------------------------
def setup_logging(level: str = "INFO") -> logging.Logger:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
    )
    return logging.getLogger("dfs-visualizer.http")


load_dotenv()
logger = setup_logging(os.getenv("LOG_LEVEL", "INFO"))


def get_port() -> int:
    """PORT from the environment; anything unusable falls back to 8080."""
    raw = os.getenv("PORT")
    if raw is None:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        logger.warning("ignoring invalid PORT=%r, using %d", raw, DEFAULT_PORT)
        return DEFAULT_PORT


def get_host() -> str:
    return os.getenv("HOST", DEFAULT_HOST)


# ---------------------------------------------------------------------------
# App & shared graph
# ---------------------------------------------------------------------------
app = Flask(__name__)

GRAPH = Graph.default()


def _plain(body: str, status: int = 200) -> Response:
    return Response(body, status=status, content_type=TEXT_PLAIN)


def _range_text(graph: Graph) -> str:
    return f"0..{graph.vertex_count - 1}"


@app.errorhandler(OutOfRangeVertex)
def handle_out_of_range(exc: OutOfRangeVertex):
    logger.warning("rejected traversal: %s", exc)
    return _plain(f"Error: start out of range 0..{exc.vertex_count - 1}\n", 400)


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    start = 0
    html = render_template_string(
        INDEX_TEMPLATE,
        svg=render_canvas(GRAPH),
        picker=start_picker(GRAPH.vertex_ids(), start),
        playback=playback_controls(SPEED_PRESETS),
        pseudocode=pseudocode_viewer(PSEUDOCODE),
        adjacency=adjacency_panel(GRAPH),
        action_lines=ACTION_LINES,
    )
    return html


# ---------------------------------------------------------------------------
# API: Trace
# ---------------------------------------------------------------------------
@app.route("/dfs")
def dfs_trace():
    start_str = request.args.get("start")
    fmt       = request.args.get("format", "")

    if start_str is None:
        return _plain(f"Usage: /dfs?start=<vertex {_range_text(GRAPH)}>&format=json\n")

    try:
        start = int(start_str)
    except ValueError:
        logger.warning("rejected traversal: start=%r is not an integer", start_str)
        return _plain(f"Error: start must be an integer {_range_text(GRAPH)}\n", 400)

    rec = Recorder()
    rec.start(GRAPH, start)
    metrics = rec.run_to_completion()
    logger.info(
        "dfs start=%d steps=%d reached=%d max_depth=%d in %.2f ms",
        metrics.start, metrics.total_steps, metrics.vertices_reached,
        metrics.max_stack_depth, metrics.wall_time_ms,
    )

    if fmt.lower() == "json":
        return jsonify(rec.export())

    return _plain(adjacency_text(GRAPH) + "\n" + trace_text(rec.trace) + "\n")


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------
@app.cli.command("trace")
@click.argument("start", type=int)
@click.option("--play", is_flag=True, help="Replay the trace step by step.")
@click.option(
    "--speed",
    type=click.Choice(list(SPEED_PRESETS)),
    default="medium",
    show_default=True,
    help="Replay speed preset.",
)
def trace_command(start: int, play: bool, speed: str):
    """Run DFS from START on the built-in graph."""
    try:
        trace = run_trace(GRAPH, start)
    except OutOfRangeVertex as exc:
        raise click.BadParameter(str(exc), param_hint="START") from exc

    if not play:
        click.echo(adjacency_text(GRAPH))
        click.echo(trace_text(trace))
        return

    stepper = Stepper(on_step=lambda s: click.echo(step_line(s)))
    stepper.set_speed(speed)
    stepper.replay(trace)
    stepper.play()
    while not stepper.is_finished:
        if not stepper.tick():
            time.sleep(min(stepper.speed, 0.05))

    click.echo("DFS order: " + " → ".join(str(v) for v in trace.visited_order))


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>DFS Trace Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --text-muted: #484f58;
      --accent-cyan: #0ea5e9;
      --accent-emerald: #10b981;
      --accent-amber: #f59e0b;
    }

    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      min-height: 100vh;
    }

    #sidebar {
      width: 320px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      padding: 20px 16px;
      overflow-y: auto;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      display: flex;
      justify-content: center;
      padding: 16px;
      border-bottom: 1px solid var(--border);
    }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 16px;
      padding: 16px;
    }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 10px;
      padding: 14px;
      margin-bottom: 14px;
    }

    .panel h3, #bottom-panel h3 {
      font-size: 12px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
      color: var(--text-secondary);
      margin-bottom: 10px;
    }

    button {
      padding: 7px 11px;
      border-radius: 8px;
      border: 1px solid var(--border);
      background: var(--bg-dark);
      color: var(--text-primary);
      cursor: pointer;
    }
    button.btn-primary { background: var(--accent-cyan); border: 0; margin-top: 10px; }
    select { padding: 6px; border-radius: 6px; background: var(--bg-dark); color: var(--text-primary); border: 1px solid var(--border); }

    .button-row { display: flex; gap: 6px; flex-wrap: wrap; }
    .step-info, .speed-control { margin-top: 10px; font-size: 13px; color: var(--text-secondary); }
    .hint { font-size: 11px; color: var(--text-muted); margin-top: 8px; font-style: italic; }

    #stack { display: flex; gap: 6px; min-height: 32px; flex-wrap: wrap; }
    #stack .item { padding: 5px 10px; border-radius: 6px; background: #1e3a5f; font-family: monospace; }
    #stack .item:first-child { background: var(--accent-amber); color: #111; }
    #stack .empty { color: var(--text-muted); }

    .adj-row { font-family: monospace; font-size: 13px; }

    #steps { max-height: 260px; overflow: auto; font-family: monospace; font-size: 13px; }
    .step { padding: 4px 6px; border-bottom: 1px dashed var(--border); cursor: pointer; }
    .step.current { background: rgba(14, 165, 233, 0.15); }

    .code-line { font-family: monospace; font-size: 13px; white-space: pre; padding: 1px 6px; color: var(--text-secondary); }
    .code-line.highlight { background: rgba(245, 158, 11, 0.18); color: var(--text-primary); }

    #visited-order { margin-top: 8px; font-weight: 600; color: var(--accent-emerald); }

    .node { cursor: pointer; }
    .node.on-stack circle { fill: #0ea5e9; }
    .node.visited circle  { fill: #10b981; }
    .node.current circle  { fill: #f59e0b; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="picker">{{ picker|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
    <div class="panel">
      <h3>Stack (top on the left)</h3>
      <div id="stack"><span class="empty">(empty)</span></div>
    </div>
    <div id="adjacency">{{ adjacency|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-container">{{ svg|safe }}</div>

    <div id="bottom-panel">
      <div class="panel">
        <h3>Pseudocode</h3>
        <div id="pseudocode">{{ pseudocode|safe }}</div>
      </div>
      <div class="panel">
        <h3>Steps (press Play to run)</h3>
        <div id="steps"></div>
        <div id="visited-order"></div>
      </div>
    </div>
  </div>

  <script>
    const ACTION_LINES = {{ action_lines|tojson }};

    let trace = null;
    let index = 0;
    let timer = null;

    const $ = (id) => document.getElementById(id);

    function renderNodes(step) {
      document.querySelectorAll('#canvas-svg .node').forEach(g => {
        const v = +g.dataset.id;
        g.classList.remove('unvisited', 'on-stack', 'visited', 'current');
        let state = 'unvisited';
        if (step) {
          if (step.stack.length && step.stack[0] === v && step.node === v) state = 'current';
          else if (step.stack.includes(v)) state = 'on-stack';
          else if (step.visited[v]) state = 'visited';
        }
        g.classList.add(state);
      });
    }

    function renderStack(stack) {
      const el = $('stack');
      el.innerHTML = '';
      if (!stack || stack.length === 0) {
        el.innerHTML = '<span class="empty">(empty)</span>';
        return;
      }
      stack.forEach(v => {
        const d = document.createElement('div');
        d.className = 'item';
        d.textContent = v;
        el.appendChild(d);
      });
    }

    function renderStepsList(steps) {
      const el = $('steps');
      el.innerHTML = '';
      steps.forEach((s, i) => {
        const d = document.createElement('div');
        d.className = 'step';
        d.textContent = (i + 1) + '. ' + s.action + ' ' + s.node + '  | stack: [' + s.stack.join(',') + ']';
        d.onclick = () => setIndex(i);
        el.appendChild(d);
      });
    }

    function highlightLine(action) {
      const line = ACTION_LINES[action];
      document.querySelectorAll('.code-line').forEach(c =>
        c.classList.toggle('highlight', +c.dataset.line === line));
    }

    function applyStep(i) {
      const st = trace.steps[i];
      renderNodes(st);
      renderStack(st.stack);
      highlightLine(st.action);
      Array.from($('steps').children).forEach((c, idx) => c.classList.toggle('current', idx === i));
      $('current-step').textContent = i + 1;
    }

    function setIndex(i) {
      if (!trace) return;
      index = Math.max(0, Math.min(i, trace.steps.length - 1));
      applyStep(index);
    }

    function stop() {
      if (timer) { clearInterval(timer); timer = null; }
    }

    async function run() {
      stop();
      const v = +$('start-selector').value;
      const res = await fetch('/dfs?start=' + v + '&format=json');
      if (!res.ok) {
        alert(await res.text());
        return;
      }
      trace = await res.json();
      renderStepsList(trace.steps);
      $('total-steps').textContent = trace.steps.length;
      $('visited-order').textContent = 'DFS order: ' + trace.visitedOrder.join(' → ');
      setIndex(0);
    }

    $('btn-run').addEventListener('click', run);
    $('btn-prev').addEventListener('click', () => setIndex(index - 1));
    $('btn-next').addEventListener('click', () => setIndex(index + 1));
    $('btn-stop').addEventListener('click', stop);
    $('btn-play').addEventListener('click', () => {
      if (!trace) return;
      stop();
      timer = setInterval(() => {
        if (index < trace.steps.length - 1) setIndex(index + 1);
        else stop();
      }, +$('speed-selector').value);
    });

    document.querySelectorAll('#canvas-svg .node').forEach(g => {
      g.addEventListener('click', () => {
        $('start-selector').value = g.dataset.id;
        run();
      });
    });

    run();
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    port = get_port()
    logger.info("DFS Trace Visualizer listening on http://%s:%d", get_host(), port)
    app.run(host=get_host(), port=port)
