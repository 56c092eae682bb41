"""
main.py — Graph Editor & Algorithm Visualizer Flask App
========================================================
The web server that powers the visualizer.  It serves JSON only; the
front end renders whatever state it receives.

Routes:
  GET  /api/state              – current app state + playback state
  GET  /api/algorithms         – registry metadata (labels, pseudocode, …)
  POST /api/action             – dispatch one reducer action
  POST /api/undo               – undo the last structural edit
  POST /api/redo               – redo
  POST /api/run                – start an algorithm run
  POST /api/step/next          – advance one step
  POST /api/step/play          – toggle play/pause
  POST /api/step/tick          – advance if the replay interval has elapsed
  POST /api/step/end           – run to the end
  POST /api/reset              – stop the run and clear the colours
  POST /api/config/speed       – set replay interval (ms or preset)
  GET  /api/graph/export       – the graph in its persisted shape
  POST /api/graph/import       – load a previously exported graph
  POST /api/compare            – run two algorithms to completion and compare

State management:
  Each browser session gets its own Store + Stepper, kept in process
  memory and looked up through a random id in the Flask session cookie.
  Not thread-safe: run the development server single-threaded.
"""

import logging
import secrets
from dataclasses import dataclass, field
from typing import Dict

from flask import Flask, jsonify, request, session

import config
from algorithms import list_algorithms
from engine import Stepper, Store, RunError, compare, initial_state, record
from engine.actions import (
    ActionError, AddEdge, ClearGraph, LoadGraph, Redo, SetAlgorithm, SetSpeed,
    Undo, UpdateEdgeWeight, action_from_dict,
)
from graph import Graph, GraphFormatError, is_valid_weight

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config.from_object(config.Config)


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
@dataclass
class EditorSession:
    store:   Store
    stepper: Stepper = field(init=False)

    def __post_init__(self):
        self.stepper = Stepper(self.store)


_SESSIONS: Dict[str, EditorSession] = {}


def get_session() -> EditorSession:
    """The caller's store + stepper, created on first use."""
    sid = session.get("sid")
    if sid is None or sid not in _SESSIONS:
        sid = secrets.token_hex(16)
        session["sid"] = sid
        _SESSIONS[sid] = EditorSession(
            Store(initial_state(
                speed=app.config["SPEED_MS"],
                history_limit=app.config["HISTORY_LIMIT"],
            ))
        )
    return _SESSIONS[sid]


def state_payload(ed: EditorSession) -> dict:
    return {"state": ed.store.state.to_dict(), "stepper": ed.stepper.to_dict()}


def bad_request(message: str):
    logger.warning("bad request to %s: %s", request.path, message)
    return jsonify({"error": message}), 400


# ---------------------------------------------------------------------------
# API: State & metadata
# ---------------------------------------------------------------------------
@app.route("/api/state")
def api_state():
    return jsonify(state_payload(get_session()))


@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})


# ---------------------------------------------------------------------------
# API: Editing
# ---------------------------------------------------------------------------
@app.route("/api/action", methods=["POST"])
def api_action():
    ed = get_session()
    try:
        action = action_from_dict(request.get_json(silent=True) or {})
    except ActionError as e:
        return bad_request(str(e))

    if isinstance(action, UpdateEdgeWeight) or (isinstance(action, AddEdge) and action.weight is not None):
        if not is_valid_weight(action.weight):
            return bad_request("Edge weight must be a positive number")

    if isinstance(action, SetAlgorithm):
        ed.stepper.select_algorithm(action.algorithm)
    elif isinstance(action, SetSpeed):
        try:
            ed.stepper.set_speed(action.speed)
        except ValueError as e:
            return bad_request(str(e))
    else:
        if isinstance(action, (ClearGraph, LoadGraph)):
            ed.stepper.reset()
        ed.store.dispatch(action)
    return jsonify(state_payload(ed))


@app.route("/api/undo", methods=["POST"])
def api_undo():
    ed = get_session()
    ed.store.dispatch(Undo())
    return jsonify(state_payload(ed))


@app.route("/api/redo", methods=["POST"])
def api_redo():
    ed = get_session()
    ed.store.dispatch(Redo())
    return jsonify(state_payload(ed))


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    ed = get_session()
    data = request.get_json(silent=True) or {}
    try:
        ed.stepper.start(
            algorithm=data.get("algorithm"),
            start=data.get("start"),
            autoplay=bool(data.get("autoplay", True)),
        )
    except RunError as e:
        return bad_request(str(e))
    return jsonify(state_payload(ed))


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    ed = get_session()
    step = ed.stepper.next_step()
    payload = state_payload(ed)
    payload["step"] = step.to_dict() if step else None
    return jsonify(payload)


@app.route("/api/step/play", methods=["POST"])
def api_step_play():
    ed = get_session()
    ed.stepper.toggle_play()
    return jsonify(state_payload(ed))


@app.route("/api/step/tick", methods=["POST"])
def api_step_tick():
    ed = get_session()
    advanced = ed.stepper.tick()
    payload = state_payload(ed)
    payload["advanced"] = advanced
    return jsonify(payload)


@app.route("/api/step/end", methods=["POST"])
def api_step_end():
    ed = get_session()
    ed.stepper.jump_to_end()
    return jsonify(state_payload(ed))


@app.route("/api/reset", methods=["POST"])
def api_reset():
    ed = get_session()
    ed.stepper.reset()
    return jsonify(state_payload(ed))


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    ed = get_session()
    data = request.get_json(silent=True) or {}
    try:
        ms = ed.stepper.set_speed(data.get("speed", "medium"))
    except ValueError as e:
        return bad_request(str(e))
    return jsonify({"speed": ms})


# ---------------------------------------------------------------------------
# API: Save / Load
# ---------------------------------------------------------------------------
@app.route("/api/graph/export")
def api_graph_export():
    ed = get_session()
    return jsonify({"data": ed.store.state.graph.to_dict()})


@app.route("/api/graph/import", methods=["POST"])
def api_graph_import():
    ed = get_session()
    data = request.get_json(silent=True) or {}
    try:
        graph = Graph.from_dict(data.get("data"))
    except GraphFormatError as e:
        return bad_request(str(e))

    ed.stepper.reset()
    ed.store.dispatch(LoadGraph(graph))
    return jsonify(state_payload(ed))


# ---------------------------------------------------------------------------
# API: Comparison
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    ed = get_session()
    data = request.get_json(silent=True) or {}
    graph = ed.store.state.graph
    start = data.get("start") or ed.store.state.start_node_id

    try:
        left = record(data.get("left", "prim"), graph, start)
        right = record(data.get("right", "kruskal"), graph, start)
    except ValueError as e:
        return bad_request(str(e))

    return jsonify(compare(left, right).to_dict())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Graph visualizer listening on http://localhost:5000")
    app.run(debug=True, host="0.0.0.0", port=5000, threaded=False)
