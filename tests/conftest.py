"""Shared fixtures: the four-node example graph, stores and the Flask client."""

import pytest

from graph import Graph
from engine import Store, initial_state
from engine.actions import LoadGraph, SetStartNode


def build_diamond() -> Graph:
    """
    A(a1) ─2─ B(a2)
      │1      │3
    C(a3) ────┘
      │4
    D(a4)
    """
    g = Graph()
    g.create_node(0, 0, label="A", node_id="a1")
    g.create_node(100, 0, label="B", node_id="a2")
    g.create_node(0, 100, label="C", node_id="a3")
    g.create_node(0, 200, label="D", node_id="a4")
    g.create_edge("a1", "a2", weight=2, edge_id="e1")
    g.create_edge("a2", "a3", weight=3, edge_id="e2")
    g.create_edge("a1", "a3", weight=1, edge_id="e3")
    g.create_edge("a3", "a4", weight=4, edge_id="e4")
    return g


@pytest.fixture
def diamond() -> Graph:
    return build_diamond()


@pytest.fixture
def state():
    return initial_state(speed=500, history_limit=100)


@pytest.fixture
def diamond_store(diamond) -> Store:
    store = Store(initial_state(speed=500, history_limit=100))
    store.dispatch(LoadGraph(diamond))
    store.dispatch(SetStartNode("a1"))
    return store


@pytest.fixture
def client():
    import main

    main.app.config["TESTING"] = True
    main._SESSIONS.clear()
    with main.app.test_client() as c:
        yield c
    main._SESSIONS.clear()
