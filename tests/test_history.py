from graph import Graph
from engine import History, reduce, initial_state
from engine.actions import AddNode, Undo


def graph_with(*ids):
    g = Graph()
    for nid in ids:
        g.create_node(0, 0, node_id=nid)
    return g


def test_push_and_walk():
    h = History.start(Graph(), limit=10)
    h = h.push(graph_with("a"))
    h = h.push(graph_with("a", "b"))
    assert len(h) == 3 and h.can_undo and not h.can_redo

    h, g = h.undo()
    assert g == graph_with("a")
    h, g = h.undo()
    assert g == Graph()
    same, g = h.undo()
    assert same is h and g is None

    h, g = h.redo()
    assert g == graph_with("a")


def test_push_drops_redo_branch():
    h = History.start(Graph(), limit=10)
    h = h.push(graph_with("a")).push(graph_with("a", "b"))
    h, _ = h.undo()
    h = h.push(graph_with("a", "c"))
    assert not h.can_redo
    assert len(h) == 3
    assert h.current() == graph_with("a", "c")


def test_limit_discards_oldest():
    h = History.start(Graph(), limit=3)
    for i in range(5):
        h = h.push(graph_with(*[str(n) for n in range(i + 1)]))
    assert len(h) == 3
    undos = 0
    while h.can_undo:
        h, _ = h.undo()
        undos += 1
    assert undos == 2
    assert h.current() == graph_with("0", "1", "2")


def test_entries_are_isolated_copies():
    live = graph_with("a")
    h = History.start(Graph(), limit=10).push(live)
    live.nodes["a"].x = 42
    assert h.current().nodes["a"].x == 0
    h.current().nodes["a"].x = 99
    assert h.current().nodes["a"].x == 0


def test_history_limit_through_reducer():
    s = initial_state(speed=500, history_limit=4)
    for i in range(10):
        s = reduce(s, AddNode(i, i, node_id=f"n{i}"))
    for _ in range(10):
        s = reduce(s, Undo())
    assert s.graph.node_count() == 7
    assert not s.can_undo
