import pytest

from graph import Graph, Node, Edge, NodeStatus, EdgeStatus, GraphFormatError, is_valid_weight


def test_adjacency_lists_both_directions(diamond):
    adj = diamond.adjacency()
    assert adj["a1"] == [("a2", 2), ("a3", 1)]
    assert adj["a3"] == [("a2", 3), ("a1", 1), ("a4", 4)]
    assert adj["a4"] == [("a3", 4)]


def test_adjacency_has_entry_for_isolated_node():
    g = Graph()
    g.create_node(0, 0, node_id="solo")
    assert g.adjacency() == {"solo": []}


def test_adjacency_is_rebuilt_after_edits(diamond):
    diamond.remove_edge("e4")
    assert diamond.adjacency()["a4"] == []


def test_find_edge_ignores_direction(diamond):
    assert diamond.find_edge("a2", "a1").id == "e1"
    assert diamond.find_edge("a1", "a2").id == "e1"
    assert diamond.find_edge("a1", "a4") is None
    assert diamond.has_edge_between("a4", "a3")


def test_remove_node_cascades_to_incident_edges(diamond):
    diamond.remove_node("a3")
    assert "a3" not in diamond.nodes
    assert set(diamond.edges) == {"e1"}
    for e in diamond.edges.values():
        assert e.source in diamond.nodes and e.target in diamond.nodes


def test_remove_unknown_node_is_harmless(diamond):
    diamond.remove_node("nope")
    assert diamond.node_count() == 4 and diamond.edge_count() == 4


def test_next_label_ignores_non_numeric_labels():
    g = Graph()
    assert g.next_label() == "1"
    g.create_node(0, 0, label="1")
    g.create_node(0, 0, label="5")
    g.create_node(0, 0, label="hub")
    assert g.next_label() == "6"


def test_copy_is_deep(diamond):
    clone = diamond.copy()
    assert clone == diamond
    clone.nodes["a1"].x = 999
    clone.edges["e1"].weight = 50
    assert diamond.nodes["a1"].x == 0
    assert diamond.edges["e1"].weight == 2
    assert clone != diamond


def test_reset_status(diamond):
    diamond.nodes["a1"].status = NodeStatus.START
    diamond.edges["e1"].status = EdgeStatus.CURRENT
    diamond.reset_status()
    assert all(n.status is NodeStatus.DEFAULT for n in diamond.nodes.values())
    assert all(e.status is EdgeStatus.DEFAULT for e in diamond.edges.values())


def test_to_dict_uses_persisted_shape(diamond):
    data = diamond.to_dict()
    assert data["nodes"][0] == {"id": "a1", "x": 0, "y": 0, "label": "A", "status": "default"}
    assert data["edges"][0] == {"id": "e1", "from": "a1", "to": "a2", "weight": 2, "status": "default"}


def test_from_dict_keeps_statuses(diamond):
    diamond.nodes["a2"].status = NodeStatus.VISITED
    diamond.edges["e3"].status = EdgeStatus.MST
    loaded = Graph.from_dict(diamond.to_dict())
    assert loaded == diamond
    assert loaded.nodes["a2"].status is NodeStatus.VISITED
    assert loaded.edges["e3"].status is EdgeStatus.MST


def test_from_dict_defaults_and_drops_dangling_edges():
    g = Graph.from_dict({
        "nodes": [{"id": "n1", "x": 1, "y": 2, "label": "1"}],
        "edges": [{"id": "e1", "from": "n1", "to": "ghost"}],
    })
    assert g.nodes["n1"].status is NodeStatus.DEFAULT
    assert g.edge_count() == 0


@pytest.mark.parametrize("bad", [
    None,
    [],
    {"nodes": [{"x": 1}]},
    {"nodes": [{"id": "n1", "label": "1", "status": "glowing"}]},
    {"nodes": ["x"], "edges": []},
    {"nodes": [], "edges": [7]},
    {"nodes": [{"id": "n1"}, {"id": "n2"}], "edges": [{"id": "e", "from": "n1", "to": "n2", "weight": "3"}]},
    {"nodes": [{"id": "n1"}, {"id": "n2"}], "edges": [{"id": "e", "from": "n1", "to": "n2", "weight": -2}]},
    {"nodes": [{"id": "n1"}, {"id": "n2"}], "edges": [{"id": "e", "from": "n1", "to": "n2", "weight": True}]},
])
def test_from_dict_rejects_malformed_data(bad):
    with pytest.raises(GraphFormatError):
        Graph.from_dict(bad)


def test_edge_helpers():
    e = Edge("a", "b", weight=3, edge_id="x")
    assert e.connects("b", "a")
    assert e.touches("b") and not e.touches("c")


@pytest.mark.parametrize("weight,ok", [
    (1, True), (2.5, True), (0, False), (-1, False), ("3", False), (True, False),
    (None, False), (float("inf"), False), (float("nan"), False),
])
def test_is_valid_weight(weight, ok):
    assert is_valid_weight(weight) is ok


def test_node_default_label_is_id():
    n = Node(node_id="abc")
    assert n.label == "abc"
    assert n.status is NodeStatus.DEFAULT
