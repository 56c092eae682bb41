import pytest

from graph import Graph
from engine import Recorder, compare, record


def test_prim_summary(diamond):
    summary = record("prim", diamond, "a1")
    assert summary.algo_label == "Prim's MST"
    assert summary.total_cost == 7
    assert summary.tree_edge_ids == ["e3", "e1", "e4"]
    assert summary.reached == ["a1", "a3", "a2", "a4"]
    assert summary.complete
    assert summary.total_steps == 17


def test_traversal_summary(diamond):
    summary = record("bfs", diamond, "a1")
    assert summary.total_cost is None
    assert summary.tree_edge_ids == ["e1", "e3", "e4"]
    assert summary.reached == ["a1", "a2", "a3", "a4"]
    assert summary.complete


def test_bad_start_is_not_complete(diamond):
    summary = record("dfs", diamond, "ghost")
    assert summary.total_steps == 1
    assert not summary.complete


def test_disconnected_is_not_complete():
    g = Graph()
    g.create_node(0, 0, node_id="x")
    g.create_node(1, 1, node_id="y")
    summary = record("kruskal", g)
    assert not summary.complete
    assert summary.total_cost == 0


def test_compare_prim_and_kruskal(diamond):
    result = compare(record("prim", diamond, "a1"), record("kruskal", diamond))
    assert result.same_cost
    assert result.fewer_steps == "Kruskal's MST"
    data = result.to_dict()
    assert data["left"]["algo_key"] == "prim"
    assert data["right"]["total_steps"] == 10


def test_compare_traversals_have_no_cost(diamond):
    result = compare(record("bfs", diamond, "a1"), record("dfs", diamond, "a1"))
    assert not result.same_cost


def test_recorder_export(diamond):
    rec = Recorder()
    rec.start("kruskal", diamond)
    rec.run_to_completion()
    data = rec.export()
    assert data["algo_key"] == "kruskal"
    assert data["graph"] == diamond.to_dict()
    assert data["steps"][0]["kind"] == "info"
    assert data["summary"]["total_cost"] == 7


def test_recorder_errors(diamond):
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()
    with pytest.raises(ValueError):
        Recorder().start("nope", diamond)
