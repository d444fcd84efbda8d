import math

import pytest

from path_engine.app.controllers.editor import GraphEditor
from path_engine.domain.entities.geography import Point
from path_engine.search.astar import AStar

# ---------- Fixtures


@pytest.fixture
def editor():
    ed = GraphEditor()
    a = ed.add_node(100, 100)
    b = ed.add_node(200, 300)
    c = ed.add_node(300, 100)
    ed.add_node(700, 500)  # isolated
    ed.add_edge(a, b)
    ed.add_edge(b, c)
    return ed


def _nodes(ed):
    return ed.nodes  # A, B, C, D


# ---------- Topology editing


def test_clicking_inside_a_node_reuses_it(editor):
    a = _nodes(editor)[0]
    assert editor.add_node(110, 95) is a
    assert len(editor.nodes) == 4
    assert editor.node_at(500, 500) is None


def test_self_loops_and_duplicate_edges_ignored(editor):
    a, b, _, _ = _nodes(editor)
    assert editor.add_edge(a, a) is None
    assert editor.add_edge(b, a) is editor.edges[0]
    assert len(editor.edges) == 2
    assert editor.neighbors_of(b) == [a, _nodes(editor)[2]]


def test_edge_length_label(editor):
    assert editor.edges[0].length == pytest.approx(math.hypot(100, 200))


# ---------- Endpoints and weights


def test_weights_follow_start_and_end(editor):
    a, b, c, d = _nodes(editor)
    editor.set_start(a)
    assert all(n.weight is None for n in editor.nodes)
    editor.set_end(c)
    assert a.weight == 0.0
    assert c.weight == pytest.approx(200.0)
    assert b.weight == pytest.approx(2 * math.hypot(100, 200))
    assert d.weight == pytest.approx(math.hypot(600, 400) + math.hypot(400, 400))


def test_start_and_end_are_exclusive(editor):
    a, _, c, _ = _nodes(editor)
    editor.set_start(a)
    editor.set_end(c)
    editor.set_start(c)
    assert c.is_start and not c.is_end
    assert editor.end_node is None
    assert not a.is_start
    assert editor.last_result is None


# ---------- Search and highlighting


def test_path_is_highlighted(editor):
    a, b, c, d = _nodes(editor)
    editor.set_start(a)
    res = editor.set_end(c)
    assert res.path == (a.key, b.key, c.key)
    assert editor.path_nodes() == [a, b, c]
    assert editor.path_edges() == editor.edges
    assert not d.on_path


def test_adding_a_shortcut_reroutes(editor):
    a, b, c, _ = _nodes(editor)
    editor.set_start(a)
    editor.set_end(c)
    shortcut = editor.add_edge(a, c)
    assert editor.last_result.path == (a.key, c.key)
    assert editor.path_nodes() == [a, c]
    assert editor.path_edges() == [shortcut]
    assert not b.on_path


def test_moving_a_node_rebuilds_the_snapshot(editor):
    a, b, c, _ = _nodes(editor)
    editor.set_start(a)
    editor.set_end(c)
    res = editor.move_node(b, 200, 120)
    assert res.path == (a.key, Point(200, 120), c.key)
    assert res.cost == pytest.approx(2 * math.hypot(100, 20))
    assert b.weight == pytest.approx(2 * math.hypot(100, 20))


def test_unreachable_end_clears_highlight(editor):
    a, _, c, d = _nodes(editor)
    editor.set_start(a)
    editor.set_end(c)
    res = editor.set_end(d)
    assert not res.found
    assert editor.path_nodes() == []
    assert editor.path_edges() == []
    assert set(res.visited) == {a.key, _nodes(editor)[1].key, c.key}


def test_snapshot_rebuild_is_idempotent(editor):
    a, _, c, _ = _nodes(editor)
    editor.set_start(a)
    first = editor.set_end(c)
    assert editor.snapshot() == editor.snapshot()
    assert editor.find_and_highlight_path() == first


def test_weighted_finder_still_connects(editor):
    ed = GraphEditor(finder=AStar("weighted"))
    for n in editor.nodes:
        ed.add_node(n.x, n.y)
    a, b, c, _ = ed.nodes
    ed.add_edge(a, b)
    ed.add_edge(b, c)
    ed.set_start(a)
    res = ed.set_end(c)
    assert res.path == (a.key, b.key, c.key)
