# tests/domain/test_graph_container.py
import numpy as np
import pytest

from pathgrid.domain.builders import build_empty, build_grid, build_simple
from pathgrid.domain.entities.geometry import Point, Viewport, world_to_screen
from pathgrid.domain.entities.node import connect
from pathgrid.domain.graph import EndpointsNotSetError, GraphError, Graph

# ---------- Helpers


def grid(cols, rows, *, weights=(10, 15), seed=0):
    return build_grid(
        cols=cols,
        rows=rows,
        disp_x=0.5,
        disp_y=0.5,
        start_x=-4.25,
        start_y=0.75,
        viewport_height=4.0,
        rng=np.random.default_rng(seed),
        weight_range=weights,
    )


# ---------- Construction


def test_empty_graph_has_no_nodes_and_no_endpoints():
    g = build_empty()
    assert len(g) == 0
    assert g.start_node is None and g.end_node is None
    assert g.last_result is None


def test_simple_graph_is_ready_with_a_path():
    g = build_simple()
    assert [(n.x, n.y) for n in g] == [(-2.0, 0.0), (-1.0, 0.0), (0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]
    assert g.start_node is g.get_node(0) and g.end_node is g.get_node(4)
    assert [n.id for n in g.path_node] == [0, 1, 2, 3, 4]
    assert g.last_result.cost == pytest.approx(4.0)
    assert all(n.on_path for n in g)


def test_grid_node_count_layout_and_ids():
    g = grid(4, 3)
    assert len(g) == 12
    assert [n.id for n in g] == list(range(12))
    # row-major, top row first
    assert (g.get_node(0).x, g.get_node(0).y) == (-4.25, 3.25)
    assert (g.get_node(3).x, g.get_node(3).y) == (-4.25 + 3 * 0.5, 3.25)
    assert (g.get_node(4).x, g.get_node(4).y) == (-4.25, 2.75)


def test_grid_degrees_corner_border_interior():
    cols, rows = 5, 4
    g = grid(cols, rows)
    for n in g:
        i, j = divmod(n.id, cols)
        border = (i in (0, rows - 1)) + (j in (0, cols - 1))
        assert n.degree == {0: 4, 1: 3, 2: 2}[border]
    assert g.edge_count() == (cols - 1) * rows + cols * (rows - 1)


def test_grid_weights_are_integers_in_range_and_seeded():
    g1, g2 = grid(6, 6, seed=7), grid(6, 6, seed=7)
    w1 = [e.cost for e in g1.iter_edges()]
    assert all(10 <= w <= 15 and w == int(w) for w in w1)
    assert w1 == [e.cost for e in g2.iter_edges()]
    assert len(set(w1)) > 1


def test_grid_builder_sets_default_endpoints():
    g = grid(3, 2)
    assert g.start_node is g.get_node(0)
    assert g.end_node is g.get_node(5)
    assert g.path_node[0] is g.start_node and g.path_node[-1] is g.end_node


def test_single_node_grid_gives_trivial_path():
    g = grid(1, 1)
    assert g.last_result.nodes == (0,)
    assert g.last_result.cost == 0.0


@pytest.mark.parametrize("cols,rows", [(0, 3), (3, 0)])
def test_grid_rejects_empty_dimensions(cols, rows):
    with pytest.raises(ValueError):
        grid(cols, rows)


def test_builders_refuse_non_empty_graph():
    g = build_simple()
    with pytest.raises(ValueError):
        build_simple(g)


def test_add_node_requires_sequential_ids():
    g = Graph()
    g.add_node(0, 0, 0)
    with pytest.raises(ValueError):
        g.add_node(5, 0, 0)


# ---------- Endpoints & path


def test_find_path_without_endpoints_raises():
    g = Graph()
    g.add_node(0, 0, 0)
    with pytest.raises(EndpointsNotSetError):
        g.find_path()
    g.set_start_node(g.get_node(0))
    with pytest.raises(GraphError):
        g.find_path()


def test_set_endpoint_rejects_foreign_node():
    g, other = build_simple(), build_simple()
    with pytest.raises(ValueError):
        g.set_start_node(other.get_node(1))


def test_recompute_clears_previous_on_path_flags():
    g = build_simple()
    g.set_start_node(g.get_node(3))
    g.set_end_node(g.get_node(4))
    g.find_path()
    assert [n.id for n in g if n.on_path] == [3, 4]
    assert [n.id for n in g.path_node] == [3, 4]


def test_unreachable_end_reports_no_path():
    g = Graph()
    a, b, c = g.add_node(0, 0, 0), g.add_node(1, 1, 0), g.add_node(2, 5, 0)
    connect(a, b, 1.0)
    g.set_start_node(a)
    g.set_end_node(c)
    res = g.find_path()
    assert res.reachable is False
    assert res.nodes == ()
    assert g.path_node == []
    # endpoints stay highlighted, nothing in between
    assert [n.on_path for n in g] == [True, False, True]


def test_path_cost_and_connectivity_helpers():
    g = build_simple()
    assert g.path_cost([0, 1, 2]) == pytest.approx(2.0)
    with pytest.raises(ValueError):
        g.path_cost([0, 2])
    assert g.is_connected()
    assert g.reachable_from(2) == {0, 1, 2, 3, 4}


def test_describe_lists_degree_per_node():
    rows = build_simple().describe()
    assert [r["degree"] for r in rows] == [1, 2, 2, 2, 1]
    assert rows[0] == {"id": 0, "x": -2.0, "y": 0.0, "degree": 1}


# ---------- Selection


def test_select_node_hits_exact_world_position():
    g = build_simple()
    vp, zoom = Viewport(1024, 768), 0.25
    for n in g:
        sx, sy = world_to_screen(Point(n.x, n.y), vp, zoom)
        assert g.select_node(sx, sy, vp.width, vp.height, zoom) is n


def test_select_node_portrait_viewport():
    g = build_simple()
    vp, zoom = Viewport(600, 900), 0.4
    n = g.get_node(3)
    sx, sy = world_to_screen(Point(n.x, n.y), vp, zoom)
    assert g.select_node(sx, sy, vp.width, vp.height, zoom) is n


def test_select_node_misses_far_from_nodes():
    g = build_simple()
    vp, zoom = Viewport(1024, 768), 0.25
    sx, sy = world_to_screen(Point(-1.5, 3.0), vp, zoom)
    assert g.select_node(sx, sy, vp.width, vp.height, zoom) is None


@pytest.mark.parametrize("x,y", [(-1, 384), (1025, 384), (512, -0.5), (512, 769)])
def test_select_node_outside_viewport_is_none(x, y):
    g = build_simple()
    assert g.select_node(x, y, 1024, 768, 0.25) is None


def test_select_node_tolerance_is_tunable():
    g = build_simple()
    vp, zoom = Viewport(1024, 768), 0.25
    sx, sy = world_to_screen(Point(0.0, 0.4), vp, zoom)
    assert g.select_node(sx, sy, vp.width, vp.height, zoom) is None
    assert g.select_node(sx, sy, vp.width, vp.height, zoom, tolerance=0.5) is g.get_node(2)


def test_select_node_center_pixel_maps_to_origin():
    g = build_simple()
    assert g.select_node(512, 384, 1024, 768, 0.25) is g.get_node(2)
