import random

import numpy as np
import pytest
from pygraphkit.Graph import Graph
from pygraphkit.LowestCommonAncestor import (
    LowestCommonAncestor,
    MalformedTreeError,
    lifting_levels,
)


def simple_tree() -> Graph:
    #          0
    #        /   \
    #       1     2
    #      / \   / \
    #     3   4 5   6
    return Graph.from_edges(7, [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (2, 6)])


def random_tree(n: int, seed: int) -> Graph:
    rng = random.Random(seed)
    return Graph.from_edges(n, [(rng.randrange(v), v) for v in range(1, n)])


def naive_lca(lca: LowestCommonAncestor, u: int, v: int) -> int:
    ancestors = set()
    while u != -1:
        ancestors.add(u)
        u = lca.parent(u)
    while v not in ancestors:
        v = lca.parent(v)
    return v


def test_lifting_levels():
    assert lifting_levels(0) == 1
    assert lifting_levels(1) == 1
    assert lifting_levels(2) == 1
    assert lifting_levels(3) == 2
    assert lifting_levels(8) == 3
    assert lifting_levels(9) == 4


def test_small_scenario():
    g = Graph.from_edges(5, [(0, 1), (0, 2), (1, 3), (1, 4)])
    lca = LowestCommonAncestor(g, 0)
    assert lca.query(3, 4) == 1
    assert lca.query(3, 2) == 0
    assert lca.query(1, 4) == 1


def test_simple_queries():
    lca = LowestCommonAncestor(simple_tree(), 0)
    assert lca.query(0, 1) == 0
    assert lca.query(0, 3) == 0
    assert lca.query(1, 2) == 0
    assert lca.query(4, 1) == 1
    assert lca.query(3, 4) == 1
    assert lca.query(5, 6) == 2
    assert lca.query(3, 5) == 0


def test_depths_and_parents():
    lca = LowestCommonAncestor(simple_tree(), 0)
    assert [lca.depth(v) for v in range(7)] == [0, 1, 1, 2, 2, 2, 2]
    assert lca.parent(0) == -1
    assert lca.parent(5) == 2
    assert lca.root == 0
    assert lca.n == 7


def test_rerooting_changes_answers():
    lca = LowestCommonAncestor(simple_tree(), 3)
    assert lca.query(0, 4) == 1
    assert lca.query(5, 6) == 2
    assert lca.query(4, 6) == 1
    assert lca.depth(3) == 0


def test_directed_parent_to_child_tree():
    g = Graph.from_edges(4, [(0, 1), (1, 2), (1, 3)], directed=True)
    lca = LowestCommonAncestor(g, 0)
    assert lca.query(2, 3) == 1
    assert lca.query(2, 0) == 0


def test_single_vertex_tree():
    lca = LowestCommonAncestor(Graph(1), 0)
    assert lca.query(0, 0) == 0
    assert lca.depth(0) == 0


def test_deep_path_tree():
    n = 1000
    g = Graph.from_edges(n, [(v - 1, v) for v in range(1, n)])
    lca = LowestCommonAncestor(g, 0)
    assert lca.query(n - 1, 500) == 500
    assert lca.query(999, 998) == 998
    assert lca.kth_ancestor(n - 1, 999) == 0
    assert lca.kth_ancestor(n - 1, 1000) == -1
    assert lca.distance(10, 990) == 980


def test_kth_ancestor():
    lca = LowestCommonAncestor(simple_tree(), 0)
    assert lca.kth_ancestor(4, 0) == 4
    assert lca.kth_ancestor(4, 1) == 1
    assert lca.kth_ancestor(4, 2) == 0
    assert lca.kth_ancestor(4, 3) == -1
    with pytest.raises(ValueError):
        lca.kth_ancestor(4, -1)


def test_distance_and_path():
    lca = LowestCommonAncestor(simple_tree(), 0)
    assert lca.distance(3, 6) == 4
    assert lca.distance(2, 2) == 0
    assert lca.path(3, 6) == [3, 1, 0, 2, 6]
    assert lca.path(1, 4) == [1, 4]
    assert lca.path(4, 1) == [4, 1]
    assert lca.path(5, 5) == [5]


def test_properties_on_random_tree():
    n = 200
    lca = LowestCommonAncestor(random_tree(n, seed=7), 0)
    rng = random.Random(3)
    for _ in range(500):
        u, v = rng.randrange(n), rng.randrange(n)
        a = lca.query(u, v)
        assert a == lca.query(v, u)
        assert a == naive_lca(lca, u, v)
        assert lca.depth(a) <= min(lca.depth(u), lca.depth(v))
    for v in range(n):
        assert lca.query(v, v) == v
        assert lca.query(0, v) == 0


def test_jump_table_consistency():
    lca = LowestCommonAncestor(random_tree(64, seed=11), 0)
    for k in range(1, lca.levels):
        for v in range(lca.n):
            half = lca.up[k - 1, v]
            expected = -1 if half == -1 else lca.up[k - 1, half]
            assert lca.up[k, v] == expected
    assert lca.up.dtype == np.int64


def test_cycle_rejected():
    g = Graph.from_edges(3, [(0, 1), (1, 2), (2, 0)])
    with pytest.raises(MalformedTreeError):
        LowestCommonAncestor(g, 0)


def test_parallel_edge_rejected():
    g = Graph.from_edges(2, [(0, 1), (0, 1)])
    with pytest.raises(MalformedTreeError):
        LowestCommonAncestor(g, 0)


def test_self_loop_rejected():
    g = Graph.from_edges(2, [(0, 1), (1, 1)])
    with pytest.raises(MalformedTreeError):
        LowestCommonAncestor(g, 0)


def test_disconnected_rejected():
    g = Graph.from_edges(4, [(0, 1), (2, 3)])
    with pytest.raises(MalformedTreeError):
        LowestCommonAncestor(g, 0)


def test_directed_edges_pointing_at_root_rejected():
    g = Graph.from_edges(3, [(1, 0), (2, 0)], directed=True)
    with pytest.raises(MalformedTreeError):
        LowestCommonAncestor(g, 0)


def test_malformed_tree_is_value_error():
    assert issubclass(MalformedTreeError, ValueError)


def test_out_of_range():
    with pytest.raises(IndexError):
        LowestCommonAncestor(Graph(0), 0)
    lca = LowestCommonAncestor(simple_tree(), 0)
    with pytest.raises(IndexError):
        lca.query(0, 7)
    with pytest.raises(IndexError):
        lca.query(-1, 0)
    with pytest.raises(IndexError):
        lca.depth(9)


def test_directed_two_cycle_rejected():
    g = Graph.from_edges(2, [(0, 1), (1, 0)], directed=True)
    with pytest.raises(MalformedTreeError):
        LowestCommonAncestor(g, 0)


def test_directed_back_edge_to_grandparent_rejected():
    g = Graph.from_edges(3, [(0, 1), (1, 2), (2, 0)], directed=True)
    with pytest.raises(MalformedTreeError):
        LowestCommonAncestor(g, 0)
