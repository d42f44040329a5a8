import random

import pytest
from pygraphkit.DisjointSet import DisjointSet


def test_initial_sets():
    ds = DisjointSet(5)
    assert len(ds) == 5
    assert ds.n == 5
    for i in range(5):
        assert ds.find(i) == i
        assert ds.connected(i, i)
        assert ds.size(i) == 1


def test_empty_universe():
    ds = DisjointSet(0)
    assert len(ds) == 0
    assert list(ds) == []
    with pytest.raises(IndexError):
        ds.find(0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_union_merges_sets():
    ds = DisjointSet(4)
    assert ds.union(0, 1) is True
    assert ds.connected(0, 1)
    assert len(ds) == 3
    assert ds.size(0) == ds.size(1) == 2


def test_union_same_set_is_noop():
    ds = DisjointSet(3)
    ds.union(0, 1)
    ds.union(1, 2)
    assert ds.union(0, 2) is False
    assert len(ds) == 1
    assert ds.size(2) == 3


def test_union_scenario():
    ds = DisjointSet(5)
    ds.union(0, 1)
    ds.union(2, 3)
    ds.union(1, 2)
    assert ds.connected(0, 3)
    assert not ds.connected(0, 4)


def test_out_of_range_indices():
    ds = DisjointSet(3)
    for bad in (3, 10, -1):
        with pytest.raises(IndexError):
            ds.find(bad)
    with pytest.raises(IndexError):
        ds.union(0, 3)
    with pytest.raises(IndexError):
        ds.connected(-1, 0)


def test_equal_rank_tie_attaches_second_under_first():
    ds = DisjointSet(2)
    ds.union(0, 1)
    assert ds.find(1) == 0
    assert ds.rank[0] == 1


def test_lower_rank_goes_under_higher_rank():
    ds = DisjointSet(3)
    ds.union(1, 2)  # root 1, rank 1
    ds.union(0, 1)  # 0 has rank 0, so it joins under 1
    assert ds.find(0) == 1
    assert ds.rank[1] == 1


def test_path_compression_flattens_chain():
    ds = DisjointSet(6)
    # build a chain by hand so compression has something to do
    ds.parent = [0, 0, 1, 2, 3, 4]
    assert ds.find(5) == 0
    assert all(ds.parent[i] == 0 for i in range(6))


def test_find_is_idempotent():
    ds = DisjointSet(10)
    for a, b in [(0, 1), (2, 3), (1, 3), (7, 8)]:
        ds.union(a, b)
    first = [ds.find(i) for i in range(10)]
    second = [ds.find(i) for i in range(10)]
    assert first == second


def test_groups_and_iteration():
    ds = DisjointSet(4)
    ds.union(0, 1)
    ds.union(2, 3)
    comps = list(ds)
    assert all(isinstance(c, set) for c in comps)
    assert sorted(sorted(c) for c in comps) == [[0, 1], [2, 3]]
    groups = ds.groups()
    assert sorted(groups.values()) == [[0, 1], [2, 3]]
    for root, members in groups.items():
        assert root in members


def test_equivalence_relation_under_random_unions():
    rng = random.Random(0)
    n = 40
    ds = DisjointSet(n)
    previous = len(ds)
    for _ in range(60):
        a, b = rng.randrange(n), rng.randrange(n)
        ds.union(a, b)
        assert ds.connected(a, b)
        assert len(ds) <= previous
        previous = len(ds)

    reps = [ds.find(i) for i in range(n)]
    for x in range(n):
        for y in range(n):
            assert ds.connected(x, y) == ds.connected(y, x)
            for z in range(0, n, 7):
                if ds.connected(x, y) and ds.connected(y, z):
                    assert ds.connected(x, z)
    assert len(set(reps)) == len(ds)
    assert sum(len(c) for c in ds) == n


def test_sizes_track_chain_of_unions():
    n = 10
    ds = DisjointSet(n)
    for u in range(1, n):
        ds.union(u - 1, u)
    assert all(ds.size(u) == n for u in range(n))
    assert len(ds) == 1
