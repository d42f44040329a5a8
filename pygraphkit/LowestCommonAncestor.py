"""
Lowest Common Ancestor module
=============================

Answers *lowest common ancestor* queries on a rooted tree by **binary
lifting**: a one‑time BFS from the root records every vertex's depth and its
parent, and from the parents a table of 2^k‑th ancestors is filled level by
level. A query then lifts the deeper vertex to the depth of the other with at
most ``log2(n)`` jumps, and, if the two still differ, lifts both together by
decreasing powers of two while their ancestors disagree.

Preprocessing is O(n log n) and every query is O(log n).

The tree is given as a :class:`~pygraphkit.Graph`. Both undirected trees and
directed parent → child trees are accepted; anything that is not a tree when
explored from the root (a cycle, a vertex reached twice, a vertex never
reached) is rejected with :class:`MalformedTreeError` before the index can be
used.
"""

import logging
from collections import deque
from typing import Deque, List

import numpy as np

from pygraphkit.Graph import Graph


class MalformedTreeError(ValueError):
    """Raised when the graph handed to :class:`LowestCommonAncestor` is not a
    tree reachable from the chosen root."""


def lifting_levels(n: int) -> int:
    """Number of binary lifting levels needed for ``n`` vertices.

    Parameters
    ----------
    n : int
        Number of vertices in the tree.

    Returns
    -------
    int
        ``ceil(log2(n))`` but at least 1, so that every depth in ``[0, n)``
        can be written with that many bits.

    """
    levels = 0
    while (1 << levels) < n:
        levels += 1
    return max(1, levels)


class LowestCommonAncestor:
    """Binary lifting index for lowest common ancestor queries."""

    def __init__(self, graph: Graph, root: int):
        """Preprocess ``graph`` as a tree rooted at ``root``.

        Parameters
        ----------
        graph : Graph
            A connected, acyclic graph.
        root : int
            The vertex to root the tree at.

        Raises
        ------
        IndexError
            If ``root`` is not a vertex of ``graph``.
        MalformedTreeError
            If ``graph`` contains a cycle or a vertex unreachable from ``root``.

        """
        n = graph.n
        if not 0 <= root < n:
            raise IndexError(f"root {root} out of range [0, {n})")

        self.root = root
        self.levels = lifting_levels(n)
        self._depth = np.full(n, -1, dtype=np.int64)
        self.up = np.full((self.levels, n), -1, dtype=np.int64)

        self._bfs(graph)
        self._fill_jump_table()
        logging.debug(
            "Built LCA index over %d vertices with %d lifting levels.", n, self.levels
        )

    @property
    def n(self) -> int:
        """Number of vertices in the tree."""
        return self._depth.shape[0]

    def _bfs(self, graph: Graph) -> None:
        """Compute depths and parents, rejecting anything that is not a tree."""
        depth, parent = self._depth, self.up[0]
        depth[self.root] = 0
        queue: Deque[int] = deque([self.root])

        while queue:
            u = queue.popleft()
            # an undirected tree lists the parent among the neighbors once;
            # a directed tree never does
            skipped_parent = graph.directed
            for v, _ in graph.neighbors(u):
                if v == parent[u] and not skipped_parent:
                    skipped_parent = True
                    continue
                if depth[v] != -1:
                    raise MalformedTreeError(
                        f"vertex {v} reached twice (via edge {u}-{v}); "
                        "graph contains a cycle"
                    )
                depth[v] = depth[u] + 1
                parent[v] = u
                queue.append(v)

        unreached = np.flatnonzero(depth == -1)
        if unreached.size:
            raise MalformedTreeError(
                f"{unreached.size} vertices not reachable from root {self.root}, "
                f"e.g. vertex {unreached[0]}"
            )

    def _fill_jump_table(self) -> None:
        """up[k][v] = up[k-1][up[k-1][v]], with -1 above the root."""
        for k in range(1, self.levels):
            prev = self.up[k - 1]
            # prev[-1] wraps around but is masked out
            self.up[k] = np.where(prev >= 0, prev[prev], -1)

    def _check_vertex(self, u: int) -> None:
        if not 0 <= u < self.n:
            raise IndexError(f"vertex {u} out of range [0, {self.n})")

    def depth(self, u: int) -> int:
        """Distance in edges from the root to ``u``."""
        self._check_vertex(u)
        return int(self._depth[u])

    def parent(self, u: int) -> int:
        """Parent of ``u``, or -1 for the root."""
        self._check_vertex(u)
        return int(self.up[0, u])

    def _lift(self, u: int, k: int) -> int:
        """Jump ``k`` steps up from ``u``, largest jump first."""
        for i in reversed(range(self.levels)):
            if u == -1:
                break
            if k & (1 << i):
                u = int(self.up[i, u])
        return u

    def kth_ancestor(self, u: int, k: int) -> int:
        """Return the ancestor ``k`` edges above ``u``.

        Parameters
        ----------
        u : int
            Starting vertex.
        k : int
            Number of edges to climb. ``0`` returns ``u`` itself.

        Returns
        -------
        int
            The ancestor, or -1 if ``k`` exceeds the depth of ``u``.

        """
        self._check_vertex(u)
        if k < 0:
            raise ValueError("k must be ≥ 0")
        if k > self._depth[u]:
            return -1
        return self._lift(u, k)

    def query(self, u: int, v: int) -> int:
        """Compute the lowest common ancestor of ``u`` and ``v``.

        Parameters
        ----------
        u : int
            First vertex.
        v : int
            Second vertex.

        Returns
        -------
        int
            The deepest vertex that is an ancestor of both (a vertex is its
            own ancestor).

        """
        self._check_vertex(u)
        self._check_vertex(v)
        depth = self._depth
        if depth[u] < depth[v]:
            u, v = v, u

        # equal depths after this; done if v was an ancestor of u
        u = self._lift(u, int(depth[u] - depth[v]))
        if u == v:
            return u

        for k in reversed(range(self.levels)):
            pu, pv = self.up[k, u], self.up[k, v]
            if pu != pv:
                u, v = int(pu), int(pv)
        return int(self.up[0, u])

    def distance(self, u: int, v: int) -> int:
        """Number of tree edges on the path between ``u`` and ``v``."""
        a = self.query(u, v)
        return int(self._depth[u] + self._depth[v] - 2 * self._depth[a])

    def path(self, u: int, v: int) -> List[int]:
        """Vertices on the tree path from ``u`` to ``v``, both included."""
        a = self.query(u, v)
        up_from_u = [u]
        while up_from_u[-1] != a:
            up_from_u.append(int(self.up[0, up_from_u[-1]]))
        up_from_v = [v]
        while up_from_v[-1] != a:
            up_from_v.append(int(self.up[0, up_from_v[-1]]))
        return up_from_u + up_from_v[-2::-1]

    def __repr__(self) -> str:
        return f"LowestCommonAncestor(n={self.n}, root={self.root})"
