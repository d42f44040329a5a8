"""
Shortest Path module
====================

Single-source shortest paths over graphs with **non‑negative** edge weights
(Dijkstra's algorithm).

Vertices are extracted from a :class:`~pygraphkit.Heap` of
``(distance, vertex)`` pairs in order of tentative distance. Improving a
vertex's distance pushes a fresh entry instead of decreasing a key in place;
superseded entries are recognised on extraction and skipped. Ties on distance
are broken by vertex index, so repeated runs over the same graph give the same
distances, parents and finalisation order.

The module provides:

* :func:`dijkstra`, returning ``(distances, parents)`` as numpy arrays with
  ``inf`` / ``-1`` marking unreachable vertices; and
* :class:`ShortestPath`, which runs :func:`dijkstra` once and adds path
  reconstruction and reachability queries.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from pygraphkit.Graph import Graph
from pygraphkit.Heap import Heap


class NegativeWeightError(ValueError):
    """Raised when a shortest-path routine meets a negative edge weight."""


def _check_weights(graph: Graph) -> None:
    for u, v, w in graph.edges():
        if w < 0:
            raise NegativeWeightError(
                f"edge ({u}, {v}) has negative weight {w}; "
                "Dijkstra requires non-negative weights"
            )


def _run(
    graph: Graph, source: int, order: Optional[List[int]] = None
) -> Tuple[np.ndarray, np.ndarray]:
    n = graph.n
    if not 0 <= source < n:
        raise IndexError(f"source {source} out of range [0, {n})")
    _check_weights(graph)

    distances = np.full(n, np.inf)
    parents = np.full(n, -1, dtype=np.int64)
    finalized = np.zeros(n, dtype=bool)
    distances[source] = 0.0

    queue = Heap([(0.0, source)])
    stale = 0
    while queue:
        d, u = queue.pop()
        if finalized[u] or d > distances[u]:
            stale += 1
            continue
        finalized[u] = True
        if order is not None:
            order.append(u)

        for v, w in graph.neighbors(u):
            if finalized[v]:
                continue
            candidate = d + w
            if candidate < distances[v]:
                distances[v] = candidate
                parents[v] = u
                queue.push((candidate, v))

    logging.debug(
        "Dijkstra from %d finalized %d of %d vertices, skipped %d stale entries.",
        source,
        int(finalized.sum()),
        n,
        stale,
    )
    return distances, parents


def dijkstra(graph: Graph, source: int) -> Tuple[np.ndarray, np.ndarray]:
    """Compute shortest distances from ``source`` to every vertex.

    Parameters
    ----------
    graph : Graph
        Graph with non-negative edge weights.
    source : int
        The start vertex.

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        A tuple containing:
        - ``distances``: float array of length n, ``inf`` for unreachable
          vertices and ``0`` for the source;
        - ``parents``: int array of length n holding each vertex's predecessor
          on a shortest path, ``-1`` for the source and unreachable vertices.

    Raises
    ------
    IndexError
        If ``source`` is not a vertex of ``graph``.
    NegativeWeightError
        If any edge weight is negative. Checked before any relaxation.

    """
    return _run(graph, source)


class ShortestPath:
    """Shortest-path tree from a single source, computed once at construction."""

    def __init__(self, graph: Graph, source: int):
        """Run Dijkstra's algorithm from ``source`` over ``graph``.

        Parameters
        ----------
        graph : Graph
            Graph with non-negative edge weights.
        source : int
            The start vertex.

        """
        self.source = source
        self.finalized_order: List[int] = []
        self.distances, self.parents = _run(graph, source, self.finalized_order)

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < len(self.distances):
            raise IndexError(f"vertex {v} out of range [0, {len(self.distances)})")

    def distance_to(self, v: int) -> float:
        """Shortest distance from the source to ``v`` (``inf`` if unreachable)."""
        self._check_vertex(v)
        return float(self.distances[v])

    def is_reachable(self, v: int) -> bool:
        """True if ``v`` has a finite distance from the source."""
        self._check_vertex(v)
        return bool(np.isfinite(self.distances[v]))

    def path_to(self, v: int) -> List[int]:
        """Reconstruct a shortest path by following parent pointers.

        Parameters
        ----------
        v : int
            Target vertex.

        Returns
        -------
        List[int]
            The vertices from the source to ``v``, both included, or an empty
            list if ``v`` is unreachable.

        """
        if not self.is_reachable(v):
            return []
        path = [v]
        while path[-1] != self.source:
            path.append(int(self.parents[path[-1]]))
        return path[::-1]

    def __repr__(self) -> str:
        reached = int(np.isfinite(self.distances).sum())
        return (
            f"ShortestPath(source={self.source}, "
            f"reached={reached}/{len(self.distances)})"
        )
