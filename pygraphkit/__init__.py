from pygraphkit.DisjointSet import DisjointSet
from pygraphkit.Graph import Graph
from pygraphkit.Heap import Heap
from pygraphkit.LowestCommonAncestor import LowestCommonAncestor, MalformedTreeError
from pygraphkit.ShortestPath import ShortestPath, NegativeWeightError, dijkstra
from pygraphkit.SegmentTree import SegmentTree, MinSegmentTree, MaxSegmentTree
from pygraphkit.plotting import (
    circular_layout,
    plot_graph,
    plot_shortest_path_tree,
    plot_lca_path,
    plot_partition
)

__all__ = [
    "DisjointSet",
    "Graph",
    "Heap",
    "LowestCommonAncestor",
    "MalformedTreeError",
    "ShortestPath",
    "NegativeWeightError",
    "dijkstra",
    "SegmentTree",
    "MinSegmentTree",
    "MaxSegmentTree",
    "circular_layout",
    "plot_graph",
    "plot_shortest_path_tree",
    "plot_lca_path",
    "plot_partition",
]
