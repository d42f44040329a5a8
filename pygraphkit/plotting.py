import matplotlib
from matplotlib.axes import Axes
from matplotlib.colors import to_hex
from pygraphkit.DisjointSet import DisjointSet
from pygraphkit.Graph import Graph
from pygraphkit.LowestCommonAncestor import LowestCommonAncestor
from typing import Any, Iterable, List, Optional, Sequence, Tuple
import numpy as np
import plotly.graph_objects as go


def circular_layout(n: int, radius: float = 1.0) -> np.ndarray:
    """
    Place ``n`` vertices evenly on a circle.

    Parameters
    ----------
    n : int
        Number of vertices.
    radius : float, optional
        Circle radius, by default 1.0.

    Returns
    -------
    np.ndarray
        Array of shape (n, 2) with vertex 0 at angle 0, counter-clockwise.
    """

    theta = 2 * np.pi * np.arange(n) / max(n, 1)
    return radius * np.stack([np.cos(theta), np.sin(theta)], axis=1)


def plot_edges(
    edges: Iterable[Tuple[np.ndarray, np.ndarray]],
    ax: Axes,
    line_color: Any = "b",
    line_width: float = 1.0,
):
    """
    Plot a set of straight edges on a 2D Matplotlib axis.

    Parameters
    ----------
    edges : Iterable[Tuple[np.ndarray, np.ndarray]]
        Pairs of endpoint coordinates.
    ax : matplotlib.axes.Axes
        A Matplotlib Axes object to plot on.
    line_color : Any, optional
        Color of the edges, by default 'b'.
    line_width : float, optional
        Width of the edge lines, by default 1.0.
    """
    for p1, p2 in edges:
        ax.plot(
            [p1[0], p2[0]],
            [p1[1], p2[1]],
            linestyle="-",
            color=line_color,
            linewidth=line_width,
        )


def _split_edges(
    graph: Graph, highlight_edges: Optional[Iterable[Tuple[int, int]]]
) -> Tuple[List[Tuple[int, int]], List[Tuple[int, int]]]:
    highlight = set()
    for u, v in highlight_edges or ():
        highlight.add((u, v))
        if not graph.directed:
            highlight.add((v, u))

    plain, marked = [], []
    for u, v, _ in graph.edges():
        (marked if (u, v) in highlight else plain).append((u, v))
    return plain, marked


def plot_graph(
    graph: Graph,
    positions: Optional[np.ndarray] = None,
    highlight_edges: Optional[Iterable[Tuple[int, int]]] = None,
    title: str = "Graph",
    fig: Optional[go.Figure] = None,
    ax: Optional[Axes] = None,
    marker_size: float = 8,
    marker_color: Any = "black",
    line_width: float = 1.0,
    line_color: Any = "lightgrey",
    highlight_width: float = 2.5,
    highlight_color: Any = "red",
    show_labels: bool = True,
):
    """
    Visualize a graph using either Matplotlib or Plotly.

    Parameters
    ----------
    graph : Graph
        The graph to draw.
    positions : np.ndarray, optional
        An (n, 2) array of vertex coordinates. Defaults to ``circular_layout``.
    highlight_edges : Iterable[Tuple[int, int]], optional
        Edges drawn with the highlight style. For undirected graphs the
        orientation of each pair is ignored.
    title : str, optional
        Title of the plot. Default is "Graph".
    fig : plotly.graph_objects.Figure, optional
        A Plotly figure to add to. If None, a new figure is created.
    ax : matplotlib.axes.Axes, optional
        A Matplotlib axis object to plot on. If provided, Matplotlib is used.
    marker_size : float, optional
        Size of the vertex markers. Default is 8.
    marker_color : Any, optional
        A single color or one color per vertex. Default is "black".
    line_width : float, optional
        Width of ordinary edges. Default is 1.0.
    line_color : Any, optional
        Color of ordinary edges. Default is "lightgrey".
    highlight_width : float, optional
        Width of highlighted edges. Default is 2.5.
    highlight_color : Any, optional
        Color of highlighted edges. Default is "red".
    show_labels : bool, optional
        Whether to print vertex indices next to the markers.

    Returns
    -------
    plotly.graph_objects.Figure or matplotlib.axes.Axes
        The figure or axis object used for plotting.
    """

    pts = circular_layout(graph.n) if positions is None else np.asarray(positions, dtype=float)
    if pts.shape != (graph.n, 2):
        raise ValueError("positions must have shape (n, 2)")
    plain, marked = _split_edges(graph, highlight_edges)

    if ax is not None:
        ax.set_title(title)
        ax.set_aspect("equal")
        ax.axis("off")
        plot_edges([(pts[u], pts[v]) for u, v in plain], ax,
                   line_color=line_color, line_width=line_width)
        plot_edges([(pts[u], pts[v]) for u, v in marked], ax,
                   line_color=highlight_color, line_width=highlight_width)
        ax.scatter(pts[:, 0], pts[:, 1], c=marker_color, s=marker_size**2, zorder=3)
        if show_labels:
            for i, (x, y) in enumerate(pts):
                ax.annotate(str(i), (x, y), textcoords="offset points", xytext=(6, 6))
        return ax

    return _plot_graph_plotly(
        pts, plain, marked, title, fig,
        marker_size, marker_color,
        line_width, line_color,
        highlight_width, highlight_color,
        show_labels
    )


def _plot_graph_plotly(
    pts: np.ndarray,
    plain: Sequence[Tuple[int, int]],
    marked: Sequence[Tuple[int, int]],
    title: str,
    fig: Optional[go.Figure],
    marker_size: float,
    marker_color: Any,
    line_width: float,
    line_color: Any,
    highlight_width: float,
    highlight_color: Any,
    show_labels: bool,
):
    """
    Internal helper to render a graph using Plotly.

    Each edge group is drawn as a single trace with ``None`` separators
    between segments.

    Returns
    -------
    plotly.graph_objects.Figure
        The updated or newly created Plotly figure.
    """

    if fig is None:
        fig = go.Figure()

    for edges, color, width, name in (
        (plain, line_color, line_width, "Edges"),
        (marked, highlight_color, highlight_width, "Highlighted"),
    ):
        if not edges:
            continue
        xs: List[Optional[float]] = []
        ys: List[Optional[float]] = []
        for u, v in edges:
            xs += [pts[u, 0], pts[v, 0], None]
            ys += [pts[u, 1], pts[v, 1], None]
        fig.add_trace(go.Scatter(
            x=xs, y=ys,
            mode='lines',
            line=dict(color=color, width=width),
            name=name
        ))

    fig.add_trace(go.Scatter(
        x=pts[:, 0], y=pts[:, 1],
        mode='markers+text' if show_labels else 'markers',
        text=[str(i) for i in range(len(pts))] if show_labels else None,
        textposition='top right',
        marker=dict(size=marker_size, color=marker_color),
        name='Vertices'
    ))

    fig.update_layout(
        title=title,
        xaxis=dict(showgrid=False, zeroline=False, visible=False),
        yaxis=dict(showgrid=False, zeroline=False, visible=False, scaleanchor='x'),
        margin=dict(l=0, r=0, b=0, t=30)
    )
    return fig


def plot_shortest_path_tree(
    graph: Graph,
    parents: Sequence[int],
    title: str = "Shortest Path Tree",
    **kwargs: Any,
):
    """
    Draw ``graph`` with the edges of a shortest-path tree highlighted.

    Parameters
    ----------
    graph : Graph
        The graph the shortest paths were computed on.
    parents : Sequence[int]
        Parent table as returned by ``dijkstra``; -1 entries are skipped.
    title : str, optional
        Plot title. Default is "Shortest Path Tree".
    **kwargs
        Forwarded to ``plot_graph``.

    Returns
    -------
    plotly.graph_objects.Figure or matplotlib.axes.Axes
        The figure or axis used for plotting.
    """

    tree_edges = [(int(p), v) for v, p in enumerate(parents) if p >= 0]
    return plot_graph(graph, highlight_edges=tree_edges, title=title, **kwargs)


def plot_lca_path(
    lca: LowestCommonAncestor,
    graph: Graph,
    u: int,
    v: int,
    title: Optional[str] = None,
    **kwargs: Any,
):
    """
    Draw a tree with the path between ``u`` and ``v`` highlighted and their
    lowest common ancestor marked.

    Parameters
    ----------
    lca : LowestCommonAncestor
        Index built over ``graph``.
    graph : Graph
        The tree.
    u, v : int
        Endpoints of the path.
    title : str, optional
        Plot title. Defaults to naming the ancestor.
    **kwargs
        Forwarded to ``plot_graph``.

    Returns
    -------
    plotly.graph_objects.Figure or matplotlib.axes.Axes
        The figure or axis used for plotting.
    """

    path = lca.path(u, v)
    ancestor = lca.query(u, v)
    colors = ["black"] * graph.n
    colors[ancestor] = "red"
    kwargs.setdefault("marker_color", colors)
    if title is None:
        title = f"LCA({u}, {v}) = {ancestor}"
    return plot_graph(
        graph,
        highlight_edges=list(zip(path, path[1:])),
        title=title,
        **kwargs,
    )


def plot_partition(
    ds: DisjointSet,
    graph: Graph,
    title: str = "Partition",
    cmap: str = "tab10",
    **kwargs: Any,
):
    """
    Draw ``graph`` with vertices colored by their disjoint set.

    Parameters
    ----------
    ds : DisjointSet
        A disjoint set over the same vertex indices as ``graph``.
    graph : Graph
        The graph to draw.
    title : str, optional
        Plot title. Default is "Partition".
    cmap : str, optional
        Name of a Matplotlib colormap used to color the sets.
    **kwargs
        Forwarded to ``plot_graph``.

    Returns
    -------
    plotly.graph_objects.Figure or matplotlib.axes.Axes
        The figure or axis used for plotting.
    """

    if ds.n != graph.n:
        raise ValueError("disjoint set and graph must have the same size")
    colormap = matplotlib.colormaps[cmap]
    colors = ["black"] * graph.n
    for i, members in enumerate(ds.groups().values()):
        color = to_hex(colormap(i % colormap.N))
        for m in members:
            colors[m] = color
    kwargs.setdefault("marker_color", colors)
    return plot_graph(graph, title=title, **kwargs)
