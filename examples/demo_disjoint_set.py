from pygraphkit import DisjointSet, Graph, plot_partition

edges = [(0, 1), (2, 3), (1, 2), (5, 6), (7, 8), (8, 9)]
graph = Graph.from_edges(10, edges)

ds = DisjointSet(graph.n)
for u, v, _ in graph.edges():
    ds.union(u, v)

print(f"{len(ds)} components:", sorted(ds.groups().values()))

fig = plot_partition(ds, graph)
fig.show()
