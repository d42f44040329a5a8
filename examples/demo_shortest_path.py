import numpy as np
import matplotlib.pyplot as plt
from pygraphkit import Graph, ShortestPath, plot_shortest_path_tree

rng = np.random.default_rng(0)
n = 12
positions = rng.uniform(0, 10, size=(n, 2))

graph = Graph(n)
for u in range(n):
    # connect each vertex to its three nearest neighbours
    dists = np.linalg.norm(positions - positions[u], axis=1)
    for v in np.argsort(dists)[1:4]:
        graph.add_edge(u, int(v), float(dists[v]))

sp = ShortestPath(graph, 0)
for v in range(n):
    print(v, round(sp.distance_to(v), 3), sp.path_to(v))

fig, ax = plt.subplots()
plot_shortest_path_tree(graph, sp.parents, positions=positions, ax=ax)
plt.show()
