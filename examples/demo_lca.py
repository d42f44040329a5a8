import random
import matplotlib.pyplot as plt
from pygraphkit import Graph, LowestCommonAncestor, plot_lca_path

random.seed(1)
n = 15
tree = Graph.from_edges(n, [(random.randrange(v), v) for v in range(1, n)])
lca = LowestCommonAncestor(tree, 0)

for u, v in [(13, 14), (5, 9), (7, 7)]:
    print(f"lca({u}, {v}) = {lca.query(u, v)}, distance = {lca.distance(u, v)}")

fig, ax = plt.subplots()
plot_lca_path(lca, tree, 13, 14, ax=ax)
plt.show()
