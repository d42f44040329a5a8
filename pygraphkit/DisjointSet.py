from typing import Dict, Iterator, List, Set


class DisjointSet:
    """
    A Union-Find (Disjoint Set) data structure over a fixed universe of
    integer elements ``0 .. n-1``.

    Uses both path compression and union by rank, which together give an
    amortized near-constant (inverse Ackermann) cost per operation.
    """

    def __init__(self, n: int):
        """
        Create ``n`` singleton sets, one per element.

        Parameters
        ----------
        n : int
            The number of elements in the universe. Must be non-negative.
        """

        if n < 0:
            raise ValueError("number of elements must be ≥ 0")
        self.parent = list(range(n))
        self.rank = [0] * n  # upper bound on tree height, valid at roots
        self._size = [1] * n  # set size, valid at roots
        self._num_sets = n

    @property
    def n(self) -> int:
        """Size of the universe."""
        return len(self.parent)

    def _check_index(self, x: int) -> None:
        if not 0 <= x < len(self.parent):
            raise IndexError(f"element {x} out of range [0, {len(self.parent)})")

    def find(self, x: int) -> int:
        """
        Find the representative of the set containing ``x``.

        Every element visited on the way is re-pointed directly at the root.

        Parameters
        ----------
        x : int
            The element whose set representative is to be found.

        Returns
        -------
        int
            The root element of the set.
        """

        self._check_index(x)
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # second pass: compress
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """
        Merge the sets containing ``x`` and ``y``.

        Parameters
        ----------
        x : int
            First element.
        y : int
            Second element.

        Returns
        -------
        bool
            True if two distinct sets were merged, False if ``x`` and ``y``
            were already in the same set.
        """

        root1 = self.find(x)
        root2 = self.find(y)
        if root1 == root2:
            return False

        # Attach smaller rank tree under the larger rank tree
        if self.rank[root1] < self.rank[root2]:
            root1, root2 = root2, root1
        elif self.rank[root1] == self.rank[root2]:
            self.rank[root1] += 1

        self.parent[root2] = root1
        self._size[root1] += self._size[root2]
        self._num_sets -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        """
        Check whether two elements are in the same set.

        Parameters
        ----------
        x : int
            First element.
        y : int
            Second element.

        Returns
        -------
        bool
            True if ``x`` and ``y`` share a representative, False otherwise.
        """

        return self.find(x) == self.find(y)

    def size(self, x: int) -> int:
        """
        Return the number of elements in the set containing ``x``.
        """

        return self._size[self.find(x)]

    def groups(self) -> Dict[int, List[int]]:
        """
        Group the elements by representative.

        Returns
        -------
        Dict[int, List[int]]
            Mapping from each representative to the ascending list of members
            of its set.
        """

        out: Dict[int, List[int]] = {}
        for i in range(len(self.parent)):
            out.setdefault(self.find(i), []).append(i)
        return out

    def __iter__(self) -> Iterator[Set[int]]:
        """
        Iterate over the current disjoint sets.

        Returns
        -------
        Iterator[Set[int]]
            An iterator over sets of element indices.
        """

        return iter(set(members) for members in self.groups().values())

    def __len__(self) -> int:
        """
        Return the number of disjoint sets.

        Returns
        -------
        int
            The number of sets currently being tracked.
        """

        return self._num_sets

    def __repr__(self) -> str:
        return f"DisjointSet(n={len(self.parent)}, sets={self._num_sets})"
