"""
Segment Tree module
===================

A segment tree stores an array in the leaves of a complete binary tree whose
internal nodes hold the combination of their two children under an
associative function. Any half-open range ``[lo, hi)`` is then covered by at
most ``2 log2(n)`` nodes, so range queries and point updates are both
O(log n).

:class:`SegmentTree` is parameterised by the ``combine`` function and its
``identity`` element; :class:`MinSegmentTree` and :class:`MaxSegmentTree` are
the range-minimum and range-maximum specialisations.
"""

from typing import Any, Callable, Sequence

import numpy as np


def next_pow2(n: int) -> int:
    """Smallest power of two ``x`` with ``n <= x``."""
    x = 1
    while x < n:
        x *= 2
    return x


class SegmentTree:
    """Iterative segment tree over a fixed number of values."""

    def __init__(
        self,
        values: Sequence[Any],
        combine: Callable[[Any, Any], Any],
        identity: Any,
    ):
        """Build the tree bottom-up in O(n).

        Parameters
        ----------
        values : Sequence
            Initial leaf values (list or 1-D numpy array).
        combine : Callable[[Any, Any], Any]
            An associative binary function.
        identity : Any
            Identity element of ``combine``; the result of an empty query.

        """
        if isinstance(values, np.ndarray):
            values = values.tolist()
        values = list(values)
        self._n = len(values)
        self.combine = combine
        self.identity = identity
        self._size = next_pow2(self._n)

        tree = [identity] * (2 * self._size)
        tree[self._size:self._size + self._n] = values
        for i in range(self._size - 1, 0, -1):
            tree[i] = combine(tree[2 * i], tree[2 * i + 1])
        self._tree = tree

    def __len__(self) -> int:
        return self._n

    def __getitem__(self, i: int) -> Any:
        self._check_index(i)
        return self._tree[self._size + i]

    def _check_index(self, i: int) -> None:
        if not 0 <= i < self._n:
            raise IndexError(f"index {i} out of range [0, {self._n})")

    def update(self, i: int, value: Any) -> None:
        """Set position ``i`` to ``value`` and refresh its ancestors.

        Parameters
        ----------
        i : int
            Leaf index.
        value : Any
            New value.

        """
        self._check_index(i)
        tree, combine = self._tree, self.combine
        i += self._size
        tree[i] = value
        i //= 2
        while i:
            tree[i] = combine(tree[2 * i], tree[2 * i + 1])
            i //= 2

    def query(self, lo: int, hi: int) -> Any:
        """Combine the values in the half-open range ``[lo, hi)``.

        Parameters
        ----------
        lo : int
            First index, inclusive.
        hi : int
            Last index, exclusive.

        Returns
        -------
        Any
            ``combine`` folded over the range, left to right, or ``identity``
            when ``lo == hi``.

        """
        if lo < 0 or hi > self._n or lo > hi:
            raise IndexError(f"invalid range [{lo}, {hi}) for size {self._n}")
        tree, combine = self._tree, self.combine
        left, right = self.identity, self.identity
        lo += self._size
        hi += self._size
        while lo < hi:
            if lo & 1:
                left = combine(left, tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                right = combine(tree[hi], right)
            lo //= 2
            hi //= 2
        return combine(left, right)


class MinSegmentTree(SegmentTree):
    """Range-minimum queries."""

    def __init__(self, values: Sequence[Any]):
        super().__init__(values, min, np.inf)


class MaxSegmentTree(SegmentTree):
    """Range-maximum queries."""

    def __init__(self, values: Sequence[Any]):
        super().__init__(values, max, -np.inf)
