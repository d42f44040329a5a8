from typing import Any, Iterable, List, Optional


class Heap:
    """
    Array-backed binary min-heap.

    Elements are compared with ``<`` only, so tuples such as
    ``(priority, tie_breaker)`` give a deterministic extraction order.
    """

    def __init__(self, items: Optional[Iterable[Any]] = None):
        """
        Parameters
        ----------
        items : Iterable, optional
            Initial elements. They are heapified in linear time.
        """

        self._xs: List[Any] = list(items) if items is not None else []
        for i in reversed(range(len(self._xs) // 2)):
            self._sift_down(i)

    def _sift_up(self, i: int) -> None:
        xs = self._xs
        while i > 0:
            parent = (i - 1) // 2
            if xs[i] < xs[parent]:
                xs[i], xs[parent] = xs[parent], xs[i]
                i = parent
            else:
                break

    def _sift_down(self, i: int) -> None:
        xs = self._xs
        n = len(xs)
        while True:
            smallest = i
            left, right = 2 * i + 1, 2 * i + 2
            if left < n and xs[left] < xs[smallest]:
                smallest = left
            if right < n and xs[right] < xs[smallest]:
                smallest = right
            if smallest == i:
                return
            xs[i], xs[smallest] = xs[smallest], xs[i]
            i = smallest

    def push(self, x: Any) -> None:
        """Insert an element. O(log n)."""
        self._xs.append(x)
        self._sift_up(len(self._xs) - 1)

    def peek(self) -> Optional[Any]:
        """Return the smallest element without removing it, or None if empty."""
        return self._xs[0] if self._xs else None

    def pop(self) -> Any:
        """
        Remove and return the smallest element. O(log n).

        Raises
        ------
        IndexError
            If the heap is empty.
        """

        if not self._xs:
            raise IndexError("pop from empty heap")
        xs = self._xs
        xs[0], xs[-1] = xs[-1], xs[0]
        smallest = xs.pop()
        if xs:
            self._sift_down(0)
        return smallest

    @property
    def is_empty(self) -> bool:
        return not self._xs

    def __len__(self) -> int:
        return len(self._xs)

    def __bool__(self) -> bool:
        return bool(self._xs)

    def __repr__(self) -> str:
        return f"Heap(size={len(self._xs)})"
