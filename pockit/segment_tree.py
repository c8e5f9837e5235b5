"""Sum segment tree over a list of integers."""

from __future__ import annotations

from collections.abc import Iterable


class SegmentTree:
    """Recursive sum segment tree with point updates and range queries.

    Nodes are stored in a flat list: node ``k`` has children ``2k + 1`` and
    ``2k + 2``. The backing list has room for ``4 * n`` nodes, of which the
    first :attr:`logical_size` are the ones the build reached.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._array = list(values)
        self._n = len(self._array)
        self._tree = [0] * (4 * self._n)
        self._max_index = 0
        if self._n:
            self._build(0, 0, self._n - 1)

    @property
    def array(self) -> list[int]:
        """The current values, in input order."""
        return list(self._array)

    @property
    def tree(self) -> list[int]:
        """The whole backing node list, unused slots included."""
        return list(self._tree)

    @property
    def logical_size(self) -> int:
        """Number of leading node slots that belong to the built tree."""
        return self._max_index + 1

    def __len__(self) -> int:
        return self._n

    def update(self, idx: int, value: int) -> None:
        """Set the value at ``idx`` and refresh the sums above it."""
        if not self._n:
            return
        if not 0 <= idx < self._n:
            raise IndexError(f"index {idx} out of range for {self._n} values")
        self._update(0, 0, self._n - 1, idx, value)

    def query(self, left: int, right: int) -> int:
        """Sum of the values at positions ``left`` to ``right`` inclusive."""
        if left < 0 or right < 0:
            raise ValueError("query bounds must not be negative")
        if not self._n:
            return 0
        return self._query(0, 0, self._n - 1, left, right)

    def _build(self, node: int, start: int, end: int) -> None:
        self._max_index = max(self._max_index, node)
        if start == end:
            self._tree[node] = self._array[start]
            return
        mid = (start + end) // 2
        self._build(2 * node + 1, start, mid)
        self._build(2 * node + 2, mid + 1, end)
        self._tree[node] = self._tree[2 * node + 1] + self._tree[2 * node + 2]

    def _update(self, node: int, start: int, end: int, idx: int, value: int) -> None:
        if start == end:
            self._array[idx] = value
            self._tree[node] = value
            return
        mid = (start + end) // 2
        if idx <= mid:
            self._update(2 * node + 1, start, mid, idx, value)
        else:
            self._update(2 * node + 2, mid + 1, end, idx, value)
        self._tree[node] = self._tree[2 * node + 1] + self._tree[2 * node + 2]

    def _query(self, node: int, start: int, end: int, left: int, right: int) -> int:
        if right < start or left > end:
            return 0
        if left <= start and end <= right:
            return self._tree[node]
        mid = (start + end) // 2
        return self._query(2 * node + 1, start, mid, left, right) + self._query(
            2 * node + 2, mid + 1, end, left, right
        )