import logging

import numpy as np

from .Table import CumulFreqTable
from .bits import lowbit, to_tree_index, update_path, query_path, highest_power_of_two

logger = logging.getLogger(__name__)


class BinaryIndexedTree(CumulFreqTable):
    """
    A data structure for maintaining cumulative (prefix) sums.
    (aka "Fenwick tree")

    Just as an integer is the sum of appropriate powers of two, a cumulative
    frequency is the sum of O(log n) partial sums over power-of-two sized
    blocks. From Peter M. Fenwick, "A new data structure for cumulative
    frequency tables" (1994).

    Adding to a frequency is O(log n).
    Calculating a cumulative sum is O(log n).
    Retrieving a single frequency is the difference of two cumulative sums,
    and is thus O(log n).

    The tree is stored 1-indexed: ``_tree[k]`` for ``k`` in ``[1, n]`` holds
    the sum of the frequencies of the positions ``(k - lowbit(k), k]`` (in
    1-based numbering) and ``_tree[0]`` is unused.
    """
    def _allocate(self):
        self._tree = np.zeros(self._n + 1, dtype=self._dtype)

    def _add(self, pos, delta):
        # unique indices, so the fancy in-place add wraps each block once
        self._tree[list(update_path(to_tree_index(pos), self._n))] += delta

    def _prefix_sum(self, stop):
        """ Returns sum of the first *stop* frequencies (up to *stop*, exclusive). """
        _sum = 0
        for idx in query_path(stop):
            _sum += int(self._tree[idx])
        return self._wrap(_sum)

    def _sum(self, pos):
        return self._prefix_sum(to_tree_index(pos))

    def _freq(self, pos):
        # sum(pos - 1) is the prefix of pos exclusive, 0 for the first position
        return self._wrap(self._prefix_sum(to_tree_index(pos)) - self._prefix_sum(pos))

    def total(self):
        return self._prefix_sum(self._n)

    def frequencies(self):
        """ Retrieves all frequencies in O(n). """
        _frequencies = self._tree[1:].copy()
        for idx in range(1, self._n + 1):
            parent_idx = idx + lowbit(idx)
            if parent_idx <= self._n:
                _frequencies[parent_idx - 1:parent_idx] -= self._tree[idx:idx + 1]
        return _frequencies

    def init(self, frequencies):
        """ Initialize in O(n) with specified frequencies. """
        tree = np.zeros(self._n + 1, dtype=self._dtype)
        tree[1:] = self._check_frequencies(frequencies)
        for idx in range(1, self._n + 1):
            parent_idx = idx + lowbit(idx)  # parent in update tree
            if parent_idx <= self._n:
                tree[parent_idx:parent_idx + 1] += tree[idx:idx + 1]
        self._tree = tree
        logger.debug("initialized tree of length %d", self._n)

    def _find_by_sum(self, target):
        # Binary descent over the blocks, see Fenwick's Tech Report 110.
        idx = 0
        remaining = target
        step = highest_power_of_two(self._n)
        while step > 0:
            nxt = idx + step
            if nxt <= self._n and int(self._tree[nxt]) < remaining:
                idx = nxt
                remaining -= int(self._tree[nxt])
            step >>= 1
        # idx is the 1-based index of the last position whose sum is below target
        return idx
