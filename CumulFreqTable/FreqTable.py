import numpy as np

from .Table import CumulFreqTable


class FreqTable(CumulFreqTable):
    """
    Stores the absolute frequency of every position in an array.
    Adding to a frequency is O(1).
    Retrieving a single frequency is O(1).
    Calculating a cumulative sum is O(pos), the total is O(n).
    Best suited to small tables, or to workloads that update much more often
    than they sum.
    """
    def _allocate(self):
        self._freqs = np.zeros(self._n, dtype=self._dtype)

    def _add(self, pos, delta):
        self._freqs[pos:pos + 1] += delta

    def _sum(self, pos):
        return int(self._freqs[:pos + 1].sum(dtype=self._dtype))

    def _freq(self, pos):
        return int(self._freqs[pos])

    def total(self):
        return int(self._freqs.sum(dtype=self._dtype))

    def frequencies(self):
        return self._freqs.copy()

    def init(self, frequencies):
        self._freqs = self._check_frequencies(frequencies)

    def _find_by_sum(self, target):
        _sum = 0
        for pos, f in enumerate(self._freqs):
            _sum = self._wrap(_sum + int(f))
            if _sum >= target:
                return pos
        return self._n
