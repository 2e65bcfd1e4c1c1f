import numpy as np

from .Table import CumulFreqTable


class CumulFreqArray(CumulFreqTable):
    """
    Stores the cumulative frequency of every position in an array.
    Adding to a frequency adds to every following cumulative frequency, O(n).
    Cumulative sums, the total and single frequencies are O(1).
    Mostly useful as a reference to validate the other tables.
    """
    def _allocate(self):
        self._sums = np.zeros(self._n, dtype=self._dtype)

    def _add(self, pos, delta):
        self._sums[pos:] += delta

    def _sum(self, pos):
        return int(self._sums[pos])

    def _freq(self, pos):
        if pos == 0:
            return int(self._sums[0])
        return self._wrap(int(self._sums[pos]) - int(self._sums[pos - 1]))

    def total(self):
        if self._n == 0:
            return 0
        return int(self._sums[-1])

    def frequencies(self):
        return np.diff(self._sums, prepend=self._dtype.type(0))

    def init(self, frequencies):
        self._sums = np.cumsum(self._check_frequencies(frequencies), dtype=self._dtype)

    def _find_by_sum(self, target):
        # sums are non-decreasing for non-negative frequencies
        return int(np.searchsorted(self._sums, target, side='left'))
