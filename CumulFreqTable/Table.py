import abc
import logging
import numbers

import numpy as np

from .errors import IndexOutOfRange, InvalidLength, FrequencyOverflow

logger = logging.getLogger(__name__)


def _is_integer(value):
    return isinstance(value, (numbers.Integral, np.integer)) and not isinstance(value, (bool, np.bool_))


class CumulFreqTable(abc.ABC):
    """
    A cumulative frequency table maintains the absolute frequency of every
    position in ``[0, length)`` and answers cumulative (prefix) sums over them.

    Concrete tables only differ by how they store the frequencies, and thus by
    the cost of each operation. They all share the contract below:

    - ``freq(i)`` is the absolute frequency at position ``i``;
    - ``sum(i)`` is ``freq(0) + ... + freq(i)``;
    - ``total()`` is ``sum(length - 1)``, and 0 for an empty table.

    Positions outside of ``[0, length)`` raise :class:`IndexOutOfRange` before
    anything is modified. Frequencies are signed integers stored with the fixed
    width of ``dtype``: deltas and initial frequencies must fit in ``dtype``
    (else :class:`FrequencyOverflow`), while the frequencies and sums they
    accumulate to wrap around modulo ``2**bits`` in every implementation.

    :param int length:
        Number of positions of the table. Zero is allowed.

    :param dtype: (default=np.int64)
        numpy signed integer type used to store the frequencies.
    """
    def __init__(self, length, dtype=np.int64):
        if not _is_integer(length) or length < 0:
            raise InvalidLength("table length must be a non-negative integer, got {0!r}".format(length))
        if not np.issubdtype(np.dtype(dtype), np.signedinteger):
            raise TypeError("dtype must be a signed integer type, got {0}".format(np.dtype(dtype)))
        self._n = int(length)
        self._dtype = np.dtype(dtype)
        self._allocate()
        logger.debug("created %s of length %d (%s)", type(self).__name__, self._n, self._dtype)

    @classmethod
    def with_freq(cls, length, init, dtype=np.int64):
        """ Creates a table of the given length where every position has frequency ``init``. """
        if not _is_integer(length) or length < 0:
            raise InvalidLength("table length must be a non-negative integer, got {0!r}".format(length))
        if not _is_integer(init):
            raise TypeError("frequencies are integers, got {0!r}".format(init))
        return cls.from_frequencies(np.full(int(length), init), dtype=dtype)

    @classmethod
    def from_frequencies(cls, frequencies, dtype=np.int64):
        """ Creates a table holding the given absolute frequencies, in O(n). """
        frequencies = np.asarray(frequencies)
        if frequencies.ndim != 1:
            raise InvalidLength("frequencies must be one dimensional, got shape {0}".format(frequencies.shape))
        table = cls(len(frequencies), dtype=dtype)
        table.init(frequencies)
        return table

    # Storage specific operations.

    @abc.abstractmethod
    def _allocate(self):
        """ Allocates the zeroed storage for ``self._n`` positions. """

    @abc.abstractmethod
    def _add(self, pos, delta):
        pass

    @abc.abstractmethod
    def _sum(self, pos):
        pass

    @abc.abstractmethod
    def _freq(self, pos):
        pass

    @abc.abstractmethod
    def total(self):
        """ Cumulative frequency of the whole table, 0 if it is empty. """

    @abc.abstractmethod
    def frequencies(self):
        """ Retrieves all the absolute frequencies as a numpy array. """

    @abc.abstractmethod
    def init(self, frequencies):
        """ Overwrites the table with the given absolute frequencies. """

    @abc.abstractmethod
    def _find_by_sum(self, target):
        pass

    # Checked public operations.

    @property
    def length(self):
        return self._n

    @property
    def dtype(self):
        return self._dtype

    def __len__(self):
        return self._n

    def _check_pos(self, pos):
        if not _is_integer(pos):
            raise TypeError("positions must be integers, got {0!r}".format(pos))
        if pos < 0 or pos >= self._n:
            raise IndexOutOfRange(pos, self._n)
        return int(pos)

    def _check_integer(self, value):
        if not _is_integer(value):
            raise TypeError("frequencies are integers, got {0!r}".format(value))
        return int(value)

    def _check_delta(self, delta):
        delta = self._check_integer(delta)
        info = np.iinfo(self._dtype)
        if delta < info.min or delta > info.max:
            raise FrequencyOverflow("{0} does not fit in {1}".format(delta, self._dtype))
        return delta

    def _check_frequencies(self, frequencies):
        frequencies = np.asarray(frequencies)
        if frequencies.shape != (self._n,):
            raise InvalidLength("expected {0} frequencies, got shape {1}".format(self._n, frequencies.shape))
        if frequencies.size:
            # Python integers too wide for numpy end up in object arrays
            if frequencies.dtype == object and all(_is_integer(f) for f in frequencies):
                low, high = int(min(frequencies)), int(max(frequencies))
            elif np.issubdtype(frequencies.dtype, np.integer):
                low, high = int(frequencies.min()), int(frequencies.max())
            else:
                raise TypeError("frequencies must be integers, got {0}".format(frequencies.dtype))
            info = np.iinfo(self._dtype)
            if low < info.min or high > info.max:
                raise FrequencyOverflow("frequencies in [{0}, {1}] do not fit in {2}".format(low, high, self._dtype))
        return frequencies.astype(self._dtype)

    def _wrap(self, value):
        """ Reduces a Python integer to the fixed width of the table, as numpy arithmetic does. """
        info = np.iinfo(self._dtype)
        return (value - info.min) % (info.max - info.min + 1) + info.min

    def freq(self, pos):
        """ Absolute frequency of position ``pos``. """
        return self._freq(self._check_pos(pos))

    def sum(self, pos):
        """ Cumulative frequency over ``[0, pos]``. """
        return self._sum(self._check_pos(pos))

    def add(self, pos, delta):
        """ Adds ``delta`` (possibly negative) to the frequency of ``pos``. """
        pos = self._check_pos(pos)
        self._add(pos, self._check_delta(delta))

    def sub(self, pos, delta):
        """ Subtracts ``delta`` from the frequency of ``pos``. """
        pos = self._check_pos(pos)
        self._add(pos, self._check_delta(-self._check_integer(delta)))

    def inc(self, pos):
        """ Shortcut for ``add(pos, 1)``. """
        self.add(pos, 1)

    def dec(self, pos):
        """ Shortcut for ``sub(pos, 1)``. """
        self.sub(pos, 1)

    def find_by_sum(self, target):
        """
        Finds the first position whose cumulative frequency is greater or
        equal to ``target``.

        The search assumes every frequency is non-negative, so that the
        cumulative frequencies are non-decreasing.

        :param int target:
            Cumulative frequency to look for.

        :returns int:
            The smallest ``i`` such that ``sum(i) >= target``, or ``length``
            when ``target`` exceeds the total.
        """
        return self._find_by_sum(self._check_integer(target))

    def scale(self, scale_freq):
        """
        Replaces every absolute frequency ``f`` by ``scale_freq(f)``.

        ``scale(lambda f: f // 2)`` halves every frequency rounding down,
        ``scale(lambda f: (f + 1) // 2)`` rounding up.
        """
        scaled = [self._check_integer(scale_freq(int(f))) for f in self.frequencies()]
        logger.debug("scaling %s of length %d", type(self).__name__, self._n)
        self.init(scaled)

    def __eq__(self, other):
        return (type(self) is type(other) and self._n == other._n
                and np.array_equal(self.frequencies(), other.frequencies()))

    def __repr__(self):
        return "{0}({1})".format(type(self).__name__, self.frequencies().tolist())
