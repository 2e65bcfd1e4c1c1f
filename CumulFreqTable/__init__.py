"""
Cumulative frequency tables.

A cumulative frequency table stores the absolute frequency of every position
of a fixed size table and computes the cumulative frequency of any position.

Example::

    from CumulFreqTable import BinaryIndexedTree

    table = BinaryIndexedTree(16)
    table.inc(0)
    table.inc(3)
    table.add(5, 3)

    table.freq(5)   # 3
    table.sum(6)    # 5
    table.total()   # 5

Three implementations share the :class:`CumulFreqTable` contract:

- :class:`FreqTable` stores the frequencies, O(1) updates and O(n) sums;
- :class:`BinaryIndexedTree` stores a Fenwick tree, O(log n) for everything;
- :class:`CumulFreqArray` stores the cumulative frequencies, O(n) updates and O(1) sums.
"""
import logging

from .errors import CumulFreqTableError, IndexOutOfRange, InvalidLength, FrequencyOverflow
from .Table import CumulFreqTable
from .FreqTable import FreqTable
from .CumulFreqArray import CumulFreqArray
from .BinaryIndexedTree import BinaryIndexedTree
from .settings import available_settings, make_table

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
