import numpy as np

from .FreqTable import FreqTable
from .CumulFreqArray import CumulFreqArray
from .BinaryIndexedTree import BinaryIndexedTree


available_settings = {}

# Possible choices of table, from the cheapest update to the cheapest sum
available_settings['type_table'] = ['freq_array', 'binary_indexed_tree', 'cumulfreq_array']

# Possible workloads of the benchmark
available_settings['workload'] = ['inc', 'inc+sum', 'inc+total', 'inc+sum+total']

type_table2class = {
    'freq_array': FreqTable,
    'cumulfreq_array': CumulFreqArray,
    'binary_indexed_tree': BinaryIndexedTree,
}


def make_table(type_table, length, dtype=np.int64):
    """
    Builds an empty table of the requested type.

    :param str type_table:
        One of ``available_settings['type_table']``.
        - ``'freq_array'`` – O(1) updates, O(n) sums, best for small tables
        - ``'binary_indexed_tree'`` – O(log n) updates and sums
        - ``'cumulfreq_array'`` – O(n) updates, O(1) sums

    :param int length:
        Number of positions.

    :param dtype: (default=np.int64)
        numpy integer type of the frequencies.

    :raises ValueError: If ``type_table`` is unknown.
    """
    if type_table not in type_table2class:
        raise ValueError("unknown type_table {0!r}, expected one of {1}".format(
            type_table, available_settings['type_table']))
    return type_table2class[type_table](length, dtype=dtype)
