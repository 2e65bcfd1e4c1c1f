"""
Index arithmetic of the binary indexed tree.

The tables expose 0-based positions while the tree is stored 1-based, so that
every stored index ``pos`` covers the block ``(pos - lowbit(pos), pos]``.
All the conversions between the two live here.
"""


def lowbit(pos):
    """ Value of the lowest set bit of ``pos`` (``pos & -pos`` in two's complement). """
    if pos <= 0:
        raise ValueError("lowbit is only defined for positive integers, got {0}".format(pos))
    return pos & -pos


def to_tree_index(i):
    """ Maps a 0-based table position to its 1-based tree index. """
    return i + 1


def update_path(pos, n):
    """
    Yields the tree indices whose block covers ``pos``: ``pos``, then
    ``pos + lowbit(pos)``, and so on while the index stays ``<= n``.
    """
    while pos <= n:
        yield pos
        pos += lowbit(pos)


def query_path(pos):
    """
    Yields the tree indices whose blocks partition ``(0, pos]``: ``pos``, then
    ``pos - lowbit(pos)``, and so on down to (excluding) zero.
    """
    while pos > 0:
        yield pos
        pos -= lowbit(pos)


def highest_power_of_two(n):
    """ Largest power of two lower or equal to ``n``, 0 when ``n`` is 0. """
    if n <= 0:
        return 0
    return 1 << (n.bit_length() - 1)
