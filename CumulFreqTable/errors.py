class CumulFreqTableError(Exception):
    """ Base class of the errors raised by the cumulative frequency tables. """


class IndexOutOfRange(CumulFreqTableError, IndexError):
    """ A position lies outside of ``[0, length)``. """
    def __init__(self, pos, length):
        self.pos = pos
        self.length = length
        super().__init__("position {0} out of range for a table of length {1}".format(pos, length))


class InvalidLength(CumulFreqTableError, ValueError):
    """ A table length is negative, not an integer, or does not match the data given. """


class FrequencyOverflow(CumulFreqTableError, OverflowError):
    """ A frequency or delta does not fit in the integer type of the table. """
