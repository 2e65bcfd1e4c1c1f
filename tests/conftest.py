import pytest

from CumulFreqTable import FreqTable, CumulFreqArray, BinaryIndexedTree

ALL_TABLES = [FreqTable, CumulFreqArray, BinaryIndexedTree]


@pytest.fixture(params=ALL_TABLES, ids=lambda cls: cls.__name__)
def table_class(request):
    return request.param
