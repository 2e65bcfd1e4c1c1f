import numpy as np
import pytest

from CumulFreqTable import InvalidLength, FrequencyOverflow, FreqTable, BinaryIndexedTree

from harness import assert_consistent


@pytest.mark.parametrize("length", [0, 1, 5, 16, 21])
def test_with_freq(table_class, length):
    table = table_class.with_freq(length, 1)
    assert len(table) == length
    assert table.total() == length
    for i in range(length):
        assert table.freq(i) == 1
        assert table.sum(i) == i + 1

    for i in range(length):
        table.dec(i)
    assert table.total() == 0
    for i in range(length):
        assert table.freq(i) == 0
        assert table.sum(i) == 0


def test_with_freq_rejects_non_integer(table_class):
    with pytest.raises(TypeError):
        table_class.with_freq(4, 0.5)
    with pytest.raises(InvalidLength):
        table_class.with_freq(-2, 1)


def test_from_frequencies(table_class):
    freqs = [3, 0, 1, 4, 1, 5, 9, 2, 6]
    table = table_class.from_frequencies(freqs)
    assert [table.freq(i) for i in range(len(freqs))] == freqs
    assert [table.sum(i) for i in range(len(freqs))] == np.cumsum(freqs).tolist()
    np.testing.assert_array_equal(table.frequencies(), freqs)
    assert table_class.from_frequencies(table.frequencies()) == table


def test_from_frequencies_invalid(table_class):
    with pytest.raises(InvalidLength):
        table_class.from_frequencies([[1, 2], [3, 4]])
    with pytest.raises(TypeError):
        table_class.from_frequencies([1.5, 2.0])


def test_init_checks_length(table_class):
    table = table_class(3)
    with pytest.raises(InvalidLength):
        table.init([1, 2])


def test_frequencies_is_a_copy(table_class):
    table = table_class.from_frequencies([1, 2, 3])
    freqs = table.frequencies()
    freqs[0] = 100
    assert table.freq(0) == 1


@pytest.mark.parametrize("length", [1, 2, 7, 16, 32])
def test_find_by_sum(table_class, length):
    table = table_class.with_freq(length, 3)
    for i in range(length):
        assert table.find_by_sum(3 * (i + 1)) == i
        assert table.find_by_sum(3 * i + 1) == i
    assert table.find_by_sum(0) == 0
    assert table.find_by_sum(-5) == 0
    assert table.find_by_sum(table.total() + 1) == length


def test_find_by_sum_skips_empty_positions(table_class):
    table = table_class(10)
    table.add(2, 4)
    table.add(7, 1)
    assert table.find_by_sum(1) == 2
    assert table.find_by_sum(4) == 2
    assert table.find_by_sum(5) == 7
    assert table.find_by_sum(6) == 10


def test_find_by_sum_empty_table(table_class):
    assert table_class(0).find_by_sum(1) == 0


def test_scale(table_class):
    length = 13
    table = table_class.with_freq(length, 1)
    table.scale(lambda f: f * 2)
    assert [table.freq(i) for i in range(length)] == [2] * length
    table.scale(lambda f: (f + 1) // 2)
    assert [table.freq(i) for i in range(length)] == [1] * length
    table.scale(lambda f: f * 42)
    assert table.total() == 42 * length

    a = table_class.from_frequencies(table.frequencies())
    b = table_class.from_frequencies(table.frequencies())
    a.scale(lambda f: f // 5)
    b.scale(lambda f: (f + 1) // 5)
    assert [a.freq(i) for i in range(length)] == [8] * length
    assert [b.freq(i) for i in range(length)] == [8] * length
    a.scale(lambda f: f // 9)
    b.scale(lambda f: (f + 1) // 9)
    assert a.total() == 0
    assert b.total() == length
    assert_consistent(a)
    assert_consistent(b)


def test_scale_halves_rounding_down(table_class):
    table = table_class.from_frequencies([7, 0, 3, 8, 1])
    table.scale(lambda f: f // 2)
    assert [table.freq(i) for i in range(5)] == [3, 0, 1, 4, 0]
    assert table.total() == 8


def test_scale_must_return_integers(table_class):
    table = table_class.from_frequencies([2, 4])
    with pytest.raises(TypeError):
        table.scale(lambda f: f / 2)
    assert [table.freq(0), table.freq(1)] == [2, 4]


def test_equality_and_repr():
    a = BinaryIndexedTree.from_frequencies([1, 0, 2])
    b = BinaryIndexedTree(3)
    b.inc(0)
    b.add(2, 2)
    assert a == b
    assert a != FreqTable.from_frequencies([1, 0, 2])
    b.inc(1)
    assert a != b
    assert repr(a) == "BinaryIndexedTree([1, 0, 2])"


def test_init_rejects_non_integer_frequencies(table_class):
    table = table_class.from_frequencies([4, 5])
    with pytest.raises(TypeError):
        table.init([1.9, 2.7])
    with pytest.raises(TypeError):
        table.init([True, False])
    assert table.frequencies().tolist() == [4, 5]


@pytest.mark.parametrize("frequencies", [[300], [300, -200], [0, -129], [2**70, 1]])
def test_from_frequencies_must_fit_dtype(table_class, frequencies):
    with pytest.raises(FrequencyOverflow):
        table_class.from_frequencies(frequencies, dtype=np.int8)


def test_init_overflow_leaves_table_unchanged(table_class):
    table = table_class.from_frequencies([1, 2, 3], dtype=np.int8)
    with pytest.raises(OverflowError):
        table.init([1, 2, 128])
    assert table.frequencies().tolist() == [1, 2, 3]


def test_with_freq_must_fit_dtype(table_class):
    with pytest.raises(FrequencyOverflow):
        table_class.with_freq(3, 300, dtype=np.int8)
    table = table_class.with_freq(3, -128, dtype=np.int8)
    assert table.frequencies().tolist() == [-128] * 3


def test_scale_overflow_leaves_table_unchanged(table_class):
    table = table_class.from_frequencies([10, 20], dtype=np.int8)
    with pytest.raises(FrequencyOverflow):
        table.scale(lambda f: f * 10)
    assert table.frequencies().tolist() == [10, 20]
