import pytest

from misislab.segment_tree import SegmentTree

VALUES = [3, 1, 4, 1, 5, 9, 2, 6]


def test_total_of_positive_values():
    tree = SegmentTree(VALUES)
    assert tree.positive_sum(0, len(VALUES) - 1) == sum(VALUES)


@pytest.mark.parametrize("left", range(len(VALUES)))
def test_every_subrange(left):
    tree = SegmentTree(VALUES)
    for right in range(left, len(VALUES)):
        assert tree.positive_sum(left, right) == sum(VALUES[left : right + 1])


def test_negative_values_are_ignored():
    values = [-2, 5, -7, 3]
    tree = SegmentTree(values)
    assert tree.positive_sum(0, 3) == values[1] + values[3]
    assert tree.positive_sum(1, 1) == values[1]


def test_add_range_positive_delta():
    tree = SegmentTree(VALUES)
    expected = list(VALUES)
    for left, right, delta in [(1, 3, 2), (0, 7, 1), (5, 5, 10)]:
        tree.add_range(left, right, delta)
        for i in range(left, right + 1):
            expected[i] += delta
    for left in range(len(expected)):
        for right in range(left, len(expected)):
            assert tree.positive_sum(left, right) == sum(expected[left : right + 1])


def test_add_range_makes_negative_positive():
    values = [-4, 2]
    tree = SegmentTree(values)
    tree.add_range(0, 1, 5)
    assert tree.positive_sum(0, 1) == (values[0] + 5) + (values[1] + 5)


def test_subtract_less_than_value():
    tree = SegmentTree(VALUES)
    tree.subtract_at(2, 1)
    assert tree.positive_sum(0, len(VALUES) - 1) == sum(VALUES) - 1
    assert tree.positive_sum(2, 2) == VALUES[2] - 1


def test_subtract_more_than_value_clamps():
    tree = SegmentTree(VALUES)
    tree.subtract_at(2, 10)
    assert tree.positive_sum(2, 2) == 0
    assert tree.positive_sum(0, len(VALUES) - 1) == sum(VALUES) - VALUES[2]


def test_sums_are_additive_after_updates():
    tree = SegmentTree(VALUES)
    tree.add_range(2, 6, 3)
    tree.subtract_at(4, 2)
    tree.subtract_at(1, 50)
    last = len(VALUES) - 1
    for split in range(last):
        assert tree.positive_sum(0, split) + tree.positive_sum(split + 1, last) == tree.positive_sum(0, last)


def test_empty_query_range():
    tree = SegmentTree(VALUES)
    assert tree.positive_sum(3, 1) == 0


def test_empty_values_rejected():
    with pytest.raises(ValueError):
        SegmentTree([])


@pytest.mark.parametrize("left,right", [(0, 8), (-1, 2), (4, 2)])
def test_add_range_out_of_bounds(left, right):
    tree = SegmentTree(VALUES)
    with pytest.raises(IndexError):
        tree.add_range(left, right, 1)


@pytest.mark.parametrize("index", [-1, 8])
def test_subtract_out_of_bounds(index):
    tree = SegmentTree(VALUES)
    with pytest.raises(IndexError):
        tree.subtract_at(index, 1)