import pytest

from tremolo_fx.strided_queue import StridedQueue


def contents(queue):
    return [queue[i] for i in range(len(queue))]


def test_push_back():
    testee = StridedQueue(5)
    testee.set_stride(3)

    testee.push_back([1, 0, 0, 2, 0, 0, 3, 0, 0, 4, 0, 0, 5])
    assert contents(testee) == [1, 2, 3, 4, 5]

    testee.push_back([0, 0, 6, 0, 0, 7, 0])
    assert contents(testee) == [3, 4, 5, 6, 7]

    testee.push_back([0, 1, 0, 0, 2, 0, 0, 3, 0, 0, 4, 0, 0, 5, 0, 0])
    assert contents(testee) == [1, 2, 3, 4, 5]

    testee.push_back([6])
    assert contents(testee) == [2, 3, 4, 5, 6]

    testee.push_back([0])
    assert contents(testee) == [2, 3, 4, 5, 6]

    testee.push_back([0, 7])
    assert contents(testee) == [3, 4, 5, 6, 7]

    testee.push_back([0])
    testee.push_back([0])
    testee.push_back([8])
    testee.push_back([0])
    testee.push_back([0])
    testee.push_back([9])
    assert contents(testee) == [5, 6, 7, 8, 9]

    testee.push_back([0, 0, 10, 0, 0, 20, 0, 0, 30, 0, 0, 40, 0, 0, 50,
                      0, 0, 60, 0, 0, 70, 0, 0, 80, 0, 0, 90, 0])
    assert contents(testee) == [50, 60, 70, 80, 90]


def test_front_is_first_element():
    testee = StridedQueue(3)
    testee.push_back([7, 8, 9])
    assert testee.front() == 7
    assert testee.front() == testee[0]


def test_length_is_fixed_size():
    testee = StridedQueue(4)
    testee.push_back([1, 2, 3, 4, 5, 6])
    assert len(testee) == 4


def test_stride_below_one_is_clamped():
    testee = StridedQueue(3)
    testee.set_stride(0)
    testee.push_back([1, 2, 3])
    assert contents(testee) == [1, 2, 3]


def test_index_out_of_range_raises():
    testee = StridedQueue(2)
    testee.push_back([3, 4])
    assert testee[0] == 3
    assert testee[1] == 4
    with pytest.raises(IndexError):
        testee[2]
    with pytest.raises(IndexError):
        testee[-1]


def test_non_positive_size_rejected():
    with pytest.raises(ValueError):
        StridedQueue(0)


def test_push_back_zeros_shifts_in_zeros():
    testee = StridedQueue(4)
    testee.push_back([1, 2, 3, 4])
    testee.push_back_zeros(2)
    assert contents(testee) == [3, 4, 0, 0]

    testee.push_back_zeros(10)
    assert contents(testee) == [0, 0, 0, 0]


def test_push_back_zeros_respects_stride():
    testee = StridedQueue(4)
    testee.set_stride(2)
    testee.push_back([1, 0, 2, 0, 3, 0, 4, 0])
    assert contents(testee) == [1, 2, 3, 4]
    testee.push_back_zeros(3)
    assert contents(testee) == [3, 4, 0, 0]


def test_push_back_of_empty_block_changes_nothing():
    testee = StridedQueue(3)
    testee.push_back([1, 2, 3])
    testee.push_back([])
    assert contents(testee) == [1, 2, 3]