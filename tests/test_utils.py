from array_ import Array
from utils import by_priority, is_heap, max_order, min_order, opposite


class TestComparators:
    def test_max_and_min_order(self):
        assert max_order(3, 1)
        assert not max_order(1, 3)
        assert not max_order(2, 2)
        assert min_order(1, 3)
        assert not min_order(2, 2)

    def test_by_priority(self):
        comparator = by_priority(len)
        assert comparator("long", "ab")
        assert not comparator("ab", "cd")
        reverse = by_priority(len, reverse=True)
        assert reverse("ab", "long")

    def test_opposite(self):
        comparator = opposite(max_order)
        assert comparator(1, 3)
        assert not comparator(2, 2)


class TestIsHeap:
    def test_lists(self):
        assert is_heap([], max_order)
        assert is_heap([9, 5, 8, 1, 2], max_order)
        assert not is_heap([5, 9, 8], max_order)
        assert is_heap([1, 2, 2, 3], min_order)

    def test_array(self):
        array = Array()
        for value in (9, 5, 8):
            array.insert(value)
        assert is_heap(array, max_order)
        assert not is_heap(array, min_order)
