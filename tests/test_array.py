import pytest

from array_ import Array


class TestArray:
    def test_insert_and_get(self):
        array = Array(2)
        for value in ("a", "b", "c"):
            array.insert(value)
        assert array.length() == 3
        assert array.size == 4
        assert array.get(0) == "a"
        assert array.get(2) == "c"
        assert array.get(3) is None
        assert array.get(-1) is None

    def test_set_and_swap(self):
        array = Array()
        array.insert(1)
        array.insert(2)
        array.set(0, 5)
        array.swap(0, 1)
        assert array.to_list() == [2, 5]
        with pytest.raises(IndexError):
            array.set(2, 9)

    def test_pop(self):
        array = Array()
        assert array.pop() is None
        array.insert(1)
        array.insert(2)
        assert array.pop() == 2
        assert array.to_list() == [1]
        assert not array.has_index(1)

    def test_iteration_and_delete_all(self):
        array = Array(1)
        for value in range(5):
            array.insert(value)
        assert list(array) == [0, 1, 2, 3, 4]
        array.delete_all()
        assert array.length() == 0
        assert list(array) == []
