from array_ import Array


class BinaryHeap:
    """
    Array-backed binary heap ordered by a caller supplied comparator.

    comparator(a, b) returns True when a should sit above b, so the same class
    works as a max-heap (a > b), a min-heap (a < b) or with any custom priority.
    None is reserved as the empty signal of peek() and poll().
    """

    def __init__(self, comparator, size=16):
        if not callable(comparator):
            raise TypeError("comparator must be callable")
        self.comparator = comparator
        self.items = Array(size)

    def size(self):
        return self.items.length()

    def is_empty(self):
        return self.size() == 0

    def __len__(self):
        return self.size()

    def to_list(self):
        """Returns a copy of the items in array order."""
        return self.items.to_list()

    @staticmethod
    def _parent_index(i):
        return (i - 1) // 2 if i > 0 else -1

    @staticmethod
    def _left_child_index(i):
        return 2 * i + 1

    @staticmethod
    def _right_child_index(i):
        return 2 * i + 2

    def peek(self):
        if self.is_empty():
            return None
        return self.items.get(0)

    def push(self, value):
        if value is None:
            raise ValueError("cannot push None into the heap")
        self.items.insert(value)
        self.sift_up()

    def poll(self):
        """
        Removes and returns the root, or None when the heap is empty.

        The last element is moved into the root. If the removed root outranks it
        the new root sinks, otherwise a sift-up pass runs from the last index.
        """
        if self.is_empty():
            return None

        result = self.items.get(0)
        last = self.items.pop()
        if self.is_empty():
            return result

        self.items.set(0, last)
        if self.comparator(result, last):
            self.sift_down()
        else:
            self.sift_up()
        return result

    def replace(self, value):
        """Overwrites the root with value and restores the heap from the top."""
        if value is None:
            raise ValueError("cannot replace the heap root with None")
        if self.is_empty():
            self.items.insert(value)
            return
        self.items.set(0, value)
        self.sift_down()

    # Move a node up while it outranks its parent; used after insertion
    def sift_up(self, from_index=None):
        if from_index is None:
            from_index = self.size() - 1
        if self.is_empty() or not self.items.has_index(from_index):
            return

        i = from_index
        parent = self._parent_index(i)
        while parent != -1 and self.comparator(self.items.get(i), self.items.get(parent)):
            self.items.swap(parent, i)
            i = parent
            parent = self._parent_index(i)

    # Move a node down while a child outranks it; used after removal or replacement
    def sift_down(self, from_index=0):
        if self.is_empty() or not self.items.has_index(from_index):
            return

        i = from_index
        while True:
            left = self._left_child_index(i)
            right = self._right_child_index(i)
            if not self.items.has_index(left):
                break

            current = self.items.get(i)
            left_child = self.items.get(left)

            # The right child only wins if it beats the left one and the current node
            if self.items.has_index(right):
                right_child = self.items.get(right)
                if self.comparator(right_child, left_child) and self.comparator(right_child, current):
                    self.items.swap(right, i)
                    i = right
                    continue

            if not self.comparator(left_child, current):
                break
            self.items.swap(left, i)
            i = left
