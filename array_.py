class Array:
    def __init__(self, size=16):
        self.size = max(size, 1)
        self.index = 0
        self.elements = [None] * self.size

    def _resize(self):
        self.size *= 2
        self.elements.extend([None] * (self.size - len(self.elements)))

    def insert(self, data):
        if self.index >= self.size:
            self._resize()
        self.elements[self.index] = data
        self.index += 1

    def get(self, i):
        if i < 0 or i >= self.index:
            return None
        return self.elements[i]

    def set(self, i, data):
        if not self.has_index(i):
            raise IndexError(f"Array index {i} out of range (length {self.index})")
        self.elements[i] = data

    def has_index(self, i):
        return 0 <= i < self.index

    def swap(self, i, j):
        self.elements[i], self.elements[j] = self.elements[j], self.elements[i]

    def pop(self):
        """Removes and returns the last element, or None when empty."""
        if self.index == 0:
            return None
        self.index -= 1
        data = self.elements[self.index]
        self.elements[self.index] = None
        return data

    def length(self):
        return self.index

    def to_list(self):
        return self.elements[:self.index]

    def delete_all(self):
        self.elements = [None] * self.size
        self.index = 0

    def __iter__(self):
        for i in range(self.index):
            yield self.elements[i]
