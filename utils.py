from typing import Callable, Sequence, Union

from array_ import Array


def max_order(a, b) -> bool:
    """Larger values sit higher (max-heap)."""
    return a > b


def min_order(a, b) -> bool:
    """Smaller values sit higher (min-heap)."""
    return a < b


def by_priority(priority: Callable, reverse: bool = False) -> Callable:
    """Builds a comparator ranking elements by priority(element), highest first unless reverse."""
    if reverse:
        return lambda a, b: priority(a) < priority(b)
    return lambda a, b: priority(a) > priority(b)


def opposite(comparator: Callable) -> Callable:
    """Comparator for the reverse order of comparator."""
    return lambda a, b: comparator(b, a)


def is_heap(items: Union[Sequence, Array], comparator: Callable) -> bool:
    """Check that no element outranks its parent."""
    if isinstance(items, Array):
        items = items.to_list()
    for i in range(1, len(items)):
        if comparator(items[i], items[(i - 1) // 2]):
            return False
    return True
