"""In-place sorting of dynamic arrays using their element type's comparison."""

from __future__ import annotations

from enum import Enum

from .collection import DynamicArray
from .util import ComparisonResult


class SortOrder(Enum):
    """Direction in which an array is sorted."""

    ASCENDING = 0
    DESCENDING = 1


def _misordered(order: SortOrder) -> ComparisonResult:
    """The comparison result that means a first element must come after a second."""
    return ComparisonResult.GREATER if order is SortOrder.ASCENDING else ComparisonResult.LESS


def bubble_sort(array: DynamicArray, order: SortOrder = SortOrder.ASCENDING) -> None:
    """Sort ``array`` in place by bubble sort, stopping once a pass makes no swap."""
    compare = array.type_info.compare
    wrong = _misordered(order)
    size = len(array)

    for done in range(size - 1):
        swapped = False
        for i in range(size - 1 - done):
            if compare(array[i], array[i + 1]) is wrong:
                array.swap(i, i + 1)
                swapped = True
        if not swapped:
            break


def _sift_down(array: DynamicArray, root: int, end: int, wrong: ComparisonResult) -> None:
    compare = array.type_info.compare
    while True:
        child = 2 * root + 1
        if child >= end:
            return
        right = child + 1
        if right < end and compare(array[right], array[child]) is wrong:
            child = right
        if compare(array[child], array[root]) is wrong:
            array.swap(root, child)
            root = child
        else:
            return


def heap_sort(array: DynamicArray, order: SortOrder = SortOrder.ASCENDING) -> None:
    """Sort ``array`` in place by heap sort."""
    wrong = _misordered(order)
    size = len(array)

    for root in reversed(range(size // 2)):
        _sift_down(array, root, size, wrong)
    for end in reversed(range(1, size)):
        array.swap(0, end)
        _sift_down(array, 0, end, wrong)