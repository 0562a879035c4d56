"""Top-down merge sort.

Running time is O(n log n) and one scratch buffer of the input's length is
allocated per `sort` call.
"""
from collections.abc import MutableSequence, Sequence

from .SortingAlgorithm import SortingAlgorithm


class IndexOutOfRangeError(IndexError):
    def __init__(self, msg: str) -> None:
        super().__init__("Index out of range: " + msg)


def _check_range(start: int, end: int, *buffers: Sequence[int]) -> None:
    if start < 0 or start > end:
        raise IndexOutOfRangeError(f"invalid range [{start}, {end})")
    for buffer in buffers:
        if end > len(buffer):
            raise IndexOutOfRangeError(f"range [{start}, {end}) exceeds buffer of length {len(buffer)}")


def merge(arr: Sequence[int], start: int, mid: int, end: int, scratch: MutableSequence[int]) -> None:
    """Merge the ordered runs `arr[start:mid]` and `arr[mid:end]` into `scratch[start:end]`."""
    _check_range(start, end, arr, scratch)
    if not start <= mid <= end:
        raise IndexOutOfRangeError(f"midpoint {mid} outside [{start}, {end}]")
    i, j = start, mid
    for k in range(start, end):
        # once a run is exhausted the rest of the other one is copied as is
        if i < mid and (j >= end or arr[i] <= arr[j]):
            scratch[k] = arr[i]
            i += 1
        else:
            scratch[k] = arr[j]
            j += 1


def merge_copy(arr: MutableSequence[int], start: int, end: int, scratch: Sequence[int]) -> None:
    _check_range(start, end, arr, scratch)
    for i in range(start, end):
        arr[i] = scratch[i]


def merge_split(arr: MutableSequence[int], start: int, end: int, scratch: MutableSequence[int]) -> None:
    """Sort `arr[start:end]` in place, staging every merge in `scratch`."""
    _check_range(start, end, arr, scratch)
    if end - start > 1:
        mid = start + (end - start) // 2
        merge_split(arr, start, mid, scratch)
        merge_split(arr, mid, end, scratch)
        merge(arr, start, mid, end, scratch)
        merge_copy(arr, start, end, scratch)


def sort(arr: MutableSequence[int]) -> None:
    merge_split(arr, 0, len(arr), [0] * len(arr))


algorithm = SortingAlgorithm("merge sort", sort, 9)
