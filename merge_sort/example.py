from collections.abc import MutableSequence
from typing import Optional

from .Config import *
from .merge_sort import sort


def main(arr: Optional[MutableSequence[int]] = None) -> MutableSequence[int]:
    if arr is None:
        arr = list(EXAMPLE_LIST)
    print(f"Original list: {list(arr)}")
    sort(arr)
    print(f"Sorted list: {list(arr)}")
    return arr


if __name__ == "__main__":
    main()
