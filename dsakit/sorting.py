"""Classic comparison and distribution sorts over lists of integers."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from dsakit.array_heap import ArrayMinHeap
from dsakit.linked_queue import LinkedQueue


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, placing the minimum of the rest at each position."""
    result = list(values)
    for i in range(len(result) - 1):
        min_index = i
        for j in range(i + 1, len(result)):
            if result[min_index] > result[j]:
                min_index = j
        result[i], result[min_index] = result[min_index], result[i]
    return result


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy by repeatedly swapping adjacent out-of-order pairs."""
    result = list(values)
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def _partition(arr: list[int], left: int, right: int, pivot: int) -> int | None:
    pivot_value = arr[pivot]
    while left < right:
        while arr[left] < pivot_value and left < right:
            left += 1
        while arr[right] >= pivot_value and left < right:
            right -= 1
        if left == right:
            arr[left], arr[pivot] = arr[pivot], arr[left]
            return left
        if arr[left] > arr[right]:
            arr[left], arr[right] = arr[right], arr[left]
    return None


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, partitioning around the last element of each range.

    The lower part of each partition is re-sorted from index 0.
    """
    result = list(values)
    pending = [(0, len(result) - 1, len(result) - 1)]
    while pending:
        left, right, pivot = pending.pop()
        if left < 0 or right < 0 or left == pivot or pivot <= 0:
            continue
        split = _partition(result, left, right, pivot)
        if split is None:
            continue
        pending.append((split + 1, pivot, pivot))
        pending.append((0, split - 1, split - 1))
    return result


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, inserting each value before the first larger one."""
    result = list(values)
    for i in range(1, len(result)):
        current = result[i]
        for j in range(i):
            if result[j] > current:
                del result[i]
                result.insert(j, current)
                break
    return result


def shell_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy: gapped compare-and-swap passes, then insertion sort."""
    result = list(values)
    gap = len(result) // 2
    while gap > 1:
        for i in range(len(result) - gap):
            if result[i] > result[i + gap]:
                result[i], result[i + gap] = result[i + gap], result[i]
        gap //= 2
    return insertion_sort(result)


def _merge(first: LinkedQueue, second: LinkedQueue) -> LinkedQueue:
    merged = LinkedQueue()
    while first and second:
        source = second if second.peek() < first.peek() else first
        merged.enqueue(source.dequeue())
    for rest in (first, second):
        while rest:
            merged.enqueue(rest.dequeue())
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy by merging single-value queues pairwise, bottom up."""
    queues = [LinkedQueue([value]) for value in values]
    while len(queues) > 1:
        merged = [_merge(queues[i], queues[i + 1]) for i in range(0, len(queues) - 1, 2)]
        if len(queues) % 2:
            merged.append(queues[-1])
        queues = merged
    return list(queues[0]) if queues else []


def _distribute(values: list[int], digit: Callable[[int], int]) -> list[int]:
    buckets = [LinkedQueue() for _ in range(10)]
    for value in values:
        buckets[digit(value)].enqueue(value)
    return [value for bucket in buckets for value in bucket]


def radix_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of two-digit values (0 to 99) by ones then tens."""
    result = list(values)
    for value in result:
        if not 0 <= value <= 99:
            raise ValueError(f"radix sort handles values from 0 to 99, got {value}")
    result = _distribute(result, lambda value: value % 10)
    return _distribute(result, lambda value: value // 10)


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy by filling a min-heap and draining it."""
    items = list(values)
    heap = ArrayMinHeap(len(items))
    for value in items:
        heap.insert(value)
    return [heap.delete() for _ in items]


def format_array(values: Iterable[int]) -> str:
    """Render values under a rule line, each followed by a space."""
    return "=" * 16 + "\n" + "".join(f"{value} " for value in values)


def main(argv: list[str] | None = None) -> int:
    """Run every sort on a sample array and print the results."""
    data = [80, 50, 70, 10, 60, 20, 40, 30]
    print("\norigin info")
    print(format_array(data))
    for label, sort in (
        ("selection sort", selection_sort),
        ("bubble sort", bubble_sort),
        ("quick sort", quick_sort),
        ("insert sort", insertion_sort),
        ("shell sort", shell_sort),
        ("merge sort", merge_sort),
        ("heap sort", heap_sort),
    ):
        print(f"\n{label}")
        print(format_array(sort(data)))
    two_digit = [42, 60, 75, 81, 10, 23, 12, 18]
    print("\nradix sort")
    print(format_array(radix_sort(two_digit)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())