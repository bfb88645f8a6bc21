import pytest

from dsakit.heap import MaxHeap

SOURCE_VALUES = [20, 15, 7, 8, 50, 18, 35, 45]


def _filled(values, capacity=1000):
    heap = MaxHeap(capacity)
    for value in values:
        heap.push(value)
    return heap


def test_source_array_layout():
    assert list(_filled(SOURCE_VALUES)) == [50, 45, 35, 20, 15, 7, 18, 8]


def test_heap_property_after_each_push_and_pop():
    values = [5, 3, 17, 10, 84, 19, 6, 22, 9, 17]
    heap = MaxHeap(50)
    snapshots = []
    for value in values:
        heap.push(value)
        snapshots.append(list(heap))
    while len(heap):
        heap.pop()
        snapshots.append(list(heap))
    assert len(snapshots) == 2 * len(values)
    assert snapshots[-1] == []
    violations = [
        (snapshot, i)
        for snapshot in snapshots
        for i in range(1, len(snapshot))
        if snapshot[(i - 1) // 2] < snapshot[i]
    ]
    assert violations == []


def test_pop_returns_descending_order():
    heap = _filled(SOURCE_VALUES)
    popped = [heap.pop() for _ in range(len(SOURCE_VALUES))]
    assert popped == sorted(SOURCE_VALUES, reverse=True)
    assert len(heap) == 0


def test_first_pop_is_maximum():
    heap = _filled(SOURCE_VALUES)
    assert heap.pop() == max(SOURCE_VALUES)
    assert len(heap) == len(SOURCE_VALUES) - 1
    assert max(SOURCE_VALUES) not in list(heap)


def test_overflow():
    heap = _filled([1, 2], capacity=2)
    with pytest.raises(OverflowError):
        heap.push(3)
    assert len(heap) == 2


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap(4).pop()


def test_iteration_does_not_consume():
    heap = _filled(SOURCE_VALUES)
    assert sorted(heap) == sorted(SOURCE_VALUES)
    assert len(heap) == len(SOURCE_VALUES)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        MaxHeap(-1)