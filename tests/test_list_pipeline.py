# -*- coding: utf-8 -*-

from __future__ import annotations

from searchbar.services.list_pipeline import ListPipeline, derive_filtered, derive_sorted
from searchbar.services.listener import RecordingListener


def _even(item):
    return item % 2 == 0


def _descending(a, b):
    return b - a


def _pipeline(items=(1, 2, 3, 4, 5)):
    listener = RecordingListener()
    pipeline = ListPipeline(listener)
    pipeline.reset(items)
    listener.clear()
    return pipeline, listener


def test_filter_then_sort_sorts_the_filtered_set():
    pipeline, listener = _pipeline([5, 2, 8, 3, 4])

    pipeline.filter_list(_even)
    pipeline.sort_list(_descending)

    assert listener.lists == [[2, 8, 4], [8, 4, 2]]


def test_sort_then_filter_filters_the_sorted_set():
    pipeline, listener = _pipeline([5, 2, 8, 3, 4])

    pipeline.sort_list(_descending)
    pipeline.filter_list(_even)

    assert listener.lists == [[8, 5, 4, 3, 2], [8, 4, 2]]


def test_remove_filter_resorts_full_list_with_active_comparator():
    pipeline, listener = _pipeline()

    pipeline.sort_list(_descending)
    pipeline.filter_list(_even)
    pipeline.remove_filter()

    assert listener.last_list == [5, 4, 3, 2, 1]
    assert pipeline.state.filtered == ()


def test_remove_filter_without_sort_restores_canonical():
    pipeline, listener = _pipeline()

    pipeline.filter_list(_even)
    pipeline.remove_filter()

    assert listener.last_list == [1, 2, 3, 4, 5]


def test_remove_sort_falls_back_to_filtered_view():
    pipeline, listener = _pipeline()

    pipeline.filter_list(_even)
    pipeline.sort_list(_descending)
    pipeline.remove_sort()

    assert listener.last_list == [2, 4]
    assert pipeline.state.comparator is None


def test_remove_sort_falls_back_to_canonical_when_filter_is_empty():
    pipeline, listener = _pipeline()

    pipeline.filter_list(lambda item: item > 10)
    assert listener.last_list == []
    pipeline.sort_list(_descending)
    pipeline.remove_sort()

    assert listener.last_list == [1, 2, 3, 4, 5]


def test_filter_remove_filter_remove_sort_walkthrough():
    pipeline, listener = _pipeline()

    pipeline.filter_list(_even)
    pipeline.sort_list(_descending)
    pipeline.remove_filter()
    pipeline.remove_sort()

    # remove_filter already dropped the filtered view, so nothing to fall back to
    assert listener.lists == [
        [2, 4],
        [4, 2],
        [5, 4, 3, 2, 1],
        [1, 2, 3, 4, 5],
    ]


def test_sort_is_stable_for_equal_keys():
    items = [('b', 1), ('a', 2), ('c', 1), ('d', 2)]

    ordered = derive_sorted(items, lambda x, y: x[1] - y[1])

    assert ordered == (('b', 1), ('c', 1), ('a', 2), ('d', 2))


def test_derivations_do_not_touch_source():
    source = [3, 1, 2]

    assert derive_filtered(source, lambda item: item > 1) == (3, 2)
    assert derive_sorted(source, lambda a, b: a - b) == (1, 2, 3)
    assert source == [3, 1, 2]


def test_each_operation_emits_once_with_a_fresh_list():
    pipeline, listener = _pipeline()

    pipeline.sort_list(_descending)
    emitted = listener.last_list
    emitted.append(99)

    assert pipeline.visible == [5, 4, 3, 2, 1]
    assert len(listener.events) == 1


class _EmptySizedListener(RecordingListener):
    def __len__(self) -> int:
        return 0


def test_listener_without_items_is_still_notified():
    listener = _EmptySizedListener()
    pipeline = ListPipeline(listener)

    pipeline.reset([1, 2])
    pipeline.set_listener(listener)
    pipeline.filter_list(_even)

    assert listener.lists == [[1, 2], [2]]
