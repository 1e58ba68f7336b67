# -*- coding: utf-8 -*-
"""
Filter/sort views layered on top of the canonical result list.

Filtering derives from the sorted view when there is one, sorting derives
from the filtered view when there is one. Only the comparator is remembered,
so removing the filter re-sorts the full list while removing the sort can
only fall back to whatever filtered view is still populated.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable, Sequence

from searchbar.services.listener import NullListener, SearchListener

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], bool]
Comparator = Callable[[Any, Any], int]


@dataclass(frozen=True)
class ListState:
    canonical: tuple[Any, ...] = ()
    filtered: tuple[Any, ...] = ()
    sorted: tuple[Any, ...] = ()
    comparator: Comparator | None = None


def derive_filtered(source: Sequence[Any], predicate: Predicate) -> tuple[Any, ...]:
    return tuple(item for item in source if predicate(item))


def derive_sorted(source: Sequence[Any], comparator: Comparator) -> tuple[Any, ...]:
    # sorted() is stable, ties keep source order
    return tuple(sorted(source, key=functools.cmp_to_key(comparator)))


class ListPipeline:
    def __init__(self, listener: SearchListener | None = None):
        self._listener: SearchListener = listener if listener is not None else NullListener()
        self._state = ListState()
        self._visible: tuple[Any, ...] = ()

    def set_listener(self, listener: SearchListener | None) -> None:
        self._listener = listener if listener is not None else NullListener()

    @property
    def state(self) -> ListState:
        return self._state

    @property
    def visible(self) -> list[Any]:
        return list(self._visible)

    def _publish(self, state: ListState, visible: tuple[Any, ...]) -> None:
        self._state = state
        self._visible = visible
        self._listener.on_list_changed(list(visible))

    def reset(self, items: Iterable[Any]) -> None:
        canonical = tuple(items)
        self._publish(ListState(canonical=canonical), canonical)

    def filter_list(self, predicate: Predicate) -> None:
        state = self._state
        source = state.sorted if state.sorted else state.canonical
        filtered = derive_filtered(source, predicate)
        logger.debug(f'Filtered {len(source)} items down to {len(filtered)}')
        self._publish(replace(state, filtered=filtered), filtered)

    def sort_list(self, comparator: Comparator) -> None:
        state = self._state
        source = state.filtered if state.filtered else state.canonical
        ordered = derive_sorted(source, comparator)
        self._publish(replace(state, sorted=ordered, comparator=comparator), ordered)

    def remove_filter(self) -> None:
        state = self._state
        if state.comparator is None:
            self._publish(replace(state, filtered=()), state.canonical)
            return
        ordered = derive_sorted(state.canonical, state.comparator)
        self._publish(replace(state, filtered=(), sorted=ordered), ordered)

    def remove_sort(self) -> None:
        state = self._state
        visible = state.filtered if state.filtered else state.canonical
        self._publish(replace(state, sorted=(), comparator=None), visible)
