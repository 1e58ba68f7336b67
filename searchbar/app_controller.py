# -*- coding: utf-8 -*-
"""
Search bar controller: one object wiring session, list views and debouncer.
"""

from __future__ import annotations

import asyncio
from typing import Any

from PySide6.QtCore import QObject

from searchbar.config import SearchBarConfig
from searchbar.services.debouncer import SearchDebouncer
from searchbar.services.list_pipeline import Comparator, ListPipeline, Predicate
from searchbar.services.listener import SearchListener
from searchbar.services.search_session import LookupFn, SearchSession, SearchStatus


class SearchBarController(QObject):
    def __init__(
        self,
        listener: SearchListener | None = None,
        lookup: LookupFn | None = None,
        config: SearchBarConfig | None = None,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self.config = (config if config is not None else SearchBarConfig()).validate()
        self.pipeline = ListPipeline(listener)
        self.session = SearchSession(listener, self.pipeline)
        self.lookup = lookup
        self.debouncer = SearchDebouncer(
            self.session,
            lookup,
            minimum_chars=self.config.minimum_chars,
            debounce_ms=self.config.debounce_ms,
            parent=self,
        )

    def set_listener(self, listener: SearchListener | None) -> None:
        self.session.set_listener(listener)

    def set_lookup(self, lookup: LookupFn | None) -> None:
        self.lookup = lookup
        self.debouncer.set_lookup(lookup)

    @property
    def status(self) -> SearchStatus:
        return self.session.status

    @property
    def visible(self) -> list[Any]:
        return self.pipeline.visible

    @property
    def last_query(self) -> str | None:
        return self.session.last_query

    def on_text_changed(self, text: str) -> None:
        self.debouncer.on_text_changed(text)

    def search(self, text: str, lookup: LookupFn | None = None) -> asyncio.Task:
        lookup = lookup or self.lookup
        if lookup is None:
            raise ValueError('search requires a lookup function')
        return self.session.search(text, lookup)

    def replay_last_search(self) -> asyncio.Task | None:
        return self.session.replay_last_search()

    def cancel(self) -> None:
        self.debouncer.cancel()
        self.session.cancel()

    def clear(self) -> None:
        self.debouncer.cancel()
        self.session.clear()

    def filter_list(self, predicate: Predicate) -> None:
        self.pipeline.filter_list(predicate)

    def sort_list(self, comparator: Comparator) -> None:
        self.pipeline.sort_list(comparator)

    def remove_filter(self) -> None:
        self.pipeline.remove_filter()

    def remove_sort(self) -> None:
        self.pipeline.remove_sort()
