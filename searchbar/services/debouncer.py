# -*- coding: utf-8 -*-
"""
Coalesces text-change events into at most one search per quiet period.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QTimer

from searchbar.config import DEBOUNCE_MS, MINIMUM_CHARS
from searchbar.services.search_session import LookupFn, SearchSession

logger = logging.getLogger(__name__)


class SearchDebouncer(QObject):
    def __init__(
        self,
        session: SearchSession,
        lookup: LookupFn | None = None,
        *,
        minimum_chars: int = MINIMUM_CHARS,
        debounce_ms: int = DEBOUNCE_MS,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self._session = session
        self._lookup = lookup
        self._minimum_chars = int(minimum_chars)
        self._debounce_ms = int(debounce_ms)
        self._pending_search_query: str | None = None
        self._search_debounce_timer = QTimer(self)
        self._search_debounce_timer.setSingleShot(True)
        self._search_debounce_timer.setInterval(self._debounce_ms)
        self._search_debounce_timer.timeout.connect(self.flush)

    @property
    def pending_query(self) -> str | None:
        return self._pending_search_query

    def set_lookup(self, lookup: LookupFn | None) -> None:
        self._lookup = lookup

    def on_text_changed(self, text: str) -> None:
        self._search_debounce_timer.stop()
        text = str(text or '')
        if len(text) < self._minimum_chars:
            self._pending_search_query = None
            self._session.clear()
            return
        self._pending_search_query = text
        self._search_debounce_timer.start(self._debounce_ms)

    def flush(self) -> None:
        query = self._pending_search_query
        self._pending_search_query = None
        if query is None:
            return
        if self._lookup is None:
            logger.warning(f'No lookup configured, dropping search for {query!r}')
            return
        self._session.search(query, self._lookup)

    def cancel(self) -> None:
        self._search_debounce_timer.stop()
        self._pending_search_query = None
