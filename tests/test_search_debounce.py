# -*- coding: utf-8 -*-

from __future__ import annotations

from searchbar.services.debouncer import SearchDebouncer


class _FakeTimer:
    def __init__(self):
        self.started_with: list[int | None] = []
        self.stopped = 0

    def start(self, interval: int | None = None) -> None:
        self.started_with.append(interval)

    def stop(self) -> None:
        self.stopped += 1


class _FakeSession:
    def __init__(self):
        self.searches: list[tuple[str, object]] = []
        self.cleared = 0

    def search(self, text, lookup):
        self.searches.append((text, lookup))

    def clear(self):
        self.cleared += 1


async def _lookup(text):
    return [text]


def _debouncer(minimum_chars: int = 3, debounce_ms: int = 300) -> SearchDebouncer:
    debouncer = SearchDebouncer.__new__(SearchDebouncer)
    debouncer._session = _FakeSession()
    debouncer._lookup = _lookup
    debouncer._minimum_chars = minimum_chars
    debouncer._debounce_ms = debounce_ms
    debouncer._pending_search_query = None
    debouncer._search_debounce_timer = _FakeTimer()
    return debouncer


def test_short_input_clears_without_arming_timer():
    debouncer = _debouncer()

    debouncer.on_text_changed('a')
    debouncer.on_text_changed('ab')

    assert debouncer._session.cleared == 2
    assert debouncer._search_debounce_timer.started_with == []
    debouncer.flush()
    assert debouncer._session.searches == []


def test_search_debounce_coalesces_rapid_input():
    debouncer = _debouncer()

    debouncer.on_text_changed('a')
    debouncer.on_text_changed('ab')
    debouncer.on_text_changed('abc')
    debouncer.on_text_changed('abcd')

    assert debouncer.pending_query == 'abcd'
    assert debouncer._search_debounce_timer.started_with == [300, 300]
    assert debouncer._search_debounce_timer.stopped == 4

    debouncer.flush()
    debouncer.flush()
    assert debouncer._session.searches == [('abcd', _lookup)]


def test_dropping_below_minimum_discards_pending_search():
    debouncer = _debouncer()

    debouncer.on_text_changed('abc')
    debouncer.on_text_changed('ab')
    debouncer.flush()

    assert debouncer._session.searches == []
    assert debouncer._session.cleared == 1


def test_cancel_drops_pending_search():
    debouncer = _debouncer()

    debouncer.on_text_changed('hello')
    debouncer.cancel()
    debouncer.flush()

    assert debouncer._session.searches == []


def test_flush_without_lookup_issues_nothing():
    debouncer = _debouncer()
    debouncer.set_lookup(None)

    debouncer.on_text_changed('hello')
    debouncer.flush()

    assert debouncer._session.searches == []


def test_timer_fires_single_search_after_quiet_period(qapp):
    from PySide6.QtTest import QTest

    session = _FakeSession()
    debouncer = SearchDebouncer(session, _lookup, minimum_chars=3, debounce_ms=30)

    debouncer.on_text_changed('a')
    debouncer.on_text_changed('ab')
    debouncer.on_text_changed('abc')
    assert session.searches == []

    QTest.qWait(150)

    assert session.searches == [('abc', _lookup)]
