# -*- coding: utf-8 -*-
"""
Listener contract between the search core and whatever renders it.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol

from PySide6.QtCore import QObject, Signal


class SearchListener(Protocol):
    def on_loading(self) -> None: ...

    def on_list_changed(self, items: list[Any]) -> None: ...

    def on_error(self, error: BaseException) -> None: ...


class NullListener:
    def on_loading(self) -> None:
        return None

    def on_list_changed(self, items: list[Any]) -> None:
        return None

    def on_error(self, error: BaseException) -> None:
        return None


class CallbackListener:
    def __init__(
        self,
        on_loading: Callable[[], None] | None = None,
        on_list_changed: Callable[[list[Any]], None] | None = None,
        on_error: Callable[[BaseException], None] | None = None,
    ):
        self._on_loading = on_loading
        self._on_list_changed = on_list_changed
        self._on_error = on_error

    def on_loading(self) -> None:
        if self._on_loading:
            self._on_loading()

    def on_list_changed(self, items: list[Any]) -> None:
        if self._on_list_changed:
            self._on_list_changed(items)

    def on_error(self, error: BaseException) -> None:
        if self._on_error:
            self._on_error(error)


class RecordingListener:
    """Keeps every notification as a discrete event tuple, oldest first."""

    def __init__(self):
        self.events: list[tuple[Any, ...]] = []

    def on_loading(self) -> None:
        self.events.append(('loading',))

    def on_list_changed(self, items: list[Any]) -> None:
        self.events.append(('list', list(items)))

    def on_error(self, error: BaseException) -> None:
        self.events.append(('error', error))

    @property
    def lists(self) -> list[list[Any]]:
        return [event[1] for event in self.events if event[0] == 'list']

    @property
    def errors(self) -> list[BaseException]:
        return [event[1] for event in self.events if event[0] == 'error']

    @property
    def last_list(self) -> list[Any] | None:
        lists = self.lists
        return lists[-1] if lists else None

    def clear(self) -> None:
        self.events.clear()


class QtSearchListener(QObject):
    loading = Signal()
    list_changed = Signal(object)
    error_occurred = Signal(object)

    def on_loading(self) -> None:
        self.loading.emit()

    def on_list_changed(self, items: list[Any]) -> None:
        self.list_changed.emit(list(items))

    def on_error(self, error: BaseException) -> None:
        self.error_occurred.emit(error)
