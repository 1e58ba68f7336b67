# -*- coding: utf-8 -*-
"""
Search bar widget rendering the controller's visible list.
"""

from __future__ import annotations

from typing import Any, Callable

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from searchbar.app_controller import SearchBarController
from searchbar.config import SearchBarConfig
from searchbar.services.listener import QtSearchListener
from searchbar.services.search_session import LookupFn


class SearchBarWidget(QWidget):
    item_activated = Signal(object)

    def __init__(
        self,
        lookup: LookupFn | None = None,
        *,
        config: SearchBarConfig | None = None,
        controller: SearchBarController | None = None,
        item_text: Callable[[Any], str] = str,
        error_text: Callable[[BaseException], str] | None = None,
        header: QWidget | None = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self.listener = QtSearchListener(self)
        if controller is None:
            controller = SearchBarController(self.listener, lookup, config, parent=self)
        elif lookup is not None:
            controller.set_lookup(lookup)
        self.controller = controller
        self.controller.set_listener(self.listener)
        self.config = self.controller.config
        self._item_text = item_text
        self._error_text = error_text
        self._header = header
        self._items: list[Any] = []
        self._loading = False
        self._error: str | None = None
        self._active = False
        self._build_ui()
        self._bind_events()
        self._render()

    def _build_ui(self) -> None:
        self.setObjectName('SearchBarRoot')
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        bar = QHBoxLayout()
        self.search_input = QLineEdit()
        self.search_input.setProperty('searchField', True)
        self.search_input.setPlaceholderText(self.config.hint_text)
        self.cancel_btn = QPushButton(self.config.cancellation_text)
        self.cancel_btn.setProperty('variant', 'link')
        self.cancel_btn.setVisible(False)
        bar.addWidget(self.search_input, 1)
        bar.addWidget(self.cancel_btn)
        layout.addLayout(bar)

        if self._header is not None:
            layout.addWidget(self._header)

        self.status_label = QLabel('')
        self.status_label.setProperty('muted', True)
        self.results_list = QListWidget()
        layout.addWidget(self.status_label)
        layout.addWidget(self.results_list, 1)

    def _bind_events(self) -> None:
        self.search_input.textChanged.connect(self._on_text_changed)
        self.cancel_btn.clicked.connect(self.cancel)
        self.results_list.itemActivated.connect(self._on_item_activated)
        self.listener.loading.connect(self._on_loading)
        self.listener.list_changed.connect(self._on_list_changed)
        self.listener.error_occurred.connect(self._on_error)

    @property
    def items(self) -> list[Any]:
        return list(self._items)

    def _on_text_changed(self, text: str) -> None:
        self.controller.on_text_changed(text)
        if len(text) < self.config.minimum_chars:
            self._error = None
            self._loading = False
            self._active = False
            self._render()

    def _on_loading(self) -> None:
        self._loading = True
        self._error = None
        self._active = True
        self._render()

    def _on_list_changed(self, items: list[Any]) -> None:
        self._loading = False
        self._items = list(items)
        self._render()

    def _on_error(self, error: BaseException) -> None:
        self._loading = False
        self._error = self._error_text(error) if self._error_text else self.config.error_text
        self._render()

    def _on_item_activated(self, item: QListWidgetItem) -> None:
        self.item_activated.emit(item.data(Qt.ItemDataRole.UserRole))

    def cancel(self) -> None:
        self.controller.clear()
        self.search_input.blockSignals(True)
        self.search_input.clear()
        self.search_input.blockSignals(False)
        self._items = []
        self._error = None
        self._loading = False
        self._active = False
        self._render()

    def _render(self) -> None:
        self.cancel_btn.setVisible(self._active)
        self.status_label.setProperty('error', self._error is not None)
        self.status_label.style().unpolish(self.status_label)
        self.status_label.style().polish(self.status_label)

        if self._error is not None:
            self._set_status(self._error)
            self._fill([])
        elif self._loading:
            self._set_status('Loading...')
            self._fill([])
        elif len(self.search_input.text()) < self.config.minimum_chars:
            self._set_status('')
            self._fill(self.config.suggestions)
        elif self._items:
            self._set_status('')
            self._fill(self._items)
        else:
            self._set_status(self.config.empty_text)
            self._fill([])

    def _set_status(self, text: str) -> None:
        self.status_label.setText(text)
        self.status_label.setVisible(bool(text))

    def _fill(self, items: list[Any]) -> None:
        self.results_list.clear()
        for entry in items:
            item = QListWidgetItem(self._item_text(entry))
            item.setData(Qt.ItemDataRole.UserRole, entry)
            self.results_list.addItem(item)
