# -*- coding: utf-8 -*-
"""
Shared visual theme for the search bar widget.
"""

from __future__ import annotations

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication


_BASE_STYLESHEET = """
QWidget {
    color: #0f172a;
    font-family: "Segoe UI Variable", "Segoe UI", sans-serif;
    font-size: 10.5pt;
}

QWidget#SearchBarRoot {
    background: #f1f5f9;
}

QLineEdit[searchField="true"] {
    background: #ffffff;
    border: 1px solid #e2e8f0;
    border-radius: 12px;
    padding: 8px 12px;
}

QLineEdit[searchField="true"]:focus {
    border-color: #3b82f6;
}

QPushButton[variant="link"] {
    border: none;
    background: transparent;
    color: #3b82f6;
}

QLabel[muted="true"] {
    color: #64748b;
}

QLabel[error="true"] {
    color: #ef4444;
}

QListWidget {
    background: #ffffff;
    border: 1px solid #e2e8f0;
    border-radius: 12px;
}
"""


def apply_theme(app: QApplication) -> None:
    """Apply the palette and stylesheet used by the search bar."""
    palette = QPalette()
    palette.setColor(QPalette.Window, QColor("#f8fafc"))
    palette.setColor(QPalette.WindowText, QColor("#1e293b"))
    palette.setColor(QPalette.Base, QColor("#ffffff"))
    palette.setColor(QPalette.Text, QColor("#1e293b"))
    palette.setColor(QPalette.Highlight, QColor("#3b82f6"))
    palette.setColor(QPalette.HighlightedText, QColor("#ffffff"))
    app.setPalette(palette)
    app.setStyleSheet(_BASE_STYLESHEET)
