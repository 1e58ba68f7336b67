# -*- coding: utf-8 -*-
"""
Demo launcher: python -m searchbar [--minimum-chars N] [--debounce-ms MS]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import random
import sys

from PySide6 import QtAsyncio
from PySide6.QtWidgets import QApplication

from searchbar.config import DEBOUNCE_MS, MINIMUM_CHARS, SearchBarConfig
from searchbar.ui.search_bar import SearchBarWidget
from searchbar.ui.theme import apply_theme

_WORDS = [
    'alpha', 'almond', 'amber', 'anchor', 'apple', 'april', 'arrow', 'aspen',
    'badge', 'banner', 'basil', 'beacon', 'berry', 'birch', 'bison', 'blossom',
    'cactus', 'canyon', 'carbon', 'cedar', 'cherry', 'cinder', 'cobalt', 'comet',
]


async def _demo_lookup(text: str) -> list[str]:
    # Random latency so overlapping searches settle out of order.
    await asyncio.sleep(random.uniform(0.1, 1.2))
    lowered = text.lower()
    return [word for word in _WORDS if lowered in word]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog='searchbar')
    parser.add_argument('--minimum-chars', type=int, default=MINIMUM_CHARS)
    parser.add_argument('--debounce-ms', type=int, default=DEBOUNCE_MS)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    app = QApplication(sys.argv[:1])
    apply_theme(app)
    config = SearchBarConfig(
        minimum_chars=args.minimum_chars,
        debounce_ms=args.debounce_ms,
        hint_text='Search words',
        empty_text='No results',
        suggestions=_WORDS[:5],
    )
    widget = SearchBarWidget(_demo_lookup, config=config)
    widget.setWindowTitle('Search bar')
    widget.resize(420, 560)
    widget.show()
    QtAsyncio.run(handle_sigint=True)
    return 0


if __name__ == '__main__':
    sys.exit(main())
