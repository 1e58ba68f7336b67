# -*- coding: utf-8 -*-
"""
Search bar settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from searchbar.errors import ConfigError

# ============================================================================
# Search behaviour
# ============================================================================
MINIMUM_CHARS = 3  # shorter input clears the list instead of searching
DEBOUNCE_MS = 500

# ============================================================================
# Widget texts
# ============================================================================
HINT_TEXT = ''
CANCELLATION_TEXT = 'Cancel'
EMPTY_TEXT = ''
ERROR_TEXT = 'error'

# ============================================================================
# HTTP lookup
# ============================================================================
HTTP_TIMEOUT_SECONDS = 15.0
HTTP_SEARCH_PATH = '/api/search'
HTTP_QUERY_PARAM = 'q'


@dataclass
class SearchBarConfig:
    minimum_chars: int = MINIMUM_CHARS
    debounce_ms: int = DEBOUNCE_MS
    hint_text: str = HINT_TEXT
    cancellation_text: str = CANCELLATION_TEXT
    empty_text: str = EMPTY_TEXT
    error_text: str = ERROR_TEXT
    suggestions: list[Any] = field(default_factory=list)

    def validate(self) -> 'SearchBarConfig':
        if int(self.minimum_chars) < 0:
            raise ConfigError(
                f'minimum_chars must be >= 0 (got {self.minimum_chars})',
                option='minimum_chars',
            )
        if int(self.debounce_ms) < 0:
            raise ConfigError(
                f'debounce_ms must be >= 0 (got {self.debounce_ms})',
                option='debounce_ms',
            )
        return self

    @classmethod
    def from_mapping(cls, options: dict[str, Any] | None) -> 'SearchBarConfig':
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in (options or {}).items() if key in known}
        if 'suggestions' in values:
            values['suggestions'] = list(values['suggestions'] or [])
        return cls(**values).validate()
