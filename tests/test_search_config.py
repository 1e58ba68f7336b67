# -*- coding: utf-8 -*-

from __future__ import annotations

import pytest

from searchbar.config import DEBOUNCE_MS, MINIMUM_CHARS, SearchBarConfig
from searchbar.errors import ConfigError, SearchBarError


def test_defaults_match_module_settings():
    config = SearchBarConfig()

    assert config.minimum_chars == MINIMUM_CHARS == 3
    assert config.debounce_ms == DEBOUNCE_MS == 500
    assert config.suggestions == []


def test_from_mapping_ignores_unknown_keys():
    config = SearchBarConfig.from_mapping({'minimum_chars': 2, 'suggestions': ('x',), 'theme': 'dark'})

    assert config.minimum_chars == 2
    assert config.suggestions == ['x']


@pytest.mark.parametrize('option', ['minimum_chars', 'debounce_ms'])
def test_negative_values_are_rejected(option):
    with pytest.raises(ConfigError) as excinfo:
        SearchBarConfig.from_mapping({option: -1})

    assert excinfo.value.option == option
    assert isinstance(excinfo.value, SearchBarError)
