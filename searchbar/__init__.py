# -*- coding: utf-8 -*-
"""
Search-state orchestration for desktop search bars.
"""

from searchbar.app_controller import SearchBarController
from searchbar.config import SearchBarConfig
from searchbar.errors import ApiError, ConfigError, SearchBarError
from searchbar.services.listener import CallbackListener, NullListener, RecordingListener, SearchListener
from searchbar.services.search_session import SearchStatus

__all__ = [
    'ApiError',
    'CallbackListener',
    'ConfigError',
    'NullListener',
    'RecordingListener',
    'SearchBarConfig',
    'SearchBarController',
    'SearchBarError',
    'SearchListener',
    'SearchStatus',
]
