# -*- coding: utf-8 -*-
"""
Exception types raised by the search bar package.
"""

from __future__ import annotations


class SearchBarError(RuntimeError):
    pass


class ConfigError(SearchBarError):
    def __init__(self, message: str, *, option: str = ''):
        super().__init__(message)
        self.option = str(option or '')


class ApiError(SearchBarError):
    def __init__(self, message: str, *, status_code: int, error_code: str = ''):
        super().__init__(message)
        self.status_code = int(status_code)
        self.error_code = str(error_code or '')
