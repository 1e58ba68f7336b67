# -*- coding: utf-8 -*-
"""
HTTP-backed lookup function for the search session.
"""

from __future__ import annotations

from typing import Any

import httpx

from searchbar.config import HTTP_QUERY_PARAM, HTTP_SEARCH_PATH, HTTP_TIMEOUT_SECONDS
from searchbar.errors import ApiError


class HttpSearchLookup:
    def __init__(
        self,
        base_url: str,
        *,
        path: str = HTTP_SEARCH_PATH,
        query_param: str = HTTP_QUERY_PARAM,
        results_key: str = 'results',
        limit: int | None = None,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.path = path
        self.query_param = query_param
        self.results_key = results_key
        self.limit = limit
        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> 'HttpSearchLookup':
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __call__(self, text: str) -> list[Any]:
        params: dict[str, Any] = {self.query_param: text}
        if self.limit is not None:
            params['limit'] = max(1, int(self.limit))
        response = await self._client.get(self.path, params=params)
        content_type = response.headers.get('content-type', '')
        payload: Any = {}
        if 'application/json' in content_type:
            payload = response.json()

        if response.status_code >= 400:
            message = 'Request failed'
            error_code = ''
            if isinstance(payload, dict):
                message = str(payload.get('error') or payload.get('message') or message)
                error_code = str(payload.get('error_code') or '')
            raise ApiError(message, status_code=response.status_code, error_code=error_code)

        if isinstance(payload, list):
            return payload
        if isinstance(payload, dict):
            results = payload.get(self.results_key)
            return list(results) if isinstance(results, list) else []
        return []
