# -*- coding: utf-8 -*-
"""
Search session: issues lookups and keeps the last issued one authoritative.
"""

from __future__ import annotations

import asyncio
import enum
import inspect
import logging
from typing import Any, Awaitable, Callable, Sequence

from searchbar.services.list_pipeline import ListPipeline
from searchbar.services.listener import NullListener, SearchListener
from searchbar.services.operations import CancelableOperations, OperationHandle

logger = logging.getLogger(__name__)

LookupFn = Callable[[str], Awaitable[Sequence[Any]]]


class SearchStatus(enum.Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    READY = 'ready'
    FAILED = 'failed'


class SearchSession:
    def __init__(self, listener: SearchListener | None = None, pipeline: ListPipeline | None = None):
        self._listener: SearchListener = listener if listener is not None else NullListener()
        self.pipeline = pipeline if pipeline is not None else ListPipeline(self._listener)
        self.pipeline.set_listener(self._listener)
        self._operations = CancelableOperations()
        self._tasks: set[asyncio.Task] = set()
        self._last_query: str | None = None
        self._last_lookup: LookupFn | None = None
        self.status = SearchStatus.IDLE
        self.last_error: BaseException | None = None

    def set_listener(self, listener: SearchListener | None) -> None:
        self._listener = listener if listener is not None else NullListener()
        self.pipeline.set_listener(self._listener)

    @property
    def last_query(self) -> str | None:
        return self._last_query

    @property
    def operations(self) -> CancelableOperations:
        return self._operations

    def search(self, text: str, lookup: LookupFn) -> asyncio.Task:
        loop = asyncio.get_running_loop()
        self.status = SearchStatus.LOADING
        self._listener.on_loading()
        try:
            operation = lookup(text)
        except Exception as exc:
            operation = self._failed(exc)
        if not inspect.isawaitable(operation):
            operation = self._resolved(operation)
        handle = self._operations.start(operation)
        logger.debug(f'Search #{handle.generation} issued for {text!r}')
        task = loop.create_task(self._complete(handle, text, lookup))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    @staticmethod
    async def _failed(exc: Exception) -> Sequence[Any]:
        raise exc

    @staticmethod
    async def _resolved(items: Any) -> Sequence[Any]:
        return items

    async def _complete(self, handle: OperationHandle, text: str, lookup: LookupFn) -> None:
        # wait() leaves the lookup alone if this task is cancelled; that
        # CancelledError propagates, while a cancelled lookup is a failure.
        future = handle.future
        await asyncio.wait({future})
        if future.cancelled():
            error: BaseException | None = asyncio.CancelledError()
        else:
            error = future.exception()

        if error is not None:
            if not self._operations.settle(handle):
                logger.debug(f'Search #{handle.generation} failed after being superseded: {error!r}')
                return
            logger.warning(f'Search for {text!r} failed: {error!r}')
            self.status = SearchStatus.FAILED
            self.last_error = error
            self._listener.on_error(error)
            return

        items = future.result()
        if not self._operations.settle(handle):
            logger.debug(f'Search #{handle.generation} superseded, dropping {len(items or [])} items')
            return
        self._last_query = text
        self._last_lookup = lookup
        self.status = SearchStatus.READY
        self.last_error = None
        self.pipeline.reset(items or ())

    def replay_last_search(self) -> asyncio.Task | None:
        if self._last_lookup is None or self._last_query is None:
            return None
        return self.search(self._last_query, self._last_lookup)

    def cancel(self) -> None:
        if self._operations.pending is None:
            return
        self._operations.cancel()
        if self.status is SearchStatus.LOADING:
            self.status = SearchStatus.IDLE

    def clear(self) -> None:
        self._operations.cancel()
        self.status = SearchStatus.IDLE
        self.last_error = None
        self.pipeline.reset(())
