# -*- coding: utf-8 -*-
"""
Supersedable wrapper around in-flight lookups.

Every started operation gets the next generation number. Only the operation
carrying the latest generation may deliver its outcome; anything older is
superseded. The wrapped future keeps running, its result is just ignored.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable


@dataclass(frozen=True)
class OperationHandle:
    generation: int
    future: asyncio.Future


class CancelableOperations:
    def __init__(self):
        self._generation = 0
        self._pending: OperationHandle | None = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def pending(self) -> OperationHandle | None:
        return self._pending

    def start(self, operation: Awaitable[Any]) -> OperationHandle:
        self._generation += 1
        handle = OperationHandle(self._generation, asyncio.ensure_future(operation))
        self._pending = handle
        return handle

    def cancel(self, handle: OperationHandle | None = None) -> None:
        target = handle if handle is not None else self._pending
        if target is None or target is not self._pending:
            return
        # Bumping the counter is enough; the future is left to finish.
        self._generation += 1
        self._pending = None

    def is_superseded(self, handle: OperationHandle) -> bool:
        return handle.generation != self._generation

    def settle(self, handle: OperationHandle) -> bool:
        """Release the pending slot; returns False if the handle was superseded."""
        if self.is_superseded(handle):
            return False
        self._pending = None
        return True
