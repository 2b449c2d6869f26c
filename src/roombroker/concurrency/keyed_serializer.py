# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Per-key serialization of async calls."""

from __future__ import annotations

import asyncio
import functools
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import structlog

T = TypeVar("T")

logger = structlog.get_logger(__name__)


class _Slot:
    __slots__ = ("holders", "lock")

    def __init__(self) -> None:
        self.lock = asyncio.Lock()
        self.holders = 0


class KeyedSerializer:
    """Runs calls that share a key one at a time, in arrival order.

    Calls with different keys never wait on each other. Each key owns an
    ``asyncio.Lock`` (which hands ownership to waiters first-in, first-out)
    for as long as at least one call for that key is outstanding; the entry
    is dropped afterwards, so a later call for the same key starts fresh.

    A call that raises releases the key like any other, so the next queued
    call still runs. Cancelling a waiting call removes it from the queue.
    """

    def __init__(self) -> None:
        self._slots: dict[str, _Slot] = {}

    def __len__(self) -> int:
        """Number of keys with at least one outstanding call."""
        return len(self._slots)

    def in_flight(self, key: str) -> int:
        """Outstanding calls for *key*, running or waiting."""
        slot = self._slots.get(key)
        return slot.holders if slot is not None else 0

    async def run(
        self,
        key: str,
        fn: Callable[..., Awaitable[T]],
        *args: Any,
        **kwargs: Any,
    ) -> T:
        """Await ``fn(key, *args, **kwargs)`` once every earlier call for *key* has finished."""
        slot = self._slots.get(key)
        if slot is None:
            slot = self._slots[key] = _Slot()
        slot.holders += 1
        if slot.holders > 1:
            logger.debug("keyed_call_queued", key=key, position=slot.holders - 1)
        try:
            async with slot.lock:
                return await fn(key, *args, **kwargs)
        finally:
            slot.holders -= 1
            if slot.holders == 0:
                del self._slots[key]

    def wrap(self, fn: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        """Return *fn* serialized on its first positional argument."""

        @functools.wraps(fn)
        async def wrapper(key: str, *args: Any, **kwargs: Any) -> T:
            return await self.run(key, fn, *args, **kwargs)

        return wrapper


def serialized_per_key(
    serializer: KeyedSerializer,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Decorator form of :meth:`KeyedSerializer.wrap`.

    The decorated coroutine function must take the key as its first
    positional argument.

    Args:
        serializer: The KeyedSerializer instance that tracks in-flight keys.
    """

    def decorator(fn: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        return serializer.wrap(fn)

    return decorator
