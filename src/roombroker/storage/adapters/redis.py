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
"""Redis-backed key-value store with sliding expiry."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable
from datetime import timedelta
from typing import Any, TypeVar

import structlog
from redis.exceptions import RedisError

from roombroker.core.properties import FOUR_HOURS
from roombroker.kernel.exceptions import StoreException

T = TypeVar("T")

logger = structlog.get_logger(__name__)

# INCRBY, then clamp to ARGV[2] without dropping the key's TTL.
_INCREMENT_WITH_FLOOR = """
local value = redis.call('INCRBY', KEYS[1], ARGV[1])
local floor = tonumber(ARGV[2])
if value < floor then
  redis.call('SET', KEYS[1], floor, 'KEEPTTL')
  value = floor
end
return value
"""


class RedisKeyValueStore:
    """Key-value store that delegates to a ``redis.asyncio.Redis``-like client.

    Values are JSON-serialized. Keys are namespaced as ``<prefix>:<key>``.
    Every write sets the TTL and every successful read or counter update
    schedules a background ``EXPIRE`` so that active rooms persist while
    idle ones are evicted by Redis. A failed refresh is logged and never
    fails the operation that triggered it.

    Transport errors surface as :class:`StoreException`; nothing is retried.
    """

    def __init__(
        self,
        client: Any,
        ttl: timedelta = FOUR_HOURS,
        key_prefix: str = "roombroker",
    ) -> None:
        self._client = client
        self._ttl = ttl
        self._key_prefix = key_prefix
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def _key(self, key: str) -> str:
        return f"{self._key_prefix}:{key}" if self._key_prefix else key

    async def _call(self, op: str, key: str, fn: Callable[[], Awaitable[T]]) -> T:
        try:
            return await fn()
        except RedisError as exc:
            raise StoreException(f"Redis {op} failed for key '{key}': {exc}", context={"key": key}) from exc

    async def get(self, key: str) -> Any | None:
        """Retrieve and deserialize a value, refreshing its expiry when present."""
        raw = await self._call("GET", key, lambda: self._client.get(self._key(key)))
        if raw is None:
            return None
        self._touch(key)
        try:
            return json.loads(raw)
        except (ValueError, TypeError):
            logger.warning("value_decode_failed", key=key)
            return None

    async def set(self, key: str, value: Any) -> None:
        """Serialize and store a value with the sliding TTL."""
        raw = json.dumps(value).encode()
        ex = int(self._ttl.total_seconds())
        await self._call("SET", key, lambda: self._client.set(self._key(key), raw, ex=ex))

    async def delete(self, key: str) -> None:
        await self._call("DEL", key, lambda: self._client.delete(self._key(key)))

    async def extend_expiry(self, key: str, ttl: timedelta) -> None:
        seconds = int(ttl.total_seconds())
        await self._call("EXPIRE", key, lambda: self._client.expire(self._key(key), seconds))

    async def increment(self, key: str, amount: int = 1, *, floor: int | None = None) -> int:
        """Atomically add *amount* to the counter at *key*.

        With a *floor*, the clamp runs server-side in the same script as the
        increment, so concurrent callers on other instances never observe a
        value below it.
        """
        redis_key = self._key(key)
        if floor is None:
            value = await self._call("INCRBY", key, lambda: self._client.incrby(redis_key, amount))
        else:
            value = await self._call(
                "EVAL",
                key,
                lambda: self._client.eval(_INCREMENT_WITH_FLOOR, 1, redis_key, amount, floor),
            )
        self._touch(key)
        return int(value)

    def _touch(self, key: str) -> None:
        task = asyncio.create_task(self._refresh(key))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _refresh(self, key: str) -> None:
        try:
            await self.extend_expiry(key, self._ttl)
        except Exception:
            logger.warning("expiry_refresh_failed", key=key, exc_info=True)

    async def drain(self) -> None:
        """Wait for scheduled expiry refreshes to finish."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def start(self) -> None:
        """Validate connectivity by pinging Redis."""
        await self._call("PING", "", lambda: self._client.ping())

    async def stop(self) -> None:
        """Flush pending refreshes and close the underlying connection."""
        try:
            await self.drain()
        finally:
            await self._client.aclose()
