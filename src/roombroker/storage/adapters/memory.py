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
"""In-process key-value store."""

from __future__ import annotations

import asyncio
from datetime import timedelta
from typing import Any


class InMemoryKeyValueStore:
    """Key-value store held in a dict owned by the instance.

    Entries never expire; they live as long as the store object. Suitable
    for single-instance deployments and tests.
    """

    def __init__(self) -> None:
        self._store: dict[str, Any] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Any | None:
        return self._store.get(key)

    async def set(self, key: str, value: Any) -> None:
        self._store[key] = value

    async def delete(self, key: str) -> None:
        self._store.pop(key, None)

    async def extend_expiry(self, key: str, ttl: timedelta) -> None:
        """No-op: in-process entries are bounded by the process lifetime only."""

    async def increment(self, key: str, amount: int = 1, *, floor: int | None = None) -> int:
        """Add *amount* to the counter at *key* (absent counts as 0) and return the result."""
        async with self._lock:
            value = int(self._store.get(key) or 0) + amount
            if floor is not None and value < floor:
                value = floor
            self._store[key] = value
            return value

    def __len__(self) -> int:
        return len(self._store)

    async def clear(self) -> None:
        """Remove all entries."""
        self._store.clear()
