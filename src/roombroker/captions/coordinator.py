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
"""Reference counting of captions users per room."""

from __future__ import annotations

import structlog

from roombroker.kernel.exceptions import RoomNotFoundException
from roombroker.sessions.models import CaptionsState
from roombroker.sessions.registry import SessionRegistry
from roombroker.storage.ports.outbound import KeyValueStore

logger = structlog.get_logger(__name__)


def captions_id_key(room_name: str) -> str:
    return f"captions:{room_name}:id"


def captions_users_key(room_name: str) -> str:
    return f"captions:{room_name}:users"


class CaptionsCoordinator:
    """Turns per-user captions requests into a single room-wide toggle.

    ``increment_users`` returning 1 means the caller is the first user and
    must enable captions on the provider; ``decrement_users`` returning 0
    means the caller released the last use and must disable them. The count
    never drops below zero.

    Counter updates use the store's atomic :meth:`~KeyValueStore.increment`,
    so concurrent callers (including other instances on a shared Redis)
    never read the same stale count.
    """

    def __init__(self, store: KeyValueStore, sessions: SessionRegistry) -> None:
        self._store = store
        self._sessions = sessions

    async def _require_session(self, room_name: str, action: str) -> str:
        session_id = await self._sessions.get_session(room_name)
        if session_id is None:
            raise RoomNotFoundException(room_name, action)
        return session_id

    async def increment_users(self, room_name: str) -> int:
        """Register one more captions user and return the new count."""
        await self._require_session(room_name, "add captions user")
        count = await self._store.increment(captions_users_key(room_name))
        logger.debug("captions_users_incremented", room=room_name, count=count)
        return count

    async def decrement_users(self, room_name: str) -> int:
        """Release one captions user and return the new count, floored at 0."""
        await self._require_session(room_name, "remove captions user")
        count = await self._store.increment(captions_users_key(room_name), -1, floor=0)
        logger.debug("captions_users_decremented", room=room_name, count=count)
        return count

    async def get_captions_id(self, room_name: str) -> str | None:
        value = await self._store.get(captions_id_key(room_name))
        return str(value) if value else None

    async def set_captions_id(self, room_name: str, captions_id: str) -> None:
        await self._require_session(room_name, "set captionsId")
        await self._store.set(captions_id_key(room_name), captions_id)

    async def clear_captions_id(self, room_name: str) -> None:
        await self._store.delete(captions_id_key(room_name))

    async def get_state(self, room_name: str) -> CaptionsState:
        captions_id = await self.get_captions_id(room_name)
        count = await self._store.get(captions_users_key(room_name))
        return CaptionsState(captions_id=captions_id, user_count=int(count or 0))
