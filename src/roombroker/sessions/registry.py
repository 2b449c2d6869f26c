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
"""Idempotent get-or-create of the video session for a room."""

from __future__ import annotations

import structlog

from roombroker.concurrency.keyed_serializer import KeyedSerializer
from roombroker.sessions.models import SessionRecord
from roombroker.storage.ports.outbound import KeyValueStore
from roombroker.video.ports.outbound import VideoProvider

logger = structlog.get_logger(__name__)


def session_key(room_name: str) -> str:
    return f"sessions:{room_name}"


class SessionRegistry:
    """Maps room names to provider sessions, creating each one at most once.

    ``get_or_create_session`` is serialized per room name, so concurrent
    first callers for a room queue behind the one that creates the session
    and then read the record it persisted. Rooms never wait on each other.

    Within a process this is race-free. Across processes sharing a Redis
    store it relies on read-before-create only.
    """

    def __init__(
        self,
        store: KeyValueStore,
        provider: VideoProvider,
        serializer: KeyedSerializer | None = None,
    ) -> None:
        self._store = store
        self._provider = provider
        self._serializer = serializer if serializer is not None else KeyedSerializer()
        self.get_or_create_session = self._serializer.wrap(self._get_or_create_session)

    async def get_session(self, room_name: str) -> str | None:
        """Session id for *room_name*, or ``None`` if the room has none yet."""
        record = SessionRecord.from_value(await self._store.get(session_key(room_name)))
        return record.session_id if record is not None else None

    async def _get_or_create_session(self, room_name: str) -> str:
        session_id = await self.get_session(room_name)
        if session_id is not None:
            return session_id

        # A provider failure propagates before anything is written.
        session_id = await self._provider.create_session()
        await self._store.set(session_key(room_name), SessionRecord(session_id).to_dict())
        logger.info("session_created", room=room_name, session_id=session_id)
        return session_id
