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
"""RoomService — the operations exposed to the route layer."""

from __future__ import annotations

from typing import Any

import structlog

from roombroker.captions.coordinator import CaptionsCoordinator
from roombroker.concurrency.keyed_serializer import KeyedSerializer
from roombroker.kernel.exceptions import RoomNotFoundException
from roombroker.sessions.models import CaptionsState
from roombroker.sessions.registry import SessionRegistry
from roombroker.video.ports.outbound import VideoProvider

logger = structlog.get_logger(__name__)


class RoomService:
    """Composes the session registry, captions coordinator and video provider.

    The captions flows hold a per-room slot of *captions_serializer* for the
    whole count-then-provider sequence, so within a process a second user
    never sees a count of 2 before the first user's captions id is stored.
    Pass a serializer distinct from the registry's so that session lookups
    never queue behind a slow provider call.
    """

    def __init__(
        self,
        sessions: SessionRegistry,
        captions: CaptionsCoordinator,
        provider: VideoProvider,
        captions_serializer: KeyedSerializer | None = None,
    ) -> None:
        self._sessions = sessions
        self._captions = captions
        self._provider = provider
        self._captions_serializer = captions_serializer if captions_serializer is not None else KeyedSerializer()

    async def get_or_create_session(self, room_name: str) -> str:
        return await self._sessions.get_or_create_session(room_name)

    def generate_token(self, session_id: str) -> dict[str, Any]:
        return self._provider.generate_token(session_id)

    async def increment_captions_users(self, room_name: str) -> int:
        return await self._captions.increment_users(room_name)

    async def decrement_captions_users(self, room_name: str) -> int:
        return await self._captions.decrement_users(room_name)

    async def get_captions_id(self, room_name: str) -> str | None:
        return await self._captions.get_captions_id(room_name)

    async def set_captions_id(self, room_name: str, captions_id: str) -> None:
        await self._captions.set_captions_id(room_name, captions_id)

    async def _require_session(self, room_name: str, action: str) -> str:
        session_id = await self._sessions.get_session(room_name)
        if session_id is None:
            raise RoomNotFoundException(room_name, action)
        return session_id

    # ------------------------------------------------------------------
    # Captions
    # ------------------------------------------------------------------

    async def enable_captions(self, room_name: str) -> CaptionsState:
        """Join the room's captions, starting them on the provider for the first user.

        If starting fails at any point, including cancellation, the user
        count is rolled back and captions the provider already started are
        stopped again, so the next caller retries the first-user transition.

        Raises:
            RoomNotFoundException: the room has no session.
            ProviderException: the provider failed.
            StoreException: the store failed.
        """
        return await self._captions_serializer.run(room_name, self._enable_captions)

    async def disable_captions(self, room_name: str) -> CaptionsState:
        """Leave the room's captions, stopping them on the provider for the last user.

        Raises:
            RoomNotFoundException: the room has no session.
            ProviderException: the provider failed; the user count is restored
                so the next caller retries.
        """
        return await self._captions_serializer.run(room_name, self._disable_captions)

    async def _enable_captions(self, room_name: str) -> CaptionsState:
        count = await self._captions.increment_users(room_name)
        if count == 1:
            await self._start_captions(room_name)
        return await self._captions.get_state(room_name)

    async def _start_captions(self, room_name: str) -> None:
        captions_id: str | None = None
        try:
            session_id = await self._require_session(room_name, "enable captions")
            captions_id = await self._provider.enable_captions(session_id)
            await self._captions.set_captions_id(room_name, captions_id)
        except BaseException:
            logger.warning("captions_enable_rolled_back", room=room_name, captions_id=captions_id)
            try:
                if captions_id is not None:
                    await self._provider.disable_captions(captions_id)
            finally:
                await self._captions.decrement_users(room_name)
            raise
        logger.info("captions_enabled", room=room_name, captions_id=captions_id)

    async def _disable_captions(self, room_name: str) -> CaptionsState:
        count = await self._captions.decrement_users(room_name)
        captions_id = await self._captions.get_captions_id(room_name)
        # A floored 0 -> 0 decrement finds no captions id and calls nothing.
        if count == 0 and captions_id is not None:
            try:
                await self._provider.disable_captions(captions_id)
            except BaseException:
                await self._captions.increment_users(room_name)
                raise
            await self._captions.clear_captions_id(room_name)
            logger.info("captions_disabled", room=room_name, captions_id=captions_id)
        return await self._captions.get_state(room_name)

    # ------------------------------------------------------------------
    # Archives
    # ------------------------------------------------------------------

    async def start_archive(self, room_name: str) -> dict[str, Any]:
        """Start recording the room's session; the archive is named after the room."""
        session_id = await self._require_session(room_name, "start archive")
        archive = await self._provider.start_archive(room_name, session_id)
        logger.info("archive_started", room=room_name, archive_id=archive["id"])
        return archive

    async def stop_archive(self, archive_id: str) -> str:
        result = await self._provider.stop_archive(archive_id)
        logger.info("archive_stopped", archive_id=archive_id)
        return result

    async def list_archives(self, room_name: str) -> list[dict[str, Any]]:
        session_id = await self._require_session(room_name, "list archives")
        return await self._provider.list_archives(session_id)
