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
"""Shared fixtures: a scripted video provider and wired core components."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from roombroker.captions.coordinator import CaptionsCoordinator
from roombroker.concurrency.keyed_serializer import KeyedSerializer
from roombroker.kernel.exceptions import ProviderException
from roombroker.service import RoomService
from roombroker.sessions.registry import SessionRegistry
from roombroker.storage.adapters.memory import InMemoryKeyValueStore


class ScriptedVideoProvider:
    """VideoProvider stub that hands out predictable ids and records every call.

    ``session_ids`` are returned in order (then ``session<N>``); queued
    ``*_errors`` are raised before anything is returned. Each call yields to
    the event loop once after picking its result, like a network round trip.
    """

    def __init__(self, session_ids: list[str] | None = None) -> None:
        self.session_ids = list(session_ids or [])
        self.create_calls = 0
        self.enable_calls: list[str] = []
        self.disable_calls: list[str] = []
        self.create_errors: list[Exception] = []
        self.enable_errors: list[Exception] = []
        self.disable_errors: list[Exception] = []
        self.hold_first_create: asyncio.Event | None = None
        self.hold_first_enable: asyncio.Event | None = None
        self.archives: dict[str, dict[str, Any]] = {}
        self.stopped_archives: list[str] = []

    async def create_session(self) -> str:
        self.create_calls += 1
        call = self.create_calls
        if call == 1 and self.hold_first_create is not None:
            await self.hold_first_create.wait()
        if self.create_errors:
            raise self.create_errors.pop(0)
        session_id = self.session_ids.pop(0) if self.session_ids else f"session{call}"
        await asyncio.sleep(0)
        return session_id

    def generate_token(self, session_id: str) -> dict[str, Any]:
        return {"token": f"token-{session_id}", "apiKey": "test-key"}

    async def enable_captions(self, session_id: str) -> str:
        self.enable_calls.append(session_id)
        if len(self.enable_calls) == 1 and self.hold_first_enable is not None:
            await self.hold_first_enable.wait()
        if self.enable_errors:
            raise self.enable_errors.pop(0)
        await asyncio.sleep(0)
        return f"captions{len(self.enable_calls)}"

    async def disable_captions(self, captions_id: str) -> str:
        self.disable_calls.append(captions_id)
        if self.disable_errors:
            raise self.disable_errors.pop(0)
        await asyncio.sleep(0)
        return "Captions stopped successfully"

    async def start_archive(self, room_name: str, session_id: str) -> dict[str, Any]:
        archive_id = f"archive{len(self.archives) + 1}"
        self.archives[archive_id] = {"id": archive_id, "name": room_name, "sessionId": session_id, "status": "started"}
        return dict(self.archives[archive_id])

    async def stop_archive(self, archive_id: str) -> str:
        if archive_id not in self.archives:
            raise ProviderException(f"Failed to stop archive: invalid archive '{archive_id}'")
        self.stopped_archives.append(archive_id)
        return "Archive stopped successfully"

    async def list_archives(self, session_id: str) -> list[dict[str, Any]]:
        return [dict(a) for a in self.archives.values() if a["sessionId"] == session_id]


@pytest.fixture
def provider() -> ScriptedVideoProvider:
    return ScriptedVideoProvider()


@pytest.fixture
def provider_error() -> ProviderException:
    return ProviderException("Failed to reach video platform")


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def registry(store: InMemoryKeyValueStore, provider: ScriptedVideoProvider) -> SessionRegistry:
    return SessionRegistry(store, provider, KeyedSerializer())


@pytest.fixture
def coordinator(store: InMemoryKeyValueStore, registry: SessionRegistry) -> CaptionsCoordinator:
    return CaptionsCoordinator(store, registry)


@pytest.fixture
def service(
    registry: SessionRegistry,
    coordinator: CaptionsCoordinator,
    provider: ScriptedVideoProvider,
) -> RoomService:
    return RoomService(registry, coordinator, provider)
