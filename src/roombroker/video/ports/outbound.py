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
"""Video provider protocol — the boundary to the external video platform."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class VideoProvider(Protocol):
    """Session, token, captions and archive calls delegated to the video platform.

    Archives are returned as plain dicts with at least ``id``, ``name``,
    ``sessionId``, ``status`` and ``createdAt`` keys.

    Implementations raise :class:`~roombroker.kernel.exceptions.ProviderException`
    when the platform call fails.
    """

    async def create_session(self) -> str: ...

    def generate_token(self, session_id: str) -> dict[str, Any]: ...

    async def enable_captions(self, session_id: str) -> str: ...

    async def disable_captions(self, captions_id: str) -> str: ...

    async def start_archive(self, room_name: str, session_id: str) -> dict[str, Any]: ...

    async def stop_archive(self, archive_id: str) -> str: ...

    async def list_archives(self, session_id: str) -> list[dict[str, Any]]: ...
