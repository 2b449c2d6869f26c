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
"""In-process video provider for development and single-instance demos."""

from __future__ import annotations

import secrets
import time
import uuid
from typing import Any

from roombroker.kernel.exceptions import ProviderException


class LocalVideoProvider:
    """Issues random session, token, captions and archive identifiers without any network calls.

    Keeps track of active captions and of archives so that stopping an
    unknown or already stopped one fails the way a real platform would.
    """

    def __init__(self, api_key: str = "local") -> None:
        self._api_key = api_key
        self._active_captions: dict[str, str] = {}
        self._archives: dict[str, dict[str, Any]] = {}

    async def create_session(self) -> str:
        return f"local-session-{uuid.uuid4().hex}"

    def generate_token(self, session_id: str) -> dict[str, Any]:
        return {"token": secrets.token_urlsafe(32), "apiKey": self._api_key}

    async def enable_captions(self, session_id: str) -> str:
        captions_id = f"local-captions-{uuid.uuid4().hex}"
        self._active_captions[captions_id] = session_id
        return captions_id

    async def disable_captions(self, captions_id: str) -> str:
        if self._active_captions.pop(captions_id, None) is None:
            raise ProviderException(
                f"Failed to disable captions: unknown captions id '{captions_id}'",
                context={"captions_id": captions_id},
            )
        return "Captions stopped successfully"

    async def start_archive(self, room_name: str, session_id: str) -> dict[str, Any]:
        archive = {
            "id": f"local-archive-{uuid.uuid4().hex}",
            "name": room_name,
            "sessionId": session_id,
            "status": "started",
            "createdAt": int(time.time() * 1000),
        }
        self._archives[archive["id"]] = archive
        return dict(archive)

    async def stop_archive(self, archive_id: str) -> str:
        archive = self._archives.get(archive_id)
        if archive is None or archive["status"] != "started":
            raise ProviderException(
                f"Failed to stop archive: archive '{archive_id}' is not recording",
                context={"archive_id": archive_id},
            )
        archive["status"] = "stopped"
        return "Archive stopped successfully"

    async def list_archives(self, session_id: str) -> list[dict[str, Any]]:
        return [dict(a) for a in self._archives.values() if a["sessionId"] == session_id]

    @property
    def active_captions(self) -> dict[str, str]:
        """Active captions ids mapped to the session they belong to."""
        return dict(self._active_captions)
