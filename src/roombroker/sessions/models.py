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
"""Room-scoped records persisted in the key-value store."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class SessionRecord:
    """The video session bound to a room; written once per room lifetime."""

    session_id: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_value(cls, value: Any) -> SessionRecord | None:
        """Rebuild a record from a stored value, or ``None`` when absent or malformed."""
        if isinstance(value, dict) and value.get("session_id"):
            return cls(session_id=str(value["session_id"]))
        return None


@dataclass(frozen=True)
class CaptionsState:
    """Captions bookkeeping for a room.

    ``captions_id`` is set while captions run on the provider;
    ``user_count`` is the number of participants that asked for them.
    """

    captions_id: str | None = None
    user_count: int = 0

    @property
    def enabled(self) -> bool:
        return self.captions_id is not None
