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
"""Typed configuration sections bound from :class:`~roombroker.core.config.Config`."""

from __future__ import annotations

from datetime import timedelta
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from roombroker.core.config import config_properties

FOUR_HOURS = timedelta(hours=4)

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@config_properties(prefix="roombroker.storage")
class StorageProperties(BaseModel):
    """Key-value store selection (roombroker.storage.*)."""

    backend: Literal["memory", "redis"] = "memory"
    redis_url: str = "redis://localhost:6379/0"
    ttl_seconds: int = Field(default=int(FOUR_HOURS.total_seconds()), gt=0)
    key_prefix: str = "roombroker"

    @property
    def ttl(self) -> timedelta:
        return timedelta(seconds=self.ttl_seconds)


@config_properties(prefix="roombroker.logging")
class LoggingProperties(BaseModel):
    """Log output (roombroker.logging.*).

    ``level`` maps ``root`` and any logger name (``roombroker.storage``) to
    a level name.
    """

    format: Literal["console", "json"] = "console"
    level: dict[str, str] = Field(default_factory=lambda: {"root": "INFO"})

    @field_validator("format", mode="before")
    @classmethod
    def _lowercase_format(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value

    @field_validator("level")
    @classmethod
    def _known_levels(cls, value: dict[str, str]) -> dict[str, str]:
        levels = {name: level.upper() for name, level in value.items()}
        unknown = sorted({level for level in levels.values() if level not in _LOG_LEVELS})
        if unknown:
            raise ValueError(f"unknown log level(s): {', '.join(unknown)}")
        return levels

    @property
    def root_level(self) -> str:
        return self.level.get("root", "INFO")

    @property
    def module_levels(self) -> dict[str, str]:
        return {name: level for name, level in self.level.items() if name != "root"}


@config_properties(prefix="roombroker.server")
class ServerProperties(BaseModel):
    """HTTP listener (roombroker.server.*)."""

    host: str = "0.0.0.0"
    port: int = Field(default=3345, ge=1, le=65535)
