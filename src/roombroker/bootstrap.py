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
"""Wiring: one store, one provider and one serializer per concern per process."""

from __future__ import annotations

from starlette.applications import Starlette

from roombroker.captions.coordinator import CaptionsCoordinator
from roombroker.concurrency.keyed_serializer import KeyedSerializer
from roombroker.core.config import Config
from roombroker.core.properties import StorageProperties
from roombroker.service import RoomService
from roombroker.sessions.registry import SessionRegistry
from roombroker.storage.adapters.memory import InMemoryKeyValueStore
from roombroker.storage.ports.outbound import KeyValueStore
from roombroker.video.adapters.local import LocalVideoProvider
from roombroker.video.ports.outbound import VideoProvider
from roombroker.web.app import create_app


def build_store(config: Config) -> KeyValueStore:
    """Create the key-value store selected by ``roombroker.storage.backend``."""
    props = config.bind(StorageProperties)

    if props.backend == "redis":
        import redis.asyncio as aioredis

        from roombroker.storage.adapters.redis import RedisKeyValueStore

        client = aioredis.from_url(props.redis_url)
        return RedisKeyValueStore(client, ttl=props.ttl, key_prefix=props.key_prefix)

    return InMemoryKeyValueStore()


def build_room_service(store: KeyValueStore, provider: VideoProvider) -> RoomService:
    registry = SessionRegistry(store, provider, KeyedSerializer())
    captions = CaptionsCoordinator(store, registry)
    return RoomService(registry, captions, provider, captions_serializer=KeyedSerializer())


def create_application(
    config: Config | None = None,
    store: KeyValueStore | None = None,
    provider: VideoProvider | None = None,
) -> Starlette:
    """Build the full HTTP application from configuration.

    *store* and *provider* override what the configuration would select.
    """
    config = config or Config.defaults()
    store = store if store is not None else build_store(config)
    provider = provider if provider is not None else LocalVideoProvider()
    return create_app(build_room_service(store, provider), store=store)
