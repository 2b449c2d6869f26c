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
"""Starlette application factory."""

from __future__ import annotations

import contextlib
from collections.abc import AsyncIterator

from starlette.applications import Starlette
from starlette.middleware import Middleware

from roombroker.kernel.exceptions import RoomBrokerException
from roombroker.service import RoomService
from roombroker.storage.adapters.redis import RedisKeyValueStore
from roombroker.storage.ports.outbound import KeyValueStore
from roombroker.web.errors import roombroker_exception_handler
from roombroker.web.middleware import RequestLoggingMiddleware
from roombroker.web.routes import routes


def create_app(
    room_service: RoomService,
    store: KeyValueStore | None = None,
    debug: bool = False,
) -> Starlette:
    """Create the HTTP application around an already-wired :class:`RoomService`.

    When *store* is a Redis store, its connection is checked on startup and
    closed on shutdown.
    """

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        if isinstance(store, RedisKeyValueStore):
            await store.start()
        try:
            yield
        finally:
            if isinstance(store, RedisKeyValueStore):
                await store.stop()

    app = Starlette(
        debug=debug,
        routes=routes,
        middleware=[Middleware(RequestLoggingMiddleware)],
        exception_handlers={RoomBrokerException: roombroker_exception_handler},
        lifespan=lifespan,
    )
    app.state.room_service = room_service
    return app
