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
"""Exception handler — maps the roombroker exception hierarchy to JSON error responses."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import structlog
from starlette.requests import Request
from starlette.responses import JSONResponse

from roombroker.kernel.exceptions import (
    BusinessException,
    ExternalServiceException,
    InfrastructureException,
    ProviderException,
    RoomBrokerException,
    RoomNotFoundException,
    StoreException,
)

logger = structlog.get_logger("roombroker.web")

# Exception -> HTTP status code mapping (most specific first)
_STATUS_MAP: dict[type, int] = {
    RoomNotFoundException: 404,
    ProviderException: 502,
    ExternalServiceException: 502,
    StoreException: 503,
    BusinessException: 400,
    InfrastructureException: 503,
}


def status_for(exc: Exception) -> int:
    for exc_type, status in _STATUS_MAP.items():
        if isinstance(exc, exc_type):
            return status
    return 500


async def roombroker_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a RoomBrokerException as ``{"error": {...}}`` with the mapped status."""
    status = status_for(exc)
    code = getattr(exc, "code", None) if isinstance(exc, RoomBrokerException) else None
    if status >= 500:
        logger.error("request_failed", path=request.url.path, status=status, error=str(exc), code=code)

    body: dict[str, Any] = {
        "error": {
            "message": str(exc),
            "code": code or type(exc).__name__,
            "status": status,
            "path": request.url.path,
            "timestamp": datetime.now(UTC).isoformat(),
        }
    }
    return JSONResponse(body, status_code=status)
