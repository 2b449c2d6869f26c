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
"""HTTP routes for sessions and captions."""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from roombroker.service import RoomService
from roombroker.sessions.models import CaptionsState


def _service(request: Request) -> RoomService:
    return request.app.state.room_service


def _captions_body(state: CaptionsState) -> dict:
    return {"captionsId": state.captions_id, "captionsUserCount": state.user_count}


async def get_session(request: Request) -> JSONResponse:
    room_name = request.path_params["room"]
    service = _service(request)
    session_id = await service.get_or_create_session(room_name)
    credentials = service.generate_token(session_id)
    return JSONResponse({"sessionId": session_id, **credentials})


async def enable_captions(request: Request) -> JSONResponse:
    state = await _service(request).enable_captions(request.path_params["room"])
    return JSONResponse(_captions_body(state))


async def disable_captions(request: Request) -> JSONResponse:
    state = await _service(request).disable_captions(request.path_params["room"])
    return JSONResponse(_captions_body(state))


async def start_archive(request: Request) -> JSONResponse:
    archive = await _service(request).start_archive(request.path_params["room"])
    return JSONResponse({"archiveId": archive["id"]})


async def stop_archive(request: Request) -> JSONResponse:
    result = await _service(request).stop_archive(request.path_params["archive_id"])
    return JSONResponse({"archiveId": request.path_params["archive_id"], "result": result})


async def list_archives(request: Request) -> JSONResponse:
    archives = await _service(request).list_archives(request.path_params["room"])
    return JSONResponse({"archives": archives})


async def health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "UP"})


routes = [
    Route("/health", health, methods=["GET"]),
    Route("/session/{room}", get_session, methods=["GET"]),
    Route("/session/{room}/enableCaptions", enable_captions, methods=["POST"]),
    Route("/session/{room}/disableCaptions", disable_captions, methods=["POST"]),
    Route("/session/{room}/startArchive", start_archive, methods=["POST"]),
    Route("/session/{room}/archives", list_archives, methods=["GET"]),
    Route("/session/{room}/{archive_id}/stopArchive", stop_archive, methods=["POST"]),
]
