# Copyright (C) 2024 videogen authors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 of the License.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

import logging
from typing import Any, Dict, Optional

from fastapi import Body, FastAPI, Query, Request, status
from fastapi.responses import JSONResponse

import videogen
from videogen.api.models import (
    DocumentResponse, ErrorResponse, FramesResponse, PropertiesResponse,
    SeekRequest, SkipRequest, StateResponse, TimelineResponse, VersionResponse
)
from videogen.config.settings import get_log_level
from videogen.core.editor import EditorSession
from videogen.core.errors import EmptyKeyframeList, InvalidDuration, MalformedDocument
from videogen.models.document import ProjectDocument
from videogen.utils.format_utils import format_status_line, format_time_overlay
from videogen.utils.timeline_utils import timeline_layout


log = logging.getLogger(__name__)
log.setLevel(get_log_level())
logging.basicConfig(
    format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)

API_PREFIX = "/videogen_api"

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid duration, or properties requested from a document with no keyframes"},
}


def _state_response(session: EditorSession) -> StateResponse:
    snapshot = session.snapshot()
    return StateResponse(
        snapshot=snapshot,
        overlay=format_time_overlay(snapshot.current_time),
        status_line=(
            format_status_line(snapshot.current_time, snapshot.properties)
            if snapshot.properties is not None else None
        ),
    )


def _error_body(e: Exception) -> Dict[str, Any]:
    return ErrorResponse(detail=str(e), error_type=type(e).__name__).model_dump()


# Control surface for the preview engine.
# All routes act on one shared EditorSession; the session's lock linearizes
# them with the playback scheduler thread.
def editor_api(app: FastAPI, session: EditorSession):

    @app.exception_handler(EmptyKeyframeList)
    async def empty_keyframes_handler(request: Request, exc: EmptyKeyframeList):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_error_body(exc))

    @app.exception_handler(InvalidDuration)
    async def invalid_duration_handler(request: Request, exc: InvalidDuration):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_error_body(exc))

    @app.exception_handler(MalformedDocument)
    async def malformed_document_handler(request: Request, exc: MalformedDocument):
        return JSONResponse(status_code=422, content=_error_body(exc))

    @app.get(
        API_PREFIX + "/state",
        response_model=StateResponse,
        tags=["Playback"],
        summary="Current playback time, state and character properties",
    )
    async def get_state():
        return _state_response(session)

    @app.post(API_PREFIX + "/play", response_model=StateResponse, tags=["Playback"],
              summary="Start playback")
    async def play():
        session.play()
        log.info(f"Play requested at {session.current_time:.2f}s")
        return _state_response(session)

    @app.post(API_PREFIX + "/pause", response_model=StateResponse, tags=["Playback"],
              summary="Pause playback")
    async def pause():
        session.pause()
        log.info(f"Pause requested at {session.current_time:.2f}s")
        return _state_response(session)

    @app.post(API_PREFIX + "/toggle", response_model=StateResponse, tags=["Playback"],
              summary="Play if paused, pause if playing")
    async def toggle():
        session.toggle()
        return _state_response(session)

    @app.post(API_PREFIX + "/reset", response_model=StateResponse, tags=["Playback"],
              summary="Return to the start of the project")
    async def reset():
        session.reset()
        return _state_response(session)

    @app.post(API_PREFIX + "/seek", response_model=StateResponse, tags=["Playback"],
              summary="Jump to an absolute time")
    async def seek(request: SeekRequest):
        session.seek(request.time)
        return _state_response(session)

    @app.post(API_PREFIX + "/skip", response_model=StateResponse, tags=["Playback"],
              summary="Move relative to the current time")
    async def skip(request: SkipRequest):
        session.skip(request.delta)
        return _state_response(session)

    @app.get(
        API_PREFIX + "/properties",
        response_model=PropertiesResponse,
        tags=["Animation"],
        summary="Interpolated character properties at a time",
        responses=_ERROR_RESPONSES,
    )
    async def get_properties(time: Optional[float] = Query(default=None, description="Seconds; current time if omitted")):
        query_time = session.current_time if time is None else time
        return PropertiesResponse(time=query_time, properties=session.properties(query_time))

    @app.get(
        API_PREFIX + "/frames",
        response_model=FramesResponse,
        tags=["Animation"],
        summary="Properties for every output frame of the project",
        responses=_ERROR_RESPONSES,
    )
    async def get_frames(fps: Optional[float] = Query(default=None, gt=0, description="Defaults to the project fps")):
        frames = session.bake(fps)
        return FramesResponse(
            fps=fps or session.document.project.fps,
            frame_count=len(frames),
            frames=frames.reset_index().to_dict(orient="records"),
        )

    @app.get(
        API_PREFIX + "/timeline",
        response_model=TimelineResponse,
        tags=["Animation"],
        summary="Ruler marks, keyframe markers, clip blocks and playhead",
    )
    async def get_timeline():
        with session.lock:
            document = session.document
            current_time = session.current_time
        return timeline_layout(document.keyframes, document.timeline.clips, document.duration, current_time)

    @app.get(API_PREFIX + "/document", response_model=ProjectDocument, tags=["Document"],
             summary="The active project document")
    async def get_document():
        return session.document

    @app.put(
        API_PREFIX + "/document",
        response_model=DocumentResponse,
        tags=["Document"],
        summary="Replace the project document",
        responses={
            200: {"description": "Document validated and applied"},
            400: {"model": ErrorResponse, "description": "Duration is not positive"},
            422: {"model": ErrorResponse, "description": "Document failed validation"},
        },
    )
    async def put_document(document: Dict[str, Any] = Body(...)):
        """Replace the whole document.

        The document is validated before anything changes; a rejected
        document leaves the current one and the playback state untouched.
        """
        applied = session.replace_document(document)
        return DocumentResponse(
            message="Document applied",
            name=applied.project.name,
            duration=applied.duration,
            keyframe_count=len(applied.keyframes),
        )

    @app.get(API_PREFIX + "/version", response_model=VersionResponse, tags=["Info"],
             summary="Package version")
    async def get_version():
        return VersionResponse(version=videogen.__version__)

    return app


def create_app(session: Optional[EditorSession] = None) -> FastAPI:
    """Build a standalone FastAPI app around ``session`` (a demo session by default)."""
    if session is None:
        session = EditorSession()
    app = FastAPI(title="videogen preview API", version=videogen.__version__)
    app.state.session = session
    editor_api(app, session)
    log.debug(f"Created preview API for {session!r}")
    return app
