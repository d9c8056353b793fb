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

from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional

from videogen.models.document import InterpolatedProperties, PlaybackSnapshot


class SeekRequest(BaseModel):
    """Jump to an absolute playback time (clamped to the project duration)."""
    model_config = ConfigDict(
        json_schema_extra={"example": {"time": 45.0}}
    )

    time: float = Field(allow_inf_nan=False, description="Target time in seconds")


class SkipRequest(BaseModel):
    """Move relative to the current playback time."""
    model_config = ConfigDict(
        json_schema_extra={"example": {"delta": -10}}
    )

    delta: float = Field(allow_inf_nan=False, description="Offset in seconds, negative to rewind")


class StateResponse(BaseModel):
    """Playback snapshot plus the readouts shown under the preview."""
    model_config = ConfigDict(frozen=True)

    snapshot: PlaybackSnapshot
    overlay: str = Field(description="Caption drawn over the preview")
    status_line: Optional[str] = Field(
        default=None,
        description="Footer readout of time and properties; None when the document has no keyframes"
    )


class PropertiesResponse(BaseModel):
    time: float = Field(description="Time the properties were evaluated at")
    properties: InterpolatedProperties


class KeyframeMarker(BaseModel):
    index: int
    time: float
    left: float = Field(description="Horizontal position in percent of duration")
    title: str


class ClipBlock(BaseModel):
    id: int
    source: str
    left: float = Field(description="Start position in percent of duration")
    width: float = Field(description="Width in percent of duration")
    top: int = Field(description="Vertical offset in pixels")


class TimelineResponse(BaseModel):
    duration: float
    markers: List[float] = Field(description="Times of labelled ruler marks")
    keyframes: List[KeyframeMarker]
    clips: List[ClipBlock]
    playhead: float = Field(description="Playhead position in percent of duration")


class FrameRecord(BaseModel):
    frame: int
    time: float
    x: float
    y: float
    scale: float
    rotation: float


class FramesResponse(BaseModel):
    fps: float
    frame_count: int
    frames: List[FrameRecord]


class DocumentResponse(BaseModel):
    message: str
    name: str
    duration: float
    keyframe_count: int


class ErrorResponse(BaseModel):
    """Standard error response."""
    detail: str = Field(description="Error message")
    error_type: Optional[str] = Field(default=None, description="Engine error class, if any")


class VersionResponse(BaseModel):
    version: str = Field(description="videogen package version")
