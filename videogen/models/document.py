"""Pydantic models for the project document and engine outputs.

The project document is the JSON structure edited in the document panel. It
is validated here once, on load, so the interpolator and playback clock only
ever see well-formed data.
"""

import math
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    'Keyframe',
    'InterpolatedProperties',
    'Position',
    'Character',
    'Animation',
    'Clip',
    'Timeline',
    'ProjectInfo',
    'ProjectDocument',
    'PlaybackSnapshot',
]


class InterpolatedProperties(BaseModel):
    """Character properties at one point in time."""
    model_config = ConfigDict(frozen=True)

    x: float = Field(description="Horizontal position (percent of frame width)")
    y: float = Field(description="Vertical position (percent of frame height)")
    scale: float = Field(description="Uniform scale multiplier")
    rotation: float = Field(description="Rotation in degrees")


class Keyframe(BaseModel):
    """A timestamped set of target character properties."""
    model_config = ConfigDict(frozen=True, extra='ignore')

    time: float = Field(ge=0.0, description="Keyframe time in seconds")
    x: float = Field(description="Horizontal position (percent)")
    y: float = Field(description="Vertical position (percent)")
    scale: float = Field(default=1.0, gt=0.0, description="Scale multiplier")
    rotation: float = Field(default=0.0, description="Rotation in degrees, unbounded")

    def properties(self) -> InterpolatedProperties:
        return InterpolatedProperties(x=self.x, y=self.y, scale=self.scale, rotation=self.rotation)


class Position(BaseModel):
    model_config = ConfigDict(frozen=True, extra='ignore')

    x: float = 50.0
    y: float = 50.0


class Character(BaseModel):
    """Character definition and its keyframes."""
    model_config = ConfigDict(frozen=True, extra='ignore')

    type: str = "boy"
    position: Position = Field(default_factory=Position)
    scale: float = Field(default=1.0, gt=0.0)
    # May be empty; interpolating an empty list raises EmptyKeyframeList
    animations: Tuple[Keyframe, ...] = Field(
        default=(),
        description="Animation keyframes in document order"
    )


class Animation(BaseModel):
    model_config = ConfigDict(frozen=True, extra='ignore')

    character: Character


class Clip(BaseModel):
    """A source video placed on the timeline."""
    model_config = ConfigDict(frozen=True, extra='ignore')

    id: int
    start: float = Field(ge=0.0)
    end: float = Field(ge=0.0)
    source: str = ""


class Timeline(BaseModel):
    model_config = ConfigDict(frozen=True, extra='ignore')

    clips: Tuple[Clip, ...] = ()


class ProjectInfo(BaseModel):
    """Project-wide settings."""
    model_config = ConfigDict(frozen=True, extra='ignore')

    name: str = "Untitled"
    # Positivity is checked by ``load_document`` so it surfaces as InvalidDuration
    duration: float = Field(description="Loop length in seconds")
    resolution: str = "1920x1080"
    fps: int = Field(default=30, gt=0)

    @field_validator('resolution')
    @classmethod
    def _check_resolution(cls, value: str) -> str:
        width, sep, height = value.lower().partition('x')
        if not sep or not width.strip().isdigit() or not height.strip().isdigit():
            raise ValueError(f"resolution must look like 'WIDTHxHEIGHT', got {value!r}")
        return value

    @property
    def has_valid_duration(self) -> bool:
        return math.isfinite(self.duration) and self.duration > 0


class ProjectDocument(BaseModel):
    """The full editable project: settings, clips and character animation."""
    model_config = ConfigDict(frozen=True, extra='ignore')

    project: ProjectInfo
    timeline: Timeline = Field(default_factory=Timeline)
    animation: Animation

    @property
    def keyframes(self) -> Tuple[Keyframe, ...]:
        return self.animation.character.animations

    @property
    def duration(self) -> float:
        return self.project.duration


class PlaybackSnapshot(BaseModel):
    """State handed to the rendering layer once per tick."""
    model_config = ConfigDict(frozen=True)

    current_time: float
    is_playing: bool
    duration: float
    # None when the document has no keyframes
    properties: Optional[InterpolatedProperties] = None
