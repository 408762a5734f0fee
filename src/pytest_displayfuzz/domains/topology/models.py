"""Domain models describing a display topology."""

from typing import Dict, Optional, Tuple
from enum import IntEnum
from pydantic import BaseModel, Field, ConfigDict


class DispChange(IntEnum):
    """Result codes of a display settings change (Win32 DISP_CHANGE_*)."""
    SUCCESSFUL = 0
    RESTART = 1
    FAILED = -1
    BADMODE = -2
    NOTUPDATED = -3
    BADFLAGS = -4
    BADPARAM = -5
    BADDUALVIEW = -6

    @property
    def restart_required(self) -> bool:
        return self is DispChange.RESTART


class Resolution(BaseModel):
    width: int = Field(gt=0)
    height: int = Field(gt=0)

    model_config = ConfigDict(frozen=True)

    @property
    def pixels(self) -> int:
        return self.width * self.height


class Position(BaseModel):
    """Top-left corner of a monitor in the desktop coordinate space."""
    x: int
    y: int

    model_config = ConfigDict(frozen=True)

    @classmethod
    def origin(cls) -> "Position":
        return cls(x=0, y=0)

    @property
    def is_at_origin(self) -> bool:
        return self.x == 0 and self.y == 0


class PositionedResolution(BaseModel):
    position: Position
    resolution: Resolution

    model_config = ConfigDict(frozen=True)


class Monitor(BaseModel):
    """A monitor plugged into a video output."""
    name: str
    primary: bool
    config_mode_info_id: int
    device_id: str
    resolution: Resolution
    position: Position

    model_config = ConfigDict(frozen=True)


class VideoOutput(BaseModel):
    """A display adapter output, with or without a monitor connected to it."""
    device_path: str
    monitor: Optional[Monitor] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_plugged(self) -> bool:
        return self.monitor is not None

    def plug(self, monitor: Monitor) -> "VideoOutput":
        return self.model_copy(update={"monitor": monitor})


class FailureInjection(BaseModel):
    """Failures a fuzzed computer reports when the display settings are changed."""
    commit_error: Optional[DispChange] = None
    errors_by_device_path: Dict[str, DispChange] = Field(default_factory=dict)
    getting_primary_monitor_name_fails: bool = False
    querying_primary_display_config_fails: bool = False

    model_config = ConfigDict(frozen=True)


class Computer(BaseModel):
    """A static snapshot of the video outputs of a computer."""
    seed: int
    video_outputs: Tuple[VideoOutput, ...]
    primary_monitor: str
    secondary_monitor: str
    monitors: Tuple[str, ...]
    failures: FailureInjection = Field(default_factory=FailureInjection)

    model_config = ConfigDict(frozen=True)

    @property
    def plugged_video_outputs(self) -> Tuple[VideoOutput, ...]:
        return tuple(video_output for video_output in self.video_outputs if video_output.is_plugged)

    @property
    def plugged_monitors(self) -> Tuple[Monitor, ...]:
        return tuple(video_output.monitor for video_output in self.plugged_video_outputs)
