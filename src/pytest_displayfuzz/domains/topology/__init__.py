from pytest_displayfuzz.domains.topology.device_id import DeviceId, DeviceIdCommonParts
from pytest_displayfuzz.domains.topology.models import (
    Computer,
    DispChange,
    FailureInjection,
    Monitor,
    Position,
    PositionedResolution,
    Resolution,
    VideoOutput,
)

__all__ = [
    "Computer",
    "DeviceId",
    "DeviceIdCommonParts",
    "DispChange",
    "FailureInjection",
    "Monitor",
    "Position",
    "PositionedResolution",
    "Resolution",
    "VideoOutput",
]
