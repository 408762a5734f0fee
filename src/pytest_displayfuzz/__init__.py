"""Seeded fuzzing of display topologies for testing primary monitor swaps."""

from pytest_displayfuzz.domains.fuzzing import (
    ComputerFuzzer,
    FuzzedComputer,
    FuzzerConfigurationError,
    FuzzingInvariantError,
)
from pytest_displayfuzz.domains.topology import (
    Computer,
    DeviceId,
    DispChange,
    Monitor,
    Position,
    Resolution,
    VideoOutput,
)
from pytest_displayfuzz.infrastructure.win32 import FakeWin32, Win32Error

__all__ = [
    "Computer",
    "ComputerFuzzer",
    "DeviceId",
    "DispChange",
    "FakeWin32",
    "FuzzedComputer",
    "FuzzerConfigurationError",
    "FuzzingInvariantError",
    "Monitor",
    "Position",
    "Resolution",
    "VideoOutput",
    "Win32Error",
]
