from pytest_displayfuzz.domains.fuzzing.computer import (
    PRIMARY_PLACEHOLDER,
    SECONDARY_PLACEHOLDER,
    ComputerFuzzer,
    FuzzedComputer,
)
from pytest_displayfuzz.domains.fuzzing.errors import FuzzerConfigurationError, FuzzingInvariantError
from pytest_displayfuzz.domains.fuzzing.identifiers import (
    ConfigModeInfoIdFuzzer,
    DeviceIdFuzzer,
    GsmIdFuzzer,
    MonitorNameFuzzer,
)
from pytest_displayfuzz.domains.fuzzing.monitor import MonitorFuzzer
from pytest_displayfuzz.domains.fuzzing.positions import PositionFuzzer
from pytest_displayfuzz.domains.fuzzing.video_output import VideoOutputFuzzer

__all__ = [
    "PRIMARY_PLACEHOLDER",
    "SECONDARY_PLACEHOLDER",
    "ComputerFuzzer",
    "ConfigModeInfoIdFuzzer",
    "DeviceIdFuzzer",
    "FuzzedComputer",
    "FuzzerConfigurationError",
    "FuzzingInvariantError",
    "GsmIdFuzzer",
    "MonitorFuzzer",
    "MonitorNameFuzzer",
    "PositionFuzzer",
    "VideoOutputFuzzer",
]
