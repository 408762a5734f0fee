"""Fake of the Win32 display APIs, backed by a fuzzed computer."""

from typing import Dict, List, Sequence, Tuple
from loguru import logger
from pytest_displayfuzz.domains.topology.models import (
    DispChange,
    FailureInjection,
    Monitor,
    Position,
    VideoOutput,
)

ERROR_GEN_FAILURE = 31
ERROR_INVALID_PARAMETER = 87
ERROR_NOT_FOUND = 1168


class Win32Error(Exception):
    """A Win32 call returned an error code."""

    def __init__(self, function: str, code: int):
        super().__init__(f"{function} failed with error code {code}")
        self.function = function
        self.code = code


class FakeWin32:
    """
    Answers the display queries and settings changes of the code under test.

    Changes are staged per device path by ``change_display_settings`` and
    applied all at once by ``commit_display_settings``, like
    ``ChangeDisplaySettingsExW`` with ``CDS_NORESET`` followed by a final call
    without a device. The fuzzed models are never mutated: committing replaces
    the monitors of this fake with updated copies.
    """

    def __init__(self, video_outputs: Sequence[VideoOutput], failures: FailureInjection):
        self._video_outputs: Dict[str, VideoOutput] = {
            video_output.device_path: video_output for video_output in video_outputs
        }
        self._failures = failures
        self._staged_changes: Dict[str, Tuple[Position, bool]] = {}

    @property
    def staged_device_paths(self) -> List[str]:
        return list(self._staged_changes)

    def enum_display_devices(self) -> List[VideoOutput]:
        """All the video outputs, plugged or not."""
        return list(self._video_outputs.values())

    def query_display_config(self) -> List[Monitor]:
        """The monitors currently plugged in, with their display config."""
        return [
            video_output.monitor
            for video_output in self._video_outputs.values()
            if video_output.monitor is not None
        ]

    def get_primary_monitor_name(self) -> str:
        if self._failures.getting_primary_monitor_name_fails:
            raise Win32Error("DisplayConfigGetDeviceInfo", ERROR_GEN_FAILURE)
        return self._primary_monitor("DisplayConfigGetDeviceInfo").name

    def query_primary_display_config(self) -> Monitor:
        if self._failures.querying_primary_display_config_fails:
            raise Win32Error("QueryDisplayConfig", ERROR_INVALID_PARAMETER)
        return self._primary_monitor("QueryDisplayConfig")

    def change_display_settings(self, device_path: str, position: Position, primary: bool = False) -> DispChange:
        """Stages a new position (and primary flag) for the monitor plugged into `device_path`."""
        error = self._failures.errors_by_device_path.get(device_path)
        if error is not None:
            logger.debug(f"Changing the display settings of {device_path} fails with {error.name}")
            return error

        video_output = self._video_outputs.get(device_path)
        if video_output is None or video_output.monitor is None:
            return DispChange.BADPARAM

        self._staged_changes[device_path] = (position, primary)
        return DispChange.SUCCESSFUL

    def commit_display_settings(self) -> DispChange:
        """Applies every staged change. Staged changes are dropped when the commit returns a negative code."""
        staged_changes = self._staged_changes
        self._staged_changes = {}

        commit_error = self._failures.commit_error
        if commit_error is not None and commit_error < DispChange.SUCCESSFUL:
            logger.debug(f"Committing {len(staged_changes)} display changes fails with {commit_error.name}")
            return commit_error

        for device_path, (position, primary) in staged_changes.items():
            video_output = self._video_outputs[device_path]
            monitor = video_output.monitor.model_copy(update={"position": position, "primary": primary})
            self._video_outputs[device_path] = video_output.plug(monitor)

        logger.debug(f"Committed {len(staged_changes)} display changes")
        return commit_error if commit_error is not None else DispChange.SUCCESSFUL

    def _primary_monitor(self, function: str) -> Monitor:
        for monitor in self.query_display_config():
            if monitor.primary:
                return monitor
        raise Win32Error(function, ERROR_NOT_FOUND)
