"""Fuzzer generating whole computers out of the other fuzzers."""

from random import Random
from typing import Collection, Dict, FrozenSet, List, Optional, Tuple, Union
from loguru import logger
from pydantic import BaseModel, ConfigDict
from pytest_displayfuzz.domains.fuzzing.base import Fuzzer
from pytest_displayfuzz.domains.fuzzing.errors import FuzzerConfigurationError, ensure
from pytest_displayfuzz.domains.fuzzing.monitor import MonitorFuzzer
from pytest_displayfuzz.domains.fuzzing.positions import PositionFuzzer
from pytest_displayfuzz.domains.fuzzing.video_output import VideoOutputFuzzer
from pytest_displayfuzz.domains.topology.device_id import DeviceId
from pytest_displayfuzz.domains.topology.models import Computer, DispChange, FailureInjection, VideoOutput
from pytest_displayfuzz.infrastructure.win32.fake import FakeWin32

PRIMARY_PLACEHOLDER = "<primary>"
SECONDARY_PLACEHOLDER = "<secondary>"


class FuzzedComputer(BaseModel):
    """A generated computer and the fake Win32 API that exposes it."""
    computer: Computer
    win32: FakeWin32

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class ComputerFuzzer(Fuzzer):
    """
    Builds random computers for the display settings tests.

    Configure the computer with the ``with_*`` and ``for_which_*`` methods,
    which all return the fuzzer itself, then call ``build``::

        fuzzed = ComputerFuzzer(seed).with_two_monitors_or_more().build()

    Every ``build`` draws a build seed from the fuzzer's stream and stores it
    in ``Computer.seed``: the same seed and the same calls give the same
    computers, and ``build(computer.seed)`` rebuilds one of them.
    """

    # Windows has a hard limit of 128 million pixels, which allows at most
    # 162 monitors at 1024x768.
    MAX_VIDEO_OUTPUTS = 162

    def __init__(self, seed: int):
        super().__init__(seed)
        self._monitor_range: Optional[Tuple[int, int]] = None
        self._forbidden_monitor_names: FrozenSet[str] = frozenset()
        self._forbidden_device_ids: Tuple[Union[DeviceId, str], ...] = ()
        self._has_an_internal_display = False
        self._change_display_settings_error_on_commit: Optional[DispChange] = None
        self._change_display_settings_error_for_some_monitors: Optional[DispChange] = None
        self._getting_primary_monitor_name_fails = False
        self._querying_the_display_config_of_the_primary_monitor_fails = False

    def with_n_monitors(self, n_monitor: int) -> "ComputerFuzzer":
        return self._with_a_range_of_monitors(n_monitor, n_monitor)

    def with_two_monitors_or_more(self) -> "ComputerFuzzer":
        return self._with_a_range_of_monitors(2, self.MAX_VIDEO_OUTPUTS)

    def with_two_monitors_or_more_with_names_different_than(
        self,
        forbidden_monitor_names: Collection[str]
    ) -> "ComputerFuzzer":
        return self._with_a_range_of_monitors(
            2, self.MAX_VIDEO_OUTPUTS, forbidden_monitor_names=forbidden_monitor_names
        )

    def with_two_monitors_or_more_with_device_ids_different_than(
        self,
        forbidden_device_ids: Collection[Union[DeviceId, str]]
    ) -> "ComputerFuzzer":
        return self._with_a_range_of_monitors(
            2, self.MAX_VIDEO_OUTPUTS, forbidden_device_ids=forbidden_device_ids
        )

    def with_an_internal_display_and_at_least_one_more_monitor(self) -> "ComputerFuzzer":
        self._has_an_internal_display = True
        return self._with_a_range_of_monitors(2, self.MAX_VIDEO_OUTPUTS)

    def for_which_committing_the_display_changes_fails_with(self, error: DispChange) -> "ComputerFuzzer":
        self._change_display_settings_error_on_commit = DispChange(error)
        return self

    def for_which_changing_the_display_settings_fails_for_some_monitors(self, error: DispChange) -> "ComputerFuzzer":
        self._change_display_settings_error_for_some_monitors = DispChange(error)
        return self

    def for_which_getting_the_primary_monitor_fails(self) -> "ComputerFuzzer":
        self._getting_primary_monitor_name_fails = True
        return self

    def for_which_querying_the_display_config_of_the_primary_monitor_fails(self) -> "ComputerFuzzer":
        self._querying_the_display_config_of_the_primary_monitor_fails = True
        return self

    def build(self, seed: Optional[int] = None) -> FuzzedComputer:
        """
        Builds a computer from `seed`, or from a seed drawn from the fuzzer's stream.

        Passing a seed leaves the stream untouched.
        """
        if seed is None:
            seed = self._next_seed()
        random = Random(seed)

        error_for_some_monitors = self._change_display_settings_error_for_some_monitors
        if error_for_some_monitors is not None and (self._monitor_range is None or self._monitor_range[0] < 2):
            raise FuzzerConfigurationError(
                "Making the display settings change fail for only some monitors requires at least two monitors"
            )

        video_outputs: List[VideoOutput] = []
        if self._monitor_range is not None:
            video_outputs = self._generate_video_outputs(random, *self._monitor_range)

        errors_by_device_path: Dict[str, DispChange] = {}
        if error_for_some_monitors is not None:
            errors_by_device_path = self._pick_failing_monitors(random, video_outputs, error_for_some_monitors)

        secondary_monitor = self._get_monitor(video_outputs, primary=False)
        primary_monitor = self._get_monitor(video_outputs, primary=True)

        ensure(
            primary_monitor != secondary_monitor,
            "Primary and secondary monitors are the same"
        )

        failures = FailureInjection(
            commit_error=self._change_display_settings_error_on_commit,
            errors_by_device_path=errors_by_device_path,
            getting_primary_monitor_name_fails=self._getting_primary_monitor_name_fails,
            querying_primary_display_config_fails=self._querying_the_display_config_of_the_primary_monitor_fails,
        )

        computer = Computer(
            seed=seed,
            video_outputs=tuple(video_outputs),
            primary_monitor=primary_monitor,
            secondary_monitor=secondary_monitor,
            monitors=tuple(sorted(
                video_output.monitor.name for video_output in video_outputs if video_output.monitor is not None
            )),
            failures=failures,
        )

        logger.debug(
            f"Built computer from seed {seed}: {len(computer.plugged_video_outputs)} monitors "
            f"on {len(video_outputs)} video outputs"
        )

        return FuzzedComputer(computer=computer, win32=FakeWin32(computer.video_outputs, failures))

    def _with_a_range_of_monitors(
        self,
        min_monitors: int,
        max_monitors: int,
        forbidden_monitor_names: Collection[str] = (),
        forbidden_device_ids: Collection[Union[DeviceId, str]] = ()
    ) -> "ComputerFuzzer":
        """Sets the range of monitors. Forbidden names and device ids add up across calls."""
        if not 0 <= min_monitors <= max_monitors <= self.MAX_VIDEO_OUTPUTS:
            raise FuzzerConfigurationError(
                f"Invalid range of monitors [{min_monitors}, {max_monitors}]: "
                f"expected 0 <= min <= max <= {self.MAX_VIDEO_OUTPUTS}"
            )

        self._monitor_range = (min_monitors, max_monitors)
        self._forbidden_monitor_names = self._forbidden_monitor_names.union(forbidden_monitor_names)
        self._forbidden_device_ids = self._forbidden_device_ids + tuple(forbidden_device_ids)
        return self

    def _generate_video_outputs(self, random: Random, min_monitors: int, max_monitors: int) -> List[VideoOutput]:
        monitor_fuzzer = MonitorFuzzer(random.getrandbits(64))
        position_fuzzer = PositionFuzzer(random.getrandbits(64))

        n_video_output = random.randint(min_monitors, max_monitors)
        n_monitor = random.randint(min_monitors, n_video_output)

        monitors = monitor_fuzzer.generate_several(
            self._has_an_internal_display,
            position_fuzzer.generate_several(n_monitor),
            forbidden_monitor_names=self._forbidden_monitor_names,
            forbidden_device_ids=self._forbidden_device_ids,
        )

        video_outputs = VideoOutputFuzzer.generate_several(n_video_output)

        # Only which outputs get a monitor is random, monitors are plugged in order.
        video_outputs_to_plug_in_indexes = sorted(random.sample(range(n_video_output), n_monitor))

        for monitor, video_output_index in zip(monitors, video_outputs_to_plug_in_indexes):
            video_outputs[video_output_index] = video_outputs[video_output_index].plug(monitor)

        return video_outputs

    def _pick_failing_monitors(
        self,
        random: Random,
        video_outputs: List[VideoOutput],
        error: DispChange
    ) -> Dict[str, DispChange]:
        possible_device_paths = [
            video_output.device_path for video_output in video_outputs if video_output.is_plugged
        ]

        ensure(
            len(possible_device_paths) >= 2,
            "At least two monitors must be plugged in to make only some of them fail"
        )

        n_monitor_on_error = random.randint(1, len(possible_device_paths) - 1)

        return {
            device_path: error
            for device_path in random.sample(possible_device_paths, n_monitor_on_error)
        }

    @staticmethod
    def _get_monitor(video_outputs: List[VideoOutput], primary: bool) -> str:
        for video_output in video_outputs:
            if video_output.monitor is not None and video_output.monitor.primary == primary:
                return video_output.monitor.name

        return PRIMARY_PLACEHOLDER if primary else SECONDARY_PLACEHOLDER
