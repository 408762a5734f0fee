"""Fuzzer generating the video outputs of a computer."""

from typing import List
from pytest_displayfuzz.domains.topology.models import VideoOutput


class VideoOutputFuzzer:

    @staticmethod
    def device_path(index: int) -> str:
        """Device name Windows gives to the `index`-th output (``\\\\.\\DISPLAY1``, ...)."""
        return f"\\\\.\\DISPLAY{index + 1}"

    @staticmethod
    def generate_several(n_video_output: int) -> List[VideoOutput]:
        """Generates `n_video_output` outputs with no monitor plugged in."""
        return [
            VideoOutput(device_path=VideoOutputFuzzer.device_path(index))
            for index in range(n_video_output)
        ]
