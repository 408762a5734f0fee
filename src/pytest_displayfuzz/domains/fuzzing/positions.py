"""Fuzzer placing monitors on the desktop."""

from typing import List
from loguru import logger
from pytest_displayfuzz.domains.fuzzing.base import Fuzzer
from pytest_displayfuzz.domains.fuzzing.errors import FuzzerConfigurationError, ensure
from pytest_displayfuzz.domains.topology.models import Position, PositionedResolution, Resolution

COMMON_RESOLUTIONS = tuple(
    Resolution(width=width, height=height)
    for width, height in [
        (1024, 768),
        (1280, 720),
        (1280, 1024),
        (1366, 768),
        (1440, 900),
        (1600, 900),
        (1680, 1050),
        (1920, 1080),
        (1920, 1200),
        (2560, 1080),
        (2560, 1440),
        (3440, 1440),
        (3840, 2160),
        (5120, 1440),
        (5120, 2880),
        (7680, 4320),
    ]
)

SMALLEST_RESOLUTION = min(COMMON_RESOLUTIONS, key=lambda resolution: resolution.pixels)

# Windows refuses desktops larger than 128 million pixels.
# See https://learn.microsoft.com/en-us/answers/questions/1324305/what-is-the-maximum-horizontal-resolution-size-rec
MAX_PIXELS = 128_000_000


class PositionFuzzer(Fuzzer):
    """
    Generates the resolution and position of each monitor of a computer.

    Exactly one monitor is positioned at the origin: it is the primary one.
    The others are laid out edge to edge on the left or on the right of the
    desktop with a random vertical offset, so no two anchors coincide.
    """

    def generate_resolutions(self, n: int) -> List[Resolution]:
        """Draws `n` resolutions whose total pixel count fits in MAX_PIXELS."""
        if n * SMALLEST_RESOLUTION.pixels > MAX_PIXELS:
            raise FuzzerConfigurationError(
                f"{n} monitors cannot fit in a desktop of {MAX_PIXELS} pixels"
            )

        resolutions = []
        budget = MAX_PIXELS
        for index in range(n):
            # Leave room for the smallest resolution on every remaining monitor.
            reserved = (n - index - 1) * SMALLEST_RESOLUTION.pixels
            candidates = [r for r in COMMON_RESOLUTIONS if r.pixels <= budget - reserved]
            resolution = self._random.choice(candidates)
            budget -= resolution.pixels
            resolutions.append(resolution)

        return resolutions

    def generate_several(self, n: int) -> List[PositionedResolution]:
        resolutions = self.generate_resolutions(n)
        if not resolutions:
            return []

        primary = resolutions[0]
        positioned_resolutions = [PositionedResolution(position=Position.origin(), resolution=primary)]

        left_edge = 0
        right_edge = primary.width
        for resolution in resolutions[1:]:
            y = self._random.randint(-(resolution.height // 2), primary.height // 2)
            if self._random.random() < 0.5:
                x = right_edge
                right_edge += resolution.width
            else:
                left_edge -= resolution.width
                x = left_edge
            positioned_resolutions.append(
                PositionedResolution(position=Position(x=x, y=y), resolution=resolution)
            )

        self._random.shuffle(positioned_resolutions)

        ensure(
            sum(1 for p in positioned_resolutions if p.position.is_at_origin) == 1,
            "Exactly one monitor must be positioned at the origin"
        )
        ensure(
            len({p.position for p in positioned_resolutions}) == n,
            "Two monitors share the same position"
        )

        logger.debug(f"Laid out {n} monitors on a {right_edge - left_edge}px wide desktop")
        return positioned_resolutions
