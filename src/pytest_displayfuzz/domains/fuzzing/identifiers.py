"""Leaf fuzzers producing batches of distinct identifiers."""

from typing import Callable, Collection, List, TypeVar
from loguru import logger
from pytest_displayfuzz.domains.fuzzing.base import Fuzzer
from pytest_displayfuzz.domains.fuzzing.errors import FuzzerConfigurationError
from pytest_displayfuzz.domains.topology.device_id import DeviceId, DeviceIdCommonParts

T = TypeVar("T")

MONITOR_BRANDS = (
    "ACER", "AOC", "ASUS", "BENQ", "DELL", "EIZO", "HP", "IIYAMA",
    "LG", "MSI", "PHILIPS", "SAMSUNG", "SONY", "VIEWSONIC",
)
MODEL_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
MODEL_LENGTHS = range(3, 7)


def draw_distinct(
    draw: Callable[[], T],
    n: int,
    forbidden: Collection[T],
    domain_size: int,
    kind: str
) -> List[T]:
    """
    Draws `n` pairwise distinct values, none of them in `forbidden`.

    Raises:
        FuzzerConfigurationError: if the domain is too small for the request.
    """
    if n < 0:
        raise FuzzerConfigurationError(f"Cannot generate a negative number of {kind}s ({n})")

    excluded = set(forbidden)
    if n + len(excluded) > domain_size:
        raise FuzzerConfigurationError(
            f"Cannot generate {n} {kind}s while excluding {len(excluded)} of only {domain_size} possible values"
        )

    values: List[T] = []
    max_attempts = 100 * (n + len(excluded)) + 1000
    attempts = 0
    while len(values) < n:
        if attempts == max_attempts:
            raise FuzzerConfigurationError(f"Could not draw {n} distinct {kind}s after {max_attempts} attempts")
        attempts += 1

        value = draw()
        if value not in excluded:
            excluded.add(value)
            values.append(value)

    return values


class MonitorNameFuzzer(Fuzzer):
    """Friendly names such as ``DELL U27Q``. Never empty."""

    DOMAIN_SIZE = len(MONITOR_BRANDS) * sum(len(MODEL_ALPHABET) ** length for length in MODEL_LENGTHS)

    def generate(self) -> str:
        brand = self._random.choice(MONITOR_BRANDS)
        length = self._random.choice(MODEL_LENGTHS)
        model = "".join(self._random.choice(MODEL_ALPHABET) for _ in range(length))
        return f"{brand} {model}"

    def generate_several(self, n: int, forbidden: Collection[str] = ()) -> List[str]:
        names = draw_distinct(self.generate, n, forbidden, self.DOMAIN_SIZE, "monitor name")
        logger.debug(f"Generated {len(names)} monitor names")
        return names


class GsmIdFuzzer(Fuzzer):
    """Manufacturer/product part of a device id, e.g. ``GSM5B08``."""

    DOMAIN_SIZE = 16 ** 4

    def generate(self) -> str:
        return f"GSM{self._random.getrandbits(16):04X}"

    def generate_several(self, n: int, forbidden: Collection[str] = ()) -> List[str]:
        return draw_distinct(self.generate, n, forbidden, self.DOMAIN_SIZE, "GSM id part")


class ConfigModeInfoIdFuzzer(Fuzzer):
    """Unsigned 32-bit ids of the display config mode infos."""

    DOMAIN_SIZE = 2 ** 32

    def generate(self) -> int:
        return self._random.getrandbits(32)

    def generate_several(self, n: int, forbidden: Collection[int] = ()) -> List[int]:
        return draw_distinct(self.generate, n, forbidden, self.DOMAIN_SIZE, "config mode info id")


class DeviceIdFuzzer(Fuzzer):
    """Builds device ids out of their parts."""

    def generate_common_parts(self) -> DeviceIdCommonParts:
        """Parts shared by every monitor of one computer."""
        return DeviceIdCommonParts(
            common_part_1=self._random.randint(1, 9),
            common_part_2=f"{self._random.getrandbits(32):08x}",
            common_part_3=self._random.randint(0, 9),
        )

    @staticmethod
    def generate_from_parts(gsm_part: str, common_parts: DeviceIdCommonParts, config_mode_info_id: int) -> str:
        return DeviceId.from_parts(gsm_part, common_parts, config_mode_info_id).format()
