"""Fuzzer generating the monitors of a computer."""

from typing import Collection, List, Optional, Union
from loguru import logger
from pytest_displayfuzz.domains.fuzzing.base import Fuzzer
from pytest_displayfuzz.domains.fuzzing.errors import ensure
from pytest_displayfuzz.domains.fuzzing.identifiers import (
    ConfigModeInfoIdFuzzer,
    DeviceIdFuzzer,
    GsmIdFuzzer,
    MonitorNameFuzzer,
)
from pytest_displayfuzz.domains.topology.device_id import DeviceId, DeviceIdCommonParts
from pytest_displayfuzz.domains.topology.models import Monitor, PositionedResolution


class MonitorFuzzer(Fuzzer):
    """
    Generates monitors out of positioned resolutions.

    Each kind of identifier comes from its own fuzzer, seeded from this
    fuzzer's stream, so drawing names never shifts the device ids.
    """

    def __init__(self, seed: int):
        super().__init__(seed)
        self.monitor_name_fuzzer = MonitorNameFuzzer(self._next_seed())
        self.device_id_fuzzer = DeviceIdFuzzer(self._next_seed())
        self.config_mode_info_id_fuzzer = ConfigModeInfoIdFuzzer(self._next_seed())
        self.gsm_id_fuzzer = GsmIdFuzzer(self._next_seed())

    def generate(
        self,
        positioned_resolution: PositionedResolution,
        has_an_internal_display: bool,
        common_parts: DeviceIdCommonParts,
        name: str,
        config_mode_info_id: int,
        gsm_part: str
    ) -> Monitor:
        """
        Builds one monitor.

        The monitor positioned at the origin is the primary one. An internal
        display reports no friendly name, so the primary monitor of a computer
        with an internal display gets an empty name.
        """
        primary = positioned_resolution.position.is_at_origin
        if has_an_internal_display and primary:
            name = ""

        return Monitor(
            name=name,
            primary=primary,
            config_mode_info_id=config_mode_info_id,
            device_id=self.device_id_fuzzer.generate_from_parts(gsm_part, common_parts, config_mode_info_id),
            resolution=positioned_resolution.resolution,
            position=positioned_resolution.position,
        )

    def generate_several(
        self,
        has_an_internal_display: bool,
        positioned_resolutions: List[PositionedResolution],
        common_parts: Optional[DeviceIdCommonParts] = None,
        forbidden_monitor_names: Collection[str] = (),
        forbidden_device_ids: Collection[Union[DeviceId, str]] = ()
    ) -> List[Monitor]:
        n_monitor = len(positioned_resolutions)
        if common_parts is None:
            common_parts = self.device_id_fuzzer.generate_common_parts()

        # A device id embeds its config mode info id: avoiding the forbidden
        # ones is enough to avoid the forbidden device ids.
        forbidden_config_mode_info_ids = {
            device_id.config_mode_info_id
            for device_id in map(_as_device_id, forbidden_device_ids)
            if device_id is not None
        }

        names = self.monitor_name_fuzzer.generate_several(n_monitor, forbidden_monitor_names)
        config_mode_info_ids = self.config_mode_info_id_fuzzer.generate_several(
            n_monitor, forbidden_config_mode_info_ids
        )
        gsm_parts = self.gsm_id_fuzzer.generate_several(n_monitor)

        monitors = [
            self.generate(
                positioned_resolutions[index],
                has_an_internal_display,
                common_parts,
                names[index],
                config_mode_info_ids[index],
                gsm_parts[index],
            )
            for index in range(n_monitor)
        ]

        if monitors:
            ensure(
                sum(1 for monitor in monitors if monitor.primary) == 1,
                "Exactly one primary monitor must be generated"
            )

        logger.debug(f"Generated {n_monitor} monitors (internal display: {has_an_internal_display})")
        return monitors


def _as_device_id(device_id: Union[DeviceId, str]) -> Optional[DeviceId]:
    """Strings outside the device id template can never be generated: None."""
    if isinstance(device_id, DeviceId):
        return device_id
    try:
        return DeviceId.parse(device_id)
    except ValueError:
        return None
