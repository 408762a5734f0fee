"""Monitor device id template.

A monitor device id looks like the device interface path Windows reports for a
monitor target, e.g.::

    \\\\?\\DISPLAY#GSM5B08#5&2a1d0c0b&0&UID4352#{e6f07b5f-ee97-4a90-b076-33f57bf4eaa7}

The template is only meant to be consistent with itself: ``DeviceId.parse``
reverses ``DeviceId.format`` and nothing more.
"""

import re
from pydantic import BaseModel, ConfigDict, Field

MONITOR_INTERFACE_GUID = "{e6f07b5f-ee97-4a90-b076-33f57bf4eaa7}"

_DEVICE_ID_PATTERN = re.compile(
    r"^\\\\\?\\DISPLAY#(?P<gsm_part>GSM[0-9A-F]{4})"
    r"#(?P<common_part_1>\d+)&(?P<common_part_2>[0-9a-f]+)&(?P<common_part_3>\d+)"
    r"&UID(?P<config_mode_info_id>\d+)"
    r"#" + re.escape(MONITOR_INTERFACE_GUID) + r"$"
)


class DeviceIdCommonParts(BaseModel):
    """Parts of the device id shared by every monitor of a computer."""
    common_part_1: int = Field(ge=0)
    common_part_2: str
    common_part_3: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)


class DeviceId(BaseModel):
    gsm_part: str
    common_part_1: int = Field(ge=0)
    common_part_2: str
    common_part_3: int = Field(ge=0)
    config_mode_info_id: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_parts(cls, gsm_part: str, common_parts: DeviceIdCommonParts, config_mode_info_id: int) -> "DeviceId":
        return cls(
            gsm_part=gsm_part,
            common_part_1=common_parts.common_part_1,
            common_part_2=common_parts.common_part_2,
            common_part_3=common_parts.common_part_3,
            config_mode_info_id=config_mode_info_id,
        )

    @classmethod
    def parse(cls, text: str) -> "DeviceId":
        """Splits a device id back into its parts."""
        match = _DEVICE_ID_PATTERN.match(text)
        if match is None:
            raise ValueError(f"Not a monitor device id: {text!r}")
        return cls(
            gsm_part=match.group("gsm_part"),
            common_part_1=int(match.group("common_part_1")),
            common_part_2=match.group("common_part_2"),
            common_part_3=int(match.group("common_part_3")),
            config_mode_info_id=int(match.group("config_mode_info_id")),
        )

    def format(self) -> str:
        return (
            f"\\\\?\\DISPLAY#{self.gsm_part}"
            f"#{self.common_part_1}&{self.common_part_2}&{self.common_part_3}"
            f"&UID{self.config_mode_info_id}"
            f"#{MONITOR_INTERFACE_GUID}"
        )

    def __str__(self) -> str:
        return self.format()
