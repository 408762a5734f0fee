import pytest

from pytest_displayfuzz.domains.topology.device_id import DeviceId, DeviceIdCommonParts
from pytest_displayfuzz.domains.fuzzing.identifiers import DeviceIdFuzzer

DEVICE_ID = DeviceId(
    gsm_part="GSM5B08",
    common_part_1=5,
    common_part_2="2a1d0c0b",
    common_part_3=0,
    config_mode_info_id=4352,
)
DEVICE_ID_TEXT = "\\\\?\\DISPLAY#GSM5B08#5&2a1d0c0b&0&UID4352#{e6f07b5f-ee97-4a90-b076-33f57bf4eaa7}"


def test_format():
    """Verify the textual template of a device id."""
    assert DEVICE_ID.format() == DEVICE_ID_TEXT
    assert str(DEVICE_ID) == DEVICE_ID_TEXT


def test_parse_gives_back_the_parts():
    assert DeviceId.parse(DEVICE_ID_TEXT) == DEVICE_ID


@pytest.mark.parametrize("text", [
    "",
    "\\\\.\\DISPLAY1",
    "\\\\?\\DISPLAY#GSM5B08#5&2a1d0c0b&0&UID4352",
    "\\\\?\\DISPLAY#DEL5B08#5&2a1d0c0b&0&UID4352#{e6f07b5f-ee97-4a90-b076-33f57bf4eaa7}",
])
def test_parse_rejects_other_strings(text):
    with pytest.raises(ValueError):
        DeviceId.parse(text)


def test_generated_device_ids_parse_back():
    """Verify that ids built by the fuzzer keep their parts."""
    fuzzer = DeviceIdFuzzer(7)
    common_parts = fuzzer.generate_common_parts()

    device_id = DeviceId.parse(fuzzer.generate_from_parts("GSM00AF", common_parts, 123456))

    assert device_id.gsm_part == "GSM00AF"
    assert device_id.config_mode_info_id == 123456
    assert DeviceIdCommonParts(
        common_part_1=device_id.common_part_1,
        common_part_2=device_id.common_part_2,
        common_part_3=device_id.common_part_3,
    ) == common_parts
