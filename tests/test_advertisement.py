import pytest

from quicky.advertisement import (
    QCY_COMPANY_ID,
    AdvertisementInfo,
    DeviceType,
    ManufacturerData,
    get_device_type,
    parse_manufacturer_data,
)


def _payload(length=24, other=(0x0B, 0x0A, 0x0C, 0x0F, 0x0E, 0x0D)):
    data = bytearray(length)
    data[0], data[1] = 0x12, 0x34
    data[3] = 0x00
    data[5] = 0x80 | 55
    data[6] = 40
    data[7] = 0x80 | 90
    data[11:17] = bytes([0x02, 0x01, 0x03, 0x06, 0x05, 0x04])
    if length >= 24:
        data[18:24] = bytes(other)
    return bytes(data)


def test_company_id_constant():
    assert get_device_type([ManufacturerData(0x521C, b"")]) is DeviceType.QCY
    assert get_device_type([ManufacturerData(QCY_COMPANY_ID, b"")]) is DeviceType.QCY


def test_device_type_empty_is_unknown():
    assert get_device_type([]) is DeviceType.UNKNOWN


def test_device_type_qcy_detected_among_others():
    entries = [ManufacturerData(0x004C, b"\x01"), ManufacturerData(QCY_COMPANY_ID, b"")]
    assert get_device_type(entries) is DeviceType.QCY


def test_device_type_other_company_is_unknown():
    assert get_device_type([ManufacturerData(0x004C, b"\x01")]) is DeviceType.UNKNOWN


def test_parse_vendor_and_batteries():
    info = parse_manufacturer_data(_payload())
    assert isinstance(info, AdvertisementInfo)
    assert info.vendor_id == 0x1234
    assert info.left_battery == 55
    assert info.is_left_charging is True
    assert info.right_battery == 40
    assert info.is_right_charging is False
    assert info.box_battery == 90
    assert info.is_box_charging is True


def test_parse_mac_byte_order():
    info = parse_manufacturer_data(_payload())
    assert info.control_mac == "01:02:03:04:05:06"
    assert info.other_mac == "0a:0b:0c:0d:0e:0f"


def test_zero_other_mac_falls_back_to_control():
    info = parse_manufacturer_data(_payload(other=(0, 0, 0, 0, 0, 0)))
    assert info.other_mac == info.control_mac


def test_short_payload_has_no_other_mac():
    info = parse_manufacturer_data(_payload(length=20))
    assert info.other_mac == ""
    assert info.control_mac == "01:02:03:04:05:06"


def test_color_index_zero_when_bits_clear():
    data = bytearray(_payload())
    data[3] = 0xE7
    assert parse_manufacturer_data(bytes(data)).color_index == 0


def test_color_index_uses_bits_three_and_four():
    data = bytearray(_payload())
    data[3] = 0x18
    assert parse_manufacturer_data(bytes(data)).color_index == 0x0C


@pytest.mark.parametrize("length", [0, 10, 19])
def test_too_short_raises(length):
    with pytest.raises(ValueError, match="too short"):
        parse_manufacturer_data(bytes(length))