"""Recognising the earbuds from their BLE advertisements."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

QCY_COMPANY_ID = 0x521C
"""BLE manufacturer-data company identifier used by the earbuds."""

_MIN_LENGTH = 20
_CONTROL_MAC_LENGTH = 17
_OTHER_MAC_LENGTH = 24
_ZERO_MAC = "00:00:00:00:00:00"


class DeviceType(IntEnum):
    UNKNOWN = 0
    QCY = 1


@dataclass(frozen=True)
class ManufacturerData:
    """One manufacturer-specific entry of an advertisement."""

    company_id: int
    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))


@dataclass(frozen=True)
class AdvertisementInfo:
    """State broadcast by the earbuds in their manufacturer data."""

    vendor_id: int
    color_index: int
    left_battery: int
    right_battery: int
    box_battery: int
    is_left_charging: bool
    is_right_charging: bool
    is_box_charging: bool
    control_mac: str = ""
    other_mac: str = ""


def get_device_type(manufacturer_data: Iterable[ManufacturerData]) -> DeviceType:
    """Classify an advertisement by its manufacturer-data entries."""
    if any(entry.company_id == QCY_COMPANY_ID for entry in manufacturer_data):
        return DeviceType.QCY
    return DeviceType.UNKNOWN


def _mac(data: bytes, order: tuple[int, ...]) -> str:
    return ":".join(f"{data[i]:02x}" for i in order)


def parse_manufacturer_data(data: bytes) -> AdvertisementInfo:
    """Decode the manufacturer payload; at least 20 bytes, 24 for both MACs."""
    data = bytes(data)
    if len(data) < _MIN_LENGTH:
        raise ValueError(
            f"manufacturer data too short: got {len(data)} bytes, "
            f"need at least {_MIN_LENGTH}"
        )

    control_mac = ""
    if len(data) >= _CONTROL_MAC_LENGTH:
        control_mac = _mac(data, (12, 11, 13, 16, 15, 14))

    other_mac = ""
    if len(data) >= _OTHER_MAC_LENGTH:
        other_mac = _mac(data, (19, 18, 20, 23, 22, 21))
        if other_mac == _ZERO_MAC:
            other_mac = control_mac

    left, right, box = data[5], data[6], data[7]
    return AdvertisementInfo(
        vendor_id=(data[0] << 8) | data[1],
        color_index=(data[3] & 0x18) >> 1,
        left_battery=left & 0x7F,
        right_battery=right & 0x7F,
        box_battery=box & 0x7F,
        is_left_charging=bool(left & 0x80),
        is_right_charging=bool(right & 0x80),
        is_box_charging=bool(box & 0x80),
        control_mac=control_mac,
        other_mac=other_mac,
    )