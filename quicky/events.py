"""Turning notification command blocks into typed events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable

from . import responses
from .responses import MusicFile, ResponseError


class EventType(IntEnum):
    """Kind of notification received from the device."""

    UNKNOWN = 0x00
    RESET_DEFAULT = 0x01
    CLEAR_PAIRING = 0x02
    FACTORY_RESET = 0x03
    MUSIC_CONTROL = 0x04
    LIGHT_FLASH = 0x05
    IN_EAR_TEST = 0x06
    NOISE_VALUE = 0x07
    VOLUME = 0x08
    LOW_LATENCY = 0x09
    MONITORING = 0x0A
    NOISE_CANCEL_MODE = 0x0C
    TEST_MODE = 0x0D
    SLEEP_MODE = 0x10
    EAR_TIP_FIT = 0x11
    LED_MODE = 0x12
    POWER_MANAGER = 0x14
    SOUND_BALANCE = 0x16
    ANC_SETTING = 0x17
    RENAME = 0x18
    AUDIO_LANG = 0x19
    TONE_VOLUME = 0x1D
    TAKE_PHOTO = 0x1E
    STANDBY = 0x1F
    EQ_V1 = 0x20
    EQ_V2 = 0x22
    LDAC = 0x23
    ADAPTIVE_EQ = 0x27
    ANC_RESULT = 0x28
    ANC_WEAR = 0x29
    KEY_FUNCTION = 0x2B
    WEARING_DETECTION = 0x2C
    SPATIAL_AUDIO = 0x2D
    MUSIC_MODE = 0x2E
    BATTERY = 0x2F
    VERSION = 0x30
    ENV_ADAPTATION = 0x32
    TWS_ENABLE = 0x34
    LED_SWITCH = 0x35
    LED_EFFECT = 0x36
    PLAY_MODE = 0x37
    FOCUS_MODE = 0x39
    MUSIC_STATUS = 0x3A
    MUSIC_INFO = 0x3B
    TONE_PLAY = 0x3D
    SYNC_TIME = 0x3E
    ALARM = 0x3F
    AI = 0x43
    MAX_EQ_COUNT = 0x44
    CUSTOM_EQ_TEST = 0x45
    EQ_LEFT = 0x46
    EQ_RIGHT = 0x47
    IN_EAR_SENSITIVITY = 0x48
    GAME_CONFIG = 0x4A


@dataclass(frozen=True)
class MusicInfoResult:
    start_tone_id: int
    files: tuple[MusicFile, ...] = ()


@dataclass(frozen=True)
class Event:
    """A decoded notification; ``error`` is set when the parameters were malformed."""

    type: EventType
    cmd_id: int
    raw: bytes
    parsed: Any = None
    error: Exception | None = None


def _music_info(params: bytes) -> MusicInfoResult:
    start, files = responses.parse_music_info(params)
    return MusicInfoResult(start_tone_id=start, files=tuple(files))


def _text(params: bytes) -> str:
    return params.decode("utf-8", errors="replace").rstrip("\x00")


def _first_byte(params: bytes) -> int | None:
    return params[0] if params else None


_PARSERS: dict[int, Callable[[bytes], Any]] = {
    0x2F: responses.parse_battery,
    0x30: responses.parse_version,
    0x17: responses.parse_anc_setting,
    0x14: responses.parse_power_manager,
    0x08: responses.parse_volume,
    0x1D: responses.parse_tone_volume,
    0x2C: responses.parse_wearing_detection,
    0x11: responses.parse_ear_tip_fit,
    0x20: responses.parse_eq_v1,
    0x22: responses.parse_eq_v2,
    0x46: responses.parse_eq_v2,
    0x47: responses.parse_eq_v2,
    0x2B: responses.parse_key_function,
    0x36: responses.parse_led_effect,
    0x3F: responses.parse_alarm_list,
    0x3A: responses.parse_music_status,
    0x3B: _music_info,
    0x18: _text,
    0x19: _text,
    # ANC result and wear reports are variable length and kept as raw bytes.
    0x28: bytes,
    0x29: bytes,
}

_SINGLE_BYTE_CODES = frozenset({
    0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07, 0x09, 0x0A, 0x0C, 0x0D,
    0x10, 0x12, 0x16, 0x1E, 0x1F, 0x23, 0x27, 0x2D, 0x2E, 0x32, 0x34,
    0x35, 0x37, 0x39, 0x3D, 0x43, 0x44, 0x45, 0x48, 0x4A,
})

_PARSERS.update({code: _first_byte for code in _SINGLE_BYTE_CODES})


def dispatch(cmd_id: int, params: bytes) -> Event:
    """Decode one command block received from the device into an Event."""
    raw = bytes(params)
    parser = _PARSERS.get(cmd_id)
    if parser is None:
        return Event(type=EventType.UNKNOWN, cmd_id=cmd_id, raw=raw)

    try:
        parsed = parser(raw)
    except ResponseError as exc:
        placeholder = MusicInfoResult(start_tone_id=0) if cmd_id == 0x3B else None
        return Event(
            type=EventType(cmd_id), cmd_id=cmd_id, raw=raw, parsed=placeholder, error=exc
        )
    return Event(type=EventType(cmd_id), cmd_id=cmd_id, raw=raw, parsed=parsed)