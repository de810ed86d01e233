"""Decoders for the parameter bytes of notifications sent by the earbuds."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .commands import Color

EAR_TIP_FIT_READY = 0x00
EAR_TIP_FIT_RESULT = 0x02

_DEFAULT_MAX_TONE_VOLUME = 100


class ResponseError(ValueError):
    """Raised when notification parameters are too short or malformed."""


@dataclass(frozen=True)
class BatteryInfo:
    level: int
    charging: bool

    @classmethod
    def from_byte(cls, value: int) -> BatteryInfo:
        return cls(level=value & 0x7F, charging=bool(value & 0x80))


@dataclass(frozen=True)
class Battery:
    left: BatteryInfo
    right: BatteryInfo
    case: BatteryInfo


@dataclass(frozen=True)
class Version:
    left: str
    right: str = ""


@dataclass(frozen=True)
class ANCSetting:
    mode: int
    sub_scene: int
    noise_value: int


@dataclass(frozen=True)
class PowerManager:
    power_off_time: int
    current_time: int


@dataclass(frozen=True)
class Volume:
    left: int
    right: int
    max: int


@dataclass(frozen=True)
class ToneVolume:
    volume: int
    max_volume: int = _DEFAULT_MAX_TONE_VOLUME


@dataclass(frozen=True)
class WearingDetection:
    enabled: bool
    music_index: int
    anc_index: int
    tone_enable: bool = False
    has_tone: bool = False


@dataclass(frozen=True)
class EarTipFitResult:
    status: int
    left_result: int
    right_result: int


@dataclass(frozen=True)
class EQBand:
    freq: int
    gain: int
    q: int
    band_type: int = 0


@dataclass(frozen=True)
class EQParams:
    eq_type: int
    master_gain: int
    bands: tuple[EQBand, ...] = ()


@dataclass(frozen=True)
class KeyMapping:
    key: int
    func: int


@dataclass(frozen=True)
class LEDEffect:
    speed: int
    brightness: int
    effect_index: int
    colors: tuple[Color, ...] = ()


@dataclass(frozen=True)
class Alarm:
    alarm_id: int
    enabled: bool
    hour: int
    minute: int
    cycle: int


@dataclass(frozen=True)
class MusicStatus:
    music_id: int
    is_playing: bool
    play_mode: int


@dataclass(frozen=True)
class MusicFile:
    music_id: int
    total: int


def _require(params: bytes, minimum: int, what: str) -> bytes:
    data = bytes(params)
    if len(data) < minimum:
        if minimum == 1 or what.startswith(("eq", "wearing", "led")):
            need = f"need at least {minimum} byte{'s' if minimum > 1 else ''}"
        else:
            need = f"need {minimum} bytes"
        raise ResponseError(f"{what}: {need}, got {len(data)}")
    return data


def _chunks(data: bytes, size: int):
    """Yield whole records of the given size; a trailing partial record is dropped."""
    for start in range(0, len(data) - size + 1, size):
        yield data[start:start + size]


def parse_battery(params: bytes) -> Battery:
    data = _require(params, 3, "battery")
    left, right, case = (BatteryInfo.from_byte(b) for b in data[:3])
    return Battery(left=left, right=right, case=case)


def _dotted(triple: bytes) -> str:
    return ".".join(str(b) for b in triple)


def parse_version(params: bytes) -> Version:
    data = bytes(params)
    if len(data) == 3:
        return Version(left=_dotted(data))
    if len(data) == 6:
        return Version(left=_dotted(data[:3]), right=_dotted(data[3:]))
    raise ResponseError(f"version: need 3 or 6 bytes, got {len(data)}")


def parse_anc_setting(params: bytes) -> ANCSetting:
    data = _require(params, 3, "anc setting")
    return ANCSetting(mode=data[0], sub_scene=data[1], noise_value=data[2])


def parse_power_manager(params: bytes) -> PowerManager:
    data = _require(params, 4, "power manager")
    off, current = struct.unpack_from("<HH", data)
    return PowerManager(power_off_time=off, current_time=current)


def parse_volume(params: bytes) -> Volume:
    data = _require(params, 3, "volume")
    return Volume(left=data[0], right=data[1], max=data[2])


def parse_tone_volume(params: bytes) -> ToneVolume:
    data = _require(params, 1, "tone volume")
    if len(data) >= 2:
        return ToneVolume(volume=data[0], max_volume=data[1])
    return ToneVolume(volume=data[0])


def parse_wearing_detection(params: bytes) -> WearingDetection:
    data = _require(params, 3, "wearing detection")
    has_tone = len(data) >= 4
    return WearingDetection(
        enabled=data[0] == 0x01,
        music_index=data[1],
        anc_index=data[2],
        tone_enable=has_tone and data[3] == 0x01,
        has_tone=has_tone,
    )


def parse_ear_tip_fit(params: bytes) -> EarTipFitResult:
    data = _require(params, 3, "ear tip fit")
    return EarTipFitResult(status=data[0], left_result=data[1], right_result=data[2])


def _eq_header(data: bytes) -> tuple[int, int]:
    eq_type, master_gain = struct.unpack_from("<Bh", data)
    return eq_type, master_gain


def parse_eq_v1(params: bytes) -> EQParams:
    data = _require(params, 3, "eq v1")
    eq_type, master_gain = _eq_header(data)
    bands = tuple(
        EQBand(*struct.unpack("<HhH", record)) for record in _chunks(data[3:], 6)
    )
    return EQParams(eq_type=eq_type, master_gain=master_gain, bands=bands)


def parse_eq_v2(params: bytes) -> EQParams:
    data = _require(params, 3, "eq v2")
    eq_type, master_gain = _eq_header(data)
    bands = tuple(
        EQBand(*struct.unpack("<HhHB", record)) for record in _chunks(data[3:], 7)
    )
    return EQParams(eq_type=eq_type, master_gain=master_gain, bands=bands)


def parse_key_function(params: bytes) -> list[KeyMapping]:
    data = bytes(params)
    if len(data) % 2:
        raise ResponseError(f"key function: odd byte count {len(data)}")
    return [KeyMapping(key=key, func=func) for key, func in _chunks(data, 2)]


def parse_led_effect(params: bytes) -> LEDEffect:
    data = _require(params, 3, "led effect")
    colors = tuple(Color(r, g, b) for r, g, b in _chunks(data[3:], 3))
    return LEDEffect(
        speed=data[0], brightness=data[1], effect_index=data[2], colors=colors
    )


def parse_alarm_list(params: bytes) -> list[Alarm]:
    data = _require(params, 1, "alarm list")
    return [
        Alarm(
            alarm_id=record[0],
            enabled=record[1] == 0x01,
            hour=record[2],
            minute=record[3],
            cycle=record[4],
        )
        for record in _chunks(data[1:], 6)
    ]


def parse_music_status(params: bytes) -> MusicStatus:
    data = _require(params, 6, "music status")
    music_id, playing, play_mode = struct.unpack_from("<IBB", data)
    return MusicStatus(music_id=music_id, is_playing=playing == 0x01, play_mode=play_mode)


def parse_music_info(params: bytes) -> tuple[int, list[MusicFile]]:
    """Return the start tone id and the listed music files."""
    data = _require(params, 1, "music info")
    files = [MusicFile(*struct.unpack("<IH", record)) for record in _chunks(data[1:], 6)]
    return data[0], files