"""Builders for every command the earbuds accept."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Iterable

from .packet import Command

_GAIN_LIMIT = 1270

# Most switches encode on as 0x01 and off as 0x02.
_SWITCH_BYTE = {True: 0x01, False: 0x02}


class AlarmOperation(IntEnum):
    ADD = 0x01
    DELETE = 0x02
    EDIT = 0x03


class KeyID(IntEnum):
    MUSIC_LEFT_SINGLE = 0x01
    MUSIC_RIGHT_SINGLE = 0x02
    MUSIC_LEFT_DOUBLE = 0x03
    MUSIC_RIGHT_DOUBLE = 0x04
    MUSIC_LEFT_TRIPLE = 0x05
    MUSIC_RIGHT_TRIPLE = 0x06
    MUSIC_LEFT_QUAD = 0x07
    MUSIC_RIGHT_QUAD = 0x08
    MUSIC_LEFT_LONG = 0x09
    MUSIC_RIGHT_LONG = 0x0A

    VOICE_LEFT_SINGLE = 0x15
    VOICE_RIGHT_SINGLE = 0x16
    VOICE_LEFT_DOUBLE = 0x17
    VOICE_RIGHT_DOUBLE = 0x18
    VOICE_LEFT_TRIPLE = 0x19
    VOICE_RIGHT_TRIPLE = 0x1A
    VOICE_LEFT_QUAD = 0x1B
    VOICE_RIGHT_QUAD = 0x1C
    VOICE_LEFT_LONG = 0x1D
    VOICE_RIGHT_LONG = 0x1E


class FuncID(IntEnum):
    NONE = 0x00
    PLAY_PAUSE = 0x01
    PREVIOUS = 0x02
    NEXT = 0x03
    VOICE_ASSISTANT = 0x04
    VOLUME_UP = 0x05
    VOLUME_DOWN = 0x06
    GAME_MODE = 0x07
    ANSWER_CALL = 0x08
    REJECT_CALL = 0x09
    HOLD_CALL = 0x0A
    REDIAL = 0x0B


class NoiseCancelMode(IntEnum):
    OFF = 0x00
    ANC = 0x01
    OUTDOOR = 0x02
    TRANSPARENCY = 0x03


@dataclass(frozen=True)
class Color:
    """An RGBA colour; only red, green and blue go on the wire."""

    r: int
    g: int
    b: int
    a: int = 0xFF


@dataclass(frozen=True)
class EQBand:
    freq: int
    gain: int
    q: int
    band_type: int = 0


@dataclass(frozen=True)
class KeyMapping:
    key: KeyID
    func: FuncID


@dataclass(frozen=True)
class MusicFile:
    music_id: int
    total: int


def _single(opcode: int, value: int) -> Command:
    return Command(opcode, bytes([value]))


def _switch(opcode: int, enable: bool) -> Command:
    """A one-byte on/off command using the 0x01/0x02 encoding."""
    return Command(opcode, bytes([_SWITCH_BYTE[bool(enable)]]))


def _clamp_gain(gain: int) -> int:
    return max(-_GAIN_LIMIT, min(_GAIN_LIMIT, gain))


def _eq_header(eq_index: int, master_gain: int) -> bytes:
    return struct.pack("<Bh", eq_index, master_gain)


def _eq_v2_params(eq_index: int, master_gain: int, bands: Iterable[EQBand]) -> bytes:
    return _eq_header(eq_index, master_gain) + b"".join(
        struct.pack("<HhHB", b.freq, _clamp_gain(b.gain), b.q, b.band_type)
        for b in bands
    )


def reset_default() -> Command:
    return Command(0x01)


def reset_pair() -> Command:
    return Command(0x02)


def factory_reset() -> Command:
    return Command(0x03)


def music_control(action: int) -> Command:
    return _single(0x04, int(action) & 0xFF)


def light_flash(on: bool) -> Command:
    return _single(0x05, 0x01 if on else 0x00)


def in_ear_test(on: bool) -> Command:
    return _switch(0x06, on)


def noise_value(value: int) -> Command:
    return _single(0x07, value)


def volume(left: int, right: int) -> Command:
    return Command(0x08, bytes([left, right, 0x00]))


def low_latency(on: bool) -> Command:
    return _switch(0x09, on)


def monitoring(value: int) -> Command:
    return _single(0x0A, value)


def noise_cancel_mode(mode: NoiseCancelMode) -> Command:
    return _single(0x0C, int(mode))


def test_mode(on: bool) -> Command:
    return _switch(0x0D, on)


def sleep_mode(enable: bool) -> Command:
    return _switch(0x10, enable)


def ear_tip_fit(left: int, right: int) -> Command:
    return Command(0x11, bytes([left, right]))


def ear_tip_fit_start() -> Command:
    return ear_tip_fit(0x01, 0x01)


def ear_tip_fit_stop() -> Command:
    return ear_tip_fit(0x02, 0x02)


def led_mode(enable: bool) -> Command:
    return _switch(0x12, enable)


def booking_reboot(reserve_time: int, current_time: int) -> Command:
    return Command(
        0x14,
        struct.pack("<HH", reserve_time & 0xFFFF, current_time & 0xFFFF),
    )


def sound_balance(left: int) -> Command:
    return _single(0x16, left & 0xFF)


def anc_setting(mode: int, sub_scene: int, noise_value: int) -> Command:
    return Command(0x17, bytes([mode, sub_scene, noise_value]))


def change_name(name: str) -> Command:
    return Command(0x18, name.encode("utf-8"))


def audio_language(lang: str) -> Command:
    return Command(0x19, lang.encode("utf-8"))


def tone_volume(volume: int) -> Command:
    return _single(0x1D, volume)


def take_photo(action: int) -> Command:
    return _single(0x1E, action)


def standby(state: int) -> Command:
    return _single(0x1F, state)


def eq_v1(eq_index: int, master_gain: int, bands: Iterable[EQBand]) -> Command:
    params = _eq_header(eq_index, master_gain) + b"".join(
        struct.pack("<HhH", b.freq, _clamp_gain(b.gain), b.q) for b in bands
    )
    return Command(0x20, params)


def eq_v2(eq_index: int, master_gain: int, bands: Iterable[EQBand]) -> Command:
    return Command(0x22, _eq_v2_params(eq_index, master_gain, bands))


def ldac(enable: bool) -> Command:
    return _switch(0x23, enable)


def adaptive_eq(enable: bool) -> Command:
    return _switch(0x27, enable)


def wearing_detection(enable: bool, music_index: int, anc_index: int) -> Command:
    return Command(
        0x2C, bytes([_SWITCH_BYTE[bool(enable)], music_index, anc_index])
    )


def wearing_detection_v2(
    enable: bool, music_index: int, anc_index: int, tone_enable: bool
) -> Command:
    return Command(
        0x2C,
        bytes([
            _SWITCH_BYTE[bool(enable)],
            music_index,
            anc_index,
            _SWITCH_BYTE[bool(tone_enable)],
        ]),
    )


def spatial_audio(enable: bool) -> Command:
    return _switch(0x2D, enable)


def music_mode(mode: int) -> Command:
    return _single(0x2E, mode)


def env_adaptation(state: int) -> Command:
    return _single(0x32, state)


def tws_enable(enable: bool) -> Command:
    return _switch(0x34, enable)


def led_switch(enable: bool) -> Command:
    return _switch(0x35, enable)


def led_effect(
    speed: int, brightness: int, effect_index: int, colors: Iterable[Color]
) -> Command:
    params = bytearray([speed, brightness, effect_index])
    for color in colors:
        params += bytes([color.r, color.g, color.b])
    return Command(0x36, params)


def play_mode(mode: int) -> Command:
    return _single(0x37, mode)


def focus_mode(enable: bool) -> Command:
    return _switch(0x39, enable)


def music_status(music_id: int, is_playing: bool, play_mode: int) -> Command:
    return Command(
        0x3A, struct.pack("<IBB", music_id, 0x01 if is_playing else 0x00, play_mode)
    )


def music_info(start_tone_id: int, files: Iterable[MusicFile]) -> Command:
    params = bytes([start_tone_id]) + b"".join(
        struct.pack("<IH", f.music_id, f.total) for f in files
    )
    return Command(0x3B, params)


def tone_play(tone_id: int) -> Command:
    return _single(0x3D, tone_id)


def sync_time(moment: datetime) -> Command:
    """Encode a wall-clock time; the weekday is a bit mask with Sunday as bit 0."""
    weekday_bit = 1 << (moment.isoweekday() % 7)
    return Command(
        0x3E,
        bytes([
            moment.year % 100,
            moment.month,
            moment.day,
            moment.hour,
            moment.minute,
            moment.second,
            weekday_bit,
        ]),
    )


def alarm_add(alarm_id: int, hour: int, minute: int, cycle: int) -> Command:
    return Command(
        0x3F, bytes([AlarmOperation.ADD, alarm_id, 0x01, hour, minute, cycle, 0x05])
    )


def alarm_delete(alarm_id: int) -> Command:
    return Command(0x3F, bytes([AlarmOperation.DELETE, alarm_id, 0, 0, 0, 0, 0]))


def alarm_edit(
    alarm_id: int, enable: bool, hour: int, minute: int, cycle: int, index: int
) -> Command:
    return Command(
        0x3F,
        bytes([
            AlarmOperation.EDIT,
            alarm_id,
            0x01 if enable else 0x00,
            hour,
            minute,
            cycle,
            index,
        ]),
    )


def ai(action: int) -> Command:
    return _single(0x43, action)


def custom_eq_test(state: int) -> Command:
    return _single(0x45, state)


def eq_left(eq_index: int, master_gain: int, bands: Iterable[EQBand]) -> Command:
    return Command(0x46, _eq_v2_params(eq_index, master_gain, bands))


def eq_right(eq_index: int, master_gain: int, bands: Iterable[EQBand]) -> Command:
    return Command(0x47, _eq_v2_params(eq_index, master_gain, bands))


def in_ear_sensitivity(level: int) -> Command:
    return _single(0x48, level)


def game_config(config: int) -> Command:
    return _single(0x4A, config)


def request_data(cmd_id: int) -> Command:
    return _single(0xFE, cmd_id)


def eq_direct_data(eq_type: int, data: bytes) -> bytes:
    """Payload for the unframed EQ characteristic."""
    return bytes([eq_type]) + bytes(data)


def key_function_direct_data(mappings: Iterable[KeyMapping]) -> bytes:
    """Payload for the unframed key-function characteristic."""
    return b"".join(bytes([m.key, m.func]) for m in mappings)