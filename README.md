# quicky

A pure-Python toolkit for the BLE protocol spoken by QCY Bluetooth earbuds. It
builds the bytes to send, decodes the bytes that come back, and recognises the
earbuds in advertisement data. It has no runtime dependencies.

## Modules

- **`quicky.packet`**: the `0xFF`-framed packet format. A `Command` holds an
  `opcode` and its `parameters`; `Command.pack()` frames it as a packet, and
  `parse_packet()` splits a packet back into its commands, raising `PacketError`
  (a `ValueError`) on malformed input.
- **`quicky.commands`**: one builder per device setting, each returning a
  `Command`: `volume`, `noise_cancel_mode` (with `NoiseCancelMode`), `anc_setting`,
  the equalizer builders `eq_v1`, `eq_v2`, `eq_left` and `eq_right` (taking
  `EQBand`s; band gains are clamped to ±1270), `led_effect` (taking `Color`s),
  `alarm_add`, `alarm_edit`, `alarm_delete`, `music_status`, `music_info`
  (taking `MusicFile`s), `sync_time`, `wearing_detection`,
  `wearing_detection_v2`, `request_data` and many more. `eq_direct_data` and
  `key_function_direct_data` (with `KeyID`, `FuncID` and `KeyMapping`) return the
  unframed payloads meant for the EQ and key-function characteristics.
- **`quicky.responses`**: parsers for the data the earbuds report back:
  `parse_battery`, `parse_version`, `parse_eq_v1`, `parse_eq_v2`,
  `parse_alarm_list`, `parse_led_effect`, `parse_music_status`,
  `parse_music_info` and others. They return frozen dataclasses and raise
  `ResponseError` (a `ValueError`) when a payload is too short or malformed.
- **`quicky.events`**: `dispatch(cmd_id, params)` turns one command block into an
  `Event` with its `EventType`, the raw bytes, the parsed value and, if parsing
  failed, the error. Unknown command ids give `EventType.UNKNOWN`.
- **`quicky.advertisement`**: `parse_manufacturer_data()` decodes the
  manufacturer data in QCY advertisements into an `AdvertisementInfo` (vendor id,
  colour index, battery level and charging state of both buds and the case, and
  the buds' MAC addresses). `get_device_type()` tells QCY entries apart by their
  company id, `QCY_COMPANY_ID`.
- **`quicky.product`**: `ProductCatalog` maps vendor ids to `Product` entries and
  their `Features`. `parse_catalog()` builds one from JSON text and
  `load_catalog()` from a JSON file.
- **`quicky.discovery`**: `match_report()` picks QCY devices out of a
  `ScanReport`, returning a `ScanResult`. `Scanner` wraps any adapter object that
  offers `scan(callback)` and `stop_scan()` and calls the callback with
  `ScanReport`s; it forwards only the matches. `ScanResult.product_info()` looks
  the model up in a catalogue.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Building and reading packets

```python
from quicky import commands
from quicky.packet import parse_packet

packet = commands.volume(10, 10).pack()
assert packet == bytes([0xFF, 0x05, 0x08, 0x03, 0x0A, 0x0A, 0x00])

for command in parse_packet(packet):
    print(command.opcode, command.parameters)
```

## Decoding notifications

Every command found in a notification can be fed to `dispatch()`:

```python
from quicky.events import EventType, dispatch
from quicky.packet import parse_packet

notification = bytes([0xFF, 0x05, 0x2F, 0x03, 0x85, 0x50, 0x64])
for command in parse_packet(notification):
    event = dispatch(command.opcode, command.parameters)
    assert event.type is EventType.BATTERY
    print(event.parsed)
```

Here the payload is a battery report: the left bud at 5 % and charging, the right
bud at 80 % and the case at 100 %.

## Recognising the earbuds

```python
from quicky.advertisement import ManufacturerData
from quicky.discovery import ScanReport, match_report

payload = bytes([0x00, 0x2A]) + bytes(18)
report = ScanReport(
    address="placeholder-address",
    rssi=-60,
    local_name="earbuds",
    manufacturer_data=[ManufacturerData(0x521C, payload)],
)
result = match_report(report)
assert result is not None and result.advertisement.vendor_id == 42
```

## What this package does not do

- It does not talk to Bluetooth itself. There is no connection or GATT client:
  the bytes produced by `Command.pack()`, `eq_direct_data()` and
  `key_function_direct_data()` have to be written, and notifications read, with
  a BLE library of your choice. `Scanner` likewise needs an adapter object
  supplied by the caller.
- It ships no product data. `ProductCatalog` starts empty unless a catalogue is
  loaded with `parse_catalog()` or `load_catalog()`.
- It has no command-line program.