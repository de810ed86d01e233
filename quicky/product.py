"""Catalogue of known earbud models, keyed by advertised vendor id."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any, Iterator, Mapping


def _obj(value: Any, what: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"{what}: expected an object")
    return value


def _list(value: Any, what: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{what}: expected an array")
    return value


@dataclass(frozen=True)
class ANCItem:
    name: str = ""
    start_cmd_id: int = 0
    end_cmd_id: int = 0

    @classmethod
    def from_dict(cls, raw: Any) -> ANCItem:
        d = _obj(raw, "anc item")
        return cls(
            name=str(d.get("name", "")),
            start_cmd_id=int(d.get("startcmdid", 0)),
            end_cmd_id=int(d.get("endcmdid", 0)),
        )


@dataclass(frozen=True)
class ANCMode:
    name: str = ""
    start_cmd_id: int = 0
    end_cmd_id: int = 0
    default_cmd: int = 0
    view_type: int = 0
    items: tuple[ANCItem, ...] = ()

    @classmethod
    def from_dict(cls, raw: Any) -> ANCMode:
        d = _obj(raw, "anc mode")
        return cls(
            name=str(d.get("name", "")),
            start_cmd_id=int(d.get("startcmdid", 0)),
            end_cmd_id=int(d.get("endcmdid", 0)),
            default_cmd=int(d.get("defaultcmd", 0)),
            view_type=int(d.get("viewtype", 0)),
            items=tuple(ANCItem.from_dict(i) for i in _list(d.get("items"), "anc items")),
        )


@dataclass(frozen=True)
class ANCFeature:
    modes: tuple[ANCMode, ...] = ()

    @classmethod
    def from_dict(cls, raw: Any) -> ANCFeature:
        d = _obj(raw, "anc")
        return cls(modes=tuple(ANCMode.from_dict(m) for m in _list(d.get("modes"), "anc modes")))


@dataclass(frozen=True)
class EQFeature:
    bands: int = 0
    min_db: int = 0
    max_db: int = 0
    freq: str = ""
    characteristic: str = ""
    presets: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, raw: Any) -> EQFeature:
        d = _obj(raw, "eq")
        return cls(
            bands=int(d.get("bands", 0)),
            min_db=int(d.get("mindb", 0)),
            max_db=int(d.get("maxdb", 0)),
            freq=str(d.get("freq", "")),
            characteristic=str(d.get("characteristic", "")),
            presets=tuple(str(p) for p in _list(d.get("presets"), "eq presets")),
        )


@dataclass(frozen=True)
class KeyEvent:
    name: str = ""
    functions: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, raw: Any) -> KeyEvent:
        d = _obj(raw, "key event")
        return cls(
            name=str(d.get("name", "")),
            functions=tuple(str(f) for f in _list(d.get("functions"), "key functions")),
        )


@dataclass(frozen=True)
class KeyFuncFeature:
    events: tuple[KeyEvent, ...] = ()

    @classmethod
    def from_dict(cls, raw: Any) -> KeyFuncFeature:
        d = _obj(raw, "key function")
        return cls(events=tuple(KeyEvent.from_dict(e) for e in _list(d.get("events"), "key events")))


@dataclass(frozen=True)
class AutoOffFeature:
    cmd_id: int = 0
    repeat: int = 0

    @classmethod
    def from_dict(cls, raw: Any) -> AutoOffFeature:
        d = _obj(raw, "auto off timer")
        return cls(cmd_id=int(d.get("cmdid", 0)), repeat=int(d.get("repeat", 0)))


@dataclass(frozen=True)
class SettingItem:
    name: str = ""
    type: str = ""
    cmd_id: int | None = None
    cmd: str = ""

    @classmethod
    def from_dict(cls, raw: Any) -> SettingItem:
        d = _obj(raw, "setting")
        cmd_id = d.get("cmdid")
        return cls(
            name=str(d.get("name", "")),
            type=str(d.get("type", "")),
            cmd_id=None if cmd_id is None else int(cmd_id),
            cmd=str(d.get("cmd", "")),
        )


@dataclass(frozen=True)
class Features:
    anc: ANCFeature | None = None
    eq: EQFeature | None = None
    key_function: KeyFuncFeature | None = None
    channel_balance: bool = False
    find_earphone: bool = False
    device_name: bool = False
    auto_off_timer: AutoOffFeature | None = None
    settings: tuple[SettingItem, ...] = ()

    @classmethod
    def from_dict(cls, raw: Any) -> Features:
        d = _obj(raw, "features")

        def optional(key, kind):
            value = d.get(key)
            return None if value is None else kind.from_dict(value)

        return cls(
            anc=optional("anc", ANCFeature),
            eq=optional("eq", EQFeature),
            key_function=optional("key_function", KeyFuncFeature),
            channel_balance=bool(d.get("channel_balance", False)),
            find_earphone=bool(d.get("find_earphone", False)),
            device_name=bool(d.get("device_name", False)),
            auto_off_timer=optional("auto_off_timer", AutoOffFeature),
            settings=tuple(SettingItem.from_dict(s) for s in _list(d.get("settings"), "settings")),
        )


@dataclass(frozen=True)
class Product:
    vendor_id: int = 0
    title: str = ""
    sub_title: str = ""
    category: str = ""
    features: Features = field(default_factory=Features)

    @classmethod
    def from_dict(cls, raw: Any) -> Product:
        d = _obj(raw, "product")
        return cls(
            vendor_id=int(d.get("vendorId", 0)),
            title=str(d.get("title", "")),
            sub_title=str(d.get("subTitle", "")),
            category=str(d.get("category", "")),
            features=Features.from_dict(d.get("features")),
        )


class ProductCatalog:
    """Products keyed by the decimal string of their vendor id."""

    def __init__(self, products: Mapping[str, Product] | None = None) -> None:
        self._products: dict[str, Product] = dict(products or {})

    def lookup(self, vendor_id: int) -> Product | None:
        return self._products.get(str(int(vendor_id)))

    def lookup_by_string(self, key: str) -> Product | None:
        return self._products.get(key)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[str]:
        return iter(self._products)

    def __contains__(self, key: object) -> bool:
        return key in self._products


def parse_catalog(text: str | bytes) -> ProductCatalog:
    """Build a catalogue from its JSON text."""
    try:
        raw = json.loads(text)
        if not isinstance(raw, dict):
            raise ValueError("expected an object at top level")
        products = {str(key): Product.from_dict(value) for key, value in raw.items()}
    except (ValueError, TypeError) as exc:
        raise ValueError(f"failed to load product database: {exc}") from exc
    return ProductCatalog(products)


def load_catalog(path: str | PathLike[str]) -> ProductCatalog:
    """Read and parse a catalogue file."""
    return parse_catalog(Path(path).read_bytes())