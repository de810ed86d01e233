import json

import pytest

from quicky.product import ProductCatalog, load_catalog, parse_catalog

SAMPLE = {
    "4660": {
        "vendorId": 4660,
        "title": "Model A",
        "subTitle": "Wireless",
        "category": "earbuds",
        "features": {
            "anc": {
                "modes": [
                    {
                        "name": "anc",
                        "startcmdid": 1,
                        "endcmdid": 3,
                        "defaultcmd": 2,
                        "viewtype": 1,
                        "items": [{"name": "deep", "startcmdid": 4, "endcmdid": 5}],
                    }
                ]
            },
            "eq": {
                "bands": 10,
                "mindb": -12,
                "maxdb": 12,
                "freq": "31,62,125",
                "characteristic": "v2",
                "presets": ["flat", "bass"],
            },
            "key_function": {"events": [{"name": "double", "functions": ["next", "prev"]}]},
            "channel_balance": True,
            "find_earphone": True,
            "auto_off_timer": {"cmdid": 20, "repeat": 2},
            "settings": [
                {"name": "ldac", "type": "switch", "cmdid": 35},
                {"name": "reset", "type": "button", "cmd": "ff"},
            ],
        },
    },
    "99": {"vendorId": 99, "title": "Plain"},
}


@pytest.fixture
def catalog():
    return parse_catalog(json.dumps(SAMPLE))


def test_count(catalog):
    assert len(catalog) == 2


def test_lookup_by_int(catalog):
    product = catalog.lookup(4660)
    assert product.title == "Model A"
    assert product.sub_title == "Wireless"
    assert product.vendor_id == 4660


def test_lookup_by_string_matches_int(catalog):
    assert catalog.lookup_by_string("4660") == catalog.lookup(4660)


def test_missing_lookup_returns_none(catalog):
    assert catalog.lookup(1) is None
    assert catalog.lookup_by_string("nope") is None


def test_nested_features(catalog):
    features = catalog.lookup(4660).features
    mode = features.anc.modes[0]
    assert (mode.name, mode.start_cmd_id, mode.end_cmd_id, mode.default_cmd) == ("anc", 1, 3, 2)
    assert mode.items[0].name == "deep"
    assert features.eq.presets == ("flat", "bass")
    assert features.eq.min_db == -12
    assert features.key_function.events[0].functions == ("next", "prev")
    assert features.channel_balance is True
    assert features.device_name is False
    assert features.auto_off_timer.cmd_id == 20
    assert features.settings[0].cmd_id == 35
    assert features.settings[1].cmd_id is None
    assert features.settings[1].cmd == "ff"


def test_missing_fields_default(catalog):
    product = catalog.lookup(99)
    assert product.category == ""
    assert product.features.anc is None
    assert product.features.settings == ()


def test_invalid_json_raises():
    with pytest.raises(ValueError, match="failed to load product database"):
        parse_catalog("{not json")


def test_non_object_raises():
    with pytest.raises(ValueError):
        parse_catalog("[1, 2]")


def test_load_catalog_from_file(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(json.dumps(SAMPLE), encoding="utf-8")
    catalog = load_catalog(path)
    assert len(catalog) == 2
    assert catalog.lookup(99).title == "Plain"


def test_empty_catalog():
    assert len(ProductCatalog()) == 0
    assert ProductCatalog().lookup(0) is None