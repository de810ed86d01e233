import json

from quicky.advertisement import QCY_COMPANY_ID, ManufacturerData
from quicky.discovery import ScanReport, ScanResult, Scanner, match_report
from quicky.product import parse_catalog


def _payload():
    data = bytearray(24)
    data[0], data[1] = 0x12, 0x34
    data[5] = 70
    return bytes(data)


def _report(*entries, address="00:11:22:33:44:55", name="Buds"):
    return ScanReport(address=address, rssi=-60, local_name=name, manufacturer_data=entries)


class FakeAdapter:
    def __init__(self, reports):
        self.reports = reports
        self.stopped = False

    def scan(self, callback):
        for report in self.reports:
            callback(report)
        return "scanned"

    def stop_scan(self):
        self.stopped = True
        return "stopped"


def test_match_valid_report():
    result = match_report(_report(ManufacturerData(QCY_COMPANY_ID, _payload())))
    assert result.address == "00:11:22:33:44:55"
    assert result.rssi == -60
    assert result.name == "Buds"
    assert result.advertisement.vendor_id == 0x1234
    assert result.advertisement.left_battery == 70


def test_other_company_ignored():
    assert match_report(_report(ManufacturerData(0x004C, _payload()))) is None


def test_short_qcy_data_ignored():
    assert match_report(_report(ManufacturerData(QCY_COMPANY_ID, b"\x01\x02"))) is None


def test_skips_bad_entry_and_uses_next():
    report = _report(
        ManufacturerData(QCY_COMPANY_ID, b"\x00"),
        ManufacturerData(QCY_COMPANY_ID, _payload()),
    )
    assert match_report(report).advertisement.vendor_id == 0x1234


def test_no_manufacturer_data():
    assert match_report(_report()) is None


def test_scanner_filters_reports():
    adapter = FakeAdapter([
        _report(ManufacturerData(0x004C, _payload()), address="aa"),
        _report(ManufacturerData(QCY_COMPANY_ID, _payload()), address="bb"),
        _report(address="cc"),
    ])
    found = []
    assert Scanner(adapter).scan(found.append) == "scanned"
    assert [r.address for r in found] == ["bb"]


def test_stop_scan_delegates():
    adapter = FakeAdapter([])
    assert Scanner(adapter).stop_scan() == "stopped"
    assert adapter.stopped is True


def test_product_info_lookup():
    catalog = parse_catalog(json.dumps({"4660": {"vendorId": 4660, "title": "Model A"}}))
    result = match_report(_report(ManufacturerData(QCY_COMPANY_ID, _payload())))
    assert result.product_info(catalog).title == "Model A"


def test_product_info_without_advertisement():
    catalog = parse_catalog(json.dumps({"0": {"title": "Zero"}}))
    result = ScanResult(address="x", rssi=0, name="", advertisement=None)
    assert result.product_info(catalog) is None