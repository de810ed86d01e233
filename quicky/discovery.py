"""Filtering BLE scan reports down to the earbuds."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from .advertisement import (
    QCY_COMPANY_ID,
    AdvertisementInfo,
    ManufacturerData,
    parse_manufacturer_data,
)
from .product import Product, ProductCatalog


@dataclass(frozen=True)
class ScanReport:
    """One advertisement as seen by a BLE adapter."""

    address: str
    rssi: int
    local_name: str = ""
    manufacturer_data: tuple[ManufacturerData, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "manufacturer_data", tuple(self.manufacturer_data))


@dataclass(frozen=True)
class ScanResult:
    """An advertisement recognised as coming from the earbuds."""

    address: str
    rssi: int
    name: str
    advertisement: AdvertisementInfo | None

    def product_info(self, catalog: ProductCatalog) -> Product | None:
        """Look up the advertised model in a product catalogue."""
        if self.advertisement is None:
            return None
        return catalog.lookup(self.advertisement.vendor_id)


def match_report(report: ScanReport) -> ScanResult | None:
    """Return a result for the first decodable QCY entry of a report, if any."""
    for entry in report.manufacturer_data:
        if entry.company_id != QCY_COMPANY_ID:
            continue
        try:
            info = parse_manufacturer_data(entry.data)
        except ValueError:
            continue
        return ScanResult(
            address=report.address,
            rssi=report.rssi,
            name=report.local_name,
            advertisement=info,
        )
    return None


class Scanner:
    """Scans through an adapter offering ``scan(callback)`` and ``stop_scan()``.

    The adapter calls its callback with a ScanReport for every advertisement.
    """

    def __init__(self, adapter: Any) -> None:
        self._adapter = adapter

    def scan(self, callback: Callable[[ScanResult], None]) -> Any:
        """Scan, calling ``callback`` for each advertisement from the earbuds."""

        def on_report(report: ScanReport) -> None:
            result = match_report(report)
            if result is not None:
                callback(result)

        return self._adapter.scan(on_report)

    def stop_scan(self) -> Any:
        return self._adapter.stop_scan()