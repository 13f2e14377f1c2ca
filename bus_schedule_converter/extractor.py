# -*- coding: utf-8 -*-
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from .cells import cell_at, cell_text
from .config import FALLBACK_ROUTE_LABEL, LOOKBACK_ROWS, MIN_SHEET_ROWS
from .header import HeaderLayout, find_header
from .labels import clean_route_label, clean_stop_name, parse_driver_and_license
from .models import DepartureRecord, SheetStatus, SheetSummary
from .time_parser import ClockTime, parse_departure_time

logger = logging.getLogger(__name__)


@dataclass
class BusContext:
    """Last known bus info for the sheet; merged cells only fill their first row."""
    bus_number: str = ""
    driver: str = ""
    license_plate: str = ""

    def complete(self) -> bool:
        return bool(self.bus_number and self.driver and self.license_plate)

    def update(self, other: "BusContext") -> None:
        # never cleared, only overwritten by newer non-empty values
        if other.bus_number:
            self.bus_number = other.bus_number
        if other.driver:
            self.driver = other.driver
        if other.license_plate:
            self.license_plate = other.license_plate


@dataclass(frozen=True)
class SheetResult:
    summary: SheetSummary
    stop_departures: Tuple[DepartureRecord, ...] = ()
    destination_departures: Tuple[DepartureRecord, ...] = ()


def _fill_from_row(info: BusContext, row: Sequence, layout: HeaderLayout) -> None:
    """Fill blank fields of `info` from one row's bus columns."""
    if not info.bus_number and layout.bus_number_column is not None:
        info.bus_number = cell_text(cell_at(row, layout.bus_number_column))

    if (not info.driver or not info.license_plate) and layout.bus_details_column is not None:
        details = cell_text(cell_at(row, layout.bus_details_column))
        if details:
            parsed = parse_driver_and_license(details)
            info.driver = info.driver or parsed.driver
            info.license_plate = info.license_plate or parsed.license_plate


def row_bus_info(row: Sequence, layout: HeaderLayout) -> BusContext:
    info = BusContext()
    _fill_from_row(info, row, layout)
    return info


def lookback_bus_info(
    rows: Sequence[Sequence], row_index: int, layout: HeaderLayout, info: BusContext
) -> BusContext:
    """
    Fill what `info` is missing from the rows above `row_index`, nearest first.
    Stays below the header and at most LOOKBACK_ROWS rows away.
    """
    stop = max(layout.row_index + 1, row_index - LOOKBACK_ROWS)
    for k in range(row_index - 1, stop - 1, -1):
        if info.complete():
            break
        prev = rows[k]
        if prev:
            _fill_from_row(info, prev, layout)
    return info


def _stop_times(row: Sequence, layout: HeaderLayout) -> Dict[str, ClockTime]:
    times: Dict[str, ClockTime] = {}
    for col in layout.stop_columns:
        parsed = parse_departure_time(cell_at(row, col.column_index))
        if parsed is not None:
            times[col.label] = parsed
    return times


def route_label(stop_labels) -> str:
    names = [clean_route_label(label) for label in stop_labels]
    names = [n for n in names if n]
    return " & ".join(names) if names else FALLBACK_ROUTE_LABEL


def _record(time: ClockTime, location: str, bus: BusContext) -> DepartureRecord:
    return DepartureRecord(
        time=time.label,
        location=location,
        license_plate=bus.license_plate,
        driver=bus.driver,
        bus_number=bus.bus_number,
    )


def extract_rows(
    rows: Sequence[Sequence], layout: HeaderLayout
) -> Tuple[List[DepartureRecord], List[DepartureRecord]]:
    stops: List[DepartureRecord] = []
    destinations: List[DepartureRecord] = []
    bus = BusContext()

    for i in range(layout.row_index + 1, len(rows)):
        row = rows[i]
        if row is None:
            continue

        times = _stop_times(row, layout)
        if not times:
            continue

        destination_time = None
        if layout.destination_column is not None:
            destination_time = parse_departure_time(cell_at(row, layout.destination_column))

        info = row_bus_info(row, layout)
        if not info.complete():
            lookback_bus_info(rows, i, layout, info)
        bus.update(info)
        logger.debug("row %d bus: %s | %s | %s", i, bus.bus_number, bus.driver, bus.license_plate)

        for label, time in times.items():
            stops.append(_record(time, clean_stop_name(label), bus))

        if destination_time is not None:
            destinations.append(_record(destination_time, route_label(times), bus))

    return stops, destinations


def extract_sheet(sheet_name: str, rows: Sequence[Sequence]) -> SheetResult:
    """Run header discovery and row extraction for one sheet."""
    rows = list(rows)
    if len(rows) < MIN_SHEET_ROWS:
        logger.warning("sheet %r has insufficient data, skipping", sheet_name)
        return SheetResult(SheetSummary(sheet_name, SheetStatus.SKIPPED_INSUFFICIENT_DATA))

    layout = find_header(rows)
    if layout is None:
        logger.warning("sheet %r: no valid header found, skipping", sheet_name)
        return SheetResult(SheetSummary(sheet_name, SheetStatus.NO_HEADER_FOUND))

    stops, destinations = extract_rows(rows, layout)
    logger.info(
        "sheet %r: %d hotel departures, %d WCH departures",
        sheet_name, len(stops), len(destinations),
    )
    status = SheetStatus.PROCESSED if stops or destinations else SheetStatus.NO_SCHEDULES_FOUND
    summary = SheetSummary(
        sheet_name=sheet_name,
        status=status,
        rows_scanned=len(rows),
        stop_departure_count=len(stops),
        destination_departure_count=len(destinations),
    )
    return SheetResult(summary, tuple(stops), tuple(destinations))
