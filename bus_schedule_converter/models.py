# -*- coding: utf-8 -*-
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from .config import DESTINATION_DEPARTURE_LABEL, STOP_DEPARTURE_LABEL


class ScheduleExtractionError(RuntimeError):
    """The workbook as a whole could not be processed."""


class DepartureType(Enum):
    STOP = STOP_DEPARTURE_LABEL
    DESTINATION = DESTINATION_DEPARTURE_LABEL


class SheetStatus(Enum):
    PROCESSED = "Processed"
    SKIPPED_INSUFFICIENT_DATA = "Skipped - insufficient data"
    NO_HEADER_FOUND = "No header found"
    NO_SCHEDULES_FOUND = "No schedules found"


@dataclass(frozen=True)
class DepartureRecord:
    time: str
    location: str
    license_plate: str = ""
    driver: str = ""
    bus_number: str = ""
    departure_type: Optional[DepartureType] = None

    def as_row(self) -> Dict[str, str]:
        row = {
            "Time": self.time,
            "Location": self.location,
            "License Plate": self.license_plate,
            "Driver": self.driver,
            "Bus No": self.bus_number,
        }
        if self.departure_type is not None:
            row["Departure Type"] = self.departure_type.value
        return row


@dataclass(frozen=True)
class SheetSummary:
    sheet_name: str
    status: SheetStatus
    rows_scanned: int = 0
    stop_departure_count: int = 0
    destination_departure_count: int = 0


@dataclass(frozen=True)
class ScheduleBundle:
    stop_departures: Tuple[DepartureRecord, ...]
    destination_departures: Tuple[DepartureRecord, ...]
    combined: Tuple[DepartureRecord, ...]
    sheet_summaries: Tuple[SheetSummary, ...]
    total_sheets: int
