# -*- coding: utf-8 -*-
import logging
from dataclasses import replace
from typing import Iterable, List, Mapping, Sequence, Tuple

from .config import OPERATING_DAY_START_HOUR
from .extractor import SheetResult, extract_sheet
from .models import DepartureRecord, DepartureType, ScheduleBundle, ScheduleExtractionError

logger = logging.getLogger(__name__)


# ------------------------------
# Operating-day ordering: 05:00 sorts first, 04:59 last
def minutes_since_5am(hour: int, minute: int) -> int:
    if hour >= OPERATING_DAY_START_HOUR:
        return (hour - OPERATING_DAY_START_HOUR) * 60 + minute
    return (hour + 24 - OPERATING_DAY_START_HOUR) * 60 + minute


def operating_day_key(record: DepartureRecord) -> int:
    hour, minute = map(int, (record.time or "00:00").split(":"))
    return minutes_since_5am(hour, minute)


def sort_by_operating_day(records: Iterable[DepartureRecord]) -> List[DepartureRecord]:
    # sorted() is stable, equal times keep their input order
    return sorted(records, key=operating_day_key)


def _sheets(workbook) -> List[Tuple[str, Sequence]]:
    if isinstance(workbook, Mapping):
        return list(workbook.items())
    return [(name, rows) for name, rows in workbook]


def build_schedule(workbook) -> ScheduleBundle:
    """
    Extract every sheet of a decoded workbook and merge the results.

    `workbook` is a mapping of sheet name -> rows, or a sequence of
    (sheet name, rows) pairs. Sheet-level problems end up in the summaries;
    anything else raises ScheduleExtractionError.
    """
    try:
        sheets = _sheets(workbook)
        logger.info("processing %d sheets: %s", len(sheets), [name for name, _ in sheets])

        results: List[SheetResult] = [extract_sheet(name, rows) for name, rows in sheets]

        stops = sort_by_operating_day(r for res in results for r in res.stop_departures)
        destinations = sort_by_operating_day(r for res in results for r in res.destination_departures)
        combined = sort_by_operating_day(
            [replace(r, departure_type=DepartureType.STOP) for r in stops]
            + [replace(r, departure_type=DepartureType.DESTINATION) for r in destinations]
        )
    except Exception as err:
        logger.error("error processing schedule data: %s", err, exc_info=True)
        raise ScheduleExtractionError(f"Failed to process schedule data: {err}") from err

    logger.info(
        "totals: %d hotel departures, %d WCH departures, %d combined",
        len(stops), len(destinations), len(combined),
    )
    return ScheduleBundle(
        stop_departures=tuple(stops),
        destination_departures=tuple(destinations),
        combined=tuple(combined),
        sheet_summaries=tuple(res.summary for res in results),
        total_sheets=len(sheets),
    )
