# -*- coding: utf-8 -*-
import io
import logging
from datetime import datetime, time
from typing import Dict, List, Optional

import pandas as pd

from .config import (
    COMBINED_COLUMNS,
    COMBINED_SHEET,
    DESTINATION_SHEET,
    RECORD_COLUMNS,
    STOP_SHEET,
)
from .models import ScheduleBundle

logger = logging.getLogger(__name__)

EXCEL_EPOCH = datetime(1899, 12, 30)


def _raw_value(value):
    """
    Undo the reader's type guessing so cells look like raw spreadsheet values:
    time-of-day -> fraction of a day, dates -> serial numbers, 101.0 -> 101.
    """
    if value is None or value is pd.NaT:
        return ""
    if isinstance(value, float):
        if pd.isna(value):
            return ""
        return int(value) if value.is_integer() else value
    if isinstance(value, datetime):
        return (value.replace(tzinfo=None) - EXCEL_EPOCH).total_seconds() / 86400
    if isinstance(value, time):
        return (value.hour * 3600 + value.minute * 60 + value.second) / 86400
    return value


def frame_to_rows(df: pd.DataFrame) -> List[list]:
    return [[_raw_value(v) for v in row] for row in df.itertuples(index=False, name=None)]


def read_workbook(source) -> Dict[str, List[list]]:
    """Load every sheet of an .xlsx/.xls file as rows of raw cell values."""
    frames = pd.read_excel(source, sheet_name=None, header=None, dtype=object)
    logger.info("read %d sheets: %s", len(frames), list(frames))
    return {str(name): frame_to_rows(df) for name, df in frames.items()}


def bundle_to_frames(bundle: ScheduleBundle) -> Dict[str, pd.DataFrame]:
    return {
        STOP_SHEET: pd.DataFrame(
            [r.as_row() for r in bundle.stop_departures], columns=RECORD_COLUMNS
        ),
        DESTINATION_SHEET: pd.DataFrame(
            [r.as_row() for r in bundle.destination_departures], columns=RECORD_COLUMNS
        ),
        COMBINED_SHEET: pd.DataFrame(
            [r.as_row() for r in bundle.combined], columns=COMBINED_COLUMNS
        ),
    }


def write_bundle(bundle: ScheduleBundle, target=None) -> Optional[bytes]:
    """
    Write the three output sheets to `target` (path or file object).
    Without a target the workbook is built in memory and its bytes returned.
    """
    buffer = io.BytesIO() if target is None else target
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        for sheet_name, df in bundle_to_frames(bundle).items():
            df.to_excel(writer, sheet_name=sheet_name, index=False)
    return buffer.getvalue() if target is None else None
