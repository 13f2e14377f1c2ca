# -*- coding: utf-8 -*-
"""Turn hand-made bus timetable workbooks into one sorted departure schedule."""
from .assembler import build_schedule, sort_by_operating_day
from .models import (
    DepartureRecord,
    DepartureType,
    ScheduleBundle,
    ScheduleExtractionError,
    SheetStatus,
    SheetSummary,
)
from .time_parser import parse_time

__version__ = "0.1.0"
