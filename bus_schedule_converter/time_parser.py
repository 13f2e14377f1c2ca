# -*- coding: utf-8 -*-
import logging
import math
import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .cells import cell_text
from .config import HHMM_MAX, HHMM_MIN, MINUTES_PER_DAY, OPERATING_DAY_START_HOUR

logger = logging.getLogger(__name__)

BARE_HOUR_RE = re.compile(r"^(?:[5-9]|1[0-9]|2[0-3])$")
SEPARATED_RE = re.compile(r"^(\d{1,2})[:.](\d{2})$")
HHMM_RE = re.compile(r"^\d{3,4}$")


@dataclass(frozen=True)
class ClockTime:
    hour: int
    minute: int

    @property
    def minutes(self) -> int:
        return self.hour * 60 + self.minute

    @property
    def label(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


def _clock(total_minutes: int) -> ClockTime:
    # out-of-range values roll over like a wall clock (25:10 -> 01:10)
    total_minutes %= MINUTES_PER_DAY
    return ClockTime(total_minutes // 60, total_minutes % 60)


# ------------------------------
# Strategies, tried in order. Each returns a ClockTime or None.
# Order matters: "0.25" must be read as a day fraction before anything else.

def _day_fraction(text: str) -> Optional[ClockTime]:
    try:
        value = float(text)
    except ValueError:
        return None
    if not 0 < value < 1:
        return None
    # half-up, same as the spreadsheet's own rounding
    return _clock(math.floor(value * MINUTES_PER_DAY + 0.5))


def _bare_hour(text: str) -> Optional[ClockTime]:
    if not BARE_HOUR_RE.match(text):
        return None
    return ClockTime(int(text), 0)


def _separated(text: str) -> Optional[ClockTime]:
    m = SEPARATED_RE.match(text)
    if not m:
        return None
    return _clock(int(m.group(1)) * 60 + int(m.group(2)))


def _hhmm(text: str) -> Optional[ClockTime]:
    if not HHMM_RE.match(text):
        return None
    value = int(text)
    if not HHMM_MIN <= value <= HHMM_MAX or value % 100 >= 60:
        return None
    return ClockTime(value // 100, value % 100)


TIME_STRATEGIES: Tuple[Tuple[str, Callable[[str], Optional[ClockTime]]], ...] = (
    ("day_fraction", _day_fraction),
    ("bare_hour", _bare_hour),
    ("separated", _separated),
    ("hhmm", _hhmm),
)


def _match(raw) -> Tuple[str, Optional[ClockTime]]:
    text = cell_text(raw)
    if not text:
        return "empty", None
    for name, strategy in TIME_STRATEGIES:
        parsed = strategy(text)
        if parsed is not None:
            return name, parsed
    return "no_match", None


def parse_time(raw) -> Optional[ClockTime]:
    """
    Read a timetable cell as a time of day.
    Accepts day fractions (0.25), bare hours ("6"), "7:00" / "07.00" and "700".
    Returns None when nothing matches.
    """
    return _match(raw)[1]


def is_operating_hour(parsed: Optional[ClockTime]) -> bool:
    return parsed is not None and parsed.hour >= OPERATING_DAY_START_HOUR


def parse_departure_time(raw) -> Optional[ClockTime]:
    """parse_time, but anything before 05:00 counts as noise."""
    parsed = parse_time(raw)
    return parsed if is_operating_hour(parsed) else None


# ------------------------------
# Diagnostics for the "why wasn't my 6:00 picked up" question

@dataclass(frozen=True)
class TimeDiagnosis:
    value: object
    text: str
    strategy: str
    parsed: Optional[str]
    passes_filter: bool


def describe_time(raw) -> TimeDiagnosis:
    strategy, parsed = _match(raw)
    logger.debug("time %r -> %s via %s", raw, parsed.label if parsed else None, strategy)
    return TimeDiagnosis(
        value=raw,
        text=cell_text(raw),
        strategy=strategy,
        parsed=parsed.label if parsed else None,
        passes_filter=is_operating_hour(parsed),
    )
