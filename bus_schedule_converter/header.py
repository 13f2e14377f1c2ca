# -*- coding: utf-8 -*-
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from .cells import cell_text
from .config import (
    DESTINATION_KEYWORDS,
    GENERIC_HEADER_PHRASES,
    HEADER_SCAN_ROWS,
    STOP_KEYWORDS,
)

logger = logging.getLogger(__name__)


class ColumnRole(Enum):
    DESTINATION = "destination"
    STOP = "stop"
    BUS_NUMBER = "bus_number"
    BUS_DETAILS = "bus_details"


def _any_of(keywords) -> Callable[[str], bool]:
    return lambda text: any(k in text for k in keywords)


def _is_bus_number(text: str) -> bool:
    return ("bus" in text and "no" in text) or text == "bus no" or "bus number" in text


def _is_bus_details(text: str) -> bool:
    return (
        ("bus" in text and "detail" in text)
        or "driver" in text
        or "license" in text
        or "plate" in text
    )


# First matching rule wins. A cell like "Sentosa Hotel" is a destination,
# "Bus No / Driver" is a bus number column.
KEYWORD_RULES: Tuple[Tuple[Callable[[str], bool], ColumnRole], ...] = (
    (_any_of(DESTINATION_KEYWORDS), ColumnRole.DESTINATION),
    (_any_of(STOP_KEYWORDS), ColumnRole.STOP),
    (_is_bus_number, ColumnRole.BUS_NUMBER),
    (_is_bus_details, ColumnRole.BUS_DETAILS),
)


def classify_cell(value) -> Optional[ColumnRole]:
    text = cell_text(value).lower()
    if not text:
        return None
    for matches, role in KEYWORD_RULES:
        if matches(text):
            return role
    return None


def has_generic_header_phrase(row: Sequence) -> bool:
    return any(
        phrase in cell_text(cell).lower()
        for cell in row
        for phrase in GENERIC_HEADER_PHRASES
    )


@dataclass(frozen=True)
class StopColumn:
    label: str
    column_index: int


@dataclass
class HeaderLayout:
    row_index: int
    stop_columns: List[StopColumn] = field(default_factory=list)
    destination_column: Optional[int] = None
    bus_number_column: Optional[int] = None
    bus_details_column: Optional[int] = None

    def qualifies(self, row: Sequence) -> bool:
        stops = len(self.stop_columns)
        if self.destination_column is not None:
            if stops >= 1:
                return True
        elif stops >= 2:
            return True
        return stops >= 1 and has_generic_header_phrase(row)


def layout_for_row(row: Sequence, row_index: int) -> HeaderLayout:
    """Classify every cell of one candidate header row."""
    layout = HeaderLayout(row_index=row_index)
    for j, cell in enumerate(row):
        role = classify_cell(cell)
        if role is None:
            continue
        logger.debug("row %d col %d %r -> %s", row_index, j, cell, role.value)
        if role is ColumnRole.DESTINATION:
            # a second destination cell replaces the first
            layout.destination_column = j
        elif role is ColumnRole.STOP:
            layout.stop_columns.append(StopColumn(cell_text(cell), j))
        elif role is ColumnRole.BUS_NUMBER:
            layout.bus_number_column = j
        else:
            layout.bus_details_column = j
    return layout


def find_header(rows: Sequence[Sequence]) -> Optional[HeaderLayout]:
    """
    Scan the top of a sheet for the header row.

    A row counts as the header when it has a destination plus at least one
    stop, two or more stops on their own, or one stop next to a generic
    "departure time" / "pickup" / "drop" caption. The first such row wins.
    """
    for i in range(min(HEADER_SCAN_ROWS, len(rows))):
        row = rows[i]
        if not row:
            continue
        layout = layout_for_row(row, i)
        if layout.qualifies(row):
            logger.info(
                "header at row %d: stops=%s destination=%s bus_no=%s bus_details=%s",
                i,
                [(c.label, c.column_index) for c in layout.stop_columns],
                layout.destination_column,
                layout.bus_number_column,
                layout.bus_details_column,
            )
            return layout
    return None
