# -*- coding: utf-8 -*-
import math


def cell_text(raw) -> str:
    """Raw cell value -> trimmed text ("" for empty cells)."""
    if raw is None:
        return ""
    if isinstance(raw, float):
        if math.isnan(raw):
            return ""
        # the sheet reader hands whole numbers back as 101, never 101.0
        if raw.is_integer():
            return str(int(raw))
    return str(raw).strip()


def cell_at(row, index: int):
    """Cell `index` of `row`, or "" when the row is too short."""
    if index is None or index < 0 or row is None or index >= len(row):
        return ""
    return row[index]
