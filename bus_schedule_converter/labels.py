# -*- coding: utf-8 -*-
import re
from dataclasses import dataclass
from typing import List

from .config import ALIGHTING_GLYPH, BOARDING_GLYPH

# "(Pickup Only)", "(Pick-up only)", "(Drop Off Only)" ...
PICKUP_DROP_RE = re.compile(r"\(Pickup Only\)|\(Pick.*?Only\)|\(Drop.*?Only\)", re.IGNORECASE)
ANY_PARENTHETICAL_RE = re.compile(r"\(.*?\)")
GLYPH_RE = re.compile(f"{BOARDING_GLYPH}|{ALIGHTING_GLYPH}")

PLATE_RE = re.compile(r"[A-Z]{1,3}\d+[A-Z]?")
LINE_SPLIT_RE = re.compile(r"[\n\r]+")


def clean_stop_name(name: str) -> str:
    name = PICKUP_DROP_RE.sub("", name)
    name = GLYPH_RE.sub("", name)
    return name.strip()


def clean_route_label(name: str) -> str:
    """Stop name as used inside a destination record's "A & B" route."""
    name = ANY_PARENTHETICAL_RE.sub("", name)
    name = GLYPH_RE.sub("", name)
    return name.strip()


@dataclass(frozen=True)
class BusDetails:
    driver: str = ""
    license_plate: str = ""


def _from_lines(details: str):
    lines = LINE_SPLIT_RE.split(details)
    if len(lines) < 2:
        return "", ""
    driver = lines[0].strip()
    plate = ""
    for line in lines[1:]:
        m = PLATE_RE.search(line)
        if m:
            plate = m.group(0)
            break
    return driver, plate


def _from_tokens(details: str):
    plate = ""
    driver_parts: List[str] = []
    for token in details.split():
        if PLATE_RE.fullmatch(token):
            if not plate:
                plate = token
        elif not PLATE_RE.search(token):
            driver_parts.append(token)
    return " ".join(driver_parts), plate


def parse_driver_and_license(details: str) -> BusDetails:
    """
    Split a free-text bus details cell into driver name and plate.

    Cells are written either as "John Tan\\nSBA1234X" or "John Tan SBA1234X".
    Line splitting is tried first; whitespace splitting only fills in
    whichever field is still blank.
    """
    details = (details or "").strip()
    if not details:
        return BusDetails()

    driver, plate = _from_lines(details)
    if not driver or not plate:
        token_driver, token_plate = _from_tokens(details)
        driver = driver or token_driver
        plate = plate or token_plate
    return BusDetails(driver=driver, license_plate=plate)
