# -*- coding: utf-8 -*-
# ==============================
# --------- CONFIG -------------
# ==============================
# Everything the extractor "knows" about the source sheets lives here.
# Add a hotel / destination keyword below when a new venue shows up.

# How many rows from the top of a sheet may hold the header
HEADER_SCAN_ROWS = 10

# How far up to look for a merged bus-number / bus-details cell
LOOKBACK_ROWS = 20

# Operating day runs 05:00 -> 04:59 next morning
OPERATING_DAY_START_HOUR = 5
MINUTES_PER_DAY = 24 * 60

# Sheets with fewer rows than this cannot hold header + data
MIN_SHEET_ROWS = 2

# "700" style times are only trusted inside this window
HHMM_MIN = 600
HHMM_MAX = 2359

DESTINATION_KEYWORDS = ("wch", "arena", "sentosa", "beach", "palawan", "destination")

STOP_KEYWORDS = (
    "hotel", "amara", "mercure", "holiday", "katong", "singapore", "ibis",
    "bencoolen", "orchard", "copthorne", "furama", "aloft", "dorsett", "michael",
)

GENERIC_HEADER_PHRASES = ("departure time", "pickup", "drop")

# boarding / alighting markers written after stop names
BOARDING_GLYPH = "上人"
ALIGHTING_GLYPH = "下人"

FALLBACK_ROUTE_LABEL = "Hotels"

# ------------------------------
# Output workbook layout
STOP_SHEET = "Hotel Departures"
DESTINATION_SHEET = "WCH Departures"
COMBINED_SHEET = "Combined Schedule"

RECORD_COLUMNS = ["Time", "Location", "License Plate", "Driver", "Bus No"]
COMBINED_COLUMNS = RECORD_COLUMNS + ["Departure Type"]

STOP_DEPARTURE_LABEL = "Hotel Departure"
DESTINATION_DEPARTURE_LABEL = "WCH Departure"

DOWNLOAD_FILE_NAME = "converted_bus_schedules.xlsx"
