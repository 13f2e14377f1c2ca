# -*- coding: utf-8 -*-
import io
import logging
import os
from datetime import datetime, timedelta

import pandas as pd
import plotly.express as px
import streamlit as st

from bus_schedule_converter.assembler import build_schedule, minutes_since_5am
from bus_schedule_converter.config import (
    COMBINED_SHEET,
    DESTINATION_SHEET,
    DOWNLOAD_FILE_NAME,
    OPERATING_DAY_START_HOUR,
    STOP_SHEET,
)
from bus_schedule_converter.models import ScheduleBundle, ScheduleExtractionError
from bus_schedule_converter.time_parser import describe_time
from bus_schedule_converter.workbook_io import bundle_to_frames, read_workbook, write_bundle

logger = logging.getLogger(__name__)

# Anchor the operating day to a dummy date so we can plot just times of day
TIMELINE_DAY = datetime(2025, 1, 1)


@st.cache_data(show_spinner=False)
def process_workbook(data: bytes) -> ScheduleBundle:
    """
    Decode the upload and extract the schedule.
    Cached so it only reruns when the uploaded bytes change.
    """
    return build_schedule(read_workbook(io.BytesIO(data)))


def show_sheet_summary(bundle: ScheduleBundle):
    st.markdown(f"**Sheets processed ({bundle.total_sheets} total):**")
    cols = st.columns(3)
    for idx, sheet in enumerate(bundle.sheet_summaries):
        with cols[idx % 3]:
            lines = [f"**{sheet.sheet_name}**", sheet.status.value]
            if sheet.rows_scanned:
                lines.append(f"{sheet.stop_departure_count} hotel departures")
                lines.append(f"{sheet.destination_departure_count} WCH departures")
            st.info("  \n".join(lines))


def show_timeline(combined: pd.DataFrame):
    if combined.empty:
        return
    df = combined.copy()

    def to_dt(label):
        # 05:00 opens the day, anything earlier belongs to the next morning
        hour, minute = map(int, label.split(":"))
        return TIMELINE_DAY + timedelta(
            hours=OPERATING_DAY_START_HOUR, minutes=minutes_since_5am(hour, minute)
        )

    df["when"] = df["Time"].apply(to_dt)
    df["Bus"] = df["Bus No"].replace("", "Unknown")

    fig = px.scatter(
        df,
        x="when",
        y="Bus",
        color="Departure Type",
        hover_data=["Time", "Location", "Driver", "License Plate"],
    )
    fig.update_xaxes(tickformat="%H:%M", dtick=3600000, title=None)
    fig.update_layout(height=500, margin={"l": 0, "r": 0, "t": 30, "b": 0})

    st.subheader("🕒 Operating-day timeline")
    st.plotly_chart(fig, use_container_width=True)


def show_time_checker():
    with st.expander("🔎 Check how a time value is read"):
        raw = st.text_input("Cell value (e.g. 6, 7:00, 07.00, 700, 0.25)", key="time_probe")
        if raw:
            diagnosis = describe_time(raw)
            st.write(
                {
                    "parsed": diagnosis.parsed or "unparseable",
                    "format": diagnosis.strategy,
                    "kept (05:00 or later)": diagnosis.passes_filter,
                }
            )


# ======================================================
# ---------------- Streamlit APP -----------------------
# ======================================================
def main():
    logging.basicConfig(
        level=os.environ.get("BUS_SCHEDULE_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    st.set_page_config(page_title="Bus Schedule Converter", page_icon="🚌", layout="wide")
    st.title("🚌 Bus Schedule Converter")
    st.caption("Convert your bus schedule Excel files to organized format")

    st.markdown("""
How to use:
1. Upload your Excel file containing bus schedule data (all tabs are read).
2. Each tab needs a header row (within the first 10 rows) naming the hotels and the destination.
3. Review the preview, then download the file with "Hotel Departures", "WCH Departures" and "Combined Schedule" sheets.
    """)

    upload = st.file_uploader("Upload Excel File (.xlsx/.xls)", type=["xlsx", "xls"])
    show_time_checker()
    if upload is None:
        st.stop()

    with st.spinner("Processing…"):
        try:
            bundle = process_workbook(upload.getvalue())
        except ScheduleExtractionError as err:
            st.error(f"Error processing file: {err}")
            st.stop()
        except ValueError as err:
            # pandas / openpyxl could not read the upload at all
            logger.error("could not read %s: %s", upload.name, err)
            st.error(f"Error processing file: {err}")
            st.stop()

    st.success("Processing complete!")
    show_sheet_summary(bundle)

    col1, col2 = st.columns(2)
    col1.metric(STOP_SHEET, len(bundle.stop_departures))
    col2.metric(DESTINATION_SHEET, len(bundle.destination_departures))

    frames = bundle_to_frames(bundle)
    if bundle.stop_departures or bundle.destination_departures:
        with st.expander("Show preview"):
            for title, sheet_name in [
                ("Hotel Departures Schedule", STOP_SHEET),
                ("WCH Departures Schedule", DESTINATION_SHEET),
                ("Combined Schedule", COMBINED_SHEET),
            ]:
                df = frames[sheet_name]
                if df.empty:
                    continue
                st.markdown(f"#### {title} ({len(df)} entries)")
                st.dataframe(df, hide_index=True)
        show_timeline(frames[COMBINED_SHEET])

    st.download_button(
        "Download Converted Excel File",
        data=write_bundle(bundle),
        file_name=DOWNLOAD_FILE_NAME,
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )


if __name__ == "__main__":
    main()
