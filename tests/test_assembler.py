"""Tests for cross-sheet assembly and operating-day ordering."""
import unittest

from bus_schedule_converter.assembler import (
    build_schedule,
    minutes_since_5am,
    operating_day_key,
    sort_by_operating_day,
)
from bus_schedule_converter.models import (
    DepartureRecord,
    DepartureType,
    ScheduleExtractionError,
    SheetStatus,
)

HEADER = ["Hotel A", "Hotel B", "Arena", "Bus No", "Bus Details"]


def rec(time, location="x"):
    return DepartureRecord(time=time, location=location)


class TestMinutesSince5am(unittest.TestCase):
    def test_anchors(self):
        self.assertEqual(minutes_since_5am(5, 0), 0)
        self.assertEqual(minutes_since_5am(6, 0), 60)
        self.assertEqual(minutes_since_5am(23, 59), 1139)
        self.assertEqual(minutes_since_5am(0, 0), 1140)
        self.assertEqual(minutes_since_5am(4, 59), 1439)

    def test_bijection(self):
        values = {minutes_since_5am(h, m) for h in range(24) for m in range(60)}
        self.assertEqual(values, set(range(1440)))

    def test_record_key(self):
        self.assertEqual(operating_day_key(rec("07:30")), 150)
        self.assertEqual(operating_day_key(rec("")), 1140)


class TestSortByOperatingDay(unittest.TestCase):
    def test_early_morning_goes_last(self):
        ordered = sort_by_operating_day([rec("01:00"), rec("23:00"), rec("05:00")])
        self.assertEqual([r.time for r in ordered], ["05:00", "23:00", "01:00"])

    def test_stable_for_ties(self):
        ordered = sort_by_operating_day([rec("07:00", "b"), rec("06:00"), rec("07:00", "a")])
        self.assertEqual([r.location for r in ordered], ["x", "b", "a"])


class TestBuildSchedule(unittest.TestCase):
    def test_merges_and_sorts_across_sheets(self):
        workbook = [
            ("Evening", [HEADER, ["18:00", "", "19:00", "2", "Joe\nPB2"]]),
            ("Morning", [HEADER, ["7:00", "7:15", "8:00", "1", "Ken\nPA1"]]),
        ]
        bundle = build_schedule(workbook)

        self.assertEqual([r.time for r in bundle.stop_departures], ["07:00", "07:15", "18:00"])
        self.assertEqual([r.time for r in bundle.destination_departures], ["08:00", "19:00"])
        self.assertEqual(
            [(r.time, r.departure_type) for r in bundle.combined],
            [
                ("07:00", DepartureType.STOP),
                ("07:15", DepartureType.STOP),
                ("08:00", DepartureType.DESTINATION),
                ("18:00", DepartureType.STOP),
                ("19:00", DepartureType.DESTINATION),
            ],
        )
        self.assertEqual(bundle.total_sheets, 2)
        self.assertEqual([s.sheet_name for s in bundle.sheet_summaries], ["Evening", "Morning"])
        self.assertTrue(all(r.departure_type is None for r in bundle.stop_departures))

    def test_stop_before_destination_on_tie(self):
        rows = [HEADER, ["8:00", "", "", "1", ""], ["7:00", "", "8:00", "1", ""]]
        bundle = build_schedule({"s": rows})
        eight = [r for r in bundle.combined if r.time == "08:00"]
        self.assertEqual(
            [r.departure_type for r in eight], [DepartureType.STOP, DepartureType.DESTINATION]
        )

    def test_bad_sheets_do_not_stop_the_run(self):
        bundle = build_schedule(
            {
                "Tiny": [["Hotel A"]],
                "Notes": [["hello"], ["world"]],
                "Real": [HEADER, ["6:00", "", "", "", ""]],
            }
        )
        self.assertEqual(
            [s.status for s in bundle.sheet_summaries],
            [
                SheetStatus.SKIPPED_INSUFFICIENT_DATA,
                SheetStatus.NO_HEADER_FOUND,
                SheetStatus.PROCESSED,
            ],
        )
        self.assertEqual(len(bundle.stop_departures), 1)

    def test_overnight_runs_sort_after_evening(self):
        rows = [HEADER, ["0:30", "", "", "", ""], ["23:30", "", "", "", ""], ["5:10", "", "", "", ""]]
        bundle = build_schedule({"s": rows})
        # 00:30 is dropped as pre-5am noise
        self.assertEqual([r.time for r in bundle.stop_departures], ["05:10", "23:30"])

    def test_empty_workbook(self):
        bundle = build_schedule({})
        self.assertEqual(bundle.total_sheets, 0)
        self.assertEqual(bundle.combined, ())

    def test_malformed_workbook_wrapped(self):
        with self.assertRaises(ScheduleExtractionError) as ctx:
            build_schedule(None)
        self.assertTrue(str(ctx.exception).startswith("Failed to process schedule data: "))
        self.assertIsInstance(ctx.exception.__cause__, TypeError)

    def test_malformed_sheet_aborts(self):
        with self.assertRaises(ScheduleExtractionError):
            build_schedule([("ok", [HEADER, ["7:00"]]), ("broken", 42)])


if __name__ == "__main__":
    unittest.main()
