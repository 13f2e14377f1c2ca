"""Tests for stop name cleanup and bus details parsing."""
import unittest

from bus_schedule_converter.labels import (
    BusDetails,
    clean_route_label,
    clean_stop_name,
    parse_driver_and_license,
)


class TestCleanStopName(unittest.TestCase):
    def test_pickup_only(self):
        self.assertEqual(clean_stop_name("Amara Hotel (Pickup Only)"), "Amara Hotel")
        self.assertEqual(clean_stop_name("Amara Hotel (pick-up only)"), "Amara Hotel")

    def test_drop_only(self):
        self.assertEqual(clean_stop_name("Ibis Bencoolen (Drop Off Only)"), "Ibis Bencoolen")

    def test_glyphs(self):
        self.assertEqual(clean_stop_name("Orchard Hotel 上人"), "Orchard Hotel")
        self.assertEqual(clean_stop_name("下人 Furama"), "Furama")

    def test_other_parentheticals_kept(self):
        self.assertEqual(clean_stop_name("Hotel A (Lobby)"), "Hotel A (Lobby)")


class TestCleanRouteLabel(unittest.TestCase):
    def test_drops_every_parenthetical(self):
        self.assertEqual(clean_route_label("Hotel A (Lobby) 上人"), "Hotel A")

    def test_can_end_up_empty(self):
        self.assertEqual(clean_route_label("(Pickup Only)"), "")


class TestParseDriverAndLicense(unittest.TestCase):
    def test_newline_separated(self):
        self.assertEqual(
            parse_driver_and_license("John Tan\nSBA1234X"),
            BusDetails(driver="John Tan", license_plate="SBA1234X"),
        )

    def test_plate_on_later_line(self):
        result = parse_driver_and_license("Ahmad\r\n9123 4567\nPC 88K\nPC88K")
        self.assertEqual(result.driver, "Ahmad")
        self.assertEqual(result.license_plate, "PC88K")

    def test_space_separated(self):
        self.assertEqual(
            parse_driver_and_license("Lim Ah Kow SBS7788B"),
            BusDetails(driver="Lim Ah Kow", license_plate="SBS7788B"),
        )

    def test_first_plate_token_wins(self):
        result = parse_driver_and_license("PA123 Ken PB456")
        self.assertEqual(result.license_plate, "PA123")
        self.assertEqual(result.driver, "Ken")

    def test_line_driver_kept_when_plate_found_by_tokens(self):
        # no plate below the first line, so the token pass supplies it
        result = parse_driver_and_license("Mr Lee SG1A\nmobile 98765432")
        self.assertEqual(result.driver, "Mr Lee SG1A")
        self.assertEqual(result.license_plate, "SG1A")

    def test_driver_only(self):
        self.assertEqual(parse_driver_and_license("Raj"), BusDetails(driver="Raj"))

    def test_empty(self):
        self.assertEqual(parse_driver_and_license(""), BusDetails())
        self.assertEqual(parse_driver_and_license("   "), BusDetails())


if __name__ == "__main__":
    unittest.main()
