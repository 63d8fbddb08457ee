import unittest
from datetime import date, datetime
from comedor.logic.days import (
    InvalidDate, to_canonical, to_display, days_equal, is_canonical_day,
    day_of_week_name, parse_date, monday_of, week_id, format_date_display,
    is_valid_date_string, week_range
)
from comedor.utilities.constants import DAYS_CANONICAL, DAYS_DISPLAY


class TestDayNames(unittest.TestCase):

    def test_display_round_trip(self):
        for canonical in DAYS_CANONICAL:
            self.assertEqual(to_canonical(to_display(canonical)), canonical)

    def test_display_names_to_canonical(self):
        for display, canonical in zip(DAYS_DISPLAY, DAYS_CANONICAL):
            self.assertEqual(to_canonical(display), canonical)
        self.assertEqual(to_canonical("Miércoles"), "miercoles")

    def test_to_display(self):
        self.assertEqual(to_display("miercoles"), "Miércoles")
        self.assertEqual(to_display(" SABADO "), "Sábado")
        self.assertEqual(to_display(None), "")

    def test_unknown_names_pass_through(self):
        self.assertEqual(to_canonical("Feriado"), "feriado")
        self.assertFalse(is_canonical_day(to_canonical("Feriado")))
        self.assertEqual(to_display("Feriado"), "Feriado")

    def test_days_equal(self):
        self.assertTrue(days_equal("Miércoles", "miercoles"))
        self.assertTrue(days_equal("miercoles", "Miércoles"))
        for name in DAYS_CANONICAL + DAYS_DISPLAY:
            self.assertTrue(days_equal(name, name))
        self.assertFalse(days_equal("lunes", "martes"))
        self.assertFalse(days_equal(None, "lunes"))
        self.assertFalse(days_equal("lunes", None))
        self.assertFalse(days_equal(None, None))


class TestDates(unittest.TestCase):

    def test_day_of_week_name(self):
        self.assertEqual(day_of_week_name(date(2025, 4, 7)), "Lunes")
        self.assertEqual(day_of_week_name(datetime(2025, 4, 9, 12, 30)), "Miércoles")
        self.assertEqual(day_of_week_name("2025-04-12"), "Sábado")

    def test_day_of_week_name_rejects_bad_input(self):
        for bad in (None, "not a date", 42, "2025-02-30"):
            with self.assertRaises(InvalidDate):
                day_of_week_name(bad)

    def test_invalid_date_is_value_error(self):
        self.assertTrue(issubclass(InvalidDate, ValueError))

    def test_parse_date_formats(self):
        self.assertEqual(parse_date("2025-04-07"), date(2025, 4, 7))
        self.assertEqual(parse_date("07/04/2025"), date(2025, 4, 7))

    def test_monday_of(self):
        self.assertEqual(monday_of("2025-04-07"), date(2025, 4, 7))
        self.assertEqual(monday_of("2025-04-10"), date(2025, 4, 7))
        # Sunday belongs to the week that started six days earlier
        self.assertEqual(monday_of("2025-04-13"), date(2025, 4, 7))
        self.assertEqual(monday_of().weekday(), 0)

    def test_week_id_and_display(self):
        self.assertEqual(week_id(date(2025, 4, 11)), "2025-04-07")
        self.assertEqual(format_date_display("2025-04-07"), "07/04/2025")

    def test_is_valid_date_string(self):
        self.assertTrue(is_valid_date_string("2024-02-29"))
        self.assertFalse(is_valid_date_string("2023-02-31"))
        self.assertFalse(is_valid_date_string("07/04/2025"))
        self.assertFalse(is_valid_date_string(None))

    def test_week_range(self):
        rng = week_range("2025-04-07")
        self.assertEqual(rng["start_iso"], "2025-04-07")
        self.assertEqual(rng["end_iso"], "2025-04-13")
        self.assertEqual(rng["display_text"], "Semana del 07/04/2025 al 13/04/2025")


if __name__ == "__main__":
    unittest.main()
