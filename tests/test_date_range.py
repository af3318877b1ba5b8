import unittest
from datetime import date

from cbr_fx.utils.date_range import parse_date, window_dates


class WindowDatesTests(unittest.TestCase):
    def test_window_is_newest_first_and_inclusive(self) -> None:
        days = list(window_dates("2024-03-02", 4))
        self.assertEqual(
            days,
            [date(2024, 3, 2), date(2024, 3, 1), date(2024, 2, 29), date(2024, 2, 28)],
        )

    def test_single_day_window(self) -> None:
        self.assertEqual(list(window_dates(date(2024, 1, 1), 1)), [date(2024, 1, 1)])

    def test_default_end_is_today(self) -> None:
        self.assertEqual(next(window_dates(days=3)), date.today())

    def test_default_window_size(self) -> None:
        self.assertEqual(len(list(window_dates("2024-01-01"))), 90)

    def test_invalid_input(self) -> None:
        with self.assertRaises(ValueError):
            list(window_dates("2024-01-01", 0))
        with self.assertRaises(ValueError):
            list(window_dates("2024-01-01", -3))
        with self.assertRaises(TypeError):
            list(window_dates("2024-01-01", 2.5))  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            parse_date("01/01/2024")

    def test_parse_date_accepts_date_instance(self) -> None:
        today = date(2024, 1, 1)
        self.assertIs(parse_date(today), today)


if __name__ == "__main__":
    unittest.main()
