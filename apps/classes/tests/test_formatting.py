from datetime import date, time

from django.test import SimpleTestCase

from apps.classes.formatting import (
    format_date,
    format_date_range,
    format_duration,
    format_time,
    format_time_range,
    spots_label,
    weeks_label,
)


class DateFormattingTest(SimpleTestCase):

    def test_format_date(self):
        self.assertEqual(format_date(date(2024, 1, 5)), "Jan 5")
        self.assertEqual(format_date("2024-11-30"), "Nov 30")

    def test_range_collapses_same_day(self):
        self.assertEqual(format_date_range("2024-03-02", "2024-03-02"), "Mar 2")

    def test_range(self):
        self.assertEqual(format_date_range("2024-01-05", "2024-02-02"), "Jan 5 - Feb 2")


class TimeFormattingTest(SimpleTestCase):

    def test_morning_and_afternoon(self):
        self.assertEqual(format_time("09:00"), "9:00 AM")
        self.assertEqual(format_time("13:30:00"), "1:30 PM")

    def test_midnight_and_noon(self):
        self.assertEqual(format_time(time(0, 5)), "12:05 AM")
        self.assertEqual(format_time(time(12, 0)), "12:00 PM")

    def test_time_range(self):
        self.assertEqual(format_time_range("09:00:00", "10:30:00"), "9:00 AM - 10:30 AM")

    def test_invalid_time(self):
        with self.assertRaises(ValueError):
            format_time("quarter past")


class DurationTest(SimpleTestCase):

    def test_hours_and_minutes(self):
        self.assertEqual(format_duration("09:00", "10:30"), "1 hr 30 min")

    def test_whole_hours(self):
        self.assertEqual(format_duration("09:00", "10:00"), "1 hour")
        self.assertEqual(format_duration("09:00", "11:00"), "2 hours")

    def test_minutes_only(self):
        self.assertEqual(format_duration("09:00", "09:45"), "45 min")

    def test_negative_span_is_zero(self):
        self.assertEqual(format_duration("10:00", "09:00"), "0 minutes")
        self.assertEqual(format_duration("10:00", "10:00"), "0 minutes")


class LabelTest(SimpleTestCase):

    def test_weeks_label(self):
        self.assertEqual(weeks_label(1), "1 week")
        self.assertEqual(weeks_label(3), "3 weeks")

    def test_spots_label(self):
        self.assertEqual(spots_label(1), "1 spot left")
        self.assertEqual(spots_label(4), "4 spots left")
        self.assertEqual(spots_label(0), "0 spots left")
