"""
Tests for class registration and hosting services.
"""
from datetime import time
from unittest import mock
from uuid import uuid4

from django.core.exceptions import ValidationError
from django.db import IntegrityError
from django.test import TestCase

from apps.core.exceptions import ConflictError, ForbiddenError, NotFoundError
from apps.classes import services
from apps.classes.models import LearningClass, ClassRegistration
from apps.classes.schemas import ClassIn, ClassDetailsIn
from .helpers import make_class, make_member, register


def teach_form(**overrides):
    data = {
        'title': "  Crossword Construction  ",
        'image_url': "",
        'weeks': "3",
        'total_spots': 10,
        'level': "Intermediate",
        'start_date': "2024-07-01",
        'end_date': "2024-07-15",
        'start_time': "18:00",
        'end_time': "19:30",
        'meeting_days': "Mondays",
        'schedule_summary': "Mondays at 6pm",
        'location_tag': "DTLA",
        'location_details': "Central Library, Room 2",
        'requirements': "",
        'host_blurb': "I write puzzles for fun.",
        'description': "Build your first themed crossword.",
    }
    data.update(overrides)
    return ClassIn(**data)


class RegisterForClassTest(TestCase):

    def setUp(self):
        self.member = make_member()
        self.record = make_class(total_spots=2)

    def test_register(self):
        item = services.register_for_class(self.record.id, self.member.id)
        self.assertTrue(item.is_registered)
        self.assertEqual(item.registration_count, 1)
        self.assertTrue(
            ClassRegistration.objects.filter(learning_class=self.record, user_id=self.member.id).exists()
        )

    def test_missing_class(self):
        with self.assertRaisesMessage(NotFoundError, "Class not found."):
            services.register_for_class(uuid4(), self.member.id)

    def test_already_registered(self):
        register(self.record, self.member)
        with self.assertRaisesMessage(ConflictError, "You are already registered for this class."):
            services.register_for_class(self.record.id, self.member.id)

    def test_already_registered_wins_over_full(self):
        self.record.total_spots = 1
        self.record.save()
        register(self.record, self.member)
        with self.assertRaisesMessage(ConflictError, "You are already registered for this class."):
            services.register_for_class(self.record.id, self.member.id)

    def test_full_class(self):
        register(self.record, make_member())
        register(self.record, make_member())
        with self.assertRaisesMessage(ConflictError, "This class is already full."):
            services.register_for_class(self.record.id, self.member.id)
        self.assertEqual(self.record.registrations.count(), 2)

    def test_duplicate_insert_reads_as_already_registered(self):
        # A concurrent request took the seat between the check and the insert
        with mock.patch.object(ClassRegistration.objects, 'create', side_effect=IntegrityError):
            with self.assertRaisesMessage(ConflictError, "You are already registered for this class."):
                services.register_for_class(self.record.id, self.member.id)
        self.assertFalse(ClassRegistration.objects.exists())


class CreateClassTest(TestCase):

    def setUp(self):
        self.host = make_member()

    def test_create(self):
        record = services.create_class(self.host.id, teach_form())
        record = LearningClass.objects.get(id=record.id)

        self.assertEqual(record.host_id, self.host.id)
        self.assertEqual(record.title, "Crossword Construction")
        self.assertEqual(record.weeks, 3)
        self.assertEqual(record.total_spots, 10)
        self.assertEqual(record.start_time, time(18, 0, 0))
        self.assertEqual(record.end_time, time(19, 30, 0))
        self.assertIsNone(record.image_url)
        self.assertIsNone(record.requirements)

    def test_keeps_optional_fields(self):
        record = services.create_class(self.host.id, teach_form(
            image_url="https://cdn.example.com/class-images/a.png",
            requirements=" Bring a pencil ",
        ))
        self.assertEqual(record.image_url, "https://cdn.example.com/class-images/a.png")
        self.assertEqual(record.requirements, "Bring a pencil")

    def test_same_day_class(self):
        record = services.create_class(self.host.id, teach_form(end_date="2024-07-01", weeks=1))
        self.assertEqual(record.start_date, record.end_date)

    def assert_rejected(self, message, **overrides):
        with self.assertRaisesMessage(ValidationError, message):
            services.create_class(self.host.id, teach_form(**overrides))
        self.assertFalse(LearningClass.objects.exists())

    def test_title_required(self):
        self.assert_rejected("Title is required.", title="   ")

    def test_title_checked_first(self):
        self.assert_rejected("Title is required.", title="", weeks="", level="Expert")

    def test_weeks_must_be_positive_whole_number(self):
        for weeks in ("", "0", "-2", "2.5", "three", None):
            with self.subTest(weeks=weeks):
                self.assert_rejected("Weeks must be a positive number.", weeks=weeks)

    def test_total_spots_must_be_positive(self):
        self.assert_rejected("Total spots must be a positive number.", total_spots=0)

    def test_level_must_be_known(self):
        self.assert_rejected("Select a valid level.", level="Expert")

    def test_dates_required(self):
        self.assert_rejected("Start and end dates are required.", start_date="")
        self.assert_rejected("Start and end dates are required.", end_date="07/15/2024")

    def test_end_date_not_before_start(self):
        self.assert_rejected("End date must be on or after the start date.", end_date="2024-06-30")

    def test_times_required(self):
        self.assert_rejected("Start and end times are required.", end_time="")

    def test_end_time_after_start(self):
        self.assert_rejected("End time must be after start time.", end_time="18:00")

    def test_meeting_days_required(self):
        self.assert_rejected("Meeting days are required.", meeting_days=" ")

    def test_schedule_summary_required(self):
        self.assert_rejected("Provide a schedule summary.", schedule_summary="")

    def test_location_tag_must_be_dtla(self):
        self.assert_rejected("Location tag must be DTLA.", location_tag="NYC")

    def test_location_details_required(self):
        self.assert_rejected("Location details are required.", location_details="")

    def test_host_blurb_required(self):
        self.assert_rejected("Please add a host introduction.", host_blurb="")

    def test_description_required(self):
        self.assert_rejected("Please add a class description.", description="")


class UpdateClassDetailsTest(TestCase):

    def setUp(self):
        self.host = make_member()
        self.record = make_class(host=self.host, requirements="Apron")

    def details(self, **overrides):
        data = {
            'schedule_summary': "Tuesdays at 7pm",
            'meeting_days': "Tuesdays",
            'location_details': "Grand Park",
            'requirements': "",
            'host_blurb': " Hi! ",
            'description': "Updated description",
        }
        data.update(overrides)
        return ClassDetailsIn(**data)

    def test_update(self):
        services.update_class_details(self.record.id, self.host.id, self.details())
        self.record.refresh_from_db()
        self.assertEqual(self.record.meeting_days, "Tuesdays")
        self.assertEqual(self.record.host_blurb, "Hi!")
        self.assertIsNone(self.record.requirements)

    def test_required_fields(self):
        with self.assertRaisesMessage(ValidationError, "Please fill in all required fields."):
            services.update_class_details(self.record.id, self.host.id, self.details(description=" "))

    def test_only_host_can_update(self):
        with self.assertRaisesMessage(NotFoundError, "Unable to update this class."):
            services.update_class_details(self.record.id, make_member().id, self.details())
        self.record.refresh_from_db()
        self.assertEqual(self.record.meeting_days, "Mondays")


class DeleteClassTest(TestCase):

    def setUp(self):
        self.host = make_member()
        self.record = make_class(host=self.host)
        register(self.record, make_member())

    def test_host_deletes_class_and_registrations(self):
        services.delete_class(self.record.id, self.host.id)
        self.assertFalse(LearningClass.objects.filter(id=self.record.id).exists())
        self.assertFalse(ClassRegistration.objects.exists())

    def test_missing_class(self):
        with self.assertRaisesMessage(NotFoundError, "Class not found."):
            services.delete_class(uuid4(), self.host.id)

    def test_non_host(self):
        with self.assertRaisesMessage(ForbiddenError, "You can only delete classes you host."):
            services.delete_class(self.record.id, make_member().id)
        self.assertTrue(LearningClass.objects.filter(id=self.record.id).exists())
