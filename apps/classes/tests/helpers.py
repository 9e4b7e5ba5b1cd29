"""Shared builders for classes tests."""
from datetime import date, time, timedelta
from uuid import uuid4

from django.contrib.auth import get_user_model

from apps.classes.models import LearningClass, ClassRegistration, ClassLevel, LocationTag
from apps.identity.jwt_auth import ACCESS_COOKIE, create_access_token

User = get_user_model()

TODAY = date(2024, 6, 3)


def make_member(first_name="Ada", onboarded=True, email=None):
    email = email or f"member_{uuid4().hex[:8]}@test.com"
    user = User(username=email, email=email, first_name=first_name, onboarded=onboarded)
    user.set_unusable_password()
    user.save()
    return user


def make_class(host=None, start=None, weeks=4, **overrides):
    """A weekly class starting `start` (default: a week after TODAY) and running `weeks` sessions."""
    start = start or TODAY + timedelta(days=7)
    fields = {
        'host_id': host.id if host else uuid4(),
        'title': "Intro to Candlemaking",
        'level': ClassLevel.BEGINNER,
        'weeks': weeks,
        'total_spots': 8,
        'start_date': start,
        'end_date': start + timedelta(weeks=weeks - 1),
        'start_time': time(18, 0),
        'end_time': time(19, 30),
        'meeting_days': "Mondays",
        'schedule_summary': "Mondays, 6-7:30pm",
        'location_tag': LocationTag.DTLA,
        'location_details': "The Last Bookstore, 453 S Spring St",
        'description': "Pour your first soy candles.",
        'host_blurb': "I have been making candles for ten years.",
    }
    fields.update(overrides)
    return LearningClass.objects.create(**fields)


def register(record, user):
    return ClassRegistration.objects.create(learning_class=record, user_id=user.id)


def login(client, user):
    """Give the test client the access-token cookie a verified sign-in would set."""
    client.cookies[ACCESS_COOKIE] = create_access_token(user.id)
