"""Services for Classes app - registration and hosting."""
import logging
import math
from datetime import date, time
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from apps.core.exceptions import ConflictError, ForbiddenError, NotFoundError
from .models import LearningClass, ClassRegistration, ClassLevel, LocationTag
from .queries import get_class_by_id
from .dtos import ClassWithMeta
from .schemas import ClassIn, ClassDetailsIn

logger = logging.getLogger(__name__)

ALREADY_REGISTERED = "You are already registered for this class."


# =============================================================================
# Registration
# =============================================================================

def register_for_class(class_id: UUID, user_id: UUID) -> ClassWithMeta:
    """
    Take a seat in a class.

    The class row is locked while seats are counted so two members can't
    both take the last spot.

    Raises:
        NotFoundError: no such class
        ConflictError: already registered, or no spots left
    """
    try:
        with transaction.atomic():
            record = LearningClass.objects.select_for_update().filter(id=class_id).first()
            if record is None:
                raise NotFoundError("Class not found.")

            registrations = ClassRegistration.objects.filter(learning_class=record)
            if registrations.filter(user_id=user_id).exists():
                raise ConflictError(ALREADY_REGISTERED)

            if registrations.count() >= record.total_spots:
                raise ConflictError("This class is already full.")

            ClassRegistration.objects.create(learning_class=record, user_id=user_id)
    except IntegrityError:
        raise ConflictError(ALREADY_REGISTERED)

    logger.info(f"Member {user_id} registered for class {class_id}")
    return get_class_by_id(class_id, user_id)


# =============================================================================
# Hosting
# =============================================================================

def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def _optional(value: Optional[str]) -> Optional[str]:
    return _clean(value) or None


def _positive_whole_number(value) -> Optional[int]:
    """Parse a form number; None unless it is a finite, positive whole number."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0 or not number.is_integer():
        return None
    return int(number)


def _parse_form_date(value: str) -> Optional[date]:
    try:
        return date.fromisoformat(_clean(value))
    except ValueError:
        return None


def _parse_form_time(value: str) -> Optional[time]:
    """Accepts `HH:MM` (from time inputs) or `HH:MM:SS`; seconds default to zero."""
    try:
        return time.fromisoformat(_clean(value))
    except ValueError:
        return None


def validate_class_form(payload: ClassIn) -> dict:
    """
    Validate the teach form and return model field values.

    Checks run in form order and stop at the first problem.
    """
    title = _clean(payload.title)
    if not title:
        raise ValidationError("Title is required.")

    weeks = _positive_whole_number(payload.weeks)
    if weeks is None:
        raise ValidationError("Weeks must be a positive number.")

    total_spots = _positive_whole_number(payload.total_spots)
    if total_spots is None:
        raise ValidationError("Total spots must be a positive number.")

    level = _clean(payload.level)
    if level not in ClassLevel.values:
        raise ValidationError("Select a valid level.")

    start_date = _parse_form_date(payload.start_date)
    end_date = _parse_form_date(payload.end_date)
    if start_date is None or end_date is None:
        raise ValidationError("Start and end dates are required.")
    if end_date < start_date:
        raise ValidationError("End date must be on or after the start date.")

    start_time = _parse_form_time(payload.start_time)
    end_time = _parse_form_time(payload.end_time)
    if start_time is None or end_time is None:
        raise ValidationError("Start and end times are required.")
    if end_time <= start_time:
        raise ValidationError("End time must be after start time.")

    meeting_days = _clean(payload.meeting_days)
    if not meeting_days:
        raise ValidationError("Meeting days are required.")

    schedule_summary = _clean(payload.schedule_summary)
    if not schedule_summary:
        raise ValidationError("Provide a schedule summary.")

    location_tag = _clean(payload.location_tag)
    if location_tag not in LocationTag.values:
        raise ValidationError(f"Location tag must be {LocationTag.DTLA.value}.")

    location_details = _clean(payload.location_details)
    if not location_details:
        raise ValidationError("Location details are required.")

    host_blurb = _clean(payload.host_blurb)
    if not host_blurb:
        raise ValidationError("Please add a host introduction.")

    description = _clean(payload.description)
    if not description:
        raise ValidationError("Please add a class description.")

    return {
        'title': title,
        'image_url': _optional(payload.image_url),
        'level': level,
        'weeks': weeks,
        'total_spots': total_spots,
        'start_date': start_date,
        'end_date': end_date,
        'start_time': start_time,
        'end_time': end_time,
        'meeting_days': meeting_days,
        'schedule_summary': schedule_summary,
        'location_tag': location_tag,
        'location_details': location_details,
        'requirements': _optional(payload.requirements),
        'host_blurb': host_blurb,
        'description': description,
    }


def create_class(host_id: UUID, payload: ClassIn) -> LearningClass:
    """Publish a new class hosted by the member."""
    fields = validate_class_form(payload)
    record = LearningClass.objects.create(host_id=host_id, **fields)
    logger.info(f"Member {host_id} created class {record.id} ({record.title})")
    return record


def update_class_details(class_id: UUID, host_id: UUID, payload: ClassDetailsIn) -> LearningClass:
    """
    Edit the descriptive fields of a class the member hosts.

    Raises:
        ValidationError: a required field is blank
        NotFoundError: no class with this id is hosted by the member
    """
    schedule_summary = _clean(payload.schedule_summary)
    meeting_days = _clean(payload.meeting_days)
    location_details = _clean(payload.location_details)
    description = _clean(payload.description)

    if not schedule_summary or not meeting_days or not location_details or not description:
        raise ValidationError("Please fill in all required fields.")

    updated = LearningClass.objects.filter(id=class_id, host_id=host_id).update(
        schedule_summary=schedule_summary,
        meeting_days=meeting_days,
        location_details=location_details,
        requirements=_optional(payload.requirements),
        host_blurb=_optional(payload.host_blurb),
        description=description,
    )
    if not updated:
        raise NotFoundError("Unable to update this class.")

    logger.info(f"Member {host_id} updated class {class_id}")
    return LearningClass.objects.get(id=class_id)


def delete_class(class_id: UUID, host_id: UUID) -> None:
    """
    Delete a class the member hosts, together with its registrations.

    Raises:
        NotFoundError: no such class
        ForbiddenError: the member is not the host
    """
    record = LearningClass.objects.filter(id=class_id).only('id', 'host_id').first()
    if record is None:
        raise NotFoundError("Class not found.")

    if str(record.host_id) != str(host_id):
        raise ForbiddenError("You can only delete classes you host.")

    record.delete()
    logger.info(f"Member {host_id} deleted class {class_id}")
