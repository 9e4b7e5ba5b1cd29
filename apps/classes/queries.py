"""
Read-side queries for classes.

Every query returns ClassWithMeta DTOs: the class plus its registration count,
spots left and whether the given member holds a seat. Counts are always taken
over all of a class's registrations, even when the query itself is filtered to
classes the member registered for.
"""
from datetime import date
from typing import List, Optional
from uuid import UUID

from django.conf import settings
from django.db.models import QuerySet

from .models import LearningClass
from .dtos import ClassWithMeta, RegistrationDTO
from .progress import today as local_today


def with_meta(record: LearningClass, user_id: Optional[UUID] = None) -> ClassWithMeta:
    registrations = [
        RegistrationDTO(id=r.id, user_id=r.user_id)
        for r in record.registrations.all()
    ]
    registration_count = len(registrations)
    is_registered = bool(user_id) and any(str(r.user_id) == str(user_id) for r in registrations)

    return ClassWithMeta(
        id=record.id,
        host_id=record.host_id,
        title=record.title,
        image_url=record.image_url,
        level=record.level,
        weeks=record.weeks,
        total_spots=record.total_spots,
        start_date=record.start_date,
        end_date=record.end_date,
        start_time=record.start_time,
        end_time=record.end_time,
        meeting_days=record.meeting_days,
        schedule_summary=record.schedule_summary,
        location_tag=record.location_tag,
        location_details=record.location_details,
        requirements=record.requirements,
        host_blurb=record.host_blurb,
        description=record.description,
        created_at=record.created_at,
        registrations=registrations,
        registration_count=registration_count,
        spots_left=max(record.total_spots - registration_count, 0),
        is_registered=is_registered,
    )


def _base_queryset() -> QuerySet:
    return LearningClass.objects.prefetch_related('registrations')


def _registered_by(user_id: UUID) -> QuerySet:
    return _base_queryset().filter(registrations__user_id=user_id).distinct()


def _to_meta(queryset: QuerySet, user_id: Optional[UUID]) -> List[ClassWithMeta]:
    return [with_meta(record, user_id) for record in queryset]


def get_upcoming_classes(user_id: UUID, on: Optional[date] = None) -> List[ClassWithMeta]:
    """Classes the member registered for that have not ended, soonest first."""
    on = on or local_today()
    queryset = _registered_by(user_id).filter(end_date__gte=on).order_by('start_date')
    return _to_meta(queryset, user_id)


def get_recent_classes(user_id: UUID, on: Optional[date] = None) -> List[ClassWithMeta]:
    """Classes the member registered for that have ended, latest first."""
    on = on or local_today()
    queryset = _registered_by(user_id).filter(end_date__lt=on).order_by('-end_date')
    return _to_meta(queryset, user_id)


def get_attended_classes(user_id: UUID, on: Optional[date] = None) -> List[ClassWithMeta]:
    """Classes the member registered for that have started, latest ending first."""
    on = on or local_today()
    queryset = _registered_by(user_id).filter(start_date__lte=on).order_by('-end_date')
    return _to_meta(queryset, user_id)


def get_nearby_classes(
    user_id: Optional[UUID] = None,
    location_tag: Optional[str] = None,
    limit: Optional[int] = None,
    on: Optional[date] = None,
) -> List[ClassWithMeta]:
    """
    Classes at a location that have not started yet, soonest first.

    Defaults to the club's home location and featured-class limit.
    """
    on = on or local_today()
    if location_tag is None:
        location_tag = settings.HOME_LOCATION_TAG
    if limit is None:
        limit = settings.FEATURED_CLASS_LIMIT
    queryset = (
        _base_queryset()
        .filter(location_tag=location_tag, start_date__gte=on)
        .order_by('start_date')[:limit]
    )
    return _to_meta(queryset, user_id)


def get_teaching_classes(user_id: UUID) -> List[ClassWithMeta]:
    """Every class the member hosts, earliest first."""
    queryset = _base_queryset().filter(host_id=user_id).order_by('start_date')
    return _to_meta(queryset, user_id)


def get_class_by_id(class_id: UUID, user_id: Optional[UUID] = None) -> Optional[ClassWithMeta]:
    record = _base_queryset().filter(id=class_id).first()
    if record is None:
        return None
    return with_meta(record, user_id)
