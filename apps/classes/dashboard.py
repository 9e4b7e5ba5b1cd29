"""
Page data for the member-facing screens: home feed, classes dashboard and
class detail. These assemble query results into the shapes the screens render.
"""
from datetime import date
from typing import List, Optional
from uuid import UUID

from django.conf import settings

from apps.profiles.services import get_profile_dto, resolve_first_name
from .dtos import (
    ClassWithMeta, UpcomingSessionDTO, AttendedClassDTO, TeachingClassDTO, PastTeachingDTO,
)
from .formatting import (
    format_date_range, format_time_range, format_duration, weeks_label, spots_label,
)
from .progress import ClassProgressStatus, get_class_progress, get_upcoming_session_dates, today
from . import queries

DEFAULT_REQUIREMENTS = "Nothing special required."


# =============================================================================
# Home
# =============================================================================

def home_headline(first_name: str, upcoming_count: int) -> str:
    noun = "class" if upcoming_count == 1 else "classes"
    return f"{first_name}, you have {upcoming_count} {noun} coming up!"


def build_home_feed(user, on: Optional[date] = None) -> dict:
    on = on or today()
    first_name = resolve_first_name(user, get_profile_dto(user.id))

    upcoming = queries.get_upcoming_classes(user.id, on=on)
    nearby = queries.get_nearby_classes(user.id, on=on)
    recent = queries.get_recent_classes(user.id, on=on)

    location = settings.HOME_LOCATION_TAG
    sections = [
        {
            "title": "Upcoming Classes",
            "classes": upcoming,
            "empty_state": "No upcoming classes yet. Explore something new to add to your calendar.",
        },
        {
            "title": f"Coming up in {location}",
            "classes": nearby,
            "empty_state": f"No {location} classes are scheduled right now. Check back soon!",
        },
        {
            "title": "Recent Classes you took",
            "classes": recent,
            "empty_state": "Once you finish a class it will show up here.",
        },
    ]

    return {
        "first_name": first_name,
        "upcoming_count": len(upcoming),
        "headline": home_headline(first_name, len(upcoming)),
        "sections": sections,
    }


# =============================================================================
# Classes dashboard
# =============================================================================

def build_upcoming_sessions(classes: List[ClassWithMeta], on: date) -> List[UpcomingSessionDTO]:
    """
    One entry per remaining session of each class, numbered within the class.

    Classes with nothing left to attend contribute no entries.
    """
    sessions = []
    for item in classes:
        progress = get_class_progress(item, on)
        if progress.remaining_occurrences <= 0:
            continue

        offset = progress.total_occurrences - progress.remaining_occurrences
        for index, session_date in enumerate(get_upcoming_session_dates(item, on)):
            sessions.append(UpcomingSessionDTO(
                session_id=f"{item.id}-{session_date.isoformat()}",
                class_id=item.id,
                title=item.title,
                level=item.level,
                location_tag=item.location_tag,
                meeting_days=item.meeting_days,
                start_time=item.start_time,
                end_time=item.end_time,
                session_index=offset + index + 1,
                total_occurrences=progress.total_occurrences,
                spots_left=item.spots_left,
                session_date=session_date,
            ))
    return sessions


def _attended_entry(item: ClassWithMeta, on: date) -> AttendedClassDTO:
    progress = get_class_progress(item, on)
    completed = progress.status == ClassProgressStatus.COMPLETED
    return AttendedClassDTO(
        id=item.id,
        title=item.title,
        start_date=item.start_date,
        end_date=item.end_date,
        status="Completed" if completed else "In Progress",
    )


def _teaching_entry(item: ClassWithMeta) -> TeachingClassDTO:
    return TeachingClassDTO(
        id=item.id,
        title=item.title,
        start_date=item.start_date,
        end_date=item.end_date,
        level=item.level,
        location_tag=item.location_tag,
        schedule_summary=item.schedule_summary,
        meeting_days=item.meeting_days,
        location_details=item.location_details,
        requirements=item.requirements or "",
        description=item.description or "",
        host_blurb=item.host_blurb or "",
        spots_left=item.spots_left,
        total_spots=item.total_spots,
    )


def build_classes_dashboard(user_id: UUID, on: Optional[date] = None) -> dict:
    on = on or today()

    upcoming = queries.get_upcoming_classes(user_id, on=on)
    attended = queries.get_attended_classes(user_id, on=on)
    teaching = queries.get_teaching_classes(user_id)

    attended_history = [_attended_entry(item, on) for item in attended]
    teaching_active = [_teaching_entry(item) for item in teaching if item.end_date >= on]
    teaching_past = [
        PastTeachingDTO(
            id=item.id,
            title=item.title,
            date_range=format_date_range(item.start_date, item.end_date),
        )
        for item in teaching
        if item.end_date < on
    ]

    return {
        "upcoming_sessions": build_upcoming_sessions(upcoming, on),
        "attended_history": attended_history,
        "teaching_active": teaching_active,
        "teaching_past": teaching_past,
        "counts": {
            "upcoming": len(upcoming),
            "attended": len(attended_history),
            "teaching": len(teaching),
        },
    }


# =============================================================================
# Class detail
# =============================================================================

def build_class_detail(item: ClassWithMeta) -> dict:
    requirements = (item.requirements or "").strip() or DEFAULT_REQUIREMENTS
    return {
        "class_info": item,
        "date_range": format_date_range(item.start_date, item.end_date),
        "time_range": format_time_range(item.start_time, item.end_time),
        "duration": format_duration(item.start_time, item.end_time),
        "weeks_label": weeks_label(item.weeks),
        "spots_label": spots_label(item.spots_left),
        "requirements": requirements,
        "is_full": item.is_full,
    }
