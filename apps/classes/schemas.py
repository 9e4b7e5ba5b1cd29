"""Request/response schemas for Classes API."""
from datetime import date, time
from typing import List, Optional, Union
from uuid import UUID

from ninja import Schema


class ClassIn(Schema):
    """
    The teach form. Fields arrive as the form sent them and are validated by
    services.create_class so members get field-specific messages.
    """
    title: str = ""
    image_url: str = ""
    weeks: Union[int, float, str, None] = None
    total_spots: Union[int, float, str, None] = None
    level: str = ""
    start_date: str = ""
    end_date: str = ""
    start_time: str = ""
    end_time: str = ""
    meeting_days: str = ""
    schedule_summary: str = ""
    location_tag: str = ""
    location_details: str = ""
    requirements: str = ""
    host_blurb: str = ""
    description: str = ""


class ClassDetailsIn(Schema):
    """Fields a host can edit after the class is published."""
    schedule_summary: str = ""
    meeting_days: str = ""
    location_details: str = ""
    requirements: str = ""
    host_blurb: str = ""
    description: str = ""


class ClassCreatedOut(Schema):
    success: bool
    class_id: UUID


class SuccessOut(Schema):
    success: bool


class ImageUploadOut(Schema):
    url: str


class ClassOut(Schema):
    id: UUID
    host_id: Optional[UUID] = None
    title: str
    image_url: Optional[str] = None
    level: str
    weeks: int
    total_spots: int
    start_date: date
    end_date: date
    start_time: time
    end_time: time
    meeting_days: str
    schedule_summary: str
    location_tag: str
    location_details: str
    requirements: Optional[str] = None
    host_blurb: Optional[str] = None
    description: Optional[str] = None
    registration_count: int
    spots_left: int
    is_registered: bool


class ClassDetailOut(Schema):
    class_info: ClassOut
    date_range: str
    time_range: str
    duration: str
    weeks_label: str
    spots_label: str
    requirements: str
    is_full: bool


class ProgressOut(Schema):
    status: str
    total_occurrences: int
    completed_occurrences: int
    remaining_occurrences: int
    upcoming_session_dates: List[date]


class HomeSectionOut(Schema):
    title: str
    classes: List[ClassOut]
    empty_state: str


class HomeFeedOut(Schema):
    first_name: str
    upcoming_count: int
    headline: str
    sections: List[HomeSectionOut]


class UpcomingSessionOut(Schema):
    session_id: str
    class_id: UUID
    title: str
    level: str
    location_tag: str
    meeting_days: str
    start_time: time
    end_time: time
    session_index: int
    total_occurrences: int
    spots_left: int
    session_date: date


class AttendedClassOut(Schema):
    id: UUID
    title: str
    start_date: date
    end_date: date
    status: str


class TeachingClassOut(Schema):
    id: UUID
    title: str
    start_date: date
    end_date: date
    level: str
    location_tag: str
    schedule_summary: str
    meeting_days: str
    location_details: str
    requirements: str
    description: str
    host_blurb: str
    spots_left: int
    total_spots: int


class PastTeachingOut(Schema):
    id: UUID
    title: str
    date_range: str


class DashboardCountsOut(Schema):
    upcoming: int
    attended: int
    teaching: int


class ClassesDashboardOut(Schema):
    upcoming_sessions: List[UpcomingSessionOut]
    attended_history: List[AttendedClassOut]
    teaching_active: List[TeachingClassOut]
    teaching_past: List[PastTeachingOut]
    counts: DashboardCountsOut
