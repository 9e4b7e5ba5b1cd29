"""DTOs for Classes app - Data Transfer Objects for cross-app communication."""
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import List, Optional
from uuid import UUID


@dataclass(frozen=True)
class RegistrationDTO:
    id: UUID
    user_id: UUID


@dataclass(frozen=True)
class ClassWithMeta:
    """A class together with its registration numbers as seen by one member."""
    id: UUID
    host_id: Optional[UUID]
    title: str
    image_url: Optional[str]
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
    requirements: Optional[str]
    host_blurb: Optional[str]
    description: Optional[str]
    created_at: datetime
    registrations: List[RegistrationDTO] = field(default_factory=list)
    registration_count: int = 0
    spots_left: int = 0
    is_registered: bool = False

    @property
    def is_full(self) -> bool:
        return self.spots_left <= 0


@dataclass(frozen=True)
class UpcomingSessionDTO:
    """One future meeting of a class the member is registered for."""
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


@dataclass(frozen=True)
class AttendedClassDTO:
    id: UUID
    title: str
    start_date: date
    end_date: date
    status: str  # 'Completed' or 'In Progress'


@dataclass(frozen=True)
class TeachingClassDTO:
    """A class the member hosts that has not ended yet (editable fields included)."""
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


@dataclass(frozen=True)
class PastTeachingDTO:
    id: UUID
    title: str
    date_range: str
