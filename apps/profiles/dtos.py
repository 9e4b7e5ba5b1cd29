"""DTOs and request schemas for Profiles app."""
from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from ninja import Schema


@dataclass(frozen=True)
class ProfileDTO:
    id: UUID
    first_name: str
    last_name: str
    username: Optional[str]
    knowledge: List[str] = field(default_factory=list)
    curious_about: List[str] = field(default_factory=list)
    want_to_learn_role: Optional[str] = None


@dataclass(frozen=True)
class ProfileFormDTO:
    """Values the profile page pre-fills its form with."""
    first_name: str
    last_name: str
    username: Optional[str]
    knowledge: List[str]
    want_to_learn_role: Optional[str]


class OnboardingIn(Schema):
    first_name: str = ""
    last_name: str = ""
    curious_about: List[str] = []
    knowledge: List[str] = []
    personality_answers: List[int] = []


class ProfileUpdateIn(Schema):
    first_name: str = ""
    last_name: str = ""
    username: str = ""
    knowledge: List[str] = []
    want_to_learn_role: str = ""


class PersonalityQuestionOut(Schema):
    question: str
    options: List[str]


class ProfileOptionsOut(Schema):
    topics: List[str]
    learn_roles: List[str]
    personality_questions: List[PersonalityQuestionOut]
