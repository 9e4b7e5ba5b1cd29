"""
Services for Profiles app.
This is the public API for other apps to read member profiles.
"""
import logging
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from apps.core.exceptions import ConflictError
from apps.identity.services import update_user_names
from .models import Profile
from .dtos import ProfileDTO, ProfileFormDTO, OnboardingIn, ProfileUpdateIn
from .options import ROLE_SET, PERSONALITY_QUESTIONS, filter_topics

logger = logging.getLogger(__name__)


def _to_dto(profile: Profile) -> ProfileDTO:
    return ProfileDTO(
        id=profile.id,
        first_name=profile.first_name,
        last_name=profile.last_name,
        username=profile.username,
        knowledge=[v for v in profile.knowledge or [] if isinstance(v, str)],
        curious_about=[v for v in profile.curious_about or [] if isinstance(v, str)],
        want_to_learn_role=profile.want_to_learn_role,
    )


def get_profile_dto(user_id: UUID) -> Optional[ProfileDTO]:
    try:
        return _to_dto(Profile.objects.get(id=user_id))
    except Profile.DoesNotExist:
        return None


def resolve_first_name(user, profile: Optional[ProfileDTO] = None) -> str:
    """
    Name used to greet a member.

    Profile first name, then the account's first name, then the local part
    of the email address, then "Friend".
    """
    for candidate in (profile.first_name if profile else None, user.first_name):
        if isinstance(candidate, str) and candidate.strip():
            return candidate.strip()
    if user.email:
        return user.email.split("@")[0]
    return "Friend"


def get_profile_form(user) -> ProfileFormDTO:
    profile = get_profile_dto(user.id)
    first_name = (profile.first_name.strip() if profile else "") or (user.first_name or "").strip()
    last_name = (profile.last_name.strip() if profile else "") or (user.last_name or "").strip()
    username = (profile.username or "").strip() if profile else ""
    return ProfileFormDTO(
        first_name=first_name,
        last_name=last_name,
        username=username or None,
        knowledge=profile.knowledge if profile else [],
        want_to_learn_role=profile.want_to_learn_role if profile else None,
    )


def _validate_personality_answers(answers: list[int]) -> list[int]:
    if len(answers) != len(PERSONALITY_QUESTIONS):
        raise ValidationError("Answer every question to finish.")
    for answer, question in zip(answers, PERSONALITY_QUESTIONS):
        if not 0 <= answer < len(question["options"]):
            raise ValidationError("Select a valid answer.")
    return list(answers)


def complete_onboarding(user, payload: OnboardingIn) -> ProfileDTO:
    """
    Save the onboarding answers and mark the member as onboarded.
    """
    first_name = payload.first_name.strip()
    last_name = payload.last_name.strip()
    if not first_name or not last_name:
        raise ValidationError("Name cannot be empty.")

    answers = _validate_personality_answers(payload.personality_answers)

    with transaction.atomic():
        profile, _ = Profile.objects.update_or_create(
            id=user.id,
            defaults={
                'first_name': first_name,
                'last_name': last_name,
                'curious_about': filter_topics(payload.curious_about),
                'knowledge': filter_topics(payload.knowledge),
                'personality_answers': answers,
            },
        )
        update_user_names(user, first_name, last_name, onboarded=True)

    logger.info(f"Member {user.id} completed onboarding")
    return _to_dto(profile)


def update_profile(user, payload: ProfileUpdateIn) -> ProfileDTO:
    """
    Apply the profile page form.

    Raises:
        ValidationError: empty name or unknown learning role
        ConflictError: username already taken
    """
    first_name = payload.first_name.strip()
    last_name = payload.last_name.strip()
    username = payload.username.strip() or None
    want_role = payload.want_to_learn_role.strip() or None

    if not first_name or not last_name:
        raise ValidationError("Name cannot be empty.")

    if want_role and want_role not in ROLE_SET:
        raise ValidationError("Select a valid learning role.")

    try:
        with transaction.atomic():
            profile, _ = Profile.objects.update_or_create(
                id=user.id,
                defaults={
                    'first_name': first_name,
                    'last_name': last_name,
                    'username': username,
                    'knowledge': filter_topics(payload.knowledge),
                    'want_to_learn_role': want_role,
                },
            )
            update_user_names(user, first_name, last_name)
    except IntegrityError:
        raise ConflictError("That username is already taken.")

    return _to_dto(profile)
