"""
Profiles API endpoints: onboarding and the member's own profile.
"""
from django.http import HttpRequest
from ninja import Router

from apps.identity.api import require_auth, require_member
from .dtos import (
    ProfileDTO, ProfileFormDTO, OnboardingIn, ProfileUpdateIn, ProfileOptionsOut,
)
from .options import PROFILE_TOPIC_OPTIONS, LEARN_ROLE_OPTIONS, PERSONALITY_QUESTIONS
from . import services

router = Router(tags=["Profiles"])


@router.get("/options", response=ProfileOptionsOut, auth=None)
def get_options(request: HttpRequest):
    """
    Topics, learning roles and personality questions used by onboarding and the profile form.
    """
    return {
        "topics": list(PROFILE_TOPIC_OPTIONS),
        "learn_roles": list(LEARN_ROLE_OPTIONS),
        "personality_questions": [
            {"question": q["question"], "options": list(q["options"])}
            for q in PERSONALITY_QUESTIONS
        ],
    }


@router.post("/onboarding", response=ProfileDTO, auth=None)
def complete_onboarding(request: HttpRequest, payload: OnboardingIn):
    """
    Finish onboarding: save names, topics and personality answers.

    Only needs a signed-in account; this is what unlocks the rest of the club.
    """
    user = require_auth(request)
    return services.complete_onboarding(user, payload)


@router.get("/me", response=ProfileFormDTO, auth=None)
def get_my_profile(request: HttpRequest):
    user = require_member(request)
    return services.get_profile_form(user)


@router.put("/me", response=ProfileDTO, auth=None)
def update_my_profile(request: HttpRequest, payload: ProfileUpdateIn):
    """
    Update how other members see you and what you want to teach or learn.
    """
    user = require_member(request)
    return services.update_profile(user, payload)
