"""
API Router for Classes app.
Browsing, registering for and hosting classes. Every endpoint needs an onboarded member.
"""
from datetime import date
from typing import Optional
from uuid import UUID

from django.http import HttpRequest
from ninja import Router, File
from ninja.files import UploadedFile
from ninja.errors import HttpError

from apps.identity.api import require_member
from .schemas import (
    ClassIn, ClassDetailsIn, ClassCreatedOut, SuccessOut, ImageUploadOut,
    ClassOut, ClassDetailOut, ProgressOut, HomeFeedOut, ClassesDashboardOut,
)
from .progress import get_class_progress, get_upcoming_session_dates
from . import dashboard
from . import image_service
from . import queries
from . import services

router = Router(tags=["Classes"])


def _get_class_or_404(class_id: UUID, user_id: Optional[UUID] = None):
    item = queries.get_class_by_id(class_id, user_id)
    if item is None:
        raise HttpError(404, "Class not found.")
    return item


# =============================================================================
# Pages
# =============================================================================

@router.get("/home", response=HomeFeedOut, auth=None)
def get_home(request: HttpRequest):
    """Greeting plus upcoming, nearby and recent classes."""
    user = require_member(request)
    return dashboard.build_home_feed(user)


@router.get("/dashboard", response=ClassesDashboardOut, auth=None)
def get_dashboard(request: HttpRequest):
    """Upcoming sessions, attended history and classes the member teaches."""
    user = require_member(request)
    return dashboard.build_classes_dashboard(user.id)


# =============================================================================
# Hosting
# =============================================================================

@router.post("/images", response=ImageUploadOut, auth=None)
def upload_image(request: HttpRequest, file: UploadedFile = File(...)):
    """Upload a cover image; the returned URL goes into the teach form."""
    require_member(request)

    try:
        url = image_service.upload_class_image(file)
    except ValueError as e:
        raise HttpError(400, str(e))

    return {"url": url}


@router.post("/", response=ClassCreatedOut, auth=None)
def create_class(request: HttpRequest, payload: ClassIn):
    user = require_member(request)
    record = services.create_class(user.id, payload)
    return {"success": True, "class_id": record.id}


@router.patch("/{class_id}", response=ClassOut, auth=None)
def update_class(request: HttpRequest, class_id: UUID, payload: ClassDetailsIn):
    """Edit the details of a class you host."""
    user = require_member(request)
    services.update_class_details(class_id, user.id, payload)
    return _get_class_or_404(class_id, user.id)


@router.delete("/{class_id}", response=SuccessOut, auth=None)
def delete_class(request: HttpRequest, class_id: UUID):
    user = require_member(request)
    services.delete_class(class_id, user.id)
    return {"success": True}


# =============================================================================
# Browsing & Registration
# =============================================================================

@router.get("/{class_id}", response=ClassDetailOut, auth=None)
def get_class(request: HttpRequest, class_id: UUID):
    user = require_member(request)
    item = _get_class_or_404(class_id, user.id)
    return dashboard.build_class_detail(item)


@router.get("/{class_id}/progress", response=ProgressOut, auth=None)
def get_progress(request: HttpRequest, class_id: UUID, on: Optional[date] = None):
    """
    Where the class stands on a given day (default: today) and its remaining session dates.
    """
    require_member(request)
    item = _get_class_or_404(class_id)
    progress = get_class_progress(item, on)
    return {
        "status": progress.status.value,
        "total_occurrences": progress.total_occurrences,
        "completed_occurrences": progress.completed_occurrences,
        "remaining_occurrences": progress.remaining_occurrences,
        "upcoming_session_dates": get_upcoming_session_dates(item, on),
    }


@router.post("/{class_id}/register", response=ClassOut, auth=None)
def register(request: HttpRequest, class_id: UUID):
    """Take a seat in a class."""
    user = require_member(request)
    return services.register_for_class(class_id, user.id)
