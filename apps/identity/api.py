"""
Identity API endpoints.

Members sign in with a code emailed to them (no passwords). A verified code
yields a JWT access/refresh pair stored in httpOnly cookies.
"""
import os
from typing import Optional

from django.conf import settings
from django.http import HttpRequest, HttpResponse
from ninja import Router
from ninja.errors import HttpError

from .models import User
from .dtos import UserDTO, SendOtpIn, VerifyOtpIn, OtpSentOut, SessionOut
from .services import get_user_dto
from .otp_service import send_otp, verify_otp
from .jwt_auth import (
    ACCESS_COOKIE,
    REFRESH_COOKIE,
    create_access_token,
    create_token_pair,
    get_user_id_from_token,
    get_access_token_cookie_settings,
    get_refresh_token_cookie_settings,
)

router = Router(tags=["Identity"])


# =============================================================================
# Helper Functions
# =============================================================================

def get_current_user(request: HttpRequest) -> Optional[User]:
    """
    Extract and validate user from JWT access token cookie.

    Returns User object if valid token, None otherwise.
    """
    access_token = request.COOKIES.get(ACCESS_COOKIE)
    if not access_token:
        return None

    user_id = get_user_id_from_token(access_token)
    if not user_id:
        return None

    try:
        return User.objects.get(id=user_id, is_active=True)
    except User.DoesNotExist:
        return None


def require_auth(request: HttpRequest) -> User:
    """
    Require authentication. Raises 401 if not authenticated.
    """
    user = get_current_user(request)
    if not user:
        raise HttpError(401, "Authentication required")
    return user


def require_member(request: HttpRequest) -> User:
    """
    Require an authenticated member who finished onboarding.

    Every page of the club itself sits behind this check.
    """
    user = require_auth(request)
    if not user.onboarded:
        raise HttpError(403, "Complete onboarding to continue.")
    return user


def is_production() -> bool:
    """Check if running in production (Lambda or DEBUG=False)."""
    return bool(os.getenv('AWS_LAMBDA_FUNCTION_NAME')) or not settings.DEBUG


def _json_response(schema) -> HttpResponse:
    return HttpResponse(schema.model_dump_json(), content_type='application/json')


def welcome_message() -> str:
    return f"You're in. Welcome to {settings.CLUB_NAME}!"


# =============================================================================
# Sign-in Endpoints
# =============================================================================

@router.post("/otp/send", response=OtpSentOut, auth=None)
def send_code(request: HttpRequest, payload: SendOtpIn):
    """
    Email a one-time sign-in code. New addresses become members on verification.
    """
    email = send_otp(payload.email)
    return OtpSentOut(
        success=True,
        message=f"We sent a {settings.OTP_LENGTH}-digit code to {email}.",
    )


@router.post("/otp/verify", response=SessionOut, auth=None)
def verify_code(request: HttpRequest, payload: VerifyOtpIn):
    """
    Verify a sign-in code and set the session cookies.
    """
    user = verify_otp(payload.email, payload.token)

    access_token, refresh_token = create_token_pair(user.id)
    response = _json_response(SessionOut(
        authenticated=True,
        user=get_user_dto(user.id),
        message=welcome_message(),
    ))

    prod = is_production()
    response.set_cookie(ACCESS_COOKIE, access_token, **get_access_token_cookie_settings(prod))
    response.set_cookie(REFRESH_COOKIE, refresh_token, **get_refresh_token_cookie_settings(prod))
    return response


@router.get("/session", response=SessionOut, auth=None)
def get_session(request: HttpRequest):
    """
    Report whether the caller already has a valid session.
    """
    user = get_current_user(request)
    if not user:
        return SessionOut(authenticated=False)
    return SessionOut(authenticated=True, user=get_user_dto(user.id), message=welcome_message())


@router.post("/logout", response=SessionOut, auth=None)
def logout_user(request: HttpRequest):
    """
    Clear authentication cookies.
    """
    response = _json_response(SessionOut(authenticated=False, message="Logged out"))
    response.delete_cookie(ACCESS_COOKIE, path='/')
    response.delete_cookie(REFRESH_COOKIE, path='/')
    return response


@router.post("/refresh", response=SessionOut, auth=None)
def refresh_session(request: HttpRequest):
    """
    Refresh the access token using the refresh token.
    """
    refresh_token_value = request.COOKIES.get(REFRESH_COOKIE)
    if not refresh_token_value:
        raise HttpError(401, "No refresh token")

    user_id = get_user_id_from_token(refresh_token_value, token_type='refresh')
    if not user_id:
        raise HttpError(401, "Invalid refresh token")

    try:
        user = User.objects.get(id=user_id, is_active=True)
    except User.DoesNotExist:
        raise HttpError(401, "Invalid refresh token")

    response = _json_response(SessionOut(authenticated=True, user=get_user_dto(user.id)))
    response.set_cookie(
        ACCESS_COOKIE,
        create_access_token(user.id),
        **get_access_token_cookie_settings(is_production()),
    )
    return response


@router.get("/me", response=UserDTO, auth=None)
def get_me(request: HttpRequest):
    """
    Get the current member's account.
    """
    user = require_auth(request)
    return get_user_dto(user.id)
