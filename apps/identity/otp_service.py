"""
Email one-time-passcode sign-in.

Flow:
1. send_otp(email) stores a hashed 6-digit code and queues the email.
2. verify_otp(email, token) checks the newest pending code and returns the
   member (created on first sign-in).
"""
import logging
import secrets
from datetime import timedelta

from django.conf import settings
from django.contrib.auth.hashers import check_password, make_password
from django.core.exceptions import ValidationError
from django.core.mail import send_mail
from django.core.validators import validate_email
from django.db import transaction
from django.db.models import Q
from django.utils import timezone

from apps.core.exceptions import ServiceError
from apps.core.task_service import TaskService
from .models import EmailOTP, User
from .services import get_or_create_member

logger = logging.getLogger(__name__)


class TooManyRequestsError(ServiceError):
    status_code = 429


def normalize_email(raw: str) -> str:
    """Trim and lowercase an email address, raising ValidationError when it is missing or malformed."""
    email = (raw or "").strip().lower()
    if not email:
        raise ValidationError("Enter an email address to continue.")
    try:
        validate_email(email)
    except ValidationError:
        raise ValidationError("Enter a valid email address.")
    return email


def generate_code(length: int) -> str:
    return "".join(str(secrets.randbelow(10)) for _ in range(length))


def send_otp(raw_email: str) -> str:
    """
    Issue a new sign-in code for an email address.

    Pending codes for the address are retired so only the newest one works.
    Returns the normalized email the code was sent to.
    """
    email = normalize_email(raw_email)
    now = timezone.now()

    resend_after = now - timedelta(seconds=settings.OTP_RESEND_INTERVAL_SECONDS)
    if EmailOTP.objects.filter(email=email, consumed_at__isnull=True, created_at__gt=resend_after).exists():
        raise TooManyRequestsError("Please wait a moment before requesting another code.")

    code = generate_code(settings.OTP_LENGTH)
    with transaction.atomic():
        EmailOTP.objects.filter(email=email, consumed_at__isnull=True).update(consumed_at=now)
        EmailOTP.objects.create(
            email=email,
            code_hash=make_password(code),
            expires_at=now + timedelta(minutes=settings.OTP_TTL_MINUTES),
        )

    TaskService.send_otp_email(email=email, code=code)
    return email


def verify_otp(raw_email: str, token: str) -> User:
    """
    Check a sign-in code and return the member it authenticates.

    Raises ValidationError when the code is malformed, wrong, expired or
    out of attempts.
    """
    length = settings.OTP_LENGTH
    token = (token or "").strip()
    if len(token) != length or not token.isdigit():
        raise ValidationError(f"Enter the {length}-digit code you received.")

    email = normalize_email(raw_email)
    now = timezone.now()

    with transaction.atomic():
        otp = (
            EmailOTP.objects.select_for_update()
            .filter(email=email, consumed_at__isnull=True, expires_at__gt=now)
            .order_by('-created_at')
            .first()
        )
        verified = False
        if otp is not None and otp.attempts < settings.OTP_MAX_ATTEMPTS:
            if check_password(token, otp.code_hash):
                otp.consumed_at = now
                otp.save(update_fields=['consumed_at'])
                verified = True
            else:
                # Committed even though the request fails
                otp.attempts += 1
                otp.save(update_fields=['attempts'])
                logger.info(f"Wrong sign-in code for {email} (attempt {otp.attempts})")

    if not verified:
        raise ValidationError("Invalid or expired code.")

    user, _ = get_or_create_member(email)
    if not user.is_active:
        raise ValidationError("This account is disabled.")
    return user


def deliver_otp_email(email: str, code: str) -> None:
    """Send the sign-in code email. Runs inside a task backend."""
    club = settings.CLUB_NAME
    send_mail(
        subject=f"Your {club} sign-in code",
        message=(
            f"Your {club} code is {code}.\n\n"
            f"It expires in {settings.OTP_TTL_MINUTES} minutes. "
            "If you didn't ask for it, you can ignore this email."
        ),
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[email],
    )


def purge_expired_otps() -> int:
    """Delete codes that can no longer be used. Returns the number deleted."""
    deleted, _ = EmailOTP.objects.filter(
        Q(expires_at__lte=timezone.now()) | Q(consumed_at__isnull=False)
    ).delete()
    return deleted
