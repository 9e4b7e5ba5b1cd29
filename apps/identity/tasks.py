"""Celery tasks for Identity app."""
from celery import shared_task
from . import otp_service


@shared_task
def send_otp_email(email, code):
    otp_service.deliver_otp_email(email, code)
    return f"Sent sign-in code to {email}"


@shared_task
def purge_expired_otps():
    """
    Run daily to delete expired and consumed sign-in codes.

    Returns count of deleted codes for logging.
    """
    count = otp_service.purge_expired_otps()
    return f"Purged {count} sign-in codes"
