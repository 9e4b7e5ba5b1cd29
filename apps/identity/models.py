import uuid
from django.db import models
from django.contrib.auth.models import AbstractUser


class User(AbstractUser):
    """
    Club member. Signs in with an emailed one-time code, never a password.

    first_name/last_name mirror the profile so the navbar can greet a member
    even before a profile row exists.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True)
    onboarded = models.BooleanField(default=False)

    class Meta:
        ordering = ['email']

    def __str__(self):
        return self.email or self.username


class EmailOTP(models.Model):
    """
    A one-time sign-in code sent to an email address.

    Only a hash of the code is stored. A code is usable while it is not
    consumed, not expired and has attempts left.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(db_index=True)
    code_hash = models.CharField(max_length=128)
    expires_at = models.DateTimeField()
    attempts = models.PositiveSmallIntegerField(default=0)
    consumed_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name = "Email OTP"
        verbose_name_plural = "Email OTPs"

    def __str__(self):
        state = "consumed" if self.consumed_at else "pending"
        return f"Code for {self.email} ({state})"
