"""DTOs and request schemas for Identity app."""
from dataclasses import dataclass
from uuid import UUID
from typing import Optional

from ninja import Schema


@dataclass(frozen=True)
class UserDTO:
    id: UUID
    email: str
    first_name: str
    last_name: str
    onboarded: bool
    is_active: bool


class SendOtpIn(Schema):
    email: str = ""


class VerifyOtpIn(Schema):
    email: str = ""
    token: str = ""


class OtpSentOut(Schema):
    success: bool
    message: str


class SessionOut(Schema):
    authenticated: bool
    user: Optional[UserDTO] = None
    message: Optional[str] = None
