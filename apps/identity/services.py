"""Services for Identity app."""
import logging

from .models import User
from .dtos import UserDTO

logger = logging.getLogger(__name__)


def _to_dto(user: User) -> UserDTO:
    return UserDTO(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        onboarded=user.onboarded,
        is_active=user.is_active,
    )


def get_user_dto(user_id) -> UserDTO | None:
    try:
        return _to_dto(User.objects.get(id=user_id))
    except User.DoesNotExist:
        return None


def get_or_create_member(email: str) -> tuple[User, bool]:
    """
    Return the member for a verified email address, creating it on first sign-in.

    Members never have a usable password; the email doubles as the username.
    """
    user = User.objects.filter(email__iexact=email).first()
    if user:
        return user, False

    user = User(username=email, email=email, is_active=True)
    user.set_unusable_password()
    user.save()
    logger.info(f"Created member {user.id} for {email}")
    return user, True


def update_user_names(user: User, first_name: str, last_name: str, *, onboarded: bool | None = None) -> User:
    """Copy a member's display names onto the user row (and optionally the onboarded flag)."""
    user.first_name = first_name
    user.last_name = last_name
    update_fields = ['first_name', 'last_name']
    if onboarded is not None:
        user.onboarded = onboarded
        update_fields.append('onboarded')
    user.save(update_fields=update_fields)
    return user
