"""
Image uploads for class listings.
Files go to default_storage: S3 when USE_S3_STORAGE is on, local media otherwise.
"""
import logging
import os
import secrets
import time
from typing import Optional, Tuple

from django.conf import settings
from django.core.files.storage import default_storage
from django.core.files.uploadedfile import UploadedFile

logger = logging.getLogger(__name__)


def validate_image_file(file: UploadedFile) -> Tuple[bool, Optional[str]]:
    """
    Validate an uploaded class image.

    Returns:
        Tuple of (is_valid, error_message)
    """
    content_type = file.content_type or ''
    if not content_type.startswith('image/'):
        return False, "Please select an image file"

    max_mb = settings.CLASS_IMAGE_MAX_BYTES // (1024 * 1024)
    if file.size > settings.CLASS_IMAGE_MAX_BYTES:
        return False, f"Image must be less than {max_mb}MB"

    return True, None


def build_image_path(filename: str) -> str:
    """`class-images/<random>-<epoch ms>.<ext>`; the original extension is kept."""
    _, extension = os.path.splitext(filename or '')
    extension = extension.lstrip('.').lower() or 'jpg'
    token = secrets.token_hex(8)
    stamp = int(time.time() * 1000)
    return f"{settings.CLASS_IMAGE_PREFIX}/{token}-{stamp}.{extension}"


def upload_class_image(file: UploadedFile) -> str:
    """
    Store an image for a class and return its public URL.

    Raises:
        ValueError: If file validation fails
    """
    is_valid, error = validate_image_file(file)
    if not is_valid:
        raise ValueError(error)

    saved_path = default_storage.save(build_image_path(file.name), file)
    url = default_storage.url(saved_path)

    backend = "S3" if getattr(settings, 'USE_S3_STORAGE', False) else "local storage"
    logger.info(f"Stored class image {saved_path} in {backend}")
    return url
