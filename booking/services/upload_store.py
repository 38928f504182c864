"""
upload_store.py
---------------
Saves package images through Django's default storage. image_url() turns a
stored name into the URL the front-end can load (MEDIA_URL + stored name).
The rest of the system treats that URL as an opaque reference.
"""
import os
import time

from django.conf import settings
from django.core.files.storage import default_storage

from .errors import InvalidInput

UPLOAD_DIR = "uploads"


def validate_image(upload):
    """
    Only JPEG/JPG/PNG, at most PACKAGE_IMAGE_MAX_BYTES each.
    Checks both the extension and the declared content type.
    """
    ext = os.path.splitext(upload.name)[1].lower().lstrip(".")
    content_type = (getattr(upload, "content_type", "") or "").lower()
    allowed = settings.PACKAGE_IMAGE_EXTENSIONS
    if ext not in allowed or not any(kind in content_type for kind in allowed):
        raise InvalidInput("Only JPEG, JPG, or PNG images are allowed", param="images")
    if upload.size > settings.PACKAGE_IMAGE_MAX_BYTES:
        raise InvalidInput("Each image must be 5MB or smaller", param="images")


def save_image(upload) -> str:
    """Store the upload and return its storage name."""
    ext = os.path.splitext(upload.name)[1].lower()
    return default_storage.save(f"{UPLOAD_DIR}/{int(time.time() * 1000)}{ext}", upload)


def image_url(name) -> str:
    return default_storage.url(name)


def discard_images(names):
    """Remove stored images that ended up with nothing referencing them."""
    for name in names:
        default_storage.delete(name)
