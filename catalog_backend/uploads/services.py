"""
PATH: uploads/services.py

MANAGED UPLOADS DIRECTORY

Naming:
- image-<unix ms>-<random 0..1e9><ext>
- ext is the lower-cased original extension, kept only when it is short and
  alphanumeric (anything else is dropped, the file is stored without one)

Downloads:
- names are resolved inside UPLOADS_DIR only; anything escaping it, or not
  a regular file, is reported as UploadNotFoundError (404)
"""

from __future__ import annotations

import logging
import os
import re
import secrets
import time

from django.conf import settings
from django.core.exceptions import SuspiciousFileOperation
from django.core.files.storage import FileSystemStorage

from backend.exceptions import UploadMissingError, UploadNotFoundError

logger = logging.getLogger(__name__)

SAFE_EXTENSION = re.compile(r"^\.[a-z0-9]{1,10}$")
RANDOM_SUFFIX_BOUND = 1_000_000_000


def uploads_storage() -> FileSystemStorage:
    # read per call so override_settings(UPLOADS_DIR=...) is honoured
    return FileSystemStorage(location=settings.UPLOADS_DIR, base_url=settings.UPLOADS_URL)


def generated_name(original_name: str | None) -> str:
    ext = os.path.splitext(original_name or "")[1].lower()
    if not SAFE_EXTENSION.match(ext):
        ext = ""

    millis = int(time.time() * 1000)
    suffix = secrets.randbelow(RANDOM_SUFFIX_BOUND)
    return f"image-{millis}-{suffix}{ext}"


def save_upload(upload) -> str:
    """Store an uploaded file and return its public URL ("/uploads/<name>")."""
    if upload is None:
        raise UploadMissingError("No file uploaded")

    storage = uploads_storage()
    name = storage.save(generated_name(upload.name), upload)

    logger.info("Stored upload", extra={"upload_name": name, "size": upload.size})
    return storage.url(name)


def resolve_download(filename: str) -> str:
    """Absolute path of an existing file inside UPLOADS_DIR."""
    storage = uploads_storage()
    try:
        path = storage.path(filename)
    except SuspiciousFileOperation as exc:
        logger.warning("Rejected download outside uploads dir", extra={"upload_name": filename})
        raise UploadNotFoundError("File not found") from exc

    if not os.path.isfile(path):
        raise UploadNotFoundError("File not found")
    return path
