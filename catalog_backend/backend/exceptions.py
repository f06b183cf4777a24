"""
PATH: backend/exceptions.py

CATALOG ERRORS + API EXCEPTION HANDLER

Domain errors:
- Raised by services (categories, settings, uploads)
- Each carries the HTTP status it maps to

Error body (every API error):
    {"error": "<human readable message>"}
Validation errors also carry "fields" with the per-field detail.

Anything that is not an APIException or CatalogError is logged with its
traceback and answered with a generic 500 (no internals leaked).
"""

from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Internal server error"


class CatalogError(Exception):
    """Base exception for all catalog service failures."""

    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateCategoryError(CatalogError):
    """Raised when a category name collides with an existing one."""


class CategoryInUseError(CatalogError):
    """Raised when deleting a category that products still reference."""


class InvalidSettingsError(CatalogError):
    """Raised when a settings payload cannot be stored as key/value strings."""


class UploadMissingError(CatalogError):
    """Raised when an upload request carries no file."""


class UploadNotFoundError(CatalogError):
    """Raised when a requested file is absent from the uploads directory."""

    status_code = status.HTTP_404_NOT_FOUND


def _first_message(detail) -> str:
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return "Invalid request"
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else "Invalid request"
    return str(detail)


def api_exception_handler(exc, context):
    if isinstance(exc, CatalogError):
        return Response({"error": str(exc)}, status=exc.status_code)

    response = drf_exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception(
            "Unhandled API error",
            extra={"view": type(view).__name__ if view is not None else None},
        )
        return Response(
            {"error": GENERIC_SERVER_ERROR},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    detail = response.data
    payload = {"error": _first_message(detail)}
    if isinstance(exc, ValidationError) and isinstance(detail, dict):
        payload["fields"] = detail

    response.data = payload
    return response
