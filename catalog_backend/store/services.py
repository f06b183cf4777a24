"""
PATH: store/services.py

STORE SETTINGS SERVICES

Rules:
- Values are stored as text. Numbers are stringified, booleans become
  "true"/"false".
- A payload is accepted whole or not at all: every key/value is validated
  first, then all rows are upserted inside one transaction.
- Nested objects, arrays and null are rejected (InvalidSettingsError).
"""

from __future__ import annotations

import logging

from django.db import transaction

from backend.exceptions import InvalidSettingsError
from store.defaults import DEFAULT_SETTINGS
from store.models import StoreSetting

logger = logging.getLogger(__name__)

MAX_KEY_LENGTH = 100


def get_settings_map() -> dict[str, str]:
    return dict(StoreSetting.objects.order_by("key").values_list("key", "value"))


def _stringify(key, value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise InvalidSettingsError(f"Setting '{key}' must be a string, number or boolean")


def _clean_payload(payload) -> dict[str, str]:
    if not isinstance(payload, dict):
        raise InvalidSettingsError("Settings must be a JSON object")

    cleaned = {}
    for key, value in payload.items():
        if not isinstance(key, str) or not key.strip() or len(key) > MAX_KEY_LENGTH:
            raise InvalidSettingsError("Setting keys must be 1-100 characters")
        cleaned[key] = _stringify(key, value)
    return cleaned


def upsert_settings(payload) -> dict[str, str]:
    cleaned = _clean_payload(payload)

    with transaction.atomic():
        for key, value in cleaned.items():
            StoreSetting.objects.update_or_create(key=key, defaults={"value": value})

    logger.info("Store settings saved", extra={"keys": sorted(cleaned)})
    return cleaned


def seed_default_settings() -> bool:
    """Insert DEFAULT_SETTINGS when the table is empty. Returns True if it seeded."""
    if StoreSetting.objects.exists():
        return False

    StoreSetting.objects.bulk_create(
        [StoreSetting(key=key, value=value) for key, value in DEFAULT_SETTINGS.items()]
    )
    logger.info("Seeded default store settings")
    return True
