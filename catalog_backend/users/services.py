"""
PATH: users/services.py

ADMINISTRATOR SEEDING

ensure_admin_account():
- creates the fixed administrator when it does not exist yet
- never touches the password of an existing administrator
- removes the legacy "admin" account left by older deployments
- idempotent: running it on every start is safe
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from django.db import transaction

from users.models import User

logger = logging.getLogger(__name__)

LEGACY_ADMIN_USERNAME = "admin"


@dataclass(frozen=True)
class AdminAccount:
    user: User
    created: bool
    legacy_removed: bool


@transaction.atomic
def ensure_admin_account(*, username: str, password: str) -> AdminAccount:
    legacy_removed = False
    if username != LEGACY_ADMIN_USERNAME:
        deleted, _ = User.objects.filter(username=LEGACY_ADMIN_USERNAME).delete()
        legacy_removed = deleted > 0
        if legacy_removed:
            logger.info("Removed legacy administrator account")

    user = User.objects.filter(username=username).first()
    created = user is None
    if created:
        user = User.objects.create_user(username=username, password=password)
        logger.info("Seeded administrator account", extra={"username": username})

    return AdminAccount(user=user, created=created, legacy_removed=legacy_removed)
