"""
PATH: backend/bootstrap.py

STARTUP BOOTSTRAP (runs before the API accepts traffic)

Steps (idempotent across restarts):
1. migrate with fake_initial: tables that already exist (a store created by an
   older build) are adopted instead of re-created; missing ones are created.
   Adopted tables then gain what they lack (products.stock, users.last_login /
   users.created_at) and the one-time legacy store-name correction runs.
2. ensure the fixed administrator account (legacy "admin" account removed)
3. seed default store settings when the settings table is empty

Failure policy:
- Any error is logged at CRITICAL and re-raised.
- Callers (wsgi/asgi/manage.py/bootstrap_catalog) must not serve traffic after a failure.

Process model:
- bootstrap_on_startup() runs once per process tree: after a successful run it
  marks the environment, so the runserver autoreloader child (which inherits it)
  does not bootstrap again.
- Multi-worker servers should bootstrap once, before forking: run
  `manage.py bootstrap_catalog` as the deploy step with
  RUN_BOOTSTRAP_ON_STARTUP=false, or start gunicorn with --preload.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from django.conf import settings
from django.core.management import call_command

from store.services import seed_default_settings
from users.services import ensure_admin_account

logger = logging.getLogger(__name__)

BOOTSTRAPPED_ENV = "CATALOG_BOOTSTRAPPED"


@dataclass(frozen=True)
class BootstrapResult:
    admin_username: str
    admin_created: bool
    legacy_admin_removed: bool
    settings_seeded: bool


def run_bootstrap(*, migrate: bool = True) -> BootstrapResult:
    try:
        if migrate:
            call_command("migrate", interactive=False, fake_initial=True, verbosity=0)

        admin = ensure_admin_account(
            username=settings.BOOTSTRAP_ADMIN_USERNAME,
            password=settings.BOOTSTRAP_ADMIN_PASSWORD,
        )
        settings_seeded = seed_default_settings()
    except Exception:
        logger.critical("Catalog bootstrap failed; refusing to serve traffic", exc_info=True)
        raise

    result = BootstrapResult(
        admin_username=admin.user.username,
        admin_created=admin.created,
        legacy_admin_removed=admin.legacy_removed,
        settings_seeded=settings_seeded,
    )
    logger.info(
        "Catalog bootstrap complete",
        extra={
            "admin_created": result.admin_created,
            "legacy_admin_removed": result.legacy_admin_removed,
            "settings_seeded": result.settings_seeded,
        },
    )
    return result


def bootstrap_on_startup() -> BootstrapResult | None:
    """Entrypoint hook: bootstrap unless disabled or already done in this process tree."""
    if not settings.RUN_BOOTSTRAP_ON_STARTUP:
        return None
    if os.environ.get(BOOTSTRAPPED_ENV) == "1":
        return None

    result = run_bootstrap()
    os.environ[BOOTSTRAPPED_ENV] = "1"
    return result
