"""
PATH: manage.py

Django management entrypoint.

Key safeguard:
- If DJANGO_SETTINGS_MODULE is unset OR incorrectly set to the settings *package*
  ("backend.settings"), we force it to a concrete module ("backend.settings.dev").

Production:
- Production must set DJANGO_SETTINGS_MODULE=backend.settings.prod explicitly.
  We respect that.

Startup bootstrap:
- `runserver` migrates and seeds the store once, in the parent process, before
  serving (RUN_BOOTSTRAP_ON_STARTUP).
- A failed bootstrap exits non-zero; the dev server never starts half-initialized.
- Other commands are untouched (use `bootstrap_catalog` to run it explicitly).
"""

from __future__ import annotations

import os
import sys


def _ensure_settings_module() -> None:
    current = (os.environ.get("DJANGO_SETTINGS_MODULE") or "").strip()

    # If CI (or anyone) points to the package, Django won't load INSTALLED_APPS.
    if not current or current == "backend.settings":
        os.environ["DJANGO_SETTINGS_MODULE"] = "backend.settings.dev"


def _bootstrap_before_runserver(argv: list[str]) -> None:
    if len(argv) < 2 or argv[1] != "runserver":
        return

    import django

    django.setup()

    from backend.bootstrap import bootstrap_on_startup

    # marks the environment, so the autoreloader child and its WSGI import skip it
    try:
        bootstrap_on_startup()
    except Exception:
        # already logged at CRITICAL by run_bootstrap
        sys.exit(1)


def main() -> None:
    _ensure_settings_module()

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    _bootstrap_before_runserver(sys.argv)

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
