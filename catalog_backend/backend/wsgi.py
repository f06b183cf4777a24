# backend/wsgi.py
"""
WSGI config for backend project.
Defaults to dev settings unless DJANGO_SETTINGS_MODULE is set externally.

Startup:
- The catalog bootstrap runs before the application object is handed to the server.
- A bootstrap failure propagates, so the worker never boots against a half-migrated store.
- Runs once per process tree (see backend.bootstrap.bootstrap_on_startup). With several
  workers, bootstrap before forking: `gunicorn --preload backend.wsgi`, or run
  `manage.py bootstrap_catalog` at deploy time and set RUN_BOOTSTRAP_ON_STARTUP=false.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault(
    "DJANGO_SETTINGS_MODULE",
    os.getenv("DJANGO_SETTINGS_MODULE", "backend.settings.dev"),
)

application = get_wsgi_application()

from backend.bootstrap import bootstrap_on_startup  # noqa: E402

bootstrap_on_startup()
