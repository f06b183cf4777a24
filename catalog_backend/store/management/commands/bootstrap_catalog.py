# store/management/commands/bootstrap_catalog.py

"""
PATH: store/management/commands/bootstrap_catalog.py

Run the catalog startup bootstrap explicitly (deploy step / cron-free hosts).

- Idempotent: safe to run on every deploy.
- Does NOT print the administrator password.
"""

from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from backend.bootstrap import run_bootstrap


class Command(BaseCommand):
    help = "Migrate, seed the administrator and default store settings (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--skip-migrate",
            action="store_true",
            help="Assume the schema is already up to date.",
        )

    def handle(self, *args, **options):
        self.stdout.write("Bootstrapping catalog ...")

        try:
            result = run_bootstrap(migrate=not options["skip_migrate"])
        except Exception as exc:
            raise CommandError(f"Catalog bootstrap failed: {exc}") from exc

        if result.legacy_admin_removed:
            self.stdout.write(self.style.WARNING("Removed legacy 'admin' account."))

        admin_state = "created" if result.admin_created else "already present"
        self.stdout.write(f"Administrator '{result.admin_username}': {admin_state}")
        self.stdout.write(
            "Default settings: " + ("seeded" if result.settings_seeded else "kept existing")
        )
        self.stdout.write(self.style.SUCCESS("Catalog bootstrap complete."))
