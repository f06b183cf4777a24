"""
PATH: store/migrations/0002_correct_legacy_store_name.py

ONE-TIME LEGACY PLACEHOLDER CORRECTION

Older deployments seeded placeholder store names. When storeName still holds
one of them, storeName and primaryColor are overwritten with the current
defaults. Any other value is left untouched.

Technical debt: this exists only to repair databases seeded by old builds.
Values are inlined so the migration never changes when store/defaults.py does.
Django records it in django_migrations, so it runs at most once per database.
"""

from django.db import migrations

LEGACY_STORE_NAMES = ("Minha Loja", "Catálogo Online Pro")
CORRECTED_VALUES = {
    "storeName": "MIZUBELEM - Filial Portel",
    "primaryColor": "#0ea5e9",
}


def correct_legacy_store_name(apps, schema_editor):
    StoreSetting = apps.get_model("store", "StoreSetting")

    if not StoreSetting.objects.filter(key="storeName", value__in=LEGACY_STORE_NAMES).exists():
        return

    for key, value in CORRECTED_VALUES.items():
        StoreSetting.objects.update_or_create(key=key, defaults={"value": value})


class Migration(migrations.Migration):

    dependencies = [
        ("store", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(correct_legacy_store_name, migrations.RunPython.noop),
    ]
