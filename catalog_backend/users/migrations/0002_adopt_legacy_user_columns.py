"""
PATH: users/migrations/0002_adopt_legacy_user_columns.py

ADOPT A LEGACY users TABLE (forward-only, additive)

Stores created by older builds already have a users table holding only
id, username and password. Bootstrap adopts it (migrate --fake-initial), so
0001 is recorded without touching the table; this migration then adds the
columns Django's auth model needs. Columns that already exist are skipped, so
it is a no-op on tables created by 0001.
"""

from django.db import migrations

ADOPTED_COLUMNS = ("last_login", "created_at")


def add_missing_user_columns(apps, schema_editor):
    connection = schema_editor.connection
    User = apps.get_model("users", "User")
    table = User._meta.db_table

    with connection.cursor() as cursor:
        columns = {
            col.name for col in connection.introspection.get_table_description(cursor, table)
        }

    for name in ADOPTED_COLUMNS:
        field = User._meta.get_field(name)
        if field.column in columns:
            continue

        # the historical model already carries every column, so the column
        # is added on its own instead of through add_field()
        definition, params = schema_editor.column_sql(User, field, include_default=True)
        schema_editor.execute(
            schema_editor.sql_create_column
            % {
                "table": schema_editor.quote_name(table),
                "column": schema_editor.quote_name(field.column),
                "definition": definition,
            },
            params,
        )


class Migration(migrations.Migration):

    dependencies = [
        ("users", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(add_missing_user_columns, migrations.RunPython.noop),
    ]
