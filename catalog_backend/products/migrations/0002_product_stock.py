"""
PATH: products/migrations/0002_product_stock.py

ADD products.stock (forward-only, additive)

Databases created before stock tracking have a products table without the
column. The column set is introspected first and the column is only added when
absent, so this is a no-op on databases that already have it.
"""

from django.db import migrations, models

STOCK_COLUMN = "stock"


def add_stock_column_if_missing(apps, schema_editor):
    connection = schema_editor.connection
    Product = apps.get_model("products", "Product")
    table = Product._meta.db_table

    with connection.cursor() as cursor:
        columns = {
            col.name for col in connection.introspection.get_table_description(cursor, table)
        }

    if STOCK_COLUMN in columns:
        return

    field = models.PositiveIntegerField(default=0)
    field.set_attributes_from_name(STOCK_COLUMN)
    schema_editor.add_field(Product, field)


class Migration(migrations.Migration):

    dependencies = [
        ("products", "0001_initial"),
    ]

    operations = [
        migrations.SeparateDatabaseAndState(
            state_operations=[
                migrations.AddField(
                    model_name="product",
                    name="stock",
                    field=models.PositiveIntegerField(default=0),
                ),
            ],
            database_operations=[
                migrations.RunPython(add_stock_column_if_missing, migrations.RunPython.noop),
            ],
        ),
    ]
