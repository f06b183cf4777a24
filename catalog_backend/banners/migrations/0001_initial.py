from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Banner",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(blank=True, default="", max_length=255)),
                ("subtitle", models.CharField(blank=True, default="", max_length=255)),
                ("image", models.CharField(max_length=500)),
                ("active", models.BooleanField(default=True)),
            ],
            options={
                "db_table": "banners",
                "ordering": ["id"],
            },
        ),
    ]
