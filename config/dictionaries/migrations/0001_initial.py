import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Country",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(max_length=2, unique=True)),
                ("name", models.CharField(max_length=128)),
            ],
            options={
                "ordering": ["code"],
                "verbose_name_plural": "countries",
            },
        ),
        migrations.CreateModel(
            name="CountryState",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("country_code", models.CharField(db_index=True, max_length=2)),
                ("code", models.CharField(max_length=16)),
                ("name", models.CharField(max_length=128)),
                (
                    "country",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="states",
                        to="dictionaries.country",
                    ),
                ),
            ],
            options={
                "ordering": ["country_code", "code"],
                "constraints": [
                    models.UniqueConstraint(fields=("country_code", "code"), name="uniq_state_code_per_country"),
                ],
            },
        ),
    ]
