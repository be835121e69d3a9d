from django.db import migrations, models

import users.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="UserProfile",
            fields=[
                (
                    "id",
                    models.CharField(max_length=64, primary_key=True, serialize=False),
                ),
                ("name", models.CharField(blank=True, max_length=255)),
                ("email", models.EmailField(blank=True, max_length=254)),
                (
                    "currency",
                    models.CharField(
                        choices=[
                            ("BRL", "BRL"),
                            ("USD", "USD"),
                            ("EUR", "EUR"),
                            ("GBP", "GBP"),
                            ("CHF", "CHF"),
                            ("PLN", "PLN"),
                            ("CZK", "CZK"),
                        ],
                        default=users.models.default_currency,
                        max_length=3,
                    ),
                ),
                (
                    "theme",
                    models.CharField(
                        choices=[("LIGHT", "Light"), ("DARK", "Dark")],
                        default="LIGHT",
                        max_length=5,
                    ),
                ),
                (
                    "language",
                    models.CharField(
                        choices=[
                            ("pt-br", "Português (Brasil)"),
                            ("en", "English"),
                            ("es", "Español"),
                        ],
                        default="en",
                        max_length=5,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["created_at"],
            },
        ),
    ]
