from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="FieldOption",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "context",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Where the value belongs, e.g. an empty string for site options.",
                        max_length=64,
                    ),
                ),
                ("name", models.CharField(max_length=191)),
                ("value", models.JSONField(blank=True, null=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Field option",
                "verbose_name_plural": "Field options",
                "ordering": ["context", "name"],
            },
        ),
        migrations.AddConstraint(
            model_name="fieldoption",
            constraint=models.UniqueConstraint(
                fields=("context", "name"), name="fieldkit_unique_option_per_context"
            ),
        ),
    ]
