from django.db import models


class FieldOption(models.Model):
    """Stored value for a named field, partitioned by context."""

    context = models.CharField(
        max_length=64,
        blank=True,
        default="",
        help_text="Where the value belongs, e.g. an empty string for site options.",
    )
    name = models.CharField(max_length=191)
    value = models.JSONField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["context", "name"]
        verbose_name = "Field option"
        verbose_name_plural = "Field options"
        constraints = [
            models.UniqueConstraint(
                fields=["context", "name"], name="fieldkit_unique_option_per_context"
            )
        ]

    def __str__(self):
        if self.context:
            return f"{self.context}:{self.name}"
        return self.name
