from django.apps import AppConfig


class FieldkitConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "fieldkit"
    verbose_name = "Form fields"

    def ready(self):
        from fieldkit.hooks import load_configured_filters

        load_configured_filters()
