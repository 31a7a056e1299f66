from django.apps import AppConfig


class HealthSystemsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "staffing_core.health_systems"
