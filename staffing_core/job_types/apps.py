from django.apps import AppConfig


class JobTypesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "staffing_core.job_types"
