from django.apps import AppConfig


class ClinicalServicesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "staffing_core.clinical_services"
