# staffing_core/job_types/admin.py
from django.contrib import admin

from staffing_core.job_types.models import JobType


@admin.register(JobType)
class JobTypeAdmin(admin.ModelAdmin):
    list_display = ("code", "name", "health_system", "is_default", "is_active")
    list_filter = ("health_system", "is_default", "is_active")
    search_fields = ("code", "name")
    autocomplete_fields = ("health_system",)
    ordering = ("health_system", "code")
