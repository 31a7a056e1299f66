# staffing_core/hospitals/admin.py
from django.contrib import admin

from staffing_core.hospitals.models import Hospital


@admin.register(Hospital)
class HospitalAdmin(admin.ModelAdmin):
    list_display = ("name", "short_code", "health_system", "timezone", "is_active")
    list_filter = ("health_system", "is_active")
    search_fields = ("name", "short_code", "city")
    autocomplete_fields = ("health_system",)
    readonly_fields = ("created_by", "created_at", "updated_at")
    ordering = ("health_system", "name")
