# staffing_core/departments/admin.py
from django.contrib import admin

from staffing_core.departments.models import Department


@admin.register(Department)
class DepartmentAdmin(admin.ModelAdmin):
    list_display = ("name", "hospital", "health_system", "is_default", "is_active")
    list_filter = ("health_system", "is_default", "is_active")
    search_fields = ("name", "hospital__name", "hospital__short_code")
    autocomplete_fields = ("hospital",)
    readonly_fields = ("health_system",)
    ordering = ("hospital", "name")

    def save_model(self, request, obj, form, change):
        obj.health_system_id = obj.hospital.health_system_id
        super().save_model(request, obj, form, change)
