# staffing_core/health_systems/admin.py
from django.contrib import admin

from staffing_core.health_systems.models import HealthSystem


@admin.register(HealthSystem)
class HealthSystemAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "is_active", "created_at")
    list_filter = ("is_active",)
    search_fields = ("name", "slug")
    readonly_fields = ("slug", "created_by", "created_at", "updated_at")
    ordering = ("name",)
