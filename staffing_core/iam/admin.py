# staffing_core/iam/admin.py
from __future__ import annotations

from django.contrib import admin

from staffing_core.iam.models import AdminUser


@admin.register(AdminUser)
class AdminUserAdmin(admin.ModelAdmin):
    list_display = ("email", "external_id", "role", "health_system", "hospital", "department", "is_active")
    list_filter = ("role", "is_active")
    search_fields = ("email", "external_id", "first_name", "last_name")
    autocomplete_fields = ("health_system", "hospital", "department")
    ordering = ("-created_at",)
