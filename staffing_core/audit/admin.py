# staffing_core/audit/admin.py
from django.contrib import admin

from staffing_core.audit.models import AuditLog


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = (
        "action",
        "resource_type",
        "resource_id",
        "user",
        "timestamp",
    )
    list_filter = ("action", "resource_type")
    search_fields = ("resource_id", "user__email", "user__external_id")
    readonly_fields = ("user", "action", "resource_type", "resource_id", "changes", "timestamp")
    ordering = ("-timestamp",)

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
