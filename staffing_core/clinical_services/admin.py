# staffing_core/clinical_services/admin.py
from __future__ import annotations

from django.contrib import admin

from staffing_core.clinical_services.models import Assignment, JobPosition, Service


class JobPositionInline(admin.TabularInline):
    model = JobPosition
    extra = 0
    fields = ("job_code", "job_type", "shift_type", "position_number", "status", "is_active")
    readonly_fields = fields
    can_delete = False


@admin.register(Service)
class ServiceAdmin(admin.ModelAdmin):
    list_display = ("name", "short_code", "department", "operates_days", "operates_nights", "is_active")
    list_filter = ("is_active", "operates_weekends")
    search_fields = ("name", "short_code", "department__name")
    autocomplete_fields = ("department",)
    readonly_fields = ("created_by", "created_at", "updated_at")
    inlines = [JobPositionInline]
    ordering = ("department", "name")


@admin.register(JobPosition)
class JobPositionAdmin(admin.ModelAdmin):
    list_display = ("job_code", "service", "job_type", "shift_type", "status", "is_active")
    list_filter = ("status", "shift_type", "is_active")
    search_fields = ("job_code",)
    autocomplete_fields = ("service", "job_type")


@admin.register(Assignment)
class AssignmentAdmin(admin.ModelAdmin):
    list_display = ("provider_name", "job_position", "status", "assigned_at")
    list_filter = ("status",)
    search_fields = ("provider_name", "job_position__job_code")
    autocomplete_fields = ("job_position",)
