# staffing_core/departments/api/filters.py
from __future__ import annotations

import django_filters

from staffing_core.departments.models import Department


class DepartmentFilter(django_filters.FilterSet):
    health_system_id = django_filters.UUIDFilter(field_name="health_system_id")
    hospital_id = django_filters.UUIDFilter(field_name="hospital_id")
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")

    class Meta:
        model = Department
        fields = ["health_system_id", "hospital_id", "is_active", "is_default"]
