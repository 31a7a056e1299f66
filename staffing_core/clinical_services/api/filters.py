# staffing_core/clinical_services/api/filters.py
from __future__ import annotations

import django_filters

from staffing_core.clinical_services.models import Service


class ServiceFilter(django_filters.FilterSet):
    health_system_id = django_filters.UUIDFilter(field_name="department__health_system_id")
    hospital_id = django_filters.UUIDFilter(field_name="department__hospital_id")
    department_id = django_filters.UUIDFilter(field_name="department_id")
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")

    class Meta:
        model = Service
        fields = ["health_system_id", "hospital_id", "department_id", "is_active"]
