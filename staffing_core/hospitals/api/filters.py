# staffing_core/hospitals/api/filters.py
from __future__ import annotations

import django_filters

from staffing_core.hospitals.models import Hospital


class HospitalFilter(django_filters.FilterSet):
    health_system_id = django_filters.UUIDFilter(field_name="health_system_id")
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")

    class Meta:
        model = Hospital
        fields = ["health_system_id", "is_active", "short_code"]
