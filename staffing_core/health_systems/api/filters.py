# staffing_core/health_systems/api/filters.py
from __future__ import annotations

import django_filters

from staffing_core.health_systems.models import HealthSystem


class HealthSystemFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")

    class Meta:
        model = HealthSystem
        fields = ["is_active", "slug"]
