# staffing_core/job_types/api/filters.py
from __future__ import annotations

import django_filters

from staffing_core.job_types.models import JobType


class JobTypeFilter(django_filters.FilterSet):
    health_system_id = django_filters.UUIDFilter(field_name="health_system_id")

    class Meta:
        model = JobType
        fields = ["health_system_id", "is_active", "is_default", "code"]
