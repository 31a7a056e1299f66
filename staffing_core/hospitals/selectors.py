# staffing_core/hospitals/selectors.py
from __future__ import annotations

from django.db.models import QuerySet

from staffing_core.hierarchy.tree import Level
from staffing_core.hospitals.models import Hospital
from staffing_core.iam.policy import scope_q


def hospital_qs(*, user) -> QuerySet[Hospital]:
    q = scope_q(user, Level.HOSPITAL)
    if q is None:
        return Hospital.objects.none()
    return Hospital.objects.filter(q).select_related("health_system")
