# staffing_core/health_systems/selectors.py
from __future__ import annotations

from django.db.models import QuerySet

from staffing_core.health_systems.models import HealthSystem
from staffing_core.hierarchy.tree import Level
from staffing_core.iam.policy import scope_q


def health_system_qs(*, user) -> QuerySet[HealthSystem]:
    q = scope_q(user, Level.HEALTH_SYSTEM)
    if q is None:
        return HealthSystem.objects.none()
    return HealthSystem.objects.filter(q)
