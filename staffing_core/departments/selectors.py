# staffing_core/departments/selectors.py
from __future__ import annotations

from django.db.models import QuerySet

from staffing_core.departments.models import Department
from staffing_core.hierarchy.tree import Level
from staffing_core.iam.policy import scope_q


def department_qs(*, user) -> QuerySet[Department]:
    q = scope_q(user, Level.DEPARTMENT)
    if q is None:
        return Department.objects.none()
    return Department.objects.filter(q).select_related("hospital")
