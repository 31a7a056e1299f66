# staffing_core/job_types/selectors.py
from __future__ import annotations

from django.db.models import QuerySet

from staffing_core.hierarchy.tree import Level
from staffing_core.iam.policy import scope_q
from staffing_core.job_types.models import JobType


def job_type_qs(*, user) -> QuerySet[JobType]:
    q = scope_q(user, Level.JOB_TYPE)
    if q is None:
        return JobType.objects.none()
    return JobType.objects.filter(q)
