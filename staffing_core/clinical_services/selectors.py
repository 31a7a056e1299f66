# staffing_core/clinical_services/selectors.py
from __future__ import annotations

from uuid import UUID

from django.db.models import Count, Q, QuerySet

from staffing_core.clinical_services.models import JobPosition, PositionStatus, Service
from staffing_core.hierarchy.tree import Level
from staffing_core.iam.policy import scope_q


def service_qs(*, user) -> QuerySet[Service]:
    q = scope_q(user, Level.SERVICE)
    if q is None:
        return Service.objects.none()
    return Service.objects.filter(q).select_related("department").annotate(
        positions_total=Count("job_positions"),
        positions_open=Count("job_positions", filter=Q(job_positions__status=PositionStatus.OPEN)),
    )


def positions_for_service(*, service_id: UUID) -> QuerySet[JobPosition]:
    return JobPosition.objects.filter(service_id=service_id).select_related("job_type").order_by(
        "job_type__code", "shift_type", "position_number"
    )
