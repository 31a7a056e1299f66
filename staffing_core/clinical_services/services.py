# staffing_core/clinical_services/services.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional
from uuid import UUID

from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from staffing_core.audit.models import AuditAction, AuditResourceType
from staffing_core.audit.services import AuditRecorder
from staffing_core.clinical_services.job_codes import generate_job_code
from staffing_core.clinical_services.models import JobPosition, Service, ShiftType
from staffing_core.departments.models import Department
from staffing_core.hierarchy.tree import Level
from staffing_core.iam.identity import require_actor
from staffing_core.iam.policy import authorize, child_target, target_for
from staffing_core.job_types.models import JobType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JobTypeStaffing:
    job_type_id: UUID
    headcount: int
    # None falls back to the service's own flags
    operates_days: Optional[bool] = None
    operates_nights: Optional[bool] = None


@dataclass(frozen=True)
class ServiceUpdate:
    name: Optional[str] = None
    short_code: Optional[str] = None
    day_capacity: Optional[int] = None
    night_capacity: Optional[int] = None
    weekend_capacity: Optional[int] = None
    operates_days: Optional[bool] = None
    operates_nights: Optional[bool] = None
    operates_weekends: Optional[bool] = None


def shifts_for(*, operates_days: bool, operates_nights: bool, operates_weekends: bool) -> list[str]:
    shifts = []
    if operates_days:
        shifts.append(ShiftType.WEEKDAY_AM)
    if operates_nights:
        shifts.append(ShiftType.WEEKDAY_PM)
    if operates_weekends and operates_days:
        shifts.append(ShiftType.WEEKEND_AM)
    if operates_weekends and operates_nights:
        shifts.append(ShiftType.WEEKEND_PM)
    return shifts


class ClinicalServiceService:

    @staticmethod
    @transaction.atomic
    def create(
        *,
        actor,
        department_id: UUID,
        name: str,
        short_code: str,
        audit: AuditRecorder,
        day_capacity: Optional[int] = None,
        night_capacity: Optional[int] = None,
        weekend_capacity: Optional[int] = None,
        operates_days: bool = True,
        operates_nights: bool = False,
        operates_weekends: bool = False,
        job_types: Iterable[JobTypeStaffing] = (),
    ) -> dict:
        actor = require_actor(actor)
        name = (name or "").strip()
        short_code = (short_code or "").strip().upper()
        job_types = list(job_types)

        if not name:
            raise ValidationError({"name": "This field is required."})
        if not short_code:
            raise ValidationError({"short_code": "This field is required."})

        dept = Department.objects.select_for_update().select_related("hospital").filter(id=department_id).first()
        if dept is None:
            raise ValidationError({"department_id": "Department not found."})
        authorize(actor, child_target(Level.SERVICE, parent_level=Level.DEPARTMENT, parent=dept))
        if not dept.is_active:
            raise ValidationError({"department_id": "Department is inactive."})

        requested = {s.job_type_id for s in job_types}
        if len(requested) != len(job_types):
            raise ValidationError({"job_types": "Each job type may appear only once."})
        catalogue = {
            jt.id: jt
            for jt in JobType.objects.filter(id__in=requested, health_system_id=dept.health_system_id, is_active=True)
        }
        missing = requested - catalogue.keys()
        if missing:
            raise ValidationError(
                {"job_types": f"Unknown or inactive job types for this health system: {sorted(str(m) for m in missing)}"}
            )
        if any(s.headcount < 0 for s in job_types):
            raise ValidationError({"job_types": "headcount must be >= 0."})

        service = Service.objects.create(
            department=dept,
            name=name,
            short_code=short_code,
            day_capacity=day_capacity,
            night_capacity=night_capacity,
            weekend_capacity=weekend_capacity,
            operates_days=operates_days,
            operates_nights=operates_nights,
            operates_weekends=operates_weekends,
            created_by=actor,
        )

        positions = []
        for staffing in job_types:
            jt = catalogue[staffing.job_type_id]
            shifts = shifts_for(
                operates_days=operates_days if staffing.operates_days is None else staffing.operates_days,
                operates_nights=operates_nights if staffing.operates_nights is None else staffing.operates_nights,
                operates_weekends=operates_weekends,
            )
            for shift_type in shifts:
                for n in range(1, staffing.headcount + 1):
                    positions.append(
                        JobPosition(
                            service=service,
                            job_type=jt,
                            shift_type=shift_type,
                            position_number=n,
                            job_code=generate_job_code(
                                department_name=dept.name,
                                hospital_code=dept.hospital.short_code,
                                service_code=short_code,
                                job_type_code=jt.code,
                                shift_type=shift_type,
                                position_number=n,
                            ),
                        )
                    )
        JobPosition.objects.bulk_create(positions)

        audit.record(
            user_id=actor.id,
            action=AuditAction.CREATE,
            resource_type=AuditResourceType.SERVICE,
            resource_id=service.id,
            changes={"name": name, "short_code": short_code, "positions_created": len(positions)},
        )
        logger.info("service created id=%s department=%s positions=%s", service.id, dept.id, len(positions))
        return {"id": service.id, "positions_created": len(positions)}

    @staticmethod
    @transaction.atomic
    def update(*, actor, service_id: UUID, patch: ServiceUpdate, audit: AuditRecorder) -> Service:
        actor = require_actor(actor)

        service = Service.objects.select_for_update().select_related("department").filter(id=service_id).first()
        if service is None:
            raise NotFound()
        authorize(actor, target_for(Level.SERVICE, service))

        mapping = {
            "name": patch.name.strip() if patch.name is not None else None,
            "short_code": patch.short_code.strip().upper() if patch.short_code is not None else None,
            "day_capacity": patch.day_capacity,
            "night_capacity": patch.night_capacity,
            "weekend_capacity": patch.weekend_capacity,
            "operates_days": patch.operates_days,
            "operates_nights": patch.operates_nights,
            "operates_weekends": patch.operates_weekends,
        }
        changes = {f: v for f, v in mapping.items() if v is not None and v != getattr(service, f)}

        for required in ("name", "short_code"):
            if required in changes and not changes[required]:
                raise ValidationError({required: "This field may not be blank."})

        if not changes:
            return service

        for field, value in changes.items():
            setattr(service, field, value)
        service.save(update_fields=[*changes.keys(), "updated_at"])

        audit.record(
            user_id=actor.id,
            action=AuditAction.UPDATE,
            resource_type=AuditResourceType.SERVICE,
            resource_id=service.id,
            changes=changes,
        )
        return service
