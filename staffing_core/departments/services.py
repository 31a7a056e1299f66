# staffing_core/departments/services.py
from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from staffing_core.audit.models import AuditAction, AuditResourceType
from staffing_core.audit.services import AuditRecorder
from staffing_core.departments.models import Department
from staffing_core.hierarchy.tree import Level
from staffing_core.hospitals.models import Hospital
from staffing_core.iam.identity import require_actor
from staffing_core.iam.policy import authorize, child_target, target_for

logger = logging.getLogger(__name__)

DEFAULT_DEPARTMENTS: tuple[str, ...] = (
    "Cardiology",
    "Neurosurgery",
    "Orthopedics",
    "General Surgery",
    "Emergency Medicine",
    "Internal Medicine",
    "ICU / Critical Care",
    "Pediatrics",
    "OB/GYN",
    "Psychiatry",
    "Radiology",
    "Anesthesiology",
    "Oncology",
    "Urology",
    "Dermatology",
    "Pulmonology",
    "Gastroenterology",
    "Nephrology",
    "Endocrinology",
    "Rheumatology",
)


class DepartmentService:

    @staticmethod
    def seed_defaults(*, hospital: Hospital) -> int:
        """
        Called from hospital creation, inside its transaction and audit entry.
        Goes through save() so the health-system invariant is checked per row.
        """
        for name in DEFAULT_DEPARTMENTS:
            Department.objects.create(
                hospital=hospital,
                health_system_id=hospital.health_system_id,
                name=name,
                is_default=True,
            )
        return len(DEFAULT_DEPARTMENTS)

    @staticmethod
    @transaction.atomic
    def create(*, actor, hospital_id: UUID, name: str, audit: AuditRecorder) -> Department:
        actor = require_actor(actor)
        name = (name or "").strip()
        if not name:
            raise ValidationError({"name": "This field is required."})

        hospital = Hospital.objects.select_for_update().filter(id=hospital_id).first()
        if hospital is None:
            raise ValidationError({"hospital_id": "Hospital not found."})
        authorize(actor, child_target(Level.DEPARTMENT, parent_level=Level.HOSPITAL, parent=hospital))
        if not hospital.is_active:
            raise ValidationError({"hospital_id": "Hospital is inactive."})

        dept = Department.objects.create(
            hospital=hospital,
            health_system_id=hospital.health_system_id,
            name=name,
            is_default=False,
        )

        audit.record(
            user_id=actor.id,
            action=AuditAction.CREATE,
            resource_type=AuditResourceType.DEPARTMENT,
            resource_id=dept.id,
            changes={"name": name, "hospital_id": str(hospital.id)},
        )
        logger.info("department created id=%s hospital=%s", dept.id, hospital.id)
        return dept

    @staticmethod
    @transaction.atomic
    def update(
        *,
        actor,
        department_id: UUID,
        audit: AuditRecorder,
        name: Optional[str] = None,
    ) -> Department:
        actor = require_actor(actor)

        dept = Department.objects.select_for_update().filter(id=department_id).first()
        if dept is None:
            raise NotFound()
        authorize(actor, target_for(Level.DEPARTMENT, dept))

        if name is None:
            return dept
        name = name.strip()
        if not name:
            raise ValidationError({"name": "This field may not be blank."})
        if name == dept.name:
            return dept

        dept.name = name
        dept.save(update_fields=["name", "updated_at"])

        audit.record(
            user_id=actor.id,
            action=AuditAction.UPDATE,
            resource_type=AuditResourceType.DEPARTMENT,
            resource_id=dept.id,
            changes={"name": name},
        )
        return dept
