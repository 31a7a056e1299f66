# staffing_core/job_types/services.py
from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from staffing_core.audit.models import AuditAction, AuditResourceType
from staffing_core.audit.services import AuditRecorder
from staffing_core.health_systems.models import HealthSystem
from staffing_core.hierarchy.services import LifecycleService, ToggleResult
from staffing_core.hierarchy.tree import Level
from staffing_core.iam.identity import require_actor
from staffing_core.iam.policy import authorize, child_target, target_for
from staffing_core.job_types.models import JobType

logger = logging.getLogger(__name__)

DEFAULT_JOB_TYPES: tuple[tuple[str, str], ...] = (
    ("MD", "Medical Doctor / Physician"),
    ("NP", "Nurse Practitioner"),
    ("PA", "Physician Assistant"),
    ("RN", "Registered Nurse"),
    ("Fellow", "Fellow (Specialty Training)"),
    ("Resident", "Resident (Training Physician)"),
)


class JobTypeService:

    @staticmethod
    def seed_defaults(*, health_system_id: UUID) -> int:
        """
        Called from health system creation, inside its transaction and audit entry.
        """
        JobType.objects.bulk_create(
            [
                JobType(health_system_id=health_system_id, code=code, name=name, is_default=True)
                for code, name in DEFAULT_JOB_TYPES
            ]
        )
        return len(DEFAULT_JOB_TYPES)

    @staticmethod
    @transaction.atomic
    def create(
        *,
        actor,
        health_system_id: UUID,
        code: str,
        name: str,
        audit: AuditRecorder,
        description: str = "",
    ) -> JobType:
        actor = require_actor(actor)
        code = (code or "").strip()
        name = (name or "").strip()

        if not code:
            raise ValidationError({"code": "This field is required."})
        if not name:
            raise ValidationError({"name": "This field is required."})

        hs = HealthSystem.objects.select_for_update().filter(id=health_system_id).first()
        if hs is None:
            raise ValidationError({"health_system_id": "Health system not found."})
        authorize(actor, child_target(Level.JOB_TYPE, parent_level=Level.HEALTH_SYSTEM, parent=hs))

        if JobType.objects.filter(health_system_id=hs.id, code=code).exists():
            raise ValidationError({"code": "A job type with this code already exists in this health system."})

        jt = JobType.objects.create(
            health_system=hs,
            code=code,
            name=name,
            description=description or "",
            is_default=False,
        )

        audit.record(
            user_id=actor.id,
            action=AuditAction.CREATE,
            resource_type=AuditResourceType.JOB_TYPE,
            resource_id=jt.id,
            changes={"code": code, "name": name, "health_system_id": str(hs.id)},
        )
        logger.info("job type created id=%s code=%s health_system=%s", jt.id, code, hs.id)
        return jt

    @staticmethod
    @transaction.atomic
    def update(
        *,
        actor,
        job_type_id: UUID,
        audit: AuditRecorder,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> JobType:
        actor = require_actor(actor)

        jt = JobType.objects.select_for_update().filter(id=job_type_id).first()
        if jt is None:
            raise NotFound()
        authorize(actor, target_for(Level.JOB_TYPE, jt))

        changes = {}
        if name is not None:
            name = name.strip()
            if not name:
                raise ValidationError({"name": "This field may not be blank."})
            if name != jt.name:
                changes["name"] = name
        if description is not None and description != jt.description:
            changes["description"] = description

        if not changes:
            return jt

        for field, value in changes.items():
            setattr(jt, field, value)
        jt.save(update_fields=[*changes.keys(), "updated_at"])

        audit.record(
            user_id=actor.id,
            action=AuditAction.UPDATE,
            resource_type=AuditResourceType.JOB_TYPE,
            resource_id=jt.id,
            changes=changes,
        )
        return jt

    @staticmethod
    def toggle_active(*, actor, job_type_id: UUID, audit: AuditRecorder) -> ToggleResult:
        # job types have no descendants; the generic toggle yields an empty count map
        return LifecycleService.toggle_active(
            actor=actor,
            collection="job_types",
            entity_id=job_type_id,
            audit=audit,
        )
