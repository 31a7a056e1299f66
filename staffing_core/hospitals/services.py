# staffing_core/hospitals/services.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from staffing_core.audit.models import AuditAction, AuditResourceType
from staffing_core.audit.services import AuditRecorder
from staffing_core.departments.services import DepartmentService
from staffing_core.health_systems.models import HealthSystem
from staffing_core.hierarchy.tree import Level
from staffing_core.hospitals.models import Hospital
from staffing_core.iam.identity import require_actor
from staffing_core.iam.policy import authorize, child_target, target_for

logger = logging.getLogger(__name__)

DUPLICATE_SHORT_CODE_MSG = "A hospital with this short code already exists in this health system."


@dataclass(frozen=True)
class HospitalUpdate:
    name: Optional[str] = None
    short_code: Optional[str] = None
    timezone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None


class HospitalService:

    @staticmethod
    @transaction.atomic
    def create(
        *,
        actor,
        health_system_id: UUID,
        name: str,
        short_code: str,
        timezone: str,
        audit: AuditRecorder,
        address: str = "",
        city: str = "",
        state: str = "",
        zip_code: str = "",
        seed_default_departments: bool = True,
    ) -> dict:
        actor = require_actor(actor)
        name = (name or "").strip()
        short_code = (short_code or "").strip().upper()

        if not name:
            raise ValidationError({"name": "This field is required."})
        if not short_code:
            raise ValidationError({"short_code": "This field is required."})

        # parent row lock serializes against a concurrent delete of the health system
        hs = HealthSystem.objects.select_for_update().filter(id=health_system_id).first()
        if hs is None:
            raise ValidationError({"health_system_id": "Health system not found."})
        authorize(actor, child_target(Level.HOSPITAL, parent_level=Level.HEALTH_SYSTEM, parent=hs))
        if not hs.is_active:
            raise ValidationError({"health_system_id": "Health system is inactive."})

        if Hospital.objects.filter(health_system_id=hs.id, short_code=short_code).exists():
            raise ValidationError({"short_code": DUPLICATE_SHORT_CODE_MSG})

        hospital = Hospital.objects.create(
            health_system=hs,
            name=name,
            short_code=short_code,
            timezone=timezone,
            address=address or "",
            city=city or "",
            state=state or "",
            zip_code=zip_code or "",
            created_by=actor,
        )

        departments_created = 0
        if seed_default_departments:
            departments_created = DepartmentService.seed_defaults(hospital=hospital)

        audit.record(
            user_id=actor.id,
            action=AuditAction.CREATE,
            resource_type=AuditResourceType.HOSPITAL,
            resource_id=hospital.id,
            changes={"name": name, "short_code": short_code, "departments_created": departments_created},
        )
        logger.info("hospital created id=%s health_system=%s departments=%s", hospital.id, hs.id, departments_created)
        return {"id": hospital.id, "departments_created": departments_created}

    @staticmethod
    @transaction.atomic
    def update(*, actor, hospital_id: UUID, patch: HospitalUpdate, audit: AuditRecorder) -> Hospital:
        actor = require_actor(actor)

        hospital = Hospital.objects.select_for_update().filter(id=hospital_id).first()
        if hospital is None:
            raise NotFound()
        authorize(actor, target_for(Level.HOSPITAL, hospital))

        mapping = {
            "name": patch.name.strip() if patch.name is not None else None,
            "short_code": patch.short_code.strip().upper() if patch.short_code is not None else None,
            "timezone": patch.timezone,
            "address": patch.address,
            "city": patch.city,
            "state": patch.state,
            "zip_code": patch.zip_code,
        }
        changes = {f: v for f, v in mapping.items() if v is not None and v != getattr(hospital, f)}

        for required in ("name", "short_code"):
            if required in changes and not changes[required]:
                raise ValidationError({required: "This field may not be blank."})

        if "short_code" in changes and (
            Hospital.objects.filter(health_system_id=hospital.health_system_id, short_code=changes["short_code"])
            .exclude(id=hospital.id)
            .exists()
        ):
            raise ValidationError({"short_code": DUPLICATE_SHORT_CODE_MSG})

        if not changes:
            return hospital

        for field, value in changes.items():
            setattr(hospital, field, value)
        hospital.save(update_fields=[*changes.keys(), "updated_at"])

        audit.record(
            user_id=actor.id,
            action=AuditAction.UPDATE,
            resource_type=AuditResourceType.HOSPITAL,
            resource_id=hospital.id,
            changes=changes,
        )
        return hospital
