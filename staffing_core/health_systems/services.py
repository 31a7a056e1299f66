# staffing_core/health_systems/services.py
from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from django.db import IntegrityError, transaction
from rest_framework.exceptions import NotFound, ValidationError

from staffing_core.audit.models import AuditAction, AuditResourceType
from staffing_core.audit.services import AuditRecorder
from staffing_core.health_systems.models import HealthSystem
from staffing_core.health_systems.slugs import slugify_name
from staffing_core.hierarchy.tree import Level
from staffing_core.iam.identity import require_actor
from staffing_core.iam.policy import authorize, child_target, target_for
from staffing_core.job_types.services import JobTypeService

logger = logging.getLogger(__name__)

DUPLICATE_NAME_MSG = "A health system with this name already exists."


def _slug_for(name: str) -> str:
    slug = slugify_name(name)
    if not slug:
        raise ValidationError({"name": "Name must contain at least one letter or digit."})
    return slug


class HealthSystemService:
    """
    All HealthSystem mutations live here (write-model boundary).
    """

    @staticmethod
    @transaction.atomic
    def create(*, actor, name: str, audit: AuditRecorder) -> dict:
        actor = require_actor(actor)
        authorize(actor, child_target(Level.HEALTH_SYSTEM))

        name = (name or "").strip()
        if not name:
            raise ValidationError({"name": "This field is required."})
        slug = _slug_for(name)

        if HealthSystem.objects.filter(slug=slug).exists():
            raise ValidationError({"name": DUPLICATE_NAME_MSG})

        try:
            # savepoint so a lost race on the unique slug surfaces as a 400, not a broken transaction
            with transaction.atomic():
                hs = HealthSystem.objects.create(name=name, slug=slug, created_by=actor)
        except IntegrityError:
            raise ValidationError({"name": DUPLICATE_NAME_MSG})

        job_types_created = JobTypeService.seed_defaults(health_system_id=hs.id)

        audit.record(
            user_id=actor.id,
            action=AuditAction.CREATE,
            resource_type=AuditResourceType.HEALTH_SYSTEM,
            resource_id=hs.id,
            changes={"name": name, "slug": slug},
        )
        logger.info("health system created id=%s slug=%s job_types=%s", hs.id, slug, job_types_created)
        return {"id": hs.id, "job_types_created": job_types_created}

    @staticmethod
    @transaction.atomic
    def update(
        *,
        actor,
        health_system_id: UUID,
        audit: AuditRecorder,
        name: Optional[str] = None,
    ) -> HealthSystem:
        actor = require_actor(actor)

        hs = HealthSystem.objects.select_for_update().filter(id=health_system_id).first()
        if hs is None:
            raise NotFound()
        authorize(actor, target_for(Level.HEALTH_SYSTEM, hs))

        changes = {}
        if name is not None:
            name = name.strip()
            if not name:
                raise ValidationError({"name": "This field may not be blank."})
            if name != hs.name:
                slug = _slug_for(name)
                if HealthSystem.objects.filter(slug=slug).exclude(id=hs.id).exists():
                    raise ValidationError({"name": DUPLICATE_NAME_MSG})
                changes["name"] = name
                if slug != hs.slug:
                    changes["slug"] = slug

        if not changes:
            return hs

        for field, value in changes.items():
            setattr(hs, field, value)
        hs.save(update_fields=[*changes.keys(), "updated_at"])

        audit.record(
            user_id=actor.id,
            action=AuditAction.UPDATE,
            resource_type=AuditResourceType.HEALTH_SYSTEM,
            resource_id=hs.id,
            changes=changes,
        )
        return hs
