# staffing_core/hierarchy/services.py
"""
Lifecycle mutations shared by every hierarchy level: toggle active and hard delete.

Each call is one atomic unit: identity, authorization, cascade or dependency
check, writes and the single audit entry commit together or not at all.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from staffing_core.audit.models import AuditAction, AuditResourceType
from staffing_core.audit.services import AuditRecorder
from staffing_core.common.api.exceptions import ConflictError
from staffing_core.hierarchy.cascade import cascade_deactivate
from staffing_core.hierarchy.dependencies import check_deletion
from staffing_core.hierarchy.repository import EntityRepository
from staffing_core.hierarchy.tree import COLLECTION_LEVELS, OWNED_COLLECTIONS
from staffing_core.iam.identity import require_actor
from staffing_core.iam.policy import authorize, target_for

logger = logging.getLogger(__name__)

RESOURCE_TYPES: dict[str, str] = {
    "health_systems": AuditResourceType.HEALTH_SYSTEM,
    "hospitals": AuditResourceType.HOSPITAL,
    "departments": AuditResourceType.DEPARTMENT,
    "services": AuditResourceType.SERVICE,
    "job_types": AuditResourceType.JOB_TYPE,
}


@dataclass(frozen=True)
class ToggleResult:
    id: UUID
    is_active: bool
    cascade_affected_counts: Optional[dict[str, int]] = None

    def as_dict(self) -> dict:
        data = {"id": self.id, "is_active": self.is_active}
        if self.cascade_affected_counts is not None:
            data["cascade_affected_counts"] = self.cascade_affected_counts
        return data


def _level_for(collection: str) -> str:
    try:
        return COLLECTION_LEVELS[collection]
    except KeyError:
        raise ValidationError({"collection": f"Unsupported collection: {collection}"})


def _locked_entity(repository: EntityRepository, collection: str, entity_id: UUID):
    entity = repository.get(collection, entity_id, for_update=True)
    if entity is None:
        raise NotFound()
    return entity


def _deactivate(repository: EntityRepository, collection: str, entity) -> dict[str, int]:
    if entity.is_active:
        repository.patch(collection, entity.id, is_active=False)
    # walked even when the entity was already inactive; counts cover this pass only
    return cascade_deactivate(repository, collection, entity.id)


class LifecycleService:

    @staticmethod
    @transaction.atomic
    def toggle_active(
        *,
        actor,
        collection: str,
        entity_id: UUID,
        audit: AuditRecorder,
        repository: EntityRepository | None = None,
    ) -> ToggleResult:
        actor = require_actor(actor)
        repository = repository or EntityRepository()
        level = _level_for(collection)

        entity = _locked_entity(repository, collection, entity_id)
        authorize(actor, target_for(level, entity), write=True)

        if entity.is_active:
            counts = _deactivate(repository, collection, entity)
            result = ToggleResult(id=entity.id, is_active=False, cascade_affected_counts=counts)
            action, changes = AuditAction.DEACTIVATE, {"is_active": False, "affected": counts}
        else:
            # children deactivated by an earlier cascade stay inactive
            repository.patch(collection, entity.id, is_active=True)
            result = ToggleResult(id=entity.id, is_active=True)
            action, changes = AuditAction.ACTIVATE, {"is_active": True}

        audit.record(
            user_id=actor.id,
            action=action,
            resource_type=RESOURCE_TYPES[collection],
            resource_id=entity.id,
            changes=changes,
        )
        logger.info("%s %s:%s by %s", action, collection, entity.id, actor.id)
        return result

    @staticmethod
    @transaction.atomic
    def deactivate(
        *,
        actor,
        collection: str,
        entity_id: UUID,
        audit: AuditRecorder,
        repository: EntityRepository | None = None,
    ) -> ToggleResult:
        """
        Idempotent: an entity that is already inactive stays inactive and the
        cascade reports only what it flips this time (all zeros on a clean subtree).
        """
        actor = require_actor(actor)
        repository = repository or EntityRepository()
        level = _level_for(collection)

        entity = _locked_entity(repository, collection, entity_id)
        authorize(actor, target_for(level, entity), write=True)

        counts = _deactivate(repository, collection, entity)

        audit.record(
            user_id=actor.id,
            action=AuditAction.DEACTIVATE,
            resource_type=RESOURCE_TYPES[collection],
            resource_id=entity.id,
            changes={"is_active": False, "affected": counts},
        )
        logger.info("DEACTIVATE %s:%s by %s affected=%s", collection, entity.id, actor.id, counts)
        return ToggleResult(id=entity.id, is_active=False, cascade_affected_counts=counts)

    @staticmethod
    @transaction.atomic
    def delete(
        *,
        actor,
        collection: str,
        entity_id: UUID,
        audit: AuditRecorder,
        repository: EntityRepository | None = None,
    ) -> None:
        actor = require_actor(actor)
        repository = repository or EntityRepository()
        level = _level_for(collection)

        entity = _locked_entity(repository, collection, entity_id)
        authorize(actor, target_for(level, entity), write=True)

        # re-checked under the row lock; a can-delete answer fetched earlier may be stale
        check = check_deletion(repository, collection, entity.id)
        if not check.can_delete:
            raise ConflictError(
                "Cannot delete: dependent records exist.",
                blockers=check.as_dict()["blockers"],
            )

        for owned, foreign_key in OWNED_COLLECTIONS.get(collection, ()):
            repository.delete_by_foreign_key(owned, foreign_key, entity.id)
        repository.delete(collection, entity.id)

        audit.record(
            user_id=actor.id,
            action=AuditAction.DELETE,
            resource_type=RESOURCE_TYPES[collection],
            resource_id=entity.id,
            changes={"name": getattr(entity, "name", "")},
        )
        logger.info("DELETE %s:%s by %s", collection, entity.id, actor.id)
