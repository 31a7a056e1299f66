# staffing_core/iam/services.py
from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from staffing_core.audit.models import AuditAction, AuditResourceType
from staffing_core.audit.services import AuditRecorder
from staffing_core.common.api.exceptions import AuthorizationDenied
from staffing_core.hierarchy.repository import EntityRepository
from staffing_core.hierarchy.tree import COLLECTION_LEVELS
from staffing_core.iam.identity import require_actor
from staffing_core.iam.models import AdminUser, UserRole
from staffing_core.iam.policy import ROLE_POLICIES, authorize, outranks, target_for

logger = logging.getLogger(__name__)

# scope field -> collection holding the scope entity
SCOPE_COLLECTIONS: dict[str, str] = {
    "health_system_id": "health_systems",
    "hospital_id": "hospitals",
    "department_id": "departments",
}


class AdminUserService:

    @staticmethod
    @transaction.atomic
    def create(
        *,
        actor,
        external_id: str,
        role: str,
        audit: AuditRecorder,
        email: str = "",
        first_name: str = "",
        last_name: str = "",
        scope_id: Optional[UUID] = None,
    ) -> AdminUser:
        """
        The actor may only create users of a strictly lower role, pinned to an
        entity the actor can see. scope_id is the id of that entity; its kind
        follows from the role.
        """
        actor = require_actor(actor)
        external_id = (external_id or "").strip()

        if not external_id:
            raise ValidationError({"external_id": "This field is required."})
        if role not in UserRole.values:
            raise ValidationError({"role": f"Invalid role. Allowed: {list(UserRole.values)}"})
        if not outranks(actor, role):
            raise AuthorizationDenied("You cannot create users with this role.")

        scope_attrs = {}
        scope_field = ROLE_POLICIES[role].scope_field
        if scope_field is not None:
            if scope_id is None:
                raise ValidationError({"scope_id": f"Required for role {role}."})
            collection = SCOPE_COLLECTIONS[scope_field]
            entity = EntityRepository().get(collection, scope_id, for_update=True)
            if entity is None:
                raise ValidationError({"scope_id": "Scope entity not found."})
            authorize(actor, target_for(COLLECTION_LEVELS[collection], entity), write=False)
            scope_attrs[scope_field] = entity.id

        if AdminUser.objects.filter(external_id=external_id).exists():
            raise ValidationError({"external_id": "A user with this external id already exists."})

        user = AdminUser.objects.create(
            external_id=external_id,
            email=email or "",
            first_name=first_name or "",
            last_name=last_name or "",
            role=role,
            **scope_attrs,
        )

        audit.record(
            user_id=actor.id,
            action=AuditAction.CREATE,
            resource_type=AuditResourceType.USER,
            resource_id=user.id,
            changes={"role": role, "email": user.email, **{k: str(v) for k, v in scope_attrs.items()}},
        )
        logger.info("admin user created id=%s role=%s by %s", user.id, role, actor.id)
        return user

    @staticmethod
    def _manageable(actor, user_id: UUID) -> AdminUser:
        """
        Lock the target user and check the actor may manage it: strictly higher
        rank and the target's scope entity inside the actor's read scope.
        """
        user = AdminUser.objects.select_for_update().filter(id=user_id).first()
        if user is None:
            raise NotFound()
        if not outranks(actor, user.role):
            raise AuthorizationDenied("You cannot manage users with this role.")

        scope_field = ROLE_POLICIES[user.role].scope_field
        collection = SCOPE_COLLECTIONS[scope_field]
        entity = EntityRepository().get(collection, getattr(user, scope_field))
        authorize(actor, target_for(COLLECTION_LEVELS[collection], entity), write=False)
        return user

    @staticmethod
    @transaction.atomic
    def deactivate(*, actor, user_id: UUID, audit: AuditRecorder) -> AdminUser:
        """
        Idempotent. A deactivated user resolves to no identity but still pins its
        scope entity; delete() removes it for good.
        """
        actor = require_actor(actor)
        user = AdminUserService._manageable(actor, user_id)

        if user.is_active:
            user.is_active = False
            user.save(update_fields=["is_active", "updated_at"])

        audit.record(
            user_id=actor.id,
            action=AuditAction.DEACTIVATE,
            resource_type=AuditResourceType.USER,
            resource_id=user.id,
            changes={"is_active": False},
        )
        logger.info("admin user deactivated id=%s by %s", user.id, actor.id)
        return user

    @staticmethod
    @transaction.atomic
    def delete(*, actor, user_id: UUID, audit: AuditRecorder) -> None:
        """
        Hard delete. Audit entries the user authored keep its id; entities it
        created lose their created_by.
        """
        actor = require_actor(actor)
        user = AdminUserService._manageable(actor, user_id)

        changes = {"role": user.role, "email": user.email, "external_id": user.external_id}
        user_pk = user.id
        user.delete()

        audit.record(
            user_id=actor.id,
            action=AuditAction.DELETE,
            resource_type=AuditResourceType.USER,
            resource_id=user_pk,
            changes=changes,
        )
        logger.info("admin user deleted id=%s by %s", user_pk, actor.id)
