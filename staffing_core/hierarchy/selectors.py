# staffing_core/hierarchy/selectors.py
from __future__ import annotations

from typing import Optional
from uuid import UUID

from staffing_core.hierarchy.dependencies import DeletionCheck, check_deletion
from staffing_core.hierarchy.repository import EntityRepository
from staffing_core.hierarchy.tree import COLLECTION_LEVELS
from staffing_core.iam.policy import can_access, target_for


def get_visible_entity(*, user, collection: str, entity_id: UUID, repository: EntityRepository | None = None):
    """
    The entity if it exists and the user may read it, else None.
    Absent and not-allowed look the same to the caller.
    """
    if user is None:
        return None
    repository = repository or EntityRepository()
    entity = repository.get(collection, entity_id)
    if entity is None or not can_access(user, target_for(COLLECTION_LEVELS[collection], entity)):
        return None
    return entity


def can_delete(
    *,
    user,
    collection: str,
    entity_id: UUID,
    repository: EntityRepository | None = None,
) -> Optional[DeletionCheck]:
    """
    Advisory answer; runs outside any mutation and may be stale by the time a
    delete is attempted.
    """
    repository = repository or EntityRepository()
    entity = get_visible_entity(user=user, collection=collection, entity_id=entity_id, repository=repository)
    if entity is None:
        return None
    return check_deletion(repository, collection, entity.id)
