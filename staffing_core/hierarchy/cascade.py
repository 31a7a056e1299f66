# staffing_core/hierarchy/cascade.py
"""
Cascade engine: deactivate everything beneath an entity.

One generic walk over CASCADE_EDGES. Each child collection is fetched by the ids
of its parents (batched by the repository) and handed to the edge's deactivate
function. Rows already inactive are neither flipped nor counted, but the walk
still descends through them. Activation never cascades.
"""
from __future__ import annotations

import logging
from uuid import UUID

from staffing_core.hierarchy.repository import EntityRepository
from staffing_core.hierarchy.tree import CASCADE_EDGES, Edge, edges_from, reachable_collections

logger = logging.getLogger(__name__)


def _default_deactivate(repository: EntityRepository, collection: str, ids: list) -> int:
    return repository.deactivate_many(collection, ids)


def cascade_deactivate(
    repository: EntityRepository,
    collection: str,
    entity_id: UUID,
    *,
    edges: tuple[Edge, ...] = CASCADE_EDGES,
) -> dict[str, int]:
    """
    Returns {child collection: rows flipped active -> inactive}, with a zero entry
    for every collection reachable from `collection`. Must run inside the caller's
    transaction.
    """
    reachable = reachable_collections(edges, collection)
    counts = {name: 0 for name in reachable}
    parents: dict[str, set] = {collection: {entity_id}}

    for current in (collection, *reachable):
        parent_ids = parents.get(current)
        if not parent_ids:
            continue
        for edge in edges_from(edges, current):
            child_ids = repository.ids_by_foreign_keys(edge.child, edge.foreign_key, parent_ids)
            if not child_ids:
                continue
            deactivate = edge.deactivate or _default_deactivate
            counts[edge.child] += deactivate(repository, edge.child, child_ids)
            parents.setdefault(edge.child, set()).update(child_ids)

    logger.info("cascade from %s:%s affected=%s", collection, entity_id, counts)
    return counts
