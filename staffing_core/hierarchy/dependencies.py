# staffing_core/hierarchy/dependencies.py
from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from staffing_core.hierarchy.repository import EntityRepository
from staffing_core.hierarchy.tree import DEPENDENCY_EDGES, Edge, edges_from, reachable_collections


@dataclass(frozen=True)
class Blocker:
    type: str
    count: int


@dataclass(frozen=True)
class DeletionCheck:
    can_delete: bool
    blockers: list[Blocker] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "can_delete": self.can_delete,
            "blockers": [{"type": b.type, "count": b.count} for b in self.blockers],
        }


def _walk(
    repository: EntityRepository,
    collection: str,
    entity_id: UUID,
    edges: tuple[Edge, ...],
) -> tuple[dict[str, set], dict[str, set]]:
    reachable = reachable_collections(edges, collection)
    found: dict[str, set] = {name: set() for name in reachable}
    blocking: dict[str, set] = {name: set() for name in reachable}
    found[collection] = {entity_id}

    for current in (collection, *reachable):
        parent_ids = found[current]
        if not parent_ids:
            continue
        for edge in edges_from(edges, current):
            ids = repository.ids_by_foreign_keys(edge.child, edge.foreign_key, parent_ids)
            found[edge.child].update(ids)
            if edge.blocks:
                blocking[edge.child].update(ids)

    del found[collection]
    return found, blocking


def collect_dependents(
    repository: EntityRepository,
    collection: str,
    entity_id: UUID,
    *,
    edges: tuple[Edge, ...] = DEPENDENCY_EDGES,
) -> dict[str, set]:
    """
    Every row that references the entity, directly or through its subtree,
    regardless of is_active. A collection reached by several edges is the union
    of what each edge finds.
    """
    found, _ = _walk(repository, collection, entity_id, edges)
    return found


def check_deletion(
    repository: EntityRepository,
    collection: str,
    entity_id: UUID,
    *,
    edges: tuple[Edge, ...] = DEPENDENCY_EDGES,
) -> DeletionCheck:
    """
    Read-only. One blocker per dependent collection with at least one row reached
    through a blocking edge. Owned rows (positions under a service) are walked
    but only what references them can block.
    """
    _, blocking = _walk(repository, collection, entity_id, edges)
    blockers = [Blocker(type=name, count=len(ids)) for name, ids in blocking.items() if ids]
    return DeletionCheck(can_delete=not blockers, blockers=blockers)
