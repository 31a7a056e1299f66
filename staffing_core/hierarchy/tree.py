# staffing_core/hierarchy/tree.py
"""
Static shape of the org hierarchy.

Everything that walks the tree (cascade, dependency checks, scope resolution)
reads these tables instead of hard-coding per-level logic:

  health_systems -> hospitals -> departments -> services -> job_positions -> assignments

Admin users hang off health systems, hospitals and departments through their
scope foreign key.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from django.db import models


class Level(models.TextChoices):
    HEALTH_SYSTEM = "health_system", "Health system"
    HOSPITAL = "hospital", "Hospital"
    DEPARTMENT = "department", "Department"
    SERVICE = "service", "Service"
    JOB_TYPE = "job_type", "Job type"


# Collection name -> level used for authorization.
COLLECTION_LEVELS: dict[str, Level] = {
    "health_systems": Level.HEALTH_SYSTEM,
    "hospitals": Level.HOSPITAL,
    "departments": Level.DEPARTMENT,
    "services": Level.SERVICE,
    "job_types": Level.JOB_TYPE,
}

# Level -> {scope field on AdminUser: ORM lookup path on the entity}.
# A role whose scope field is missing for a level never matches that level.
LEVEL_SCOPE_PATHS: dict[str, dict[str, str]] = {
    Level.HEALTH_SYSTEM: {
        "health_system_id": "id",
    },
    Level.HOSPITAL: {
        "health_system_id": "health_system_id",
        "hospital_id": "id",
    },
    Level.DEPARTMENT: {
        "health_system_id": "health_system_id",
        "hospital_id": "hospital_id",
        "department_id": "id",
    },
    Level.SERVICE: {
        "health_system_id": "department__health_system_id",
        "hospital_id": "department__hospital_id",
        "department_id": "department_id",
    },
    Level.JOB_TYPE: {
        "health_system_id": "health_system_id",
    },
}

# Parent level -> scope fields a newly created child inherits from the parent entity.
PARENT_SCOPE_PATHS: dict[str, dict[str, str]] = {
    Level.HEALTH_SYSTEM: {"health_system_id": "id"},
    Level.HOSPITAL: {"health_system_id": "health_system_id", "hospital_id": "id"},
    Level.DEPARTMENT: {
        "health_system_id": "health_system_id",
        "hospital_id": "hospital_id",
        "department_id": "id",
    },
}


Deactivator = Callable[["object", str, list], int]


@dataclass(frozen=True)
class Edge:
    """
    parent collection -> child collection, joined on child.<foreign_key> = parent.id.

    deactivate(repository, collection, ids) flips the given child rows inactive and
    returns how many rows it changed. None means the repository default.

    blocks=False marks rows the parent owns: they are walked through and deleted
    with the parent, but never reported as blockers themselves.
    """
    parent: str
    child: str
    foreign_key: str
    deactivate: Optional[Deactivator] = None
    blocks: bool = True


def cancel_open_positions(repository, collection: str, ids: list) -> int:
    from staffing_core.clinical_services.models import PositionStatus

    # only rows this pass flips; already-inactive positions keep their status
    repository.update_where(
        collection, ids, {"status": PositionStatus.OPEN, "is_active": True}, status=PositionStatus.CANCELLED
    )
    return repository.deactivate_many(collection, ids)


# Ownership edges walked when an entity is deactivated.
CASCADE_EDGES: tuple[Edge, ...] = (
    Edge("health_systems", "hospitals", "health_system_id"),
    Edge("health_systems", "users", "health_system_id"),
    Edge("hospitals", "departments", "hospital_id"),
    Edge("hospitals", "users", "hospital_id"),
    Edge("departments", "services", "department_id"),
    Edge("departments", "users", "department_id"),
    Edge("services", "job_positions", "service_id", deactivate=cancel_open_positions),
)

# Referential edges walked when deciding whether a hard delete is safe.
# departments.health_system_id is a back-reference, not ownership; it is walked here
# so departments pointing at a health system are found even if their hospital is not.
DEPENDENCY_EDGES: tuple[Edge, ...] = (
    Edge("health_systems", "hospitals", "health_system_id"),
    Edge("health_systems", "departments", "health_system_id"),
    Edge("health_systems", "users", "health_system_id"),
    Edge("hospitals", "departments", "hospital_id"),
    Edge("hospitals", "users", "hospital_id"),
    Edge("departments", "services", "department_id"),
    Edge("departments", "users", "department_id"),
    Edge("services", "job_positions", "service_id", blocks=False),
    Edge("job_positions", "assignments", "job_position_id"),
    Edge("job_types", "job_positions", "job_type_id"),
)

# Parents always precede children; walkers expand collections in this order so a
# collection reachable by several paths is complete before it is expanded.
WALK_ORDER: tuple[str, ...] = (
    "health_systems",
    "job_types",
    "hospitals",
    "departments",
    "services",
    "job_positions",
    "assignments",
    "users",
)

# Rows removed together with their owner on hard delete, in deletion order.
OWNED_COLLECTIONS: dict[str, tuple[tuple[str, str], ...]] = {
    "health_systems": (("job_types", "health_system_id"),),
    "services": (("job_positions", "service_id"),),
}


def edges_from(edges: tuple[Edge, ...], collection: str) -> list[Edge]:
    return [e for e in edges if e.parent == collection]


def reachable_collections(edges: tuple[Edge, ...], root: str) -> list[str]:
    """
    Child collections reachable from root, in WALK_ORDER.
    """
    seen: set[str] = set()
    frontier = [root]
    while frontier:
        current = frontier.pop()
        for edge in edges_from(edges, current):
            if edge.child not in seen:
                seen.add(edge.child)
                frontier.append(edge.child)
    return [c for c in WALK_ORDER if c in seen]
