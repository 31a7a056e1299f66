# staffing_core/iam/policy.py
"""
Scope authorization.

The whole policy is two tables:
  ROLE_POLICIES      role -> (rank, scope field on the user, comparator, writable levels)
  LEVEL_SCOPE_PATHS  level -> scope field -> where that value lives on an entity

A user may touch a target iff the role is unscoped, or the target exposes the
role's scope field and comparator(user value, target value) holds. Writes also
require the target's level to be writable for the role. Adding a role or a level
is a table edit; nothing below branches on role names.
"""
from __future__ import annotations

import logging
import operator
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from django.db.models import Q

from staffing_core.common.api.exceptions import AuthorizationDenied
from staffing_core.hierarchy.tree import LEVEL_SCOPE_PATHS, PARENT_SCOPE_PATHS, Level
from staffing_core.iam.models import UserRole

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RolePolicy:
    rank: int
    scope_field: Optional[str]
    writable_levels: frozenset
    comparator: Callable[[Any, Any], bool] = operator.eq


ROLE_POLICIES: dict[str, RolePolicy] = {
    UserRole.SUPER_ADMIN: RolePolicy(
        rank=4,
        scope_field=None,
        writable_levels=frozenset(Level.values),
    ),
    UserRole.HEALTH_SYSTEM_ADMIN: RolePolicy(
        rank=3,
        scope_field="health_system_id",
        writable_levels=frozenset({Level.HOSPITAL, Level.DEPARTMENT, Level.SERVICE, Level.JOB_TYPE}),
    ),
    UserRole.HOSPITAL_ADMIN: RolePolicy(
        rank=2,
        scope_field="hospital_id",
        writable_levels=frozenset({Level.DEPARTMENT, Level.SERVICE}),
    ),
    UserRole.DEPARTMENTAL_ADMIN: RolePolicy(
        rank=1,
        scope_field="department_id",
        writable_levels=frozenset({Level.SERVICE}),
    ),
}


@dataclass(frozen=True)
class ScopeTarget:
    """
    What the authorizer sees of a target: its level plus the scope keys it exposes.
    """
    level: str
    keys: Mapping[str, Any] = field(default_factory=dict)


def _read_path(entity, path: str):
    return operator.attrgetter(path.replace("__", "."))(entity)


def target_for(level: str, entity) -> ScopeTarget:
    """
    Target for an existing entity at `level`.
    """
    paths = LEVEL_SCOPE_PATHS[level]
    return ScopeTarget(level=level, keys={f: _read_path(entity, p) for f, p in paths.items()})


def child_target(level: str, *, parent_level: str | None = None, parent=None) -> ScopeTarget:
    """
    Target for an entity about to be created at `level` beneath `parent`.
    A root-level create (no parent) exposes no scope keys.
    """
    if parent is None:
        return ScopeTarget(level=level)
    paths = PARENT_SCOPE_PATHS[parent_level]
    return ScopeTarget(level=level, keys={f: _read_path(parent, p) for f, p in paths.items()})


def policy_for(user) -> Optional[RolePolicy]:
    if user is None or not user.is_active:
        return None
    return ROLE_POLICIES.get(user.role)


def can_access(user, target: ScopeTarget, *, write: bool = False) -> bool:
    policy = policy_for(user)
    if policy is None:
        return False
    if write and target.level not in policy.writable_levels:
        return False
    if policy.scope_field is None:
        return True
    if policy.scope_field not in target.keys:
        return False

    mine = getattr(user, policy.scope_field)
    return mine is not None and policy.comparator(mine, target.keys[policy.scope_field])


def authorize(user, target: ScopeTarget, *, write: bool = True) -> None:
    if can_access(user, target, write=write):
        return
    logger.warning(
        "authorization denied user=%s role=%s level=%s write=%s",
        getattr(user, "id", None),
        getattr(user, "role", None),
        target.level,
        write,
    )
    raise AuthorizationDenied()


def scope_q(user, level: str) -> Optional[Q]:
    """
    Read filter for querysets at `level`. None means the user can see nothing.
    """
    policy = policy_for(user)
    if policy is None:
        return None
    if policy.scope_field is None:
        return Q()

    path = LEVEL_SCOPE_PATHS[level].get(policy.scope_field)
    value = getattr(user, policy.scope_field)
    if path is None or value is None:
        return None
    return Q(**{path: value})


def outranks(actor, role: str) -> bool:
    mine = policy_for(actor)
    theirs = ROLE_POLICIES.get(role)
    return mine is not None and theirs is not None and mine.rank > theirs.rank
