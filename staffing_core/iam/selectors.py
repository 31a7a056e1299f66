# staffing_core/iam/selectors.py
from __future__ import annotations

from django.db.models import Q, QuerySet

from staffing_core.hierarchy.tree import LEVEL_SCOPE_PATHS, Level
from staffing_core.iam.models import AdminUser
from staffing_core.iam.policy import policy_for

# AdminUser scope FK -> level of the entity it points at
SCOPE_FK_LEVELS: dict[str, str] = {
    "health_system": Level.HEALTH_SYSTEM,
    "hospital": Level.HOSPITAL,
    "department": Level.DEPARTMENT,
}


def admin_user_qs(*, user) -> QuerySet[AdminUser]:
    """
    Users whose scope entity lies inside the caller's scope.
    super_admin sees everyone; unresolved callers see nobody.
    """
    policy = policy_for(user)
    if policy is None:
        return AdminUser.objects.none()
    if policy.scope_field is None:
        return AdminUser.objects.all()

    mine = getattr(user, policy.scope_field)
    q = Q(pk__in=[])
    for fk, level in SCOPE_FK_LEVELS.items():
        path = LEVEL_SCOPE_PATHS[level].get(policy.scope_field)
        if path is not None:
            q |= Q(**{f"{fk}__{path}": mine})
    return AdminUser.objects.filter(q)
