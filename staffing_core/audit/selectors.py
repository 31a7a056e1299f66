# staffing_core/audit/selectors.py
from __future__ import annotations

from typing import Optional

from django.conf import settings
from django.db.models import QuerySet

from staffing_core.audit.models import AuditLog
from staffing_core.iam.policy import policy_for

DEFAULT_LIMIT = 100


def audit_log_qs(*, user) -> QuerySet[AuditLog]:
    """
    Unscoped roles (super_admin) see every entry; scoped admins see what they authored.
    Unresolved users see nothing.
    """
    policy = policy_for(user)
    if policy is None:
        return AuditLog.objects.none()
    qs = AuditLog.objects.select_related("user")
    if policy.scope_field is not None:
        qs = qs.filter(user_id=user.id)
    return qs


def list_audit_logs(
    *,
    user,
    resource_type: Optional[str] = None,
    action: Optional[str] = None,
    limit: Optional[int] = None,
) -> list[AuditLog]:
    qs = audit_log_qs(user=user)

    if resource_type:
        qs = qs.filter(resource_type=resource_type)
    if action:
        qs = qs.filter(action=action)

    max_limit = getattr(settings, "AUDIT_LOG_MAX_LIMIT", 500)
    limit_n = max(1, min(limit or DEFAULT_LIMIT, max_limit))

    return list(qs.order_by("-timestamp", "-id")[:limit_n])


def list_resource_types(*, user) -> list[str]:
    qs = audit_log_qs(user=user)
    return sorted(set(qs.values_list("resource_type", flat=True)))


def list_actions(*, user) -> list[str]:
    qs = audit_log_qs(user=user)
    return sorted(set(qs.values_list("action", flat=True)))
