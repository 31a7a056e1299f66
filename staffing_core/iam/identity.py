# staffing_core/iam/identity.py
"""
Identity resolution: external subject -> AdminUser.

Queries treat an unresolved identity as "sees nothing"; mutations call
require_actor() and fail with AuthenticationRequired.
"""
from __future__ import annotations

from typing import Optional

from staffing_core.common.api.exceptions import AuthenticationRequired
from staffing_core.iam.models import AdminUser


def subject_from_request(request) -> Optional[str]:
    user = getattr(request, "user", None)
    if user is None or not getattr(user, "is_authenticated", False):
        return None
    # TokenUser.id is the token's `sub` claim (see SIMPLE_JWT["USER_ID_CLAIM"])
    subject = getattr(user, "id", None)
    return str(subject) if subject else None


def resolve_user(subject: Optional[str]) -> Optional[AdminUser]:
    if not subject:
        return None
    user = AdminUser.objects.filter(external_id=subject).first()
    if user is None or not user.is_active:
        return None
    return user


def actor_from_request(request) -> Optional[AdminUser]:
    return resolve_user(subject_from_request(request))


def require_actor(actor: Optional[AdminUser]) -> AdminUser:
    if actor is None or not actor.is_active:
        raise AuthenticationRequired()
    return actor
