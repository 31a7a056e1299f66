# staffing_core/audit/services.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional
from uuid import UUID

from django.utils import timezone

from staffing_core.audit.models import AuditLog

logger = logging.getLogger(__name__)


def epoch_millis() -> int:
    return int(timezone.now().timestamp() * 1000)


@dataclass(frozen=True)
class AuditRecord:
    id: UUID
    user_id: UUID
    action: str
    resource_type: str
    resource_id: UUID
    changes: Dict[str, Any]
    timestamp: int


class AuditRecorder:
    """
    Central audit writer, handed to every mutation explicitly.

    Mutations call record() exactly once, after their last write and inside their
    own transaction, so a failed mutation leaves no entry behind.
    """

    def record(
        self,
        *,
        user_id: UUID,
        action: str,
        resource_type: str,
        resource_id: UUID,
        changes: Optional[Dict[str, Any]] = None,
    ) -> AuditRecord:
        changes = changes or {}

        entry = AuditLog.objects.create(
            user_id=user_id,
            action=action,
            resource_type=resource_type,
            resource_id=resource_id,
            changes=changes,
            timestamp=epoch_millis(),
        )
        logger.info("audit %s %s:%s by %s", action, resource_type, resource_id, user_id)

        return AuditRecord(
            id=entry.id,
            user_id=user_id,
            action=action,
            resource_type=resource_type,
            resource_id=resource_id,
            changes=changes,
            timestamp=entry.timestamp,
        )
