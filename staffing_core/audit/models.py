# staffing_core/audit/models.py
from __future__ import annotations

import uuid

from django.db import models


class AuditAction(models.TextChoices):
    CREATE = "CREATE", "Create"
    UPDATE = "UPDATE", "Update"
    DELETE = "DELETE", "Delete"
    ACTIVATE = "ACTIVATE", "Activate"
    DEACTIVATE = "DEACTIVATE", "Deactivate"


class AuditResourceType(models.TextChoices):
    HEALTH_SYSTEM = "HEALTH_SYSTEM", "Health system"
    HOSPITAL = "HOSPITAL", "Hospital"
    DEPARTMENT = "DEPARTMENT", "Department"
    SERVICE = "SERVICE", "Service"
    JOB_TYPE = "JOB_TYPE", "Job type"
    USER = "USER", "User"


class AuditLog(models.Model):
    """
    Immutable audit record. One row per successful mutation.
    resource_id is not a FK: entries outlive hard-deleted resources.
    user carries no database constraint for the same reason: an entry keeps the
    author's id after the admin user is deleted.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        "iam.AdminUser",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        related_name="audit_logs",
    )

    action = models.CharField(max_length=16, choices=AuditAction.choices, db_index=True)
    resource_type = models.CharField(max_length=32, choices=AuditResourceType.choices, db_index=True)
    resource_id = models.UUIDField(db_index=True)

    changes = models.JSONField(default=dict, blank=True)

    # epoch millis, server clock
    timestamp = models.BigIntegerField(db_index=True)

    class Meta:
        db_table = "audit_audit_log"
        indexes = [
            models.Index(fields=["resource_type", "resource_id"]),
            models.Index(fields=["user", "timestamp"]),
        ]

    def __str__(self) -> str:
        return f"{self.action} {self.resource_type}:{self.resource_id}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("Audit log entries are append-only.")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError("Audit log entries cannot be deleted.")
