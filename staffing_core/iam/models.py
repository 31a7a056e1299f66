# staffing_core/iam/models.py
from __future__ import annotations

import uuid

from django.core.exceptions import ValidationError
from django.db import models

from staffing_core.common.models import TimeStampedModel


class UserRole(models.TextChoices):
    SUPER_ADMIN = "super_admin", "Super admin"
    HEALTH_SYSTEM_ADMIN = "health_system_admin", "Health system admin"
    HOSPITAL_ADMIN = "hospital_admin", "Hospital admin"
    DEPARTMENTAL_ADMIN = "departmental_admin", "Departmental admin"


SCOPE_FIELDS = ("health_system_id", "hospital_id", "department_id")


class AdminUser(TimeStampedModel):
    """
    An administrator of the hierarchy.

    external_id is the identity provider's stable subject (JWT `sub`).
    Each non-super role is pinned to exactly one scope entity; which FK that is
    comes from the role policy table (staffing_core.iam.policy.ROLE_POLICIES).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    external_id = models.CharField(max_length=255, unique=True)
    email = models.EmailField(blank=True, default="")
    first_name = models.CharField(max_length=128, blank=True, default="")
    last_name = models.CharField(max_length=128, blank=True, default="")

    role = models.CharField(max_length=32, choices=UserRole.choices, db_index=True)

    health_system = models.ForeignKey(
        "health_systems.HealthSystem",
        on_delete=models.PROTECT,
        related_name="admin_users",
        null=True,
        blank=True,
    )
    hospital = models.ForeignKey(
        "hospitals.Hospital",
        on_delete=models.PROTECT,
        related_name="admin_users",
        null=True,
        blank=True,
    )
    department = models.ForeignKey(
        "departments.Department",
        on_delete=models.PROTECT,
        related_name="admin_users",
        null=True,
        blank=True,
    )

    is_active = models.BooleanField(default=True, db_index=True)

    class Meta:
        db_table = "iam_admin_user"
        indexes = [
            models.Index(fields=["role", "is_active"]),
        ]

    def __str__(self) -> str:
        return f"{self.email or self.external_id} ({self.role})"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def validate_scope(self) -> None:
        from staffing_core.iam.policy import ROLE_POLICIES

        policy = ROLE_POLICIES.get(self.role)
        if policy is None:
            raise ValidationError({"role": f"Invalid role. Allowed: {list(UserRole.values)}"})

        errors = {}
        for field in SCOPE_FIELDS:
            value = getattr(self, field)
            if field == policy.scope_field and value is None:
                errors[field] = f"Required for role {self.role}."
            elif field != policy.scope_field and value is not None:
                errors[field] = f"Not allowed for role {self.role}."
        if errors:
            raise ValidationError(errors)

    def save(self, *args, **kwargs):
        self.validate_scope()
        super().save(*args, **kwargs)
