# staffing_core/hospitals/models.py
from __future__ import annotations

from django.db import models

from staffing_core.common.models import HierarchyNode


class Hospital(HierarchyNode):
    """
    A hospital under a HealthSystem. Owns departments.
    """

    health_system = models.ForeignKey(
        "health_systems.HealthSystem",
        on_delete=models.PROTECT,
        related_name="hospitals",
    )

    name = models.CharField(max_length=255)
    short_code = models.CharField(max_length=16)  # upper-cased, unique per health system; used in job codes

    timezone = models.CharField(max_length=64, default="America/New_York")

    # Address (optional)
    address = models.CharField(max_length=255, blank=True, default="")
    city = models.CharField(max_length=128, blank=True, default="")
    state = models.CharField(max_length=64, blank=True, default="")
    zip_code = models.CharField(max_length=16, blank=True, default="")

    created_by = models.ForeignKey(
        "iam.AdminUser",
        on_delete=models.SET_NULL,
        related_name="+",
        null=True,
        blank=True,
    )

    class Meta:
        db_table = "hospitals_hospital"
        constraints = [
            models.UniqueConstraint(fields=["health_system", "short_code"], name="uq_hospital_health_system_short_code"),
        ]
        indexes = [
            models.Index(fields=["health_system", "is_active"]),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.short_code})"
