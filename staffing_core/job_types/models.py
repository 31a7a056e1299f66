# staffing_core/job_types/models.py
from __future__ import annotations

from django.db import models

from staffing_core.common.models import HierarchyNode


class JobType(HierarchyNode):
    """
    Provider category (MD, NP, RN...) configured per health system.
    """

    health_system = models.ForeignKey(
        "health_systems.HealthSystem",
        on_delete=models.PROTECT,
        related_name="job_types",
    )

    code = models.CharField(max_length=32)  # unique per health system
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    is_default = models.BooleanField(default=False)

    class Meta:
        db_table = "job_types_job_type"
        constraints = [
            models.UniqueConstraint(fields=["health_system", "code"], name="uq_job_type_health_system_code"),
        ]
        indexes = [
            models.Index(fields=["health_system", "is_active"]),
        ]

    def __str__(self) -> str:
        return f"{self.code} - {self.name}"
