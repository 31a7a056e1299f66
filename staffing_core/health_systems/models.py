# staffing_core/health_systems/models.py
from __future__ import annotations

from django.db import models

from staffing_core.common.models import HierarchyNode


class HealthSystem(HierarchyNode):
    """
    Root of the org hierarchy. Owns hospitals and its job type catalogue.
    """

    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)  # derived from name, see slugs.py

    created_by = models.ForeignKey(
        "iam.AdminUser",
        on_delete=models.SET_NULL,
        related_name="+",
        null=True,
        blank=True,
    )

    class Meta:
        db_table = "health_systems_health_system"
        indexes = [
            models.Index(fields=["is_active"]),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.slug})"
