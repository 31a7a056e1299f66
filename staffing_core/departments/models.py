# staffing_core/departments/models.py
from __future__ import annotations

from django.core.exceptions import ValidationError
from django.db import models

from staffing_core.common.models import HierarchyNode


class Department(HierarchyNode):
    """
    A clinical department inside a Hospital. Owns services.

    health_system is a denormalized copy of hospital.health_system, kept so scope
    checks and health-system dependency walks need no join. It must always agree
    with the hospital; save() rejects anything else.
    """

    hospital = models.ForeignKey(
        "hospitals.Hospital",
        on_delete=models.PROTECT,
        related_name="departments",
    )
    health_system = models.ForeignKey(
        "health_systems.HealthSystem",
        on_delete=models.PROTECT,
        related_name="departments",
    )

    name = models.CharField(max_length=255)
    is_default = models.BooleanField(default=False)

    class Meta:
        db_table = "departments_department"
        indexes = [
            models.Index(fields=["hospital", "is_active"]),
            models.Index(fields=["health_system", "is_active"]),
        ]

    def __str__(self) -> str:
        return self.name

    def validate_health_system(self) -> None:
        from staffing_core.hospitals.models import Hospital

        expected = Hospital.objects.filter(id=self.hospital_id).values_list("health_system_id", flat=True).first()
        if expected is None:
            raise ValidationError({"hospital": "Hospital not found."})
        if self.health_system_id != expected:
            raise ValidationError({"health_system": "Must match the hospital's health system."})

    def save(self, *args, **kwargs):
        self.validate_health_system()
        super().save(*args, **kwargs)
