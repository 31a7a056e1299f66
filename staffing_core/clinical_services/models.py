# staffing_core/clinical_services/models.py
from __future__ import annotations

import uuid

from django.db import models
from django.utils import timezone

from staffing_core.common.models import HierarchyNode, TimeStampedModel


class Service(HierarchyNode):
    """
    A staffed service line inside a Department (e.g. "Cardiac ICU").
    Owns job positions.
    """

    department = models.ForeignKey(
        "departments.Department",
        on_delete=models.PROTECT,
        related_name="services",
    )

    name = models.CharField(max_length=255)
    short_code = models.CharField(max_length=16)  # upper-cased; used in job codes

    # Patient capacity (optional)
    day_capacity = models.PositiveIntegerField(null=True, blank=True)
    night_capacity = models.PositiveIntegerField(null=True, blank=True)
    weekend_capacity = models.PositiveIntegerField(null=True, blank=True)

    operates_days = models.BooleanField(default=True)
    operates_nights = models.BooleanField(default=False)
    operates_weekends = models.BooleanField(default=False)

    created_by = models.ForeignKey(
        "iam.AdminUser",
        on_delete=models.SET_NULL,
        related_name="+",
        null=True,
        blank=True,
    )

    class Meta:
        db_table = "clinical_services_service"
        indexes = [
            models.Index(fields=["department", "is_active"]),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.short_code})"


class ShiftType(models.TextChoices):
    WEEKDAY_AM = "Weekday_AM", "Weekday day shift"
    WEEKDAY_PM = "Weekday_PM", "Weekday night shift"
    WEEKEND_AM = "Weekend_AM", "Weekend day shift"
    WEEKEND_PM = "Weekend_PM", "Weekend night shift"


SHIFT_CODES: dict[str, str] = {
    ShiftType.WEEKDAY_AM: "WD_AM",
    ShiftType.WEEKDAY_PM: "WD_PM",
    ShiftType.WEEKEND_AM: "WE_AM",
    ShiftType.WEEKEND_PM: "WE_PM",
}


class PositionStatus(models.TextChoices):
    OPEN = "Open", "Open"
    ASSIGNED = "Assigned", "Assigned"
    CONFIRMED = "Confirmed", "Confirmed"
    CANCELLED = "Cancelled", "Cancelled"


class JobPosition(HierarchyNode):
    """
    One staffable slot: (service, job type, shift, n).
    Cascade target of its Service; Open positions become Cancelled on cascade.
    """

    service = models.ForeignKey(Service, on_delete=models.PROTECT, related_name="job_positions")
    job_type = models.ForeignKey("job_types.JobType", on_delete=models.PROTECT, related_name="job_positions")

    shift_type = models.CharField(max_length=16, choices=ShiftType.choices)
    job_code = models.CharField(max_length=128, db_index=True)
    position_number = models.PositiveIntegerField()

    status = models.CharField(
        max_length=16,
        choices=PositionStatus.choices,
        default=PositionStatus.OPEN,
        db_index=True,
    )

    class Meta:
        db_table = "clinical_services_job_position"
        indexes = [
            models.Index(fields=["service", "is_active"]),
            models.Index(fields=["service", "status"]),
        ]

    def __str__(self) -> str:
        return self.job_code


class AssignmentStatus(models.TextChoices):
    ACTIVE = "Active", "Active"
    CONFIRMED = "Confirmed", "Confirmed"
    CANCELLED = "Cancelled", "Cancelled"


class Assignment(TimeStampedModel):
    """
    A provider placed into a position. Only read here, as a deletion blocker.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    job_position = models.ForeignKey(JobPosition, on_delete=models.PROTECT, related_name="assignments")
    provider_name = models.CharField(max_length=255)

    status = models.CharField(
        max_length=16,
        choices=AssignmentStatus.choices,
        default=AssignmentStatus.ACTIVE,
        db_index=True,
    )
    assigned_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "clinical_services_assignment"
        indexes = [
            models.Index(fields=["job_position", "status"]),
        ]

    def __str__(self) -> str:
        return f"{self.provider_name} -> {self.job_position_id}"
