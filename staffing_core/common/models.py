# staffing_core/common/models.py
from __future__ import annotations

import uuid

from django.db import models


class TimeStampedModel(models.Model):
    """
    Standard timestamps for all entities.
    """
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class HierarchyNode(TimeStampedModel):
    """
    Base for every entity that lives in the org hierarchy and can be toggled.
    is_active is flipped by the lifecycle services only (cascade aware).
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    is_active = models.BooleanField(default=True, db_index=True)

    class Meta:
        abstract = True
