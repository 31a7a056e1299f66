# staffing_core/hierarchy/repository.py
"""
Entity repository over named collections.

The cascade engine, dependency checker and lifecycle services only talk to the
store through this class, by collection name. Result order is by primary key;
callers must not rely on it.
"""
from __future__ import annotations

from typing import Any, Iterable, Optional
from uuid import UUID

from django.apps import apps
from django.conf import settings
from django.db import models
from django.utils import timezone

COLLECTION_MODELS: dict[str, str] = {
    "health_systems": "health_systems.HealthSystem",
    "job_types": "job_types.JobType",
    "hospitals": "hospitals.Hospital",
    "departments": "departments.Department",
    "services": "clinical_services.Service",
    "job_positions": "clinical_services.JobPosition",
    "assignments": "clinical_services.Assignment",
    "users": "iam.AdminUser",
    "audit_logs": "audit.AuditLog",
}

APPEND_ONLY = frozenset({"audit_logs"})

DEFAULT_BATCH_SIZE = 500


def batch_size() -> int:
    return int(getattr(settings, "HIERARCHY_BATCH_SIZE", DEFAULT_BATCH_SIZE))


def chunked(values: list, size: int) -> Iterable[list]:
    for start in range(0, len(values), size):
        yield values[start:start + size]


class EntityRepository:
    def model(self, collection: str) -> type[models.Model]:
        try:
            label = COLLECTION_MODELS[collection]
        except KeyError:
            raise LookupError(f"Unknown collection: {collection}")
        return apps.get_model(label)

    def _writable(self, collection: str) -> type[models.Model]:
        if collection in APPEND_ONLY:
            raise PermissionError(f"{collection} is append-only")
        return self.model(collection)

    def get(self, collection: str, entity_id: UUID, *, for_update: bool = False) -> Optional[models.Model]:
        qs = self.model(collection).objects.all()
        if for_update:
            qs = qs.select_for_update()
        return qs.filter(id=entity_id).first()

    def query_by_foreign_key(self, collection: str, field: str, value: Any) -> list[models.Model]:
        return list(self.model(collection).objects.filter(**{field: value}).order_by("pk"))

    def query_by_foreign_keys(self, collection: str, field: str, values: Iterable[Any]) -> list[models.Model]:
        values = list(values)
        out: list[models.Model] = []
        for chunk in chunked(values, batch_size()):
            out.extend(self.model(collection).objects.filter(**{f"{field}__in": chunk}).order_by("pk"))
        return out

    def ids_by_foreign_keys(self, collection: str, field: str, values: Iterable[Any]) -> list[UUID]:
        values = list(values)
        out: list[UUID] = []
        for chunk in chunked(values, batch_size()):
            out.extend(
                self.model(collection).objects.filter(**{f"{field}__in": chunk}).order_by("pk").values_list("id", flat=True)
            )
        return out

    def query_by_unique_key(self, collection: str, field: str, value: Any) -> Optional[models.Model]:
        return self.model(collection).objects.filter(**{field: value}).first()

    def insert(self, collection: str, **attrs) -> UUID:
        obj = self.model(collection)(**attrs)
        obj.save(force_insert=True)
        return obj.pk

    def patch(self, collection: str, entity_id: UUID, **attrs) -> models.Model:
        obj = self._writable(collection).objects.get(id=entity_id)
        for field, value in attrs.items():
            setattr(obj, field, value)
        # per-object save so model invariants run
        obj.save(update_fields=[*attrs.keys(), "updated_at"])
        return obj

    def deactivate_many(self, collection: str, ids: Iterable[UUID]) -> int:
        """
        Flip the given rows inactive. Rows already inactive are left alone and not counted.
        """
        model = self._writable(collection)
        ids = list(ids)
        changed = 0
        for chunk in chunked(ids, batch_size()):
            changed += model.objects.filter(id__in=chunk, is_active=True).update(
                is_active=False, updated_at=timezone.now()
            )
        return changed

    def update_where(self, collection: str, ids: Iterable[UUID], where: dict, **attrs) -> int:
        model = self._writable(collection)
        ids = list(ids)
        changed = 0
        for chunk in chunked(ids, batch_size()):
            changed += model.objects.filter(id__in=chunk, **where).update(**attrs, updated_at=timezone.now())
        return changed

    def delete(self, collection: str, entity_id: UUID) -> None:
        self._writable(collection).objects.filter(id=entity_id).delete()

    def delete_by_foreign_key(self, collection: str, field: str, value: Any) -> int:
        deleted, _ = self._writable(collection).objects.filter(**{field: value}).delete()
        return deleted
