# staffing_core/hierarchy/api/views.py
"""
Shared endpoints for every toggleable hierarchy level.

Subclasses set `collection`, the model/serializer pair and a FilterSet, and
implement create() / partial_update() against their own service.
"""
from __future__ import annotations

from uuid import UUID

from drf_spectacular.utils import extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from staffing_core.audit.services import AuditRecorder
from staffing_core.common.api.pagination import paginate
from staffing_core.hierarchy.api.serializers import DeletionCheckSerializer, ToggleActiveResultSerializer
from staffing_core.hierarchy.selectors import can_delete as deletion_check_for, get_visible_entity
from staffing_core.hierarchy.services import LifecycleService
from staffing_core.iam.identity import actor_from_request


def parse_uuid(value) -> UUID:
    # a path id that is not a UUID names nothing
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        raise NotFound()


class HierarchyNodeViewSet(viewsets.ViewSet):
    # Identity is resolved per operation: queries soft-fail, mutations raise 401.
    permission_classes = [AllowAny]

    collection: str = ""
    serializer_class = None
    filterset_class = None
    # selector(*, user) -> read-scoped QuerySet
    scoped_queryset = None
    ordering = ("name", "id")

    audit_recorder_class = AuditRecorder

    def get_audit_recorder(self) -> AuditRecorder:
        return self.audit_recorder_class()

    def get_scoped_queryset(self, actor):
        return self.scoped_queryset(user=actor)

    def filter_queryset(self, request, qs):
        if self.filterset_class is None:
            return qs
        fs = self.filterset_class(request.query_params, queryset=qs)
        if not fs.is_valid():
            raise ValidationError(fs.errors)
        return fs.qs

    def get_visible_object(self, request, pk):
        entity = get_visible_entity(
            user=actor_from_request(request),
            collection=self.collection,
            entity_id=parse_uuid(pk),
        )
        if entity is None:
            raise NotFound()
        return entity

    def list(self, request):
        qs = self.get_scoped_queryset(actor_from_request(request))
        qs = self.filter_queryset(request, qs).order_by(*self.ordering)
        return paginate(request, qs, self.serializer_class)

    def retrieve(self, request, pk=None):
        entity = self.get_visible_object(request, pk)
        return Response(self.serializer_class(entity).data, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None):
        LifecycleService.delete(
            actor=actor_from_request(request),
            collection=self.collection,
            entity_id=parse_uuid(pk),
            audit=self.get_audit_recorder(),
        )
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses={200: ToggleActiveResultSerializer})
    @action(detail=True, methods=["post"], url_path="toggle-active")
    def toggle_active(self, request, pk=None):
        result = LifecycleService.toggle_active(
            actor=actor_from_request(request),
            collection=self.collection,
            entity_id=parse_uuid(pk),
            audit=self.get_audit_recorder(),
        )
        return Response(ToggleActiveResultSerializer(result.as_dict()).data, status=status.HTTP_200_OK)

    @extend_schema(request=None, responses={200: ToggleActiveResultSerializer})
    @action(detail=True, methods=["post"], url_path="deactivate")
    def deactivate(self, request, pk=None):
        result = LifecycleService.deactivate(
            actor=actor_from_request(request),
            collection=self.collection,
            entity_id=parse_uuid(pk),
            audit=self.get_audit_recorder(),
        )
        return Response(ToggleActiveResultSerializer(result.as_dict()).data, status=status.HTTP_200_OK)

    @extend_schema(responses={200: DeletionCheckSerializer})
    @action(detail=True, methods=["get"], url_path="can-delete")
    def can_delete(self, request, pk=None):
        check = deletion_check_for(
            user=actor_from_request(request),
            collection=self.collection,
            entity_id=parse_uuid(pk),
        )
        if check is None:
            raise NotFound()
        return Response(DeletionCheckSerializer(check.as_dict()).data, status=status.HTTP_200_OK)
