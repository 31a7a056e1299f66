# staffing_core/health_systems/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status
from rest_framework.response import Response

from staffing_core.health_systems.api.filters import HealthSystemFilter
from staffing_core.health_systems.api.serializers import (
    HealthSystemCreatedSerializer,
    HealthSystemCreateSerializer,
    HealthSystemSerializer,
    HealthSystemUpdateSerializer,
)
from staffing_core.health_systems.models import HealthSystem
from staffing_core.health_systems.selectors import health_system_qs
from staffing_core.health_systems.services import HealthSystemService
from staffing_core.hierarchy.api.views import HierarchyNodeViewSet, parse_uuid
from staffing_core.iam.identity import actor_from_request


@extend_schema_view(
    list=extend_schema(tags=["Health systems"], operation_id="v1_health_systems_list", responses={200: HealthSystemSerializer(many=True)}),
    retrieve=extend_schema(tags=["Health systems"], operation_id="v1_health_systems_retrieve", responses={200: HealthSystemSerializer}),
    create=extend_schema(tags=["Health systems"], operation_id="v1_health_systems_create", request=HealthSystemCreateSerializer, responses={201: HealthSystemCreatedSerializer}),
    partial_update=extend_schema(tags=["Health systems"], operation_id="v1_health_systems_partial_update", request=HealthSystemUpdateSerializer, responses={200: HealthSystemSerializer}),
    destroy=extend_schema(tags=["Health systems"], operation_id="v1_health_systems_destroy", responses={204: None}),
    toggle_active=extend_schema(tags=["Health systems"], operation_id="v1_health_systems_toggle_active"),
    deactivate=extend_schema(tags=["Health systems"], operation_id="v1_health_systems_deactivate"),
    can_delete=extend_schema(tags=["Health systems"], operation_id="v1_health_systems_can_delete"),
)
class HealthSystemViewSet(HierarchyNodeViewSet):
    collection = "health_systems"
    serializer_class = HealthSystemSerializer
    filterset_class = HealthSystemFilter
    scoped_queryset = staticmethod(health_system_qs)
    queryset = HealthSystem.objects.none()

    def create(self, request):
        ser = HealthSystemCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        result = HealthSystemService.create(
            actor=actor_from_request(request),
            name=ser.validated_data["name"],
            audit=self.get_audit_recorder(),
        )
        return Response(HealthSystemCreatedSerializer(result).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None):
        ser = HealthSystemUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        hs = HealthSystemService.update(
            actor=actor_from_request(request),
            health_system_id=parse_uuid(pk),
            name=ser.validated_data.get("name"),
            audit=self.get_audit_recorder(),
        )
        return Response(HealthSystemSerializer(hs).data, status=status.HTTP_200_OK)
