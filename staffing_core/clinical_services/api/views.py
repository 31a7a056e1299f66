# staffing_core/clinical_services/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response

from staffing_core.clinical_services.api.filters import ServiceFilter
from staffing_core.clinical_services.api.serializers import (
    JobPositionSerializer,
    ServiceCreatedSerializer,
    ServiceCreateSerializer,
    ServiceSerializer,
    ServiceUpdateSerializer,
)
from staffing_core.clinical_services.models import Service
from staffing_core.clinical_services.selectors import positions_for_service, service_qs
from staffing_core.clinical_services.services import ClinicalServiceService, JobTypeStaffing, ServiceUpdate
from staffing_core.hierarchy.api.views import HierarchyNodeViewSet, parse_uuid
from staffing_core.iam.identity import actor_from_request


@extend_schema_view(
    list=extend_schema(tags=["Services"], operation_id="v1_services_list", responses={200: ServiceSerializer(many=True)}),
    retrieve=extend_schema(tags=["Services"], operation_id="v1_services_retrieve", responses={200: ServiceSerializer}),
    create=extend_schema(tags=["Services"], operation_id="v1_services_create", request=ServiceCreateSerializer, responses={201: ServiceCreatedSerializer}),
    partial_update=extend_schema(tags=["Services"], operation_id="v1_services_partial_update", request=ServiceUpdateSerializer, responses={200: ServiceSerializer}),
    destroy=extend_schema(tags=["Services"], operation_id="v1_services_destroy", responses={204: None}),
    toggle_active=extend_schema(tags=["Services"], operation_id="v1_services_toggle_active"),
    deactivate=extend_schema(tags=["Services"], operation_id="v1_services_deactivate"),
    can_delete=extend_schema(tags=["Services"], operation_id="v1_services_can_delete"),
)
class ServiceViewSet(HierarchyNodeViewSet):
    collection = "services"
    serializer_class = ServiceSerializer
    filterset_class = ServiceFilter
    scoped_queryset = staticmethod(service_qs)
    queryset = Service.objects.none()

    def create(self, request):
        ser = ServiceCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        data = dict(ser.validated_data)
        staffing = [JobTypeStaffing(**row) for row in data.pop("job_types", [])]

        result = ClinicalServiceService.create(
            actor=actor_from_request(request),
            audit=self.get_audit_recorder(),
            job_types=staffing,
            **data,
        )
        return Response(ServiceCreatedSerializer(result).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None):
        ser = ServiceUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        service = ClinicalServiceService.update(
            actor=actor_from_request(request),
            service_id=parse_uuid(pk),
            patch=ServiceUpdate(**ser.validated_data),
            audit=self.get_audit_recorder(),
        )
        return Response(ServiceSerializer(service).data, status=status.HTTP_200_OK)

    @extend_schema(tags=["Services"], operation_id="v1_services_positions", responses={200: JobPositionSerializer(many=True)})
    @action(detail=True, methods=["get"], url_path="positions")
    def positions(self, request, pk=None):
        service = self.get_visible_object(request, pk)
        rows = positions_for_service(service_id=service.id)
        return Response(JobPositionSerializer(rows, many=True).data, status=status.HTTP_200_OK)
