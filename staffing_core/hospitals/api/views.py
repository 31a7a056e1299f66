# staffing_core/hospitals/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status
from rest_framework.response import Response

from staffing_core.hierarchy.api.views import HierarchyNodeViewSet, parse_uuid
from staffing_core.hospitals.api.filters import HospitalFilter
from staffing_core.hospitals.api.serializers import (
    HospitalCreatedSerializer,
    HospitalCreateSerializer,
    HospitalSerializer,
    HospitalUpdateSerializer,
)
from staffing_core.hospitals.models import Hospital
from staffing_core.hospitals.selectors import hospital_qs
from staffing_core.hospitals.services import HospitalService, HospitalUpdate
from staffing_core.iam.identity import actor_from_request


@extend_schema_view(
    list=extend_schema(tags=["Hospitals"], operation_id="v1_hospitals_list", responses={200: HospitalSerializer(many=True)}),
    retrieve=extend_schema(tags=["Hospitals"], operation_id="v1_hospitals_retrieve", responses={200: HospitalSerializer}),
    create=extend_schema(tags=["Hospitals"], operation_id="v1_hospitals_create", request=HospitalCreateSerializer, responses={201: HospitalCreatedSerializer}),
    partial_update=extend_schema(tags=["Hospitals"], operation_id="v1_hospitals_partial_update", request=HospitalUpdateSerializer, responses={200: HospitalSerializer}),
    destroy=extend_schema(tags=["Hospitals"], operation_id="v1_hospitals_destroy", responses={204: None}),
    toggle_active=extend_schema(tags=["Hospitals"], operation_id="v1_hospitals_toggle_active"),
    deactivate=extend_schema(tags=["Hospitals"], operation_id="v1_hospitals_deactivate"),
    can_delete=extend_schema(tags=["Hospitals"], operation_id="v1_hospitals_can_delete"),
)
class HospitalViewSet(HierarchyNodeViewSet):
    collection = "hospitals"
    serializer_class = HospitalSerializer
    filterset_class = HospitalFilter
    scoped_queryset = staticmethod(hospital_qs)
    queryset = Hospital.objects.none()

    def create(self, request):
        ser = HospitalCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        result = HospitalService.create(
            actor=actor_from_request(request),
            audit=self.get_audit_recorder(),
            **ser.validated_data,
        )
        return Response(HospitalCreatedSerializer(result).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None):
        ser = HospitalUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        hospital = HospitalService.update(
            actor=actor_from_request(request),
            hospital_id=parse_uuid(pk),
            patch=HospitalUpdate(**ser.validated_data),
            audit=self.get_audit_recorder(),
        )
        return Response(HospitalSerializer(hospital).data, status=status.HTTP_200_OK)
