# staffing_core/departments/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status
from rest_framework.response import Response

from staffing_core.departments.api.filters import DepartmentFilter
from staffing_core.departments.api.serializers import (
    DepartmentCreateSerializer,
    DepartmentSerializer,
    DepartmentUpdateSerializer,
)
from staffing_core.departments.models import Department
from staffing_core.departments.selectors import department_qs
from staffing_core.departments.services import DepartmentService
from staffing_core.hierarchy.api.views import HierarchyNodeViewSet, parse_uuid
from staffing_core.iam.identity import actor_from_request


@extend_schema_view(
    list=extend_schema(tags=["Departments"], operation_id="v1_departments_list", responses={200: DepartmentSerializer(many=True)}),
    retrieve=extend_schema(tags=["Departments"], operation_id="v1_departments_retrieve", responses={200: DepartmentSerializer}),
    create=extend_schema(tags=["Departments"], operation_id="v1_departments_create", request=DepartmentCreateSerializer, responses={201: DepartmentSerializer}),
    partial_update=extend_schema(tags=["Departments"], operation_id="v1_departments_partial_update", request=DepartmentUpdateSerializer, responses={200: DepartmentSerializer}),
    destroy=extend_schema(tags=["Departments"], operation_id="v1_departments_destroy", responses={204: None}),
    toggle_active=extend_schema(tags=["Departments"], operation_id="v1_departments_toggle_active"),
    deactivate=extend_schema(tags=["Departments"], operation_id="v1_departments_deactivate"),
    can_delete=extend_schema(tags=["Departments"], operation_id="v1_departments_can_delete"),
)
class DepartmentViewSet(HierarchyNodeViewSet):
    collection = "departments"
    serializer_class = DepartmentSerializer
    filterset_class = DepartmentFilter
    scoped_queryset = staticmethod(department_qs)
    queryset = Department.objects.none()

    def create(self, request):
        ser = DepartmentCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        dept = DepartmentService.create(
            actor=actor_from_request(request),
            hospital_id=ser.validated_data["hospital_id"],
            name=ser.validated_data["name"],
            audit=self.get_audit_recorder(),
        )
        return Response(DepartmentSerializer(dept).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None):
        ser = DepartmentUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        dept = DepartmentService.update(
            actor=actor_from_request(request),
            department_id=parse_uuid(pk),
            name=ser.validated_data.get("name"),
            audit=self.get_audit_recorder(),
        )
        return Response(DepartmentSerializer(dept).data, status=status.HTTP_200_OK)
