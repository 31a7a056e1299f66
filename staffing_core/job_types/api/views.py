# staffing_core/job_types/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status
from rest_framework.response import Response

from staffing_core.hierarchy.api.views import HierarchyNodeViewSet, parse_uuid
from staffing_core.iam.identity import actor_from_request
from staffing_core.job_types.api.filters import JobTypeFilter
from staffing_core.job_types.api.serializers import JobTypeCreateSerializer, JobTypeSerializer, JobTypeUpdateSerializer
from staffing_core.job_types.models import JobType
from staffing_core.job_types.selectors import job_type_qs
from staffing_core.job_types.services import JobTypeService


@extend_schema_view(
    list=extend_schema(tags=["Job types"], operation_id="v1_job_types_list", responses={200: JobTypeSerializer(many=True)}),
    retrieve=extend_schema(tags=["Job types"], operation_id="v1_job_types_retrieve", responses={200: JobTypeSerializer}),
    create=extend_schema(tags=["Job types"], operation_id="v1_job_types_create", request=JobTypeCreateSerializer, responses={201: JobTypeSerializer}),
    partial_update=extend_schema(tags=["Job types"], operation_id="v1_job_types_partial_update", request=JobTypeUpdateSerializer, responses={200: JobTypeSerializer}),
    destroy=extend_schema(tags=["Job types"], operation_id="v1_job_types_destroy", responses={204: None}),
    toggle_active=extend_schema(tags=["Job types"], operation_id="v1_job_types_toggle_active"),
    deactivate=extend_schema(tags=["Job types"], operation_id="v1_job_types_deactivate"),
    can_delete=extend_schema(tags=["Job types"], operation_id="v1_job_types_can_delete"),
)
class JobTypeViewSet(HierarchyNodeViewSet):
    collection = "job_types"
    serializer_class = JobTypeSerializer
    filterset_class = JobTypeFilter
    scoped_queryset = staticmethod(job_type_qs)
    queryset = JobType.objects.none()
    ordering = ("code", "id")

    def create(self, request):
        ser = JobTypeCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        jt = JobTypeService.create(
            actor=actor_from_request(request),
            audit=self.get_audit_recorder(),
            **ser.validated_data,
        )
        return Response(JobTypeSerializer(jt).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None):
        ser = JobTypeUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        jt = JobTypeService.update(
            actor=actor_from_request(request),
            job_type_id=parse_uuid(pk),
            audit=self.get_audit_recorder(),
            **ser.validated_data,
        )
        return Response(JobTypeSerializer(jt).data, status=status.HTTP_200_OK)
