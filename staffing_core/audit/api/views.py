# staffing_core/audit/api/views.py
from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from staffing_core.audit.api.serializers import AuditFacetsSerializer, AuditLogSerializer
from staffing_core.audit.models import AuditAction, AuditLog, AuditResourceType
from staffing_core.audit.selectors import list_actions, list_audit_logs, list_resource_types
from staffing_core.iam.identity import actor_from_request


class AuditLogViewSet(viewsets.GenericViewSet):
    """
    Read-only audit trail. Unresolved callers get an empty list.
    """
    permission_classes = [AllowAny]

    serializer_class = AuditLogSerializer
    queryset = AuditLog.objects.none()

    @extend_schema(
        tags=["Audit"],
        operation_id="v1_audit_logs_list",
        responses={200: AuditLogSerializer(many=True)},
        parameters=[
            OpenApiParameter(
                name="resource_type",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=False,
                enum=AuditResourceType.values,
            ),
            OpenApiParameter(
                name="action",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=False,
                enum=AuditAction.values,
            ),
            OpenApiParameter(
                name="limit",
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Max records to return (default 100).",
            ),
        ],
    )
    def list(self, request):
        limit_raw = request.query_params.get("limit")
        limit = None
        if limit_raw:
            try:
                limit = int(limit_raw)
            except ValueError:
                raise ValidationError({"limit": "Invalid limit (int expected)"})

        rows = list_audit_logs(
            user=actor_from_request(request),
            resource_type=request.query_params.get("resource_type") or None,
            action=request.query_params.get("action") or None,
            limit=limit,
        )
        return Response(AuditLogSerializer(rows, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(tags=["Audit"], operation_id="v1_audit_logs_facets", responses={200: AuditFacetsSerializer})
    @action(detail=False, methods=["get"], url_path="facets")
    def facets(self, request):
        user = actor_from_request(request)
        data = {
            "resource_types": list_resource_types(user=user),
            "actions": list_actions(user=user),
        }
        return Response(AuditFacetsSerializer(data).data, status=status.HTTP_200_OK)
