# staffing_core/iam/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from staffing_core.audit.services import AuditRecorder
from staffing_core.common.api.pagination import paginate
from staffing_core.hierarchy.api.views import parse_uuid
from staffing_core.iam.api.serializers import AdminUserCreateSerializer, AdminUserSerializer
from staffing_core.iam.identity import actor_from_request
from staffing_core.iam.models import AdminUser
from staffing_core.iam.selectors import admin_user_qs
from staffing_core.iam.services import AdminUserService


@extend_schema_view(
    list=extend_schema(tags=["IAM"], operation_id="v1_users_list", responses={200: AdminUserSerializer(many=True)}),
    retrieve=extend_schema(tags=["IAM"], operation_id="v1_users_retrieve", responses={200: AdminUserSerializer}),
    create=extend_schema(tags=["IAM"], operation_id="v1_users_create", request=AdminUserCreateSerializer, responses={201: AdminUserSerializer}),
    destroy=extend_schema(tags=["IAM"], operation_id="v1_users_destroy", responses={204: None}),
    deactivate=extend_schema(tags=["IAM"], operation_id="v1_users_deactivate", request=None, responses={200: AdminUserSerializer}),
)
class AdminUserViewSet(viewsets.ViewSet):
    permission_classes = [AllowAny]

    serializer_class = AdminUserSerializer
    queryset = AdminUser.objects.none()

    def list(self, request):
        qs = admin_user_qs(user=actor_from_request(request)).order_by("email", "id")
        role = request.query_params.get("role")
        if role:
            qs = qs.filter(role=role)
        return paginate(request, qs, AdminUserSerializer)

    def retrieve(self, request, pk=None):
        obj = admin_user_qs(user=actor_from_request(request)).filter(id=parse_uuid(pk)).first()
        if obj is None:
            raise NotFound()
        return Response(AdminUserSerializer(obj).data, status=status.HTTP_200_OK)

    def create(self, request):
        ser = AdminUserCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        user = AdminUserService.create(
            actor=actor_from_request(request),
            audit=AuditRecorder(),
            **ser.validated_data,
        )
        return Response(AdminUserSerializer(user).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, pk=None):
        AdminUserService.delete(
            actor=actor_from_request(request),
            user_id=parse_uuid(pk),
            audit=AuditRecorder(),
        )
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["post"], url_path="deactivate")
    def deactivate(self, request, pk=None):
        user = AdminUserService.deactivate(
            actor=actor_from_request(request),
            user_id=parse_uuid(pk),
            audit=AuditRecorder(),
        )
        return Response(AdminUserSerializer(user).data, status=status.HTTP_200_OK)
