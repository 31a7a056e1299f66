# staffing_core/iam/api/me.py

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from staffing_core.iam.api.serializers import MeSerializer
from staffing_core.iam.identity import actor_from_request
from staffing_core.iam.policy import policy_for


class MeView(APIView):
    """
    The resolved AdminUser for the caller, or {authenticated: false}.
    Never errors: an unknown or inactive subject is just unauthenticated here.
    """
    permission_classes = [AllowAny]

    @extend_schema(tags=["IAM"], operation_id="v1_me_retrieve", responses={200: MeSerializer})
    def get(self, request):
        user = actor_from_request(request)
        policy = policy_for(user)
        data = {
            "authenticated": user is not None,
            "user": user,
            "writable_levels": sorted(policy.writable_levels) if policy else [],
        }
        return Response(MeSerializer(data).data, status=status.HTTP_200_OK)
