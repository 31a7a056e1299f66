# staffing_core/iam/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from staffing_core.iam.models import AdminUser, UserRole


class AdminUserSerializer(serializers.ModelSerializer):
    health_system_id = serializers.UUIDField(read_only=True, allow_null=True)
    hospital_id = serializers.UUIDField(read_only=True, allow_null=True)
    department_id = serializers.UUIDField(read_only=True, allow_null=True)

    class Meta:
        model = AdminUser
        fields = [
            "id",
            "external_id",
            "email",
            "first_name",
            "last_name",
            "role",
            "health_system_id",
            "hospital_id",
            "department_id",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class AdminUserCreateSerializer(serializers.Serializer):
    external_id = serializers.CharField(max_length=255)
    role = serializers.ChoiceField(choices=UserRole.choices)
    email = serializers.EmailField(required=False, allow_blank=True, default="")
    first_name = serializers.CharField(max_length=128, required=False, allow_blank=True, default="")
    last_name = serializers.CharField(max_length=128, required=False, allow_blank=True, default="")
    scope_id = serializers.UUIDField(required=False, allow_null=True, default=None)


class MeSerializer(serializers.Serializer):
    authenticated = serializers.BooleanField()
    user = AdminUserSerializer(allow_null=True)
    writable_levels = serializers.ListField(child=serializers.CharField())
