# staffing_core/audit/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from staffing_core.audit.models import AuditLog


class AuditLogSerializer(serializers.ModelSerializer):
    user_id = serializers.UUIDField(read_only=True)
    user_email = serializers.EmailField(source="user.email", read_only=True)

    class Meta:
        model = AuditLog
        fields = [
            "id",
            "user_id",
            "user_email",
            "action",
            "resource_type",
            "resource_id",
            "changes",
            "timestamp",
        ]
        read_only_fields = fields


class AuditFacetsSerializer(serializers.Serializer):
    resource_types = serializers.ListField(child=serializers.CharField())
    actions = serializers.ListField(child=serializers.CharField())
