# staffing_core/departments/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from staffing_core.departments.models import Department


class DepartmentSerializer(serializers.ModelSerializer):
    hospital_id = serializers.UUIDField(read_only=True)
    health_system_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Department
        fields = [
            "id",
            "hospital_id",
            "health_system_id",
            "name",
            "is_default",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class DepartmentCreateSerializer(serializers.Serializer):
    hospital_id = serializers.UUIDField()
    name = serializers.CharField(max_length=255)


class DepartmentUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, required=False)
