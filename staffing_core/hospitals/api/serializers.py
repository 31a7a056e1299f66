# staffing_core/hospitals/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from staffing_core.hospitals.models import Hospital


class HospitalSerializer(serializers.ModelSerializer):
    health_system_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Hospital
        fields = [
            "id",
            "health_system_id",
            "name",
            "short_code",
            "timezone",
            "address",
            "city",
            "state",
            "zip_code",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class HospitalCreateSerializer(serializers.Serializer):
    health_system_id = serializers.UUIDField()
    name = serializers.CharField(max_length=255)
    short_code = serializers.CharField(max_length=16)
    timezone = serializers.CharField(max_length=64)

    address = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    city = serializers.CharField(max_length=128, required=False, allow_blank=True, default="")
    state = serializers.CharField(max_length=64, required=False, allow_blank=True, default="")
    zip_code = serializers.CharField(max_length=16, required=False, allow_blank=True, default="")

    seed_default_departments = serializers.BooleanField(required=False, default=True)


class HospitalCreatedSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    departments_created = serializers.IntegerField()


class HospitalUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, required=False)
    short_code = serializers.CharField(max_length=16, required=False)
    timezone = serializers.CharField(max_length=64, required=False)
    address = serializers.CharField(max_length=255, required=False, allow_blank=True)
    city = serializers.CharField(max_length=128, required=False, allow_blank=True)
    state = serializers.CharField(max_length=64, required=False, allow_blank=True)
    zip_code = serializers.CharField(max_length=16, required=False, allow_blank=True)
