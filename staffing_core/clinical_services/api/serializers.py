# staffing_core/clinical_services/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from staffing_core.clinical_services.models import JobPosition, Service


class ServiceSerializer(serializers.ModelSerializer):
    department_id = serializers.UUIDField(read_only=True)
    positions_total = serializers.IntegerField(read_only=True, required=False)
    positions_open = serializers.IntegerField(read_only=True, required=False)

    class Meta:
        model = Service
        fields = [
            "id",
            "department_id",
            "name",
            "short_code",
            "day_capacity",
            "night_capacity",
            "weekend_capacity",
            "operates_days",
            "operates_nights",
            "operates_weekends",
            "positions_total",
            "positions_open",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class JobPositionSerializer(serializers.ModelSerializer):
    job_type_code = serializers.CharField(source="job_type.code", read_only=True)

    class Meta:
        model = JobPosition
        fields = [
            "id",
            "job_code",
            "job_type_code",
            "shift_type",
            "position_number",
            "status",
            "is_active",
        ]
        read_only_fields = fields


class JobTypeStaffingSerializer(serializers.Serializer):
    job_type_id = serializers.UUIDField()
    headcount = serializers.IntegerField(min_value=0)
    operates_days = serializers.BooleanField(required=False, allow_null=True, default=None)
    operates_nights = serializers.BooleanField(required=False, allow_null=True, default=None)


class ServiceCreateSerializer(serializers.Serializer):
    department_id = serializers.UUIDField()
    name = serializers.CharField(max_length=255)
    short_code = serializers.CharField(max_length=16)

    day_capacity = serializers.IntegerField(min_value=0, required=False, allow_null=True, default=None)
    night_capacity = serializers.IntegerField(min_value=0, required=False, allow_null=True, default=None)
    weekend_capacity = serializers.IntegerField(min_value=0, required=False, allow_null=True, default=None)

    operates_days = serializers.BooleanField(required=False, default=True)
    operates_nights = serializers.BooleanField(required=False, default=False)
    operates_weekends = serializers.BooleanField(required=False, default=False)

    job_types = JobTypeStaffingSerializer(many=True, required=False, default=list)


class ServiceCreatedSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    positions_created = serializers.IntegerField()


class ServiceUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, required=False)
    short_code = serializers.CharField(max_length=16, required=False)
    day_capacity = serializers.IntegerField(min_value=0, required=False)
    night_capacity = serializers.IntegerField(min_value=0, required=False)
    weekend_capacity = serializers.IntegerField(min_value=0, required=False)
    operates_days = serializers.BooleanField(required=False)
    operates_nights = serializers.BooleanField(required=False)
    operates_weekends = serializers.BooleanField(required=False)
