# staffing_core/clinical_services/tests/test_services.py
import pytest
from rest_framework.exceptions import ValidationError

from staffing_core.audit.models import AuditLog
from staffing_core.clinical_services.models import JobPosition, Service
from staffing_core.clinical_services.services import ClinicalServiceService, JobTypeStaffing, ServiceUpdate
from staffing_core.common.api.exceptions import AuthorizationDenied
from staffing_core.conftest import client_for
from staffing_core.job_types.models import JobType

pytestmark = pytest.mark.django_db


def test_create_generates_positions(dept_admin, department, job_type, audit):
    result = ClinicalServiceService.create(
        actor=dept_admin,
        department_id=department.id,
        name="Cardiac ICU",
        short_code="cicu",
        operates_days=True,
        operates_nights=True,
        audit=audit,
        job_types=[JobTypeStaffing(job_type_id=job_type.id, headcount=2)],
    )

    assert result["positions_created"] == 4
    codes = sorted(JobPosition.objects.filter(service_id=result["id"]).values_list("job_code", flat=True))
    assert codes == [
        "CardioloMGHCICUMDWD_AM_1",
        "CardioloMGHCICUMDWD_AM_2",
        "CardioloMGHCICUMDWD_PM_1",
        "CardioloMGHCICUMDWD_PM_2",
    ]
    entry = AuditLog.objects.get()
    assert entry.changes["positions_created"] == 4


def test_per_job_type_shift_override(super_admin, department, job_type, audit):
    result = ClinicalServiceService.create(
        actor=super_admin,
        department_id=department.id,
        name="Cardiac ICU",
        short_code="CICU",
        operates_days=True,
        operates_nights=True,
        audit=audit,
        job_types=[JobTypeStaffing(job_type_id=job_type.id, headcount=1, operates_nights=False)],
    )

    assert result["positions_created"] == 1


def test_job_type_from_other_health_system_rejected(super_admin, department, other_health_system, audit):
    foreign = JobType.objects.create(health_system=other_health_system, code="MD", name="Physician")

    with pytest.raises(ValidationError):
        ClinicalServiceService.create(
            actor=super_admin,
            department_id=department.id,
            name="Cardiac ICU",
            short_code="CICU",
            audit=audit,
            job_types=[JobTypeStaffing(job_type_id=foreign.id, headcount=1)],
        )
    assert not Service.objects.exists()


def test_repeated_job_type_rejected(super_admin, department, job_type, audit):
    with pytest.raises(ValidationError) as exc:
        ClinicalServiceService.create(
            actor=super_admin,
            department_id=department.id,
            name="Cardiac ICU",
            short_code="CICU",
            audit=audit,
            job_types=[
                JobTypeStaffing(job_type_id=job_type.id, headcount=1),
                JobTypeStaffing(job_type_id=job_type.id, headcount=2),
            ],
        )

    assert "job_types" in exc.value.detail
    assert not Service.objects.exists()
    assert not JobPosition.objects.exists()
    assert AuditLog.objects.count() == 0


def test_inactive_job_type_rejected(super_admin, department, job_type, audit):
    job_type.is_active = False
    job_type.save()

    with pytest.raises(ValidationError):
        ClinicalServiceService.create(
            actor=super_admin,
            department_id=department.id,
            name="Cardiac ICU",
            short_code="CICU",
            audit=audit,
            job_types=[JobTypeStaffing(job_type_id=job_type.id, headcount=1)],
        )


def test_dept_admin_cannot_create_in_other_department(dept_admin, other_department, audit):
    with pytest.raises(AuthorizationDenied):
        ClinicalServiceService.create(
            actor=dept_admin, department_id=other_department.id, name="X", short_code="X", audit=audit
        )


def test_update(dept_admin, service, audit):
    updated = ClinicalServiceService.update(
        actor=dept_admin,
        service_id=service.id,
        patch=ServiceUpdate(day_capacity=12, operates_nights=True),
        audit=audit,
    )

    assert (updated.day_capacity, updated.operates_nights) == (12, True)
    assert AuditLog.objects.get().changes == {"day_capacity": 12, "operates_nights": True}


def test_api_create_and_positions(dept_admin, department, job_type):
    c = client_for(dept_admin)

    res = c.post(
        "/api/v1/services/",
        {
            "department_id": str(department.id),
            "name": "Cardiac ICU",
            "short_code": "CICU",
            "job_types": [{"job_type_id": str(job_type.id), "headcount": 3}],
        },
        format="json",
    )
    assert res.status_code == 201
    assert res.data["positions_created"] == 3

    positions = c.get(f"/api/v1/services/{res.data['id']}/positions/")
    assert [p["position_number"] for p in positions.data] == [1, 2, 3]

    listing = c.get("/api/v1/services/")
    assert listing.data["results"][0]["positions_open"] == 3
