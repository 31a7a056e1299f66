# staffing_core/job_types/tests/test_job_types.py
import pytest
from rest_framework.exceptions import ValidationError

from staffing_core.audit.models import AuditLog
from staffing_core.common.api.exceptions import AuthorizationDenied
from staffing_core.conftest import client_for
from staffing_core.job_types.services import JobTypeService

pytestmark = pytest.mark.django_db


def test_create_custom_job_type(hs_admin, health_system, audit):
    jt = JobTypeService.create(actor=hs_admin, health_system_id=health_system.id, code="CRNA", name="Nurse Anesthetist", audit=audit)

    assert jt.is_default is False
    assert AuditLog.objects.get().resource_type == "JOB_TYPE"


def test_duplicate_code_rejected(hs_admin, health_system, job_type, audit):
    with pytest.raises(ValidationError):
        JobTypeService.create(actor=hs_admin, health_system_id=health_system.id, code="MD", name="Again", audit=audit)


def test_hospital_admin_cannot_manage_job_types(hospital_admin, health_system, job_type, audit):
    with pytest.raises(AuthorizationDenied):
        JobTypeService.create(actor=hospital_admin, health_system_id=health_system.id, code="X", name="X", audit=audit)
    with pytest.raises(AuthorizationDenied):
        JobTypeService.toggle_active(actor=hospital_admin, job_type_id=job_type.id, audit=audit)


def test_toggle_has_empty_cascade(hs_admin, job_type, audit):
    result = JobTypeService.toggle_active(actor=hs_admin, job_type_id=job_type.id, audit=audit)

    assert result.is_active is False
    assert result.cascade_affected_counts == {}


def test_update_description(hs_admin, job_type, audit):
    jt = JobTypeService.update(actor=hs_admin, job_type_id=job_type.id, description="Attending physicians", audit=audit)

    assert jt.description == "Attending physicians"


def test_api_list_for_health_system(hs_admin, job_type, other_health_system):
    res = client_for(hs_admin).get("/api/v1/job-types/")

    assert [r["code"] for r in res.data["results"]] == ["MD"]
