# staffing_core/departments/tests/test_departments.py
import pytest
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework.exceptions import ValidationError

from staffing_core.audit.models import AuditLog
from staffing_core.common.api.exceptions import AuthorizationDenied
from staffing_core.conftest import client_for
from staffing_core.departments.models import Department
from staffing_core.departments.services import DepartmentService

pytestmark = pytest.mark.django_db


def test_health_system_must_match_hospital(hospital, other_health_system):
    with pytest.raises(DjangoValidationError):
        Department.objects.create(hospital=hospital, health_system=other_health_system, name="Mismatch")


def test_create_derives_health_system(hospital_admin, hospital, audit):
    dept = DepartmentService.create(actor=hospital_admin, hospital_id=hospital.id, name=" Neurology ", audit=audit)

    assert dept.name == "Neurology"
    assert dept.health_system_id == hospital.health_system_id
    assert dept.is_default is False
    assert AuditLog.objects.get().resource_id == dept.id


def test_dept_admin_cannot_create_departments(dept_admin, hospital, audit):
    with pytest.raises(AuthorizationDenied):
        DepartmentService.create(actor=dept_admin, hospital_id=hospital.id, name="Neurology", audit=audit)


def test_create_under_missing_or_inactive_hospital(super_admin, hospital, audit):
    hospital.is_active = False
    hospital.save()

    with pytest.raises(ValidationError):
        DepartmentService.create(actor=super_admin, hospital_id=hospital.id, name="Neurology", audit=audit)


def test_rename(hospital_admin, department, audit):
    DepartmentService.update(actor=hospital_admin, department_id=department.id, name="Cardiac Sciences", audit=audit)

    department.refresh_from_db()
    assert department.name == "Cardiac Sciences"


def test_dept_admin_reads_but_cannot_rename(dept_admin, department, audit):
    res = client_for(dept_admin).get(f"/api/v1/departments/{department.id}/")
    assert res.status_code == 200

    with pytest.raises(AuthorizationDenied):
        DepartmentService.update(actor=dept_admin, department_id=department.id, name="Mine Now", audit=audit)


def test_api_create_and_list(hospital_admin, hospital, other_department):
    c = client_for(hospital_admin)

    res = c.post("/api/v1/departments/", {"hospital_id": str(hospital.id), "name": "Neurology"}, format="json")
    assert res.status_code == 201

    listing = c.get("/api/v1/departments/")
    assert [r["name"] for r in listing.data["results"]] == ["Neurology"]
