# staffing_core/hierarchy/tests/test_cascade.py
import pytest
from django.test import override_settings

from staffing_core.audit.models import AuditLog
from staffing_core.clinical_services.models import JobPosition, PositionStatus, Service
from staffing_core.conftest import client_for
from staffing_core.hierarchy.cascade import cascade_deactivate
from staffing_core.hierarchy.repository import EntityRepository
from staffing_core.hierarchy.services import LifecycleService
from staffing_core.hierarchy.tests.factories import make_position, make_service
from staffing_core.iam.models import AdminUser, UserRole

pytestmark = pytest.mark.django_db


def _toggle(actor, collection, entity, audit):
    return LifecycleService.toggle_active(actor=actor, collection=collection, entity_id=entity.id, audit=audit)


def test_department_cascade_counts_only_flipped_rows(super_admin, department, audit):
    for i in range(3):
        make_service(department, f"Service {i}", f"S{i}")
    make_service(department, "Closed", "CL", is_active=False)

    result = _toggle(super_admin, "departments", department, audit)

    assert result.is_active is False
    assert result.cascade_affected_counts == {"services": 3, "job_positions": 0, "users": 0}
    assert not Service.objects.filter(department=department, is_active=True).exists()


def test_health_system_cascade_reaches_every_level(super_admin, health_system, hospital, department, job_type, audit):
    service = make_service(department, "Cardiac ICU", "CICU")
    make_position(service, job_type, 1)
    make_position(service, job_type, 2)
    make_service(department, "Telemetry", "TELE")

    AdminUser.objects.create(external_id="sub-h", role=UserRole.HOSPITAL_ADMIN, hospital=hospital)
    AdminUser.objects.create(external_id="sub-d", role=UserRole.DEPARTMENTAL_ADMIN, department=department)

    result = _toggle(super_admin, "health_systems", health_system, audit)

    assert result.cascade_affected_counts == {
        "hospitals": 1,
        "departments": 1,
        "services": 2,
        "job_positions": 2,
        "users": 2,
    }
    hospital.refresh_from_db()
    department.refresh_from_db()
    assert hospital.is_active is False
    assert department.is_active is False
    assert AdminUser.objects.filter(is_active=True).count() == 1  # super_admin

    # job types are configuration and stay as they were
    job_type.refresh_from_db()
    assert job_type.is_active is True


def test_open_positions_are_cancelled(super_admin, service, job_type, audit):
    open_pos = make_position(service, job_type, 1)
    assigned = make_position(service, job_type, 2, status=PositionStatus.ASSIGNED)

    result = _toggle(super_admin, "services", service, audit)

    assert result.cascade_affected_counts == {"job_positions": 2}
    open_pos.refresh_from_db()
    assigned.refresh_from_db()
    assert (open_pos.is_active, open_pos.status) == (False, PositionStatus.CANCELLED)
    assert (assigned.is_active, assigned.status) == (False, PositionStatus.ASSIGNED)


def test_reactivation_does_not_cascade(super_admin, hospital, department, audit):
    make_service(department, "Cardiac ICU", "CICU")

    _toggle(super_admin, "hospitals", hospital, audit)
    result = _toggle(super_admin, "hospitals", hospital, audit)

    assert result.is_active is True
    assert result.cascade_affected_counts is None
    department.refresh_from_db()
    assert department.is_active is False
    assert not Service.objects.filter(is_active=True).exists()

    # a second deactivation finds nothing left to flip
    again = _toggle(super_admin, "hospitals", hospital, audit)
    assert again.cascade_affected_counts == {
        "departments": 0,
        "services": 0,
        "job_positions": 0,
        "users": 0,
    }


def test_walk_descends_through_inactive_rows(super_admin, hospital, department, audit):
    department.is_active = False
    department.save()
    make_service(department, "Cardiac ICU", "CICU")

    result = _toggle(super_admin, "hospitals", hospital, audit)

    assert result.cascade_affected_counts["departments"] == 0
    assert result.cascade_affected_counts["services"] == 1


def test_one_audit_entry_per_toggle(super_admin, hospital, department, audit):
    make_service(department, "Cardiac ICU", "CICU")

    _toggle(super_admin, "hospitals", hospital, audit)
    _toggle(super_admin, "hospitals", hospital, audit)

    entries = list(AuditLog.objects.all())
    assert len(entries) == 2
    assert {e.action for e in entries} == {"DEACTIVATE", "ACTIVATE"}
    deactivate = next(e for e in entries if e.action == "DEACTIVATE")
    assert deactivate.resource_id == hospital.id
    assert deactivate.changes["affected"]["services"] == 1


@override_settings(HIERARCHY_BATCH_SIZE=2)
def test_cascade_batches_large_fan_out(super_admin, department, job_type):
    services = [make_service(department, f"Service {i}", f"S{i}") for i in range(5)]
    for s in services:
        make_position(s, job_type, 1)
        make_position(s, job_type, 2)

    counts = cascade_deactivate(EntityRepository(), "departments", department.id)

    assert counts["services"] == 5
    assert counts["job_positions"] == 10
    assert JobPosition.objects.filter(status=PositionStatus.CANCELLED).count() == 10


def test_toggle_api_response(hospital_admin, department):
    make_service(department, "Cardiac ICU", "CICU")

    res = client_for(hospital_admin).post(f"/api/v1/departments/{department.id}/toggle-active/")

    assert res.status_code == 200
    assert res.data["is_active"] is False
    assert res.data["cascade_affected_counts"]["services"] == 1


def test_toggle_api_denies_out_of_scope(hospital_admin, other_department, audit):
    res = client_for(hospital_admin).post(f"/api/v1/departments/{other_department.id}/toggle-active/")

    assert res.status_code == 403
    other_department.refresh_from_db()
    assert other_department.is_active is True
    assert AuditLog.objects.count() == 0


def test_toggle_api_denies_unwritable_level(hospital_admin, hospital):
    res = client_for(hospital_admin).post(f"/api/v1/hospitals/{hospital.id}/toggle-active/")

    assert res.status_code == 403


def _deactivate(actor, collection, entity, audit):
    return LifecycleService.deactivate(actor=actor, collection=collection, entity_id=entity.id, audit=audit)


def test_deactivate_is_idempotent(super_admin, health_system, hospital, department, audit):
    make_service(department, "Cardiac ICU", "CICU")

    first = _deactivate(super_admin, "health_systems", health_system, audit)
    second = _deactivate(super_admin, "health_systems", health_system, audit)

    assert first.cascade_affected_counts["services"] == 1
    assert second.is_active is False
    assert second.cascade_affected_counts == {
        "hospitals": 0,
        "departments": 0,
        "services": 0,
        "job_positions": 0,
        "users": 0,
    }
    health_system.refresh_from_db()
    assert health_system.is_active is False
    assert list(AuditLog.objects.values_list("action", flat=True)) == ["DEACTIVATE", "DEACTIVATE"]


def test_deactivate_already_inactive_parent_still_cascades(super_admin, hospital, department, audit):
    hospital.is_active = False
    hospital.save()

    result = _deactivate(super_admin, "hospitals", hospital, audit)

    assert result.cascade_affected_counts["departments"] == 1
    department.refresh_from_db()
    assert department.is_active is False


def test_reactivated_department_leaves_services_inactive(super_admin, department, audit):
    make_service(department, "Cardiac ICU", "CICU")
    make_service(department, "Telemetry", "TELE")

    _toggle(super_admin, "departments", department, audit)
    result = _toggle(super_admin, "departments", department, audit)

    assert result.is_active is True
    department.refresh_from_db()
    assert department.is_active is True
    assert Service.objects.filter(department=department, is_active=False).count() == 2


def test_inactive_open_position_keeps_its_status(super_admin, service, job_type, audit):
    dormant = make_position(service, job_type, 1)
    JobPosition.objects.filter(id=dormant.id).update(is_active=False)

    result = _toggle(super_admin, "services", service, audit)

    assert result.cascade_affected_counts == {"job_positions": 0}
    dormant.refresh_from_db()
    assert (dormant.is_active, dormant.status) == (False, PositionStatus.OPEN)


def test_deactivate_api(api_client, health_system, hospital):
    url = f"/api/v1/health-systems/{health_system.id}/deactivate/"

    first = api_client.post(url)
    second = api_client.post(url)

    assert first.status_code == 200
    assert first.data["cascade_affected_counts"]["hospitals"] == 1
    assert second.status_code == 200
    assert second.data["is_active"] is False
    assert second.data["cascade_affected_counts"]["hospitals"] == 0


def test_deactivate_api_denies_out_of_scope(hospital_admin, other_department):
    res = client_for(hospital_admin).post(f"/api/v1/departments/{other_department.id}/deactivate/")

    assert res.status_code == 403
    other_department.refresh_from_db()
    assert other_department.is_active is True
