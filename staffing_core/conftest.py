# staffing_core/conftest.py
import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.models import TokenUser

from staffing_core.audit.services import AuditRecorder
from staffing_core.clinical_services.models import Service
from staffing_core.departments.models import Department
from staffing_core.health_systems.models import HealthSystem
from staffing_core.hospitals.models import Hospital
from staffing_core.iam.models import AdminUser, UserRole
from staffing_core.job_types.models import JobType


def client_for(user) -> APIClient:
    """
    APIClient whose request.user carries the user's identity-provider subject,
    exactly what SubjectJWTAuthentication produces from a real token.
    """
    c = APIClient()
    if user is not None:
        c.force_authenticate(user=TokenUser({"sub": user.external_id}))
    return c


@pytest.fixture
def audit():
    return AuditRecorder()


@pytest.fixture
def super_admin(db):
    return AdminUser.objects.create(
        external_id="sub-super",
        email="root@example.org",
        role=UserRole.SUPER_ADMIN,
    )


@pytest.fixture
def health_system(db, super_admin):
    return HealthSystem.objects.create(name="Metro Health", slug="metro-health", created_by=super_admin)


@pytest.fixture
def job_type(db, health_system):
    return JobType.objects.create(
        health_system=health_system,
        code="MD",
        name="Medical Doctor / Physician",
        is_default=True,
    )


@pytest.fixture
def hospital(db, health_system, super_admin):
    return Hospital.objects.create(
        health_system=health_system,
        name="Metro General",
        short_code="MGH",
        timezone="America/New_York",
        created_by=super_admin,
    )


@pytest.fixture
def department(db, hospital):
    return Department.objects.create(
        hospital=hospital,
        health_system_id=hospital.health_system_id,
        name="Cardiology",
    )


@pytest.fixture
def service(db, department, super_admin):
    return Service.objects.create(
        department=department,
        name="Cardiac ICU",
        short_code="CICU",
        created_by=super_admin,
    )


@pytest.fixture
def other_health_system(db, super_admin):
    return HealthSystem.objects.create(name="Valley Care", slug="valley-care", created_by=super_admin)


@pytest.fixture
def other_hospital(db, other_health_system):
    return Hospital.objects.create(
        health_system=other_health_system,
        name="Valley Regional",
        short_code="VRH",
        timezone="America/Chicago",
    )


@pytest.fixture
def other_department(db, other_hospital):
    return Department.objects.create(
        hospital=other_hospital,
        health_system_id=other_hospital.health_system_id,
        name="Radiology",
    )


@pytest.fixture
def hs_admin(db, health_system):
    return AdminUser.objects.create(
        external_id="sub-hs-admin",
        email="hs@example.org",
        role=UserRole.HEALTH_SYSTEM_ADMIN,
        health_system=health_system,
    )


@pytest.fixture
def hospital_admin(db, hospital):
    return AdminUser.objects.create(
        external_id="sub-hospital-admin",
        email="hospital@example.org",
        role=UserRole.HOSPITAL_ADMIN,
        hospital=hospital,
    )


@pytest.fixture
def dept_admin(db, department):
    return AdminUser.objects.create(
        external_id="sub-dept-admin",
        email="dept@example.org",
        role=UserRole.DEPARTMENTAL_ADMIN,
        department=department,
    )


@pytest.fixture
def api_client(super_admin):
    return client_for(super_admin)
