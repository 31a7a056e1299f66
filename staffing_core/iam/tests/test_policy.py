# staffing_core/iam/tests/test_policy.py
import pytest

from staffing_core.hierarchy.tree import Level
from staffing_core.iam.models import UserRole
from staffing_core.iam.policy import (
    ROLE_POLICIES,
    ScopeTarget,
    authorize,
    can_access,
    child_target,
    scope_q,
    target_for,
)
from staffing_core.common.api.exceptions import AuthorizationDenied
from staffing_core.health_systems.models import HealthSystem
from staffing_core.hospitals.models import Hospital
from staffing_core.departments.models import Department

pytestmark = pytest.mark.django_db

ROLE_FIXTURES = {
    UserRole.SUPER_ADMIN: "super_admin",
    UserRole.HEALTH_SYSTEM_ADMIN: "hs_admin",
    UserRole.HOSPITAL_ADMIN: "hospital_admin",
    UserRole.DEPARTMENTAL_ADMIN: "dept_admin",
}

LEVEL_FIXTURES = {
    Level.HEALTH_SYSTEM: "health_system",
    Level.HOSPITAL: "hospital",
    Level.DEPARTMENT: "department",
}

# Expected read access to the admin's own tree.
OWN_TREE = {
    (UserRole.SUPER_ADMIN, Level.HEALTH_SYSTEM): True,
    (UserRole.SUPER_ADMIN, Level.HOSPITAL): True,
    (UserRole.SUPER_ADMIN, Level.DEPARTMENT): True,
    (UserRole.HEALTH_SYSTEM_ADMIN, Level.HEALTH_SYSTEM): True,
    (UserRole.HEALTH_SYSTEM_ADMIN, Level.HOSPITAL): True,
    (UserRole.HEALTH_SYSTEM_ADMIN, Level.DEPARTMENT): True,
    (UserRole.HOSPITAL_ADMIN, Level.HEALTH_SYSTEM): False,
    (UserRole.HOSPITAL_ADMIN, Level.HOSPITAL): True,
    (UserRole.HOSPITAL_ADMIN, Level.DEPARTMENT): True,
    (UserRole.DEPARTMENTAL_ADMIN, Level.HEALTH_SYSTEM): False,
    (UserRole.DEPARTMENTAL_ADMIN, Level.HOSPITAL): False,
    (UserRole.DEPARTMENTAL_ADMIN, Level.DEPARTMENT): True,
}


@pytest.mark.parametrize("role,level", list(OWN_TREE.keys()))
def test_read_access_matrix_own_tree(request, role, level):
    user = request.getfixturevalue(ROLE_FIXTURES[role])
    entity = request.getfixturevalue(LEVEL_FIXTURES[level])

    assert can_access(user, target_for(level, entity)) is OWN_TREE[(role, level)]


@pytest.mark.parametrize("role", list(ROLE_FIXTURES.keys()))
@pytest.mark.parametrize(
    "level,fixture",
    [
        (Level.HEALTH_SYSTEM, "other_health_system"),
        (Level.HOSPITAL, "other_hospital"),
        (Level.DEPARTMENT, "other_department"),
    ],
)
def test_read_access_matrix_foreign_tree(request, role, level, fixture):
    user = request.getfixturevalue(ROLE_FIXTURES[role])
    entity = request.getfixturevalue(fixture)

    assert can_access(user, target_for(level, entity)) is (role == UserRole.SUPER_ADMIN)


def test_write_levels_follow_policy_table(hs_admin, hospital_admin, dept_admin, hospital, department, service):
    assert can_access(hs_admin, target_for(Level.HOSPITAL, hospital), write=True)
    assert not can_access(hospital_admin, target_for(Level.HOSPITAL, hospital), write=True)
    assert can_access(hospital_admin, target_for(Level.DEPARTMENT, department), write=True)

    # departmental admins read their department but only write services
    assert can_access(dept_admin, target_for(Level.DEPARTMENT, department))
    assert not can_access(dept_admin, target_for(Level.DEPARTMENT, department), write=True)
    assert can_access(dept_admin, target_for(Level.SERVICE, service), write=True)


def test_child_target_inherits_parent_scope(hospital_admin, dept_admin, hospital, department):
    dept_target = child_target(Level.DEPARTMENT, parent_level=Level.HOSPITAL, parent=hospital)
    assert dept_target.keys == {"health_system_id": hospital.health_system_id, "hospital_id": hospital.id}
    assert can_access(hospital_admin, dept_target, write=True)
    assert not can_access(dept_admin, dept_target, write=True)

    service_target = child_target(Level.SERVICE, parent_level=Level.DEPARTMENT, parent=department)
    assert can_access(dept_admin, service_target, write=True)


def test_root_create_is_super_admin_only(super_admin, hs_admin):
    target = child_target(Level.HEALTH_SYSTEM)
    assert can_access(super_admin, target, write=True)
    assert not can_access(hs_admin, target, write=True)


def test_inactive_or_missing_user_never_allowed(hs_admin, health_system):
    target = target_for(Level.HEALTH_SYSTEM, health_system)
    assert not can_access(None, target)

    hs_admin.is_active = False
    assert not can_access(hs_admin, target)


def test_authorize_raises_authorization_denied(hospital_admin, other_hospital):
    with pytest.raises(AuthorizationDenied):
        authorize(hospital_admin, target_for(Level.HOSPITAL, other_hospital), write=False)


def test_unknown_scope_key_denies(hs_admin):
    assert not can_access(hs_admin, ScopeTarget(level=Level.HOSPITAL, keys={}))


def test_scope_q_filters_querysets(hs_admin, hospital_admin, dept_admin, super_admin, department, other_department):
    assert set(Department.objects.filter(scope_q(super_admin, Level.DEPARTMENT))) == {department, other_department}
    assert list(Department.objects.filter(scope_q(hs_admin, Level.DEPARTMENT))) == [department]
    assert list(Department.objects.filter(scope_q(hospital_admin, Level.DEPARTMENT))) == [department]
    assert list(Department.objects.filter(scope_q(dept_admin, Level.DEPARTMENT))) == [department]

    # no path from a department scope up to hospitals / health systems
    assert scope_q(dept_admin, Level.HOSPITAL) is None
    assert scope_q(hospital_admin, Level.HEALTH_SYSTEM) is None
    assert scope_q(None, Level.HOSPITAL) is None

    assert list(HealthSystem.objects.filter(scope_q(hs_admin, Level.HEALTH_SYSTEM))) == [department.health_system]
    assert list(Hospital.objects.filter(scope_q(hospital_admin, Level.HOSPITAL))) == [department.hospital]


def test_role_ranks_are_strictly_ordered():
    ranks = [ROLE_POLICIES[r].rank for r in UserRole.values]
    assert len(set(ranks)) == len(ranks)
    assert ROLE_POLICIES[UserRole.SUPER_ADMIN].rank == max(ranks)
