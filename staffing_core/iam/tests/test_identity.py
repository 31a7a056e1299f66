# staffing_core/iam/tests/test_identity.py
import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from staffing_core.common.api.exceptions import AuthenticationRequired
from staffing_core.conftest import client_for
from staffing_core.iam.identity import require_actor, resolve_user

pytestmark = pytest.mark.django_db


def test_resolve_user_by_external_subject(hs_admin):
    assert resolve_user("sub-hs-admin") == hs_admin


def test_unknown_or_empty_subject_resolves_to_none(hs_admin):
    assert resolve_user("sub-nobody") is None
    assert resolve_user("") is None
    assert resolve_user(None) is None


def test_inactive_user_resolves_to_none(hs_admin):
    hs_admin.is_active = False
    hs_admin.save()

    assert resolve_user("sub-hs-admin") is None


def test_require_actor_rejects_missing_identity():
    with pytest.raises(AuthenticationRequired):
        require_actor(None)


def test_me_anonymous_is_not_an_error():
    res = APIClient().get("/api/v1/me/")

    assert res.status_code == 200
    assert res.data["authenticated"] is False
    assert res.data["user"] is None
    assert res.data["writable_levels"] == []


def test_me_with_bearer_token(hospital_admin):
    token = AccessToken()
    token["sub"] = hospital_admin.external_id

    c = APIClient()
    c.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    res = c.get("/api/v1/me/")

    assert res.status_code == 200
    assert res.data["authenticated"] is True
    assert res.data["user"]["id"] == str(hospital_admin.id)
    assert res.data["user"]["role"] == "hospital_admin"
    assert res.data["writable_levels"] == ["department", "service"]


def test_me_with_cookie_token(dept_admin):
    token = AccessToken()
    token["sub"] = dept_admin.external_id

    c = APIClient()
    c.cookies["sc_access"] = str(token)
    res = c.get("/api/v1/me/")

    assert res.data["authenticated"] is True
    assert res.data["user"]["external_id"] == "sub-dept-admin"


def test_me_for_subject_without_admin_user(db):
    token = AccessToken()
    token["sub"] = "sub-stranger"

    c = APIClient()
    c.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    res = c.get("/api/v1/me/")

    assert res.status_code == 200
    assert res.data["authenticated"] is False


def test_invalid_bearer_token_is_rejected(db):
    c = APIClient()
    c.credentials(HTTP_AUTHORIZATION="Bearer not-a-token")
    res = c.get("/api/v1/me/")

    assert res.status_code == 401


def test_deactivated_admin_cannot_mutate(hs_admin, hospital):
    hs_admin.is_active = False
    hs_admin.save()

    res = client_for(hs_admin).post(f"/api/v1/hospitals/{hospital.id}/toggle-active/")

    assert res.status_code == 401
    hospital.refresh_from_db()
    assert hospital.is_active is True
