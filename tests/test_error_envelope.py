# tests/test_error_envelope.py
import uuid

import pytest
from rest_framework.test import APIClient

from staffing_core.conftest import client_for
from staffing_core.hierarchy.tests.factories import make_service

pytestmark = pytest.mark.django_db


def _error(res):
    body = res.json()
    assert set(body) == {"error"}
    assert set(body["error"]) == {"code", "message", "details", "request_id"}
    assert body["error"]["request_id"]
    return body["error"]


def test_401_on_anonymous_mutation(hospital):
    res = APIClient().post(f"/api/v1/hospitals/{hospital.id}/toggle-active/")

    assert res.status_code == 401
    assert _error(res)["code"] == "authentication_required"


def test_403_out_of_scope(dept_admin, other_department):
    res = client_for(dept_admin).delete(f"/api/v1/departments/{other_department.id}/")

    assert res.status_code == 403
    assert _error(res)["code"] == "authorization_denied"


def test_404_unknown_entity(api_client):
    res = api_client.post(f"/api/v1/services/{uuid.uuid4()}/toggle-active/")

    assert res.status_code == 404
    assert _error(res)["code"] == "not_found"


def test_400_validation(api_client):
    res = api_client.post("/api/v1/health-systems/", {"name": "!!!"}, format="json")

    assert res.status_code == 400
    err = _error(res)
    assert err["code"] == "validation_error"
    assert "name" in err["details"]


def test_409_dependency_conflict(api_client, department):
    make_service(department, "Cardiac ICU", "CICU")

    res = api_client.delete(f"/api/v1/departments/{department.id}/")

    assert res.status_code == 409
    err = _error(res)
    assert err["code"] == "conflict"
    assert err["message"] == "Cannot delete: dependent records exist."
    assert err["details"] == {"blockers": [{"type": "services", "count": 1}]}
