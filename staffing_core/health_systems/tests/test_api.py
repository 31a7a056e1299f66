# staffing_core/health_systems/tests/test_api.py
import pytest
from rest_framework.test import APIClient

from staffing_core.conftest import client_for

pytestmark = pytest.mark.django_db


def test_create_health_system(api_client):
    res = api_client.post("/api/v1/health-systems/", {"name": "Lakeside Health"}, format="json")

    assert res.status_code == 201
    assert res.data["job_types_created"] == 6


def test_create_unauthenticated(db):
    res = APIClient().post("/api/v1/health-systems/", {"name": "Lakeside Health"}, format="json")

    assert res.status_code == 401
    assert res.json()["error"]["code"] == "authentication_required"


def test_list_is_scoped(hs_admin, health_system, other_health_system):
    res = client_for(hs_admin).get("/api/v1/health-systems/")

    assert res.status_code == 200
    assert res.data["count"] == 1
    assert res.data["results"][0]["slug"] == "metro-health"


def test_list_anonymous_is_empty(health_system):
    res = APIClient().get("/api/v1/health-systems/")

    assert res.status_code == 200
    assert res.data["count"] == 0


def test_list_filters(api_client, health_system, other_health_system):
    res = api_client.get("/api/v1/health-systems/", {"name": "valley"})

    assert [r["name"] for r in res.data["results"]] == ["Valley Care"]


def test_retrieve_out_of_scope_is_404(hs_admin, other_health_system):
    res = client_for(hs_admin).get(f"/api/v1/health-systems/{other_health_system.id}/")

    assert res.status_code == 404


def test_retrieve_bad_id_is_404(api_client):
    res = api_client.get("/api/v1/health-systems/not-a-uuid/")

    assert res.status_code == 404


def test_partial_update(api_client, health_system):
    res = api_client.patch(f"/api/v1/health-systems/{health_system.id}/", {"name": "Metro Care"}, format="json")

    assert res.status_code == 200
    assert res.data["slug"] == "metro-care"


def test_hs_admin_cannot_toggle_own_health_system(hs_admin, health_system):
    res = client_for(hs_admin).post(f"/api/v1/health-systems/{health_system.id}/toggle-active/")

    assert res.status_code == 403
    assert res.json()["error"]["code"] == "authorization_denied"
