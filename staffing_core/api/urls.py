# staffing_core/api/urls.py
from __future__ import annotations

from django.urls import path
from rest_framework.routers import DefaultRouter

from staffing_core.audit.api.views import AuditLogViewSet
from staffing_core.clinical_services.api.views import ServiceViewSet
from staffing_core.departments.api.views import DepartmentViewSet
from staffing_core.health_systems.api.views import HealthSystemViewSet
from staffing_core.hospitals.api.views import HospitalViewSet
from staffing_core.iam.api.me import MeView
from staffing_core.iam.api.views import AdminUserViewSet
from staffing_core.job_types.api.views import JobTypeViewSet

router = DefaultRouter()

# Hierarchy levels (toggle-active / deactivate / can-delete come from HierarchyNodeViewSet)
router.register(r"health-systems", HealthSystemViewSet, basename="health-systems")
router.register(r"hospitals", HospitalViewSet, basename="hospitals")
router.register(r"departments", DepartmentViewSet, basename="departments")
router.register(r"services", ServiceViewSet, basename="services")
router.register(r"job-types", JobTypeViewSet, basename="job-types")

router.register(r"users", AdminUserViewSet, basename="users")
router.register(r"audit/logs", AuditLogViewSet, basename="audit-logs")

urlpatterns = [
    path("me/", MeView.as_view(), name="me"),

    # Router URLs last (so explicit paths win if ever overlapping)
    *router.urls,
]
