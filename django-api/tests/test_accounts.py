"""Tests for profiles, roles and the administrator dashboard.

Run with: pytest tests/test_accounts.py -v
"""

import uuid
from datetime import timedelta

import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.test import APIClient

from accounts.models import Profile, Role


@pytest.mark.django_db
class TestProfile:
    def test_created_with_user(self, user_factory):
        user = user_factory("viewer")
        profile = Profile.objects.get(user=user)
        assert profile.role == Role.USER
        assert profile.is_active

    def test_shown_name_falls_back_to_email(self, user_factory):
        profile = user_factory("viewer").profile
        assert profile.shown_name == "viewer"
        profile.name = "Kim Minji"
        assert profile.shown_name == "Kim Minji"
        profile.display_name = "minji"
        assert profile.shown_name == "minji"

    def test_completeness(self, user_factory):
        profile = user_factory("viewer").profile
        assert profile.completeness == 0
        profile.name = "Kim Minji"
        profile.bio = "Likes ceramics"
        assert profile.completeness == 40

    def test_editor_flags(self, user_factory):
        assert user_factory("ed", role=Role.EDITOR).profile.is_editor
        admin = user_factory("boss", role=Role.ADMIN).profile
        assert admin.is_editor and admin.is_admin


@pytest.mark.django_db
class TestMyProfile:
    """Tests for /api/me"""

    def test_requires_login(self, api_client: APIClient):
        assert api_client.get("/api/me").status_code == 403

    def test_get_and_update(self, member_api_client: APIClient):
        body = member_api_client.get("/api/me").json()
        assert body["email"] == "member@example.com"
        assert body["role"] == "user"

        response = member_api_client.patch(
            "/api/me", {"display_name": "  Minji ", "bio": ""}
        )
        assert response.status_code == 200
        assert response.json()["shown_name"] == "Minji"
        assert response.json()["bio"] is None

    def test_user_without_profile_row_gets_one(self, user_factory):
        user = user_factory("imported")
        Profile.objects.filter(user=user).delete()
        client = APIClient()
        client.force_authenticate(user=get_user_model().objects.get(pk=user.pk))

        response = client.get("/api/me")

        assert response.status_code == 200
        assert response.json()["role"] == "user"
        assert Profile.objects.filter(user=user).count() == 1
        patched = client.patch("/api/me", {"name": "Lee"})
        assert patched.json()["name"] == "Lee"

    def test_role_is_not_self_editable(self, member_api_client: APIClient):
        member_api_client.patch("/api/me", {"role": "admin"})
        assert member_api_client.get("/api/me").json()["role"] == "user"


@pytest.mark.django_db
class TestUserManagement:
    """Tests for /api/admin/users"""

    def test_member_is_forbidden(self, member_api_client: APIClient):
        assert member_api_client.get("/api/admin/users").status_code == 403

    def test_list_with_counts_and_filters(self, admin_api_client: APIClient, user_factory):
        user_factory("ed", role=Role.EDITOR)
        user_factory("viewer")

        body = admin_api_client.get("/api/admin/users").json()
        assert body["counts"] == {"user": 1, "editor": 1, "admin": 1}
        assert len(body["results"]) == 3

        editors = admin_api_client.get("/api/admin/users", {"role": "editor"}).json()
        assert [p["email"] for p in editors["results"]] == ["ed@example.com"]
        found = admin_api_client.get("/api/admin/users", {"search": "VIEWER@"}).json()
        assert [p["email"] for p in found["results"]] == ["viewer@example.com"]

    def test_unknown_role_filter(self, admin_api_client: APIClient):
        response = admin_api_client.get("/api/admin/users", {"role": "owner"})
        assert response.status_code == 400

    def test_change_role(self, admin_api_client: APIClient, user_factory):
        profile = user_factory("viewer").profile
        response = admin_api_client.patch(f"/api/admin/users/{profile.id}", {"role": "editor"})

        assert response.status_code == 200
        profile.refresh_from_db()
        assert profile.role == Role.EDITOR

    def test_change_role_of_missing_profile(self, admin_api_client: APIClient):
        response = admin_api_client.patch(f"/api/admin/users/{uuid.uuid4()}", {"role": "editor"})
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "PROFILE_NOT_FOUND"


@pytest.mark.django_db
class TestAdminStats:
    def test_totals(self, admin_api_client: APIClient, exhibition_row):
        today = timezone.localdate()
        exhibition_row(today, today + timedelta(days=5))
        exhibition_row(today - timedelta(days=9), today - timedelta(days=2))

        body = admin_api_client.get("/api/admin/stats").json()

        assert body["total_users"] == 1
        assert body["total_exhibitions"] == 2
        assert body["exhibitions_by_status"] == {"upcoming": 0, "ongoing": 1, "ended": 1}
        assert body["total_places"] == 0

    def test_requires_admin(self, editor_api_client: APIClient):
        assert editor_api_client.get("/api/admin/stats").status_code == 403
