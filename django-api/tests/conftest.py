"""Pytest configuration and shared fixtures."""

import uuid
from datetime import date, datetime

import pytest
from rest_framework.test import APIClient

from exhibitions.domain import Exhibition, ExhibitionId


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def exhibition_factory():
    """Build domain exhibitions without touching the database."""

    def make(
        start: date,
        end: date,
        title: str = "Untitled",
        location: str = "Seoul",
        description: str | None = None,
    ) -> Exhibition:
        return Exhibition(
            id=ExhibitionId(uuid.uuid4()),
            title=title,
            location=location,
            description=description,
            start_date=start,
            end_date=end,
            thumbnail_url=None,
            created_at=datetime(2024, 1, 1, 9, 0),
        )

    return make


@pytest.fixture
def user_factory(db):
    from django.contrib.auth import get_user_model

    def make(username: str = "member", role: str = "user", **extra):
        user = get_user_model().objects.create_user(
            username=username, email=f"{username}@example.com", password="pw-for-tests", **extra
        )
        if role != "user":
            user.profile.role = role
            user.profile.save()
        return user

    return make


@pytest.fixture
def admin_api_client(user_factory) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=user_factory("curator", role="admin"))
    return client


@pytest.fixture
def editor_api_client(user_factory) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=user_factory("editor", role="editor"))
    return client


@pytest.fixture
def member_api_client(user_factory) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=user_factory("member"))
    return client


@pytest.fixture
def exhibition_row(db):
    """Create persisted exhibitions."""
    from exhibitions.models import Exhibition as ExhibitionRow

    def make(start: date, end: date, title: str = "Untitled", **fields) -> ExhibitionRow:
        fields.setdefault("location", "Seoul")
        return ExhibitionRow.objects.create(title=title, start_date=start, end_date=end, **fields)

    return make
