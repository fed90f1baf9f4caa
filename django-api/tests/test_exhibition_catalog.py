"""Integration tests for the exhibitions API.

Run with: pytest tests/test_exhibition_catalog.py -v
"""

import uuid
from datetime import date, timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient


@pytest.fixture
def today():
    return timezone.localdate()


@pytest.fixture
def catalog(exhibition_row, today):
    return {
        "ongoing": exhibition_row(
            today - timedelta(days=3), today + timedelta(days=3), title="Light and Shadow",
            description="Photography from the 1970s",
        ),
        "upcoming": exhibition_row(
            today + timedelta(days=10), today + timedelta(days=20), title="Water Lilies",
            location="Hangaram Art Museum",
        ),
        "ended": exhibition_row(
            today - timedelta(days=30), today - timedelta(days=20), title="Ceramics Now"
        ),
    }


@pytest.mark.django_db
class TestExhibitionList:
    """Tests for GET /api/exhibitions"""

    def test_list_sorted_by_status(self, api_client: APIClient, catalog):
        """Ongoing first, then upcoming, then ended, each with derived status."""
        response = api_client.get("/api/exhibitions")

        assert response.status_code == 200
        results = response.json()["results"]
        assert [r["title"] for r in results] == ["Light and Shadow", "Water Lilies", "Ceramics Now"]
        assert [r["status"] for r in results] == ["ongoing", "upcoming", "ended"]
        assert response.json()["count"] == 3

    def test_list_empty_catalog(self, api_client: APIClient):
        """Given no exhibitions, returns empty list."""
        response = api_client.get("/api/exhibitions")
        assert response.status_code == 200
        assert response.json() == {"count": 0, "results": []}

    def test_status_filter(self, api_client: APIClient, catalog):
        response = api_client.get("/api/exhibitions", {"status": "upcoming"})
        assert [r["title"] for r in response.json()["results"]] == ["Water Lilies"]

    def test_search_matches_location_and_description(self, api_client: APIClient, catalog):
        by_location = api_client.get("/api/exhibitions", {"search": "hangaram"})
        by_description = api_client.get("/api/exhibitions", {"search": "PHOTOGRAPHY"})
        assert [r["title"] for r in by_location.json()["results"]] == ["Water Lilies"]
        assert [r["title"] for r in by_description.json()["results"]] == ["Light and Shadow"]

    def test_date_filter(self, api_client: APIClient, catalog, today):
        response = api_client.get(
            "/api/exhibitions", {"date": (today + timedelta(days=10)).isoformat()}
        )
        assert [r["title"] for r in response.json()["results"]] == ["Water Lilies"]

    def test_invalid_status_returns_400(self, api_client: APIClient):
        response = api_client.get("/api/exhibitions", {"status": "archived"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_FILTER"


@pytest.mark.django_db
class TestExhibitionDetail:
    """Tests for GET /api/exhibitions/{id}"""

    def test_get_exhibition_returns_details(self, api_client: APIClient, catalog):
        """Given exhibition exists, returns exhibition details."""
        row = catalog["upcoming"]
        response = api_client.get(f"/api/exhibitions/{row.id}")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == str(row.id)
        assert body["location"] == "Hangaram Art Museum"
        assert body["status"] == "upcoming"

    def test_get_exhibition_not_found(self, api_client: APIClient):
        """Given exhibition does not exist, returns 404."""
        response = api_client.get(f"/api/exhibitions/{uuid.uuid4()}")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "EXHIBITION_NOT_FOUND"

    def test_get_exhibition_invalid_id_format(self, api_client: APIClient):
        """Given invalid UUID, returns 400."""
        response = api_client.get("/api/exhibitions/not-a-uuid")
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_EXHIBITION_ID"


@pytest.mark.django_db
class TestExhibitionWrites:
    """Tests for POST/PATCH/DELETE on exhibitions"""

    payload = {
        "title": "New Media",
        "location": "Seoul",
        "start_date": "2030-05-01",
        "end_date": "2030-05-31",
    }

    def test_anonymous_cannot_create(self, api_client: APIClient):
        response = api_client.post("/api/exhibitions", self.payload)
        assert response.status_code == 403

    def test_member_cannot_create(self, member_api_client: APIClient):
        response = member_api_client.post("/api/exhibitions", self.payload)
        assert response.status_code == 403

    def test_admin_creates_exhibition(self, admin_api_client: APIClient):
        response = admin_api_client.post("/api/exhibitions", self.payload)

        assert response.status_code == 201
        assert response.json()["status"] == "upcoming"
        listed = admin_api_client.get("/api/exhibitions").json()
        assert [r["title"] for r in listed["results"]] == ["New Media"]

    def test_create_rejects_end_before_start(self, admin_api_client: APIClient):
        response = admin_api_client.post(
            "/api/exhibitions", {**self.payload, "end_date": "2030-05-01"}
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_FAILED"
        assert "end_date" in response.json()["error"]["fields"]

    def test_create_rejects_missing_fields(self, admin_api_client: APIClient):
        response = admin_api_client.post("/api/exhibitions", {"title": "Only a title"})
        assert response.status_code == 400
        assert set(response.json()["error"]["fields"]) == {"location", "start_date", "end_date"}

    def test_create_rejects_bad_date_format(self, admin_api_client: APIClient):
        response = admin_api_client.post(
            "/api/exhibitions", {**self.payload, "start_date": "05/01/2030"}
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_FAILED"

    def test_patch_updates_fields(self, admin_api_client: APIClient, catalog):
        row = catalog["ended"]
        response = admin_api_client.patch(
            f"/api/exhibitions/{row.id}", {"title": "Ceramics, Revisited"}
        )
        assert response.status_code == 200
        assert response.json()["title"] == "Ceramics, Revisited"

    def test_delete_then_not_found(self, admin_api_client: APIClient, catalog):
        row = catalog["ended"]
        assert admin_api_client.delete(f"/api/exhibitions/{row.id}").status_code == 204
        assert admin_api_client.get(f"/api/exhibitions/{row.id}").status_code == 404


@pytest.mark.django_db
class TestExhibitionCalendar:
    """Tests for GET /api/exhibitions/calendar"""

    def test_month_grid(self, api_client: APIClient, exhibition_row):
        exhibition_row(date(2024, 1, 1), date(2024, 1, 10), title="A")
        exhibition_row(date(2024, 1, 8), date(2024, 1, 15), title="B")

        response = api_client.get("/api/exhibitions/calendar", {"month": "2024-01"})

        body = response.json()
        assert response.status_code == 200
        assert body["month"] == "2024-01"
        assert body["previous_month"] == "2023-12"
        assert body["next_month"] == "2024-02"
        assert body["leading_blanks"] == 1
        assert body["selected_date"] is None
        counts = {d["date"]: d["count"] for d in body["days"]}
        assert counts["2024-01-09"] == 2
        assert counts["2024-01-20"] == 0

    def test_select_toggles(self, api_client: APIClient, exhibition_row):
        exhibition_row(date(2024, 1, 1), date(2024, 1, 10), title="A")

        selected = api_client.get(
            "/api/exhibitions/calendar", {"month": "2024-01", "select": "2024-01-05"}
        ).json()
        assert selected["selected_date"] == "2024-01-05"
        assert [e["title"] for e in selected["exhibitions"]] == ["A"]

        cleared = api_client.get(
            "/api/exhibitions/calendar",
            {"month": "2024-01", "selected": "2024-01-05", "select": "2024-01-05"},
        ).json()
        assert cleared["selected_date"] is None
        assert cleared["exhibitions"] == []

    def test_select_empty_day_is_ignored(self, api_client: APIClient, exhibition_row):
        exhibition_row(date(2024, 1, 1), date(2024, 1, 10), title="A")
        body = api_client.get(
            "/api/exhibitions/calendar",
            {"month": "2024-01", "selected": "2024-01-05", "select": "2024-01-25"},
        ).json()
        assert body["selected_date"] == "2024-01-05"

    @pytest.mark.parametrize("month", ["2024-13", "0000-01", "10000-01"])
    def test_invalid_month_returns_400(self, api_client: APIClient, month):
        response = api_client.get("/api/exhibitions/calendar", {"month": month})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_FILTER"

    def test_first_and_last_months_have_no_neighbour(self, api_client: APIClient):
        first = api_client.get("/api/exhibitions/calendar", {"month": "0001-01"}).json()
        last = api_client.get("/api/exhibitions/calendar", {"month": "9999-12"}).json()
        assert first["previous_month"] is None
        assert first["next_month"] == "0001-02"
        assert last["next_month"] is None
        assert last["previous_month"] == "9999-11"


@pytest.mark.django_db
class TestExhibitionSummary:
    def test_counts_per_status(self, api_client: APIClient, catalog):
        response = api_client.get("/api/exhibitions/summary")
        assert response.json() == {"upcoming": 1, "ongoing": 1, "ended": 1, "total": 3}
