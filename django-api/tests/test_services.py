"""Unit tests for ExhibitionService.

These test error handling and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

import uuid
from dataclasses import asdict
from datetime import date, datetime

import pytest

from exhibitions.domain import (
    CalendarMonth,
    DateSelection,
    Exhibition,
    ExhibitionId,
    ExhibitionStatus,
    FilterState,
)
from exhibitions.domain.errors import ExhibitionNotFoundError, InvalidExhibitionIdError
from exhibitions.services.exhibition_service import ExhibitionService
from exhibitions.stores.interfaces import ExhibitionStore
from fromofyou.errors import ValidationFailedError


class InMemoryExhibitionStore(ExhibitionStore):
    def __init__(self, exhibitions=()):
        self.rows = {e.id: e for e in exhibitions}

    def list_exhibitions(self):
        return list(self.rows.values())

    def get_exhibition(self, exhibition_id):
        return self.rows.get(exhibition_id)

    def create_exhibition(self, draft):
        exhibition = Exhibition(
            id=ExhibitionId(uuid.uuid4()), created_at=datetime(2024, 1, 1), **asdict(draft)
        )
        self.rows[exhibition.id] = exhibition
        return exhibition

    def update_exhibition(self, exhibition_id, draft):
        current = self.rows.get(exhibition_id)
        if current is None:
            return None
        updated = Exhibition(id=current.id, created_at=current.created_at, **asdict(draft))
        self.rows[exhibition_id] = updated
        return updated

    def delete_exhibition(self, exhibition_id):
        return self.rows.pop(exhibition_id, None) is not None


FIXED_NOW = datetime(2024, 1, 5, 12, 0)


@pytest.fixture
def seeded(exhibition_factory):
    a = exhibition_factory(date(2024, 1, 1), date(2024, 1, 10), title="A")
    b = exhibition_factory(date(2024, 2, 1), date(2024, 2, 5), title="B")
    store = InMemoryExhibitionStore([b, a])
    return ExhibitionService(store, clock=lambda: FIXED_NOW), a, b


class TestExhibitionService:
    """Tests for ExhibitionService."""

    def test_get_exhibition_invalid_id_raises_error(self, seeded):
        """get_exhibition raises InvalidExhibitionIdError for malformed UUID."""
        service, _, _ = seeded
        with pytest.raises(InvalidExhibitionIdError):
            service.get_exhibition("not-a-uuid")

    def test_get_exhibition_not_found_raises_error(self, seeded):
        """get_exhibition raises ExhibitionNotFoundError when store returns None."""
        service, _, _ = seeded
        missing = str(uuid.uuid4())
        with pytest.raises(ExhibitionNotFoundError) as exc_info:
            service.get_exhibition(missing)
        assert exc_info.value.exhibition_id == missing

    def test_list_uses_injected_clock(self, seeded):
        service, a, b = seeded
        assert service.list_exhibitions() == [a, b]
        ongoing = service.list_exhibitions(FilterState(status_filter=ExhibitionStatus.ONGOING))
        assert ongoing == [a]

    def test_list_with_explicit_now(self, seeded):
        service, a, b = seeded
        assert service.list_exhibitions(now=datetime(2024, 3, 1)) == [b, a]

    def test_create_validates_date_order(self, seeded):
        service, _, _ = seeded
        with pytest.raises(ValidationFailedError) as exc_info:
            service.create_exhibition(
                {
                    "title": "Backwards",
                    "location": "Hall",
                    "start_date": date(2024, 5, 2),
                    "end_date": date(2024, 5, 1),
                }
            )
        assert "end_date" in exc_info.value.fields

    def test_create_normalizes_text(self, seeded):
        service, _, _ = seeded
        created = service.create_exhibition(
            {
                "title": "  Spring  ",
                "location": "Hall",
                "description": "",
                "start_date": date(2024, 5, 1),
                "end_date": date(2024, 5, 9),
            }
        )
        assert created.title == "Spring"
        assert created.description is None

    def test_update_merges_with_stored_values(self, seeded):
        """Changing only end_date is still checked against the stored start_date."""
        service, a, _ = seeded
        with pytest.raises(ValidationFailedError):
            service.update_exhibition(str(a.id), {"end_date": date(2023, 12, 1)})

        updated = service.update_exhibition(str(a.id), {"title": "A, extended"})
        assert updated.title == "A, extended"
        assert updated.start_date == a.start_date

    def test_delete_missing_raises_error(self, seeded):
        service, a, _ = seeded
        service.delete_exhibition(str(a.id))
        with pytest.raises(ExhibitionNotFoundError):
            service.delete_exhibition(str(a.id))

    def test_status_summary(self, seeded):
        service, _, _ = seeded
        assert service.status_summary() == {
            ExhibitionStatus.UPCOMING: 1,
            ExhibitionStatus.ONGOING: 1,
            ExhibitionStatus.ENDED: 0,
        }

    def test_month_view_defaults_to_current_month_and_toggles(self, seeded):
        service, a, _ = seeded
        view = service.month_view(select=date(2024, 1, 4))
        assert view.month == CalendarMonth(2024, 1)
        assert view.selection == DateSelection(date(2024, 1, 4))
        assert list(view.exhibitions) == [a]

        cleared = service.month_view(
            selection=view.selection, select=date(2024, 1, 4)
        )
        assert not cleared.selection.is_set

    def test_month_navigation_keeps_selection(self, seeded):
        service, _, _ = seeded
        selection = DateSelection(date(2024, 1, 4))
        view = service.month_view(month=CalendarMonth(2024, 2), selection=selection)
        assert view.selection == selection
        assert view.month == CalendarMonth(2024, 2)
