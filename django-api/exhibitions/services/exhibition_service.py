"""Exhibition service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

``now`` is read from the injected clock once per call and passed down, so
one request never mixes two different moments.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import date, datetime
from typing import Any

from exhibitions.domain import (
    CalendarMonth,
    DateSelection,
    Exhibition,
    ExhibitionDraft,
    ExhibitionId,
    ExhibitionStatus,
    FilterState,
    MonthView,
    build_month_view,
    count_by_status,
    filter_and_sort,
)
from exhibitions.domain.errors import ExhibitionNotFoundError, InvalidExhibitionIdError
from exhibitions.stores.interfaces import ExhibitionStore

logger = logging.getLogger(__name__)


class ExhibitionService:
    """Service for exhibition catalog operations."""

    def __init__(
        self, store: ExhibitionStore, clock: Callable[[], datetime] = datetime.now
    ) -> None:
        self._store = store
        self._clock = clock

    def now(self) -> datetime:
        return self._clock()

    def list_exhibitions(
        self, state: FilterState | None = None, now: datetime | None = None
    ) -> list[Exhibition]:
        """Return exhibitions matching ``state``, in listing order."""
        now = now if now is not None else self.now()
        return filter_and_sort(self._store.list_exhibitions(), state or FilterState(), now)

    def get_exhibition(self, exhibition_id: str) -> Exhibition:
        """Return an exhibition by ID.

        Raises:
            InvalidExhibitionIdError: If the exhibition_id is not a valid UUID.
            ExhibitionNotFoundError: If the exhibition does not exist.
        """
        exhibition = self._store.get_exhibition(_parse_id(exhibition_id))
        if exhibition is None:
            raise ExhibitionNotFoundError(exhibition_id)
        return exhibition

    def create_exhibition(self, fields: Mapping[str, Any]) -> Exhibition:
        """Validate and store a new exhibition.

        Raises:
            ValidationFailedError: If a required field is missing or the
                start date is not before the end date.
        """
        draft = ExhibitionDraft(**fields).normalized()
        draft.validate()
        exhibition = self._store.create_exhibition(draft)
        logger.info("Created exhibition %s (%s)", exhibition.id, exhibition.title)
        return exhibition

    def update_exhibition(self, exhibition_id: str, changes: Mapping[str, Any]) -> Exhibition:
        """Apply ``changes`` on top of the stored exhibition.

        The merged record is validated as a whole, so changing only the end
        date is still checked against the stored start date.

        Raises:
            InvalidExhibitionIdError, ExhibitionNotFoundError,
            ValidationFailedError
        """
        current = self.get_exhibition(exhibition_id)
        draft = replace(ExhibitionDraft.from_exhibition(current), **changes).normalized()
        draft.validate()
        updated = self._store.update_exhibition(current.id, draft)
        if updated is None:
            raise ExhibitionNotFoundError(exhibition_id)
        logger.info("Updated exhibition %s", updated.id)
        return updated

    def delete_exhibition(self, exhibition_id: str) -> None:
        """Delete an exhibition.

        Raises:
            InvalidExhibitionIdError: If the exhibition_id is not a valid UUID.
            ExhibitionNotFoundError: If the exhibition does not exist.
        """
        if not self._store.delete_exhibition(_parse_id(exhibition_id)):
            raise ExhibitionNotFoundError(exhibition_id)
        logger.info("Deleted exhibition %s", exhibition_id)

    def status_summary(self, now: datetime | None = None) -> dict[ExhibitionStatus, int]:
        now = now if now is not None else self.now()
        return count_by_status(self._store.list_exhibitions(), now)

    def month_view(
        self,
        month: CalendarMonth | None = None,
        selection: DateSelection | None = None,
        select: date | None = None,
        now: datetime | None = None,
    ) -> MonthView:
        """Build the calendar for ``month``, toggling ``select`` first if given.

        Without a month, the month containing today is shown.
        """
        now = now if now is not None else self.now()
        exhibitions = self._store.list_exhibitions()
        selection = selection or DateSelection()
        if select is not None:
            selection = selection.select(select, exhibitions)
        month = month or CalendarMonth.containing(now.date())
        return build_month_view(month, exhibitions, selection, now)


def _parse_id(exhibition_id: str) -> ExhibitionId:
    try:
        return ExhibitionId.from_string(exhibition_id)
    except (ValueError, AttributeError, TypeError):
        raise InvalidExhibitionIdError() from None
