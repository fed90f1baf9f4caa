"""Filter and sort pipeline for exhibition lists.

The pipeline never mutates or stores its input: every call derives a fresh
list from the canonical collection and the current FilterState.
"""

from collections.abc import Iterable
from datetime import date, datetime

from exhibitions.domain.lifecycle import STATUS_RANK, status_of
from exhibitions.domain.models import Exhibition, FilterState


def covers_date(exhibition: Exhibition, day: date) -> bool:
    """True if ``day`` falls within the exhibition's run, both ends inclusive."""
    return exhibition.start_date <= day <= exhibition.end_date


def matches_search(exhibition: Exhibition, term: str) -> bool:
    """Case-insensitive substring match on title, location or description."""
    needle = term.lower()
    if needle in exhibition.title.lower() or needle in exhibition.location.lower():
        return True
    return exhibition.description is not None and needle in exhibition.description.lower()


def sort_for_listing(
    exhibitions: Iterable[Exhibition], now: datetime | date
) -> list[Exhibition]:
    """Ongoing, then upcoming, then ended; latest start first within a status.

    ``sorted`` is stable, so equal start dates keep their input order.
    """
    return sorted(
        exhibitions,
        key=lambda e: (STATUS_RANK[status_of(e, now)], -e.start_date.toordinal()),
    )


def filter_and_sort(
    exhibitions: Iterable[Exhibition], state: FilterState, now: datetime | date
) -> list[Exhibition]:
    filtered = list(exhibitions)

    if state.selected_date is not None:
        filtered = [e for e in filtered if covers_date(e, state.selected_date)]

    if state.status_filter is not None:
        filtered = [e for e in filtered if status_of(e, now) == state.status_filter]

    if state.search_term:
        filtered = [e for e in filtered if matches_search(e, state.search_term)]

    return sort_for_listing(filtered, now)
