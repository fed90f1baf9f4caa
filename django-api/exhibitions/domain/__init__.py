from exhibitions.domain.calendar_index import (
    CalendarDay,
    CalendarMonth,
    DateSelection,
    MonthView,
    build_month_view,
    count_exhibitions,
    has_exhibition,
    select_date,
)
from exhibitions.domain.filters import covers_date, filter_and_sort, matches_search, sort_for_listing
from exhibitions.domain.lifecycle import STATUS_RANK, classify, count_by_status, status_of
from exhibitions.domain.models import Exhibition, ExhibitionDraft, ExhibitionStatus, FilterState
from exhibitions.domain.value_objects import ExhibitionId, parse_calendar_date

__all__ = [
    "Exhibition",
    "ExhibitionDraft",
    "ExhibitionStatus",
    "ExhibitionId",
    "FilterState",
    "CalendarDay",
    "CalendarMonth",
    "DateSelection",
    "MonthView",
    "STATUS_RANK",
    "build_month_view",
    "classify",
    "count_by_status",
    "count_exhibitions",
    "covers_date",
    "filter_and_sort",
    "has_exhibition",
    "matches_search",
    "parse_calendar_date",
    "select_date",
    "sort_for_listing",
    "status_of",
]
