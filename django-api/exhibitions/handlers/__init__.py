from exhibitions.handlers.views import (
    ExhibitionCalendarView,
    ExhibitionDetailView,
    ExhibitionListView,
    ExhibitionSummaryView,
)

__all__ = [
    "ExhibitionCalendarView",
    "ExhibitionDetailView",
    "ExhibitionListView",
    "ExhibitionSummaryView",
]
