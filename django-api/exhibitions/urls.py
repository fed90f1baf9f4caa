from django.urls import path

from exhibitions.handlers import (
    ExhibitionCalendarView,
    ExhibitionDetailView,
    ExhibitionListView,
    ExhibitionSummaryView,
)

urlpatterns = [
    path("exhibitions", ExhibitionListView.as_view(), name="exhibition-list"),
    path("exhibitions/calendar", ExhibitionCalendarView.as_view(), name="exhibition-calendar"),
    path("exhibitions/summary", ExhibitionSummaryView.as_view(), name="exhibition-summary"),
    path(
        "exhibitions/<str:exhibition_id>",
        ExhibitionDetailView.as_view(),
        name="exhibition-detail",
    ),
]
