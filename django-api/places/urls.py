from django.urls import path

from places.views import PlaceCategoryListView, PlaceDetailView, PlaceListView

urlpatterns = [
    path("place-categories", PlaceCategoryListView.as_view(), name="place-category-list"),
    path("places", PlaceListView.as_view(), name="place-list"),
    path("places/<str:place_id>", PlaceDetailView.as_view(), name="place-detail"),
]
