from django.contrib import admin
from django.urls import include, path

from fromofyou.dashboard import AdminStatsView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/admin/stats", AdminStatsView.as_view(), name="admin-stats"),
    path("api/", include("accounts.urls")),
    path("api/", include("exhibitions.urls")),
    path("api/", include("places.urls")),
]
