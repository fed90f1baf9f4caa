from django.urls import path

from accounts.views import MyProfileView, UserListView, UserRoleView

urlpatterns = [
    path("me", MyProfileView.as_view(), name="my-profile"),
    path("admin/users", UserListView.as_view(), name="user-list"),
    path("admin/users/<str:profile_id>", UserRoleView.as_view(), name="user-role"),
]
