"""Role-based access checks driven by the role stored on the user's profile."""

from rest_framework.permissions import SAFE_METHODS, BasePermission


def _profile(user):
    if user is None or not user.is_authenticated:
        return None
    return getattr(user, "profile", None)


class IsAdminRole(BasePermission):
    message = "Administrator role required."

    def has_permission(self, request, view) -> bool:
        profile = _profile(request.user)
        return profile is not None and profile.is_active and profile.is_admin


class IsEditorRole(BasePermission):
    """Editors and administrators."""

    message = "Editor role required."

    def has_permission(self, request, view) -> bool:
        profile = _profile(request.user)
        return profile is not None and profile.is_active and profile.is_editor


class ReadOnlyOrAdmin(IsAdminRole):
    def has_permission(self, request, view) -> bool:
        if request.method in SAFE_METHODS:
            return True
        return super().has_permission(request, view)


class ReadOnlyOrEditor(IsEditorRole):
    def has_permission(self, request, view) -> bool:
        if request.method in SAFE_METHODS:
            return True
        return super().has_permission(request, view)
