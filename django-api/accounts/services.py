"""Profile lookups and edits used by the account and user-management views."""

import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from django.db.models import Count, Q, QuerySet

from accounts.errors import InvalidProfileIdError, ProfileNotFoundError
from accounts.models import Profile, Role
from fromofyou.errors import ValidationFailedError

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "display_name", "bio", "website_url", "location", "avatar_url")


def list_profiles(role: str | None = None, search: str = "") -> QuerySet[Profile]:
    """Profiles newest first, optionally narrowed by role and a search term.

    The search term matches email, name or display name, case-insensitively.
    """
    profiles = Profile.objects.select_related("user")
    if role and role != "all":
        if role not in Role.values:
            raise ValidationFailedError({"role": f"Unknown role '{role}'."})
        profiles = profiles.filter(role=role)
    search = search.strip()
    if search:
        profiles = profiles.filter(
            Q(user__email__icontains=search)
            | Q(name__icontains=search)
            | Q(display_name__icontains=search)
        )
    return profiles.order_by("-created_at")


def role_counts() -> dict[str, int]:
    counts = {role: 0 for role in Role.values}
    for row in Profile.objects.order_by().values("role").annotate(total=Count("id")):
        counts[row["role"]] = row["total"]
    return counts


def profile_for(user) -> Profile:
    """Return the user's profile, creating it for users saved without the signal."""
    profile, created = Profile.objects.get_or_create(user=user)
    if created:
        logger.info("Created missing profile for user %s", user.pk)
    return profile


def get_profile(profile_id: str) -> Profile:
    try:
        pk = UUID(profile_id)
    except ValueError:
        raise InvalidProfileIdError() from None
    try:
        return Profile.objects.select_related("user").get(pk=pk)
    except Profile.DoesNotExist:
        raise ProfileNotFoundError(profile_id) from None


def change_role(profile_id: str, role: str) -> Profile:
    if role not in Role.values:
        raise ValidationFailedError({"role": f"Unknown role '{role}'."})
    profile = get_profile(profile_id)
    previous = profile.role
    profile.role = role
    profile.save(update_fields=["role", "updated_at"])
    logger.info("Changed role of profile %s from %s to %s", profile.id, previous, role)
    return profile


def update_profile(profile: Profile, changes: Mapping[str, Any]) -> Profile:
    """Apply self-service edits. Blank values are stored as null."""
    unknown = set(changes) - set(EDITABLE_FIELDS)
    if unknown:
        raise ValidationFailedError({field: "This field cannot be edited." for field in unknown})
    for field, value in changes.items():
        if isinstance(value, str):
            value = value.strip() or None
        setattr(profile, field, value)
    profile.save()
    return profile
