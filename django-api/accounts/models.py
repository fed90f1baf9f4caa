"""User profiles. The role column gates every administrative endpoint."""

import uuid

from django.conf import settings
from django.db import models


class Role(models.TextChoices):
    USER = "user", "User"
    EDITOR = "editor", "Editor"
    ADMIN = "admin", "Admin"


# Fields counted towards profile completeness.
COMPLETENESS_FIELDS = ("name", "display_name", "bio", "location", "avatar_url")


class Profile(models.Model):
    """Persistence model for user profiles, one per Django user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="profile"
    )
    role = models.CharField(max_length=10, choices=Role.choices, default=Role.USER)
    name = models.CharField(max_length=100, blank=True, null=True)
    display_name = models.CharField(max_length=100, blank=True, null=True)
    bio = models.TextField(blank=True, null=True)
    avatar_url = models.URLField(max_length=500, blank=True, null=True)
    website_url = models.URLField(max_length=500, blank=True, null=True)
    location = models.CharField(max_length=100, blank=True, null=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.shown_name} ({self.role})"

    @property
    def email(self) -> str:
        return self.user.email

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_editor(self) -> bool:
        return self.role in (Role.EDITOR, Role.ADMIN)

    @property
    def shown_name(self) -> str:
        if self.display_name:
            return self.display_name
        if self.name:
            return self.name
        if self.user.email:
            return self.user.email.split("@")[0]
        return "user"

    @property
    def completeness(self) -> int:
        """Percentage of completed profile fields, 0 to 100."""
        filled = sum(
            1 for field in COMPLETENESS_FIELDS if (getattr(self, field) or "").strip()
        )
        return round(filled / len(COMPLETENESS_FIELDS) * 100)
