"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
Lifecycle status is derived at read time and has no column.
"""

import uuid

from django.db import models


class Exhibition(models.Model):
    """Persistence model for exhibitions."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    location = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    detailed_content = models.TextField(blank=True, null=True)
    start_date = models.DateField()
    end_date = models.DateField()
    thumbnail_url = models.URLField(max_length=500, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-start_date"]
        indexes = [
            models.Index(fields=["start_date", "end_date"], name="exhibition_dates_idx"),
        ]

    def __str__(self) -> str:
        return self.title
