"""Venues ("places") and the categories they are filed under."""

import uuid

from django.conf import settings
from django.db import models

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
LINK_KEYS = ("naver_map", "kakao_map", "google_map", "website", "blog", "instagram", "youtube")


def default_operating_hours() -> dict:
    return {
        day: {"open": "10:00", "close": "18:00", "closed": day == "sunday"} for day in WEEKDAYS
    }


def default_links() -> dict:
    return {key: "" for key in LINK_KEYS}


class PlaceCategory(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    slug = models.CharField(max_length=120, unique=True)
    description = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "place categories"

    def __str__(self) -> str:
        return self.name


class Place(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    category = models.ForeignKey(PlaceCategory, on_delete=models.PROTECT, related_name="places")
    description = models.TextField(blank=True, null=True)
    phone = models.CharField(max_length=50, blank=True, null=True)
    operating_hours = models.JSONField(default=default_operating_hours)
    thumbnail_image = models.URLField(max_length=500, blank=True, null=True)
    additional_images = models.JSONField(default=list, blank=True)
    address = models.CharField(max_length=255)
    address_detail = models.CharField(max_length=255, blank=True, null=True)
    jibun_address = models.CharField(max_length=255, blank=True, null=True)
    latitude = models.FloatField(blank=True, null=True)
    longitude = models.FloatField(blank=True, null=True)
    links = models.JSONField(default=default_links, blank=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        blank=True,
        null=True,
        related_name="places",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.name

    @property
    def coordinates(self) -> dict | None:
        if self.latitude is None or self.longitude is None:
            return None
        return {"lat": self.latitude, "lng": self.longitude}
