"""Place service - venue and category rules.

Required fields and category lookup are checked here rather than in the
serializers, so every write path reports errors with the same field map.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from django.db.models import Q, QuerySet

from fromofyou.errors import ValidationFailedError
from places.errors import InvalidPlaceIdError, PlaceNotFoundError
from places.models import LINK_KEYS, WEEKDAYS, Place, PlaceCategory

logger = logging.getLogger(__name__)

_SLUG_INVALID = re.compile(r"[^a-z0-9가-힣]")
_SLUG_REPEAT = re.compile(r"_+")


def category_slug(name: str) -> str:
    """Lowercase ``name`` and replace anything but ASCII letters, digits and
    Hangul syllables with single underscores."""
    slug = _SLUG_INVALID.sub("_", name.lower())
    return _SLUG_REPEAT.sub("_", slug).strip("_")


def _time_to_minutes(hhmm: str) -> int:
    """
    Convert 'HH:MM' to minutes since midnight.
    Raises ValueError for invalid formats.
    """
    parts = str(hhmm).strip().split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid time format: {hhmm!r}")
    h = int(parts[0])
    m = int(parts[1])
    if not (0 <= h <= 23 and 0 <= m <= 59):
        raise ValueError(f"Invalid time value: {hhmm!r}")
    return h * 60 + m


def operating_hours_errors(hours: Mapping[str, Any]) -> list[str]:
    """Return a message per broken weekday entry; empty when valid."""
    errors = []
    for day in WEEKDAYS:
        entry = hours.get(day)
        if not isinstance(entry, Mapping):
            errors.append(f"{day}: missing schedule")
            continue
        if entry.get("closed"):
            continue
        try:
            opens = _time_to_minutes(entry.get("open", ""))
            closes = _time_to_minutes(entry.get("close", ""))
        except ValueError:
            errors.append(f"{day}: times must be HH:MM")
            continue
        if closes <= opens:
            errors.append(f"{day}: closing time must be after opening time")
    unknown = sorted(set(hours) - set(WEEKDAYS))
    if unknown:
        errors.append(f"unknown days: {', '.join(unknown)}")
    return errors


class PlaceService:
    """Service for venue catalog operations."""

    def list_places(self, search: str = "", category_id: str | None = None) -> QuerySet[Place]:
        places = Place.objects.select_related("category")
        if category_id and category_id != "all":
            places = places.filter(category_id=self._parse_category_id(category_id))
        search = search.strip()
        if search:
            places = places.filter(
                Q(name__icontains=search)
                | Q(address__icontains=search)
                | Q(description__icontains=search)
            )
        return places

    def get_place(self, place_id: str) -> Place:
        """Return a place by ID.

        Raises:
            InvalidPlaceIdError: If the place_id is not a valid UUID.
            PlaceNotFoundError: If the place does not exist.
        """
        try:
            pk = UUID(place_id)
        except ValueError:
            raise InvalidPlaceIdError() from None
        try:
            return Place.objects.select_related("category").get(pk=pk)
        except Place.DoesNotExist:
            raise PlaceNotFoundError(place_id) from None

    def create_place(self, fields: Mapping[str, Any], created_by=None) -> Place:
        place = Place(created_by=created_by)
        self._apply(place, fields)
        self._validate(place)
        place.save()
        logger.info("Created place %s (%s)", place.id, place.name)
        return place

    def update_place(self, place_id: str, changes: Mapping[str, Any]) -> Place:
        place = self.get_place(place_id)
        self._apply(place, changes)
        self._validate(place)
        place.save()
        logger.info("Updated place %s", place.id)
        return place

    def delete_place(self, place_id: str) -> None:
        place = self.get_place(place_id)
        place.delete()
        logger.info("Deleted place %s", place_id)

    def list_categories(self) -> QuerySet[PlaceCategory]:
        return PlaceCategory.objects.order_by("name")

    def create_category(self, name: str, description: str | None = None) -> PlaceCategory:
        name = (name or "").strip()
        if not name:
            raise ValidationFailedError({"name": "Category name is required."})
        slug = category_slug(name)
        if not slug:
            raise ValidationFailedError({"name": "Category name must contain letters or digits."})
        if PlaceCategory.objects.filter(slug=slug).exists():
            raise ValidationFailedError({"name": "A category with this name already exists."})
        category = PlaceCategory.objects.create(
            name=name, slug=slug, description=(description or "").strip() or None
        )
        logger.info("Created place category %s", slug)
        return category

    def _apply(self, place: Place, fields: Mapping[str, Any]) -> None:
        for field, value in fields.items():
            if field == "category":
                category = self._resolve_category(value)
                if category is None:
                    place.category_id = None
                else:
                    place.category = category
            elif field == "coordinates":
                place.latitude = value["lat"] if value else None
                place.longitude = value["lng"] if value else None
            elif field == "links":
                place.links = {**dict.fromkeys(LINK_KEYS, ""), **value}
            elif isinstance(value, str):
                value = value.strip()
                if field not in ("name", "address"):
                    value = value or None
                setattr(place, field, value)
            else:
                setattr(place, field, value)

    def _resolve_category(self, category_id) -> PlaceCategory | None:
        if category_id is None:
            return None
        try:
            return PlaceCategory.objects.get(pk=category_id)
        except PlaceCategory.DoesNotExist:
            raise ValidationFailedError({"category": "Unknown category."}) from None

    def _validate(self, place: Place) -> None:
        errors: dict[str, str] = {}
        if not (place.name or "").strip():
            errors["name"] = "Place name is required."
        if place.category_id is None:
            errors["category"] = "Category is required."
        if not (place.address or "").strip():
            errors["address"] = "Address is required."
        hours_errors = operating_hours_errors(place.operating_hours or {})
        if hours_errors:
            errors["operating_hours"] = "; ".join(hours_errors)
        unknown_links = sorted(set(place.links or {}) - set(LINK_KEYS))
        if unknown_links:
            errors["links"] = f"Unknown link types: {', '.join(unknown_links)}"
        if errors:
            raise ValidationFailedError(errors)

    @staticmethod
    def _parse_category_id(category_id: str) -> UUID:
        try:
            return UUID(category_id)
        except ValueError:
            raise ValidationFailedError({"category": "Invalid category ID."}) from None
