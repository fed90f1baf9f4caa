"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in exhibitions/models.py (persistence layer).
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import date, datetime
from enum import Enum
from typing import Any, Self
from uuid import UUID

from exhibitions.domain.errors import InvalidFilterError, ValidationFailedError
from exhibitions.domain.value_objects import (
    ExhibitionId,
    parse_calendar_date,
    parse_timestamp,
)


class ExhibitionStatus(Enum):
    """Lifecycle status derived from an exhibition's dates. Never stored."""

    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    ENDED = "ended"


@dataclass(frozen=True)
class Exhibition:
    """Domain representation of an Exhibition."""

    id: ExhibitionId
    title: str
    location: str
    description: str | None
    start_date: date
    end_date: date
    thumbnail_url: str | None
    created_at: datetime
    detailed_content: str | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Self:
        """Build an Exhibition from a stored row.

        Raises:
            MalformedDateError: If a date column cannot be parsed.
        """
        raw_id = record["id"]
        exhibition_id = (
            ExhibitionId(raw_id) if isinstance(raw_id, UUID) else ExhibitionId.from_string(str(raw_id))
        )
        record_id = str(exhibition_id)
        updated_at = record.get("updated_at")
        return cls(
            id=exhibition_id,
            title=record["title"],
            location=record["location"],
            description=record.get("description"),
            start_date=parse_calendar_date(record.get("start_date"), record_id),
            end_date=parse_calendar_date(record.get("end_date"), record_id),
            thumbnail_url=record.get("thumbnail_url"),
            created_at=parse_timestamp(record.get("created_at"), record_id),
            detailed_content=record.get("detailed_content"),
            updated_at=parse_timestamp(updated_at, record_id) if updated_at is not None else None,
        )


@dataclass(frozen=True)
class ExhibitionDraft:
    """Field values for creating or editing an exhibition."""

    title: str = ""
    location: str = ""
    start_date: date | None = None
    end_date: date | None = None
    description: str | None = None
    detailed_content: str | None = None
    thumbnail_url: str | None = None

    @classmethod
    def from_exhibition(cls, exhibition: Exhibition) -> Self:
        return cls(
            title=exhibition.title,
            location=exhibition.location,
            start_date=exhibition.start_date,
            end_date=exhibition.end_date,
            description=exhibition.description,
            detailed_content=exhibition.detailed_content,
            thumbnail_url=exhibition.thumbnail_url,
        )

    def normalized(self) -> Self:
        """Trim text fields and turn blank optional text into None."""
        return replace(
            self,
            title=(self.title or "").strip(),
            location=(self.location or "").strip(),
            description=_blank_to_none(self.description),
            detailed_content=_blank_to_none(self.detailed_content),
            thumbnail_url=_blank_to_none(self.thumbnail_url),
        )

    def validate(self) -> None:
        """Check write-time rules.

        Raises:
            ValidationFailedError: With one message per offending field.
        """
        errors: dict[str, str] = {}
        if not (self.title or "").strip():
            errors["title"] = "Title is required."
        if not (self.location or "").strip():
            errors["location"] = "Location is required."
        if self.start_date is None:
            errors["start_date"] = "Start date is required."
        if self.end_date is None:
            errors["end_date"] = "End date is required."
        if self.start_date is not None and self.end_date is not None:
            if self.start_date >= self.end_date:
                errors["end_date"] = "End date must be after the start date."
        if errors:
            raise ValidationFailedError(errors)


@dataclass(frozen=True)
class FilterState:
    """Filters applied to the exhibition list. ``status_filter`` None means all."""

    search_term: str = ""
    status_filter: ExhibitionStatus | None = None
    selected_date: date | None = None

    @classmethod
    def from_query(
        cls,
        search: str | None = None,
        status: str | None = None,
        selected_date: str | None = None,
    ) -> Self:
        """Parse raw query-string values.

        Raises:
            InvalidFilterError: On an unknown status or an unparseable date.
        """
        status_filter = None
        status = (status or "").strip().lower()
        if status and status != "all":
            try:
                status_filter = ExhibitionStatus(status)
            except ValueError:
                raise InvalidFilterError("status") from None

        day = None
        if selected_date:
            try:
                day = date.fromisoformat(selected_date.strip())
            except ValueError:
                raise InvalidFilterError("date") from None

        return cls(
            search_term=search or "",
            status_filter=status_filter,
            selected_date=day,
        )


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None
