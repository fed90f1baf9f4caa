"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Self
from uuid import UUID

from exhibitions.domain.errors import MalformedDateError


@dataclass(frozen=True)
class ExhibitionId:
    """Unique identifier for an Exhibition."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


def parse_calendar_date(value: object, record_id: str) -> date:
    """Return the calendar date held in ``value``.

    Accepts ``date``/``datetime`` objects and ISO 8601 strings. A timestamp
    string keeps only its date part.

    Raises:
        MalformedDateError: If the value is missing or cannot be parsed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise MalformedDateError(record_id, value)
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise MalformedDateError(record_id, value) from None


def parse_timestamp(value: object, record_id: str) -> datetime:
    """Return ``value`` as a datetime, parsing ISO 8601 strings."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            pass
    raise MalformedDateError(record_id, value)
