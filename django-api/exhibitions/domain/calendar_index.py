"""Calendar membership index for the exhibitions month view.

Membership uses ``filters.covers_date``, the same inclusive rule as the
list's date filter, so a highlighted day always yields a non-empty list.
"""

import calendar
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime
from typing import Self

from exhibitions.domain.errors import InvalidFilterError
from exhibitions.domain.filters import covers_date, filter_and_sort
from exhibitions.domain.models import Exhibition, FilterState


def has_exhibition(day: date, exhibitions: Sequence[Exhibition]) -> bool:
    return any(covers_date(e, day) for e in exhibitions)


def count_exhibitions(day: date, exhibitions: Sequence[Exhibition]) -> int:
    return sum(1 for e in exhibitions if covers_date(e, day))


@dataclass(frozen=True)
class DateSelection:
    """The calendar's selected day: unset, or set to one date."""

    selected: date | None = None

    @property
    def is_set(self) -> bool:
        return self.selected is not None

    def select(self, day: date, exhibitions: Sequence[Exhibition]) -> "DateSelection":
        """Toggle ``day``.

        Re-selecting the current day clears the selection. Days without
        exhibitions leave the selection unchanged.
        """
        if not has_exhibition(day, exhibitions):
            return self
        if self.selected == day:
            return DateSelection()
        return DateSelection(day)


def select_date(
    selection: DateSelection, day: date, exhibitions: Sequence[Exhibition]
) -> DateSelection:
    return selection.select(day, exhibitions)


@dataclass(frozen=True)
class CalendarMonth:
    """A displayed month. Navigation never touches the date selection."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError("month must be between 1 and 12")
        if not date.min.year <= self.year <= date.max.year:
            raise ValueError(f"year must be between {date.min.year} and {date.max.year}")

    @classmethod
    def containing(cls, day: date) -> Self:
        return cls(year=day.year, month=day.month)

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse ``YYYY-MM``.

        Raises:
            InvalidFilterError: If the value is not a valid month.
        """
        try:
            year, month = value.strip().split("-")
            return cls(year=int(year), month=int(month))
        except ValueError:
            raise InvalidFilterError("month") from None

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    def previous(self) -> Self:
        if self.month == 1:
            return type(self)(year=self.year - 1, month=12)
        return type(self)(year=self.year, month=self.month - 1)

    def next(self) -> Self:
        if self.month == 12:
            return type(self)(year=self.year + 1, month=1)
        return type(self)(year=self.year, month=self.month + 1)

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def leading_blanks(self) -> int:
        """Empty cells before day 1 in a Sunday-first week grid."""
        return (date(self.year, self.month, 1).weekday() + 1) % 7

    def date_for(self, day_number: int) -> date:
        return date(self.year, self.month, day_number)

    def days(self) -> list[date]:
        return [self.date_for(n) for n in range(1, self.days_in_month + 1)]


@dataclass(frozen=True)
class CalendarDay:
    day: date
    count: int
    is_selected: bool
    is_today: bool

    @property
    def has_exhibitions(self) -> bool:
        return self.count > 0


@dataclass(frozen=True)
class MonthView:
    month: CalendarMonth
    selection: DateSelection
    days: tuple[CalendarDay, ...]
    exhibitions: tuple[Exhibition, ...]


def build_month_view(
    month: CalendarMonth,
    exhibitions: Sequence[Exhibition],
    selection: DateSelection,
    now: datetime | date,
) -> MonthView:
    """Summarize every day of ``month`` against the full exhibition list.

    ``exhibitions`` in the result holds the sorted matches for the selected
    day, or nothing while the selection is unset.
    """
    today = now.date() if isinstance(now, datetime) else now
    days = tuple(
        CalendarDay(
            day=day,
            count=count_exhibitions(day, exhibitions),
            is_selected=day == selection.selected,
            is_today=day == today,
        )
        for day in month.days()
    )
    matches: tuple[Exhibition, ...] = ()
    if selection.is_set:
        matches = tuple(
            filter_and_sort(exhibitions, FilterState(selected_date=selection.selected), now)
        )
    return MonthView(month=month, selection=selection, days=days, exhibitions=matches)
