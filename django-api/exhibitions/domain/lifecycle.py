"""Exhibition lifecycle classification.

Status is a pure function of an exhibition's dates and the current moment.
``now`` is reduced to its calendar date, so an exhibition is ongoing for the
whole of its start day and the whole of its end day. This keeps the status
in agreement with calendar membership (see ``filters.covers_date``).
"""

from collections.abc import Iterable
from datetime import date, datetime

from exhibitions.domain.models import Exhibition, ExhibitionStatus

STATUS_RANK = {
    ExhibitionStatus.ONGOING: 0,
    ExhibitionStatus.UPCOMING: 1,
    ExhibitionStatus.ENDED: 2,
}


def classify(now: datetime | date, start: date, end: date) -> ExhibitionStatus:
    """Return the lifecycle status of a ``start``..``end`` run at ``now``.

    ``now`` should already be in local time; only its date is compared.
    """
    today = now.date() if isinstance(now, datetime) else now
    if today < start:
        return ExhibitionStatus.UPCOMING
    if today > end:
        return ExhibitionStatus.ENDED
    return ExhibitionStatus.ONGOING


def status_of(exhibition: Exhibition, now: datetime | date) -> ExhibitionStatus:
    return classify(now, exhibition.start_date, exhibition.end_date)


def count_by_status(
    exhibitions: Iterable[Exhibition], now: datetime | date
) -> dict[ExhibitionStatus, int]:
    """Count exhibitions per status. Every status is present in the result."""
    counts = {status: 0 for status in ExhibitionStatus}
    for exhibition in exhibitions:
        counts[status_of(exhibition, now)] += 1
    return counts
