"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic

Domain errors propagate to fromofyou.exceptions, which maps them to HTTP
responses without exposing internal details.
"""

from datetime import date

from django.utils import timezone
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import ReadOnlyOrAdmin
from exhibitions.domain import CalendarMonth, DateSelection, FilterState
from exhibitions.domain.errors import InvalidFilterError
from exhibitions.handlers.serializers import (
    ExhibitionInputSerializer,
    ExhibitionSerializer,
    MonthViewSerializer,
)
from exhibitions.services.exhibition_service import ExhibitionService
from exhibitions.stores.cached_store import CachedExhibitionStore
from exhibitions.stores.django_store import DjangoExhibitionStore


def get_exhibition_service() -> ExhibitionService:
    return ExhibitionService(
        CachedExhibitionStore(DjangoExhibitionStore()), clock=timezone.localtime
    )


def _query_date(request: Request, name: str) -> date | None:
    value = request.query_params.get(name)
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise InvalidFilterError(name) from None


class ExhibitionListView(APIView):
    """Handler for GET/POST /api/exhibitions"""

    permission_classes = [ReadOnlyOrAdmin]

    def get(self, request: Request) -> Response:
        state = FilterState.from_query(
            search=request.query_params.get("search"),
            status=request.query_params.get("status"),
            selected_date=request.query_params.get("date"),
        )
        service = get_exhibition_service()
        now = service.now()
        exhibitions = service.list_exhibitions(state, now=now)
        serializer = ExhibitionSerializer(exhibitions, many=True, context={"now": now})
        return Response({"count": len(exhibitions), "results": serializer.data})

    def post(self, request: Request) -> Response:
        payload = ExhibitionInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        service = get_exhibition_service()
        exhibition = service.create_exhibition(payload.validated_data)
        serializer = ExhibitionSerializer(exhibition, context={"now": service.now()})
        return Response(serializer.data, status=status.HTTP_201_CREATED)


class ExhibitionDetailView(APIView):
    """Handler for GET/PATCH/DELETE /api/exhibitions/{exhibition_id}"""

    permission_classes = [ReadOnlyOrAdmin]

    def get(self, request: Request, exhibition_id: str) -> Response:
        service = get_exhibition_service()
        exhibition = service.get_exhibition(exhibition_id)
        return Response(ExhibitionSerializer(exhibition, context={"now": service.now()}).data)

    def patch(self, request: Request, exhibition_id: str) -> Response:
        payload = ExhibitionInputSerializer(data=request.data, partial=True)
        payload.is_valid(raise_exception=True)
        service = get_exhibition_service()
        exhibition = service.update_exhibition(exhibition_id, payload.validated_data)
        return Response(ExhibitionSerializer(exhibition, context={"now": service.now()}).data)

    def delete(self, request: Request, exhibition_id: str) -> Response:
        get_exhibition_service().delete_exhibition(exhibition_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ExhibitionCalendarView(APIView):
    """Handler for GET /api/exhibitions/calendar

    Query parameters:
        month: ``YYYY-MM`` to display; defaults to the current month.
        selected: the currently selected day, if any.
        select: a day the user clicked; toggles the selection.
    """

    def get(self, request: Request) -> Response:
        month_param = request.query_params.get("month")
        month = CalendarMonth.from_string(month_param) if month_param else None
        selection = DateSelection(_query_date(request, "selected"))
        service = get_exhibition_service()
        now = service.now()
        view = service.month_view(
            month=month, selection=selection, select=_query_date(request, "select"), now=now
        )
        return Response(MonthViewSerializer(view, context={"now": now}).data)


class ExhibitionSummaryView(APIView):
    """Handler for GET /api/exhibitions/summary"""

    def get(self, request: Request) -> Response:
        counts = get_exhibition_service().status_summary()
        data = {status_.value: count for status_, count in counts.items()}
        data["total"] = sum(counts.values())
        return Response(data)
