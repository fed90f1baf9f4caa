"""Administrator dashboard totals across every app."""

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.models import Profile
from accounts.permissions import IsAdminRole
from exhibitions.handlers.views import get_exhibition_service
from places.models import Place, PlaceCategory


class AdminStatsView(APIView):
    """Handler for GET /api/admin/stats"""

    permission_classes = [IsAdminRole]

    def get(self, request: Request) -> Response:
        by_status = get_exhibition_service().status_summary()
        return Response(
            {
                "total_users": Profile.objects.count(),
                "total_exhibitions": sum(by_status.values()),
                "exhibitions_by_status": {status.value: count for status, count in by_status.items()},
                "total_places": Place.objects.count(),
                "total_place_categories": PlaceCategory.objects.count(),
            }
        )
