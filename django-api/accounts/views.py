from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts import services
from accounts.permissions import IsAdminRole
from accounts.serializers import (
    ProfileSerializer,
    ProfileUpdateSerializer,
    RoleChangeSerializer,
)


class MyProfileView(APIView):
    """Handler for GET/PATCH /api/me"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        return Response(ProfileSerializer(services.profile_for(request.user)).data)

    def patch(self, request: Request) -> Response:
        payload = ProfileUpdateSerializer(data=request.data, partial=True)
        payload.is_valid(raise_exception=True)
        profile = services.update_profile(
            services.profile_for(request.user), payload.validated_data
        )
        return Response(ProfileSerializer(profile).data)


class UserListView(APIView):
    """Handler for GET /api/admin/users"""

    permission_classes = [IsAdminRole]

    def get(self, request: Request) -> Response:
        profiles = services.list_profiles(
            role=request.query_params.get("role"),
            search=request.query_params.get("search", ""),
        )
        return Response(
            {
                "counts": services.role_counts(),
                "results": ProfileSerializer(profiles, many=True).data,
            }
        )


class UserRoleView(APIView):
    """Handler for PATCH /api/admin/users/{profile_id}"""

    permission_classes = [IsAdminRole]

    def patch(self, request: Request, profile_id: str) -> Response:
        payload = RoleChangeSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        profile = services.change_role(profile_id, payload.validated_data["role"])
        return Response(ProfileSerializer(profile).data)
