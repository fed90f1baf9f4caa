from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import ReadOnlyOrEditor
from places.serializers import (
    PlaceCategoryInputSerializer,
    PlaceCategorySerializer,
    PlaceInputSerializer,
    PlaceSerializer,
)
from places.services import PlaceService


class PlaceCategoryListView(APIView):
    """Handler for GET/POST /api/place-categories"""

    permission_classes = [ReadOnlyOrEditor]

    def get(self, request: Request) -> Response:
        categories = PlaceService().list_categories()
        return Response(PlaceCategorySerializer(categories, many=True).data)

    def post(self, request: Request) -> Response:
        payload = PlaceCategoryInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        category = PlaceService().create_category(**payload.validated_data)
        return Response(PlaceCategorySerializer(category).data, status=status.HTTP_201_CREATED)


class PlaceListView(APIView):
    """Handler for GET/POST /api/places"""

    permission_classes = [ReadOnlyOrEditor]

    def get(self, request: Request) -> Response:
        places = PlaceService().list_places(
            search=request.query_params.get("search", ""),
            category_id=request.query_params.get("category"),
        )
        return Response(PlaceSerializer(places, many=True).data)

    def post(self, request: Request) -> Response:
        payload = PlaceInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        place = PlaceService().create_place(payload.validated_data, created_by=request.user)
        return Response(PlaceSerializer(place).data, status=status.HTTP_201_CREATED)


class PlaceDetailView(APIView):
    """Handler for GET/PATCH/DELETE /api/places/{place_id}"""

    permission_classes = [ReadOnlyOrEditor]

    def get(self, request: Request, place_id: str) -> Response:
        return Response(PlaceSerializer(PlaceService().get_place(place_id)).data)

    def patch(self, request: Request, place_id: str) -> Response:
        payload = PlaceInputSerializer(data=request.data, partial=True)
        payload.is_valid(raise_exception=True)
        place = PlaceService().update_place(place_id, payload.validated_data)
        return Response(PlaceSerializer(place).data)

    def delete(self, request: Request, place_id: str) -> Response:
        PlaceService().delete_place(place_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
