from rest_framework import serializers

from places.models import Place, PlaceCategory


class PlaceCategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = PlaceCategory
        fields = ["id", "name", "slug", "description", "created_at", "updated_at"]
        read_only_fields = fields


class PlaceCategoryInputSerializer(serializers.Serializer):
    name = serializers.CharField(allow_blank=True, max_length=100)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class PlaceSerializer(serializers.ModelSerializer):
    category = PlaceCategorySerializer(read_only=True)
    coordinates = serializers.JSONField(read_only=True)

    class Meta:
        model = Place
        fields = [
            "id",
            "name",
            "category",
            "description",
            "phone",
            "operating_hours",
            "thumbnail_image",
            "additional_images",
            "address",
            "address_detail",
            "jibun_address",
            "coordinates",
            "links",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class CoordinatesSerializer(serializers.Serializer):
    lat = serializers.FloatField(min_value=-90, max_value=90)
    lng = serializers.FloatField(min_value=-180, max_value=180)


class PlaceInputSerializer(serializers.Serializer):
    """Shape checks only. Required fields are enforced by PlaceService."""

    name = serializers.CharField(required=False, allow_blank=True, max_length=255)
    category = serializers.UUIDField(required=False, allow_null=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    phone = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=50)
    operating_hours = serializers.DictField(required=False)
    thumbnail_image = serializers.URLField(required=False, allow_blank=True, allow_null=True)
    additional_images = serializers.ListField(child=serializers.URLField(), required=False)
    address = serializers.CharField(required=False, allow_blank=True, max_length=255)
    address_detail = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=255
    )
    jibun_address = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=255
    )
    coordinates = CoordinatesSerializer(required=False, allow_null=True)
    links = serializers.DictField(
        child=serializers.CharField(allow_blank=True), required=False
    )
