"""Serializers for transforming domain models to API responses and parsing input."""

from rest_framework import serializers

from exhibitions.domain import status_of


class ExhibitionSerializer(serializers.Serializer):
    """Serializer for the Exhibition domain model.

    Expects ``now`` in the context to derive ``status``.
    """

    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField()
    location = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    detailed_content = serializers.CharField(allow_null=True)
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    thumbnail_url = serializers.CharField(allow_null=True)
    status = serializers.SerializerMethodField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField(allow_null=True)

    def get_status(self, obj) -> str:
        return status_of(obj, self.context["now"]).value


class ExhibitionInputSerializer(serializers.Serializer):
    """Shape checks only. Required fields and date order are domain rules."""

    title = serializers.CharField(required=False, allow_blank=True, max_length=255)
    location = serializers.CharField(required=False, allow_blank=True, max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    detailed_content = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    start_date = serializers.DateField(required=False, allow_null=True)
    end_date = serializers.DateField(required=False, allow_null=True)
    thumbnail_url = serializers.URLField(
        required=False, allow_blank=True, allow_null=True, max_length=500
    )


class CalendarDaySerializer(serializers.Serializer):
    date = serializers.DateField(source="day")
    count = serializers.IntegerField()
    has_exhibitions = serializers.BooleanField()
    is_selected = serializers.BooleanField()
    is_today = serializers.BooleanField()


class MonthViewSerializer(serializers.Serializer):
    month = serializers.SerializerMethodField()
    previous_month = serializers.SerializerMethodField()
    next_month = serializers.SerializerMethodField()
    leading_blanks = serializers.IntegerField(source="month.leading_blanks")
    selected_date = serializers.DateField(source="selection.selected", allow_null=True)
    days = CalendarDaySerializer(many=True)
    exhibitions = ExhibitionSerializer(many=True)

    def get_month(self, obj) -> str:
        return str(obj.month)

    def get_previous_month(self, obj) -> str | None:
        return _month_or_none(obj.month.previous)

    def get_next_month(self, obj) -> str | None:
        return _month_or_none(obj.month.next)


def _month_or_none(step) -> str | None:
    # None past the first or last representable month
    try:
        return str(step())
    except ValueError:
        return None
