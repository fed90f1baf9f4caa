from django.contrib import admin

from places.models import Place, PlaceCategory


class PlaceInline(admin.TabularInline):
    model = Place
    fields = ["name", "address"]
    extra = 0


@admin.register(PlaceCategory)
class PlaceCategoryAdmin(admin.ModelAdmin):
    list_display = ["name", "slug", "created_at"]
    search_fields = ["name", "slug"]
    inlines = [PlaceInline]


@admin.register(Place)
class PlaceAdmin(admin.ModelAdmin):
    list_display = ["name", "category", "address", "created_at"]
    list_filter = ["category"]
    search_fields = ["name", "address", "description"]
