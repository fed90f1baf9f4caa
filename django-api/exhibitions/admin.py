from django.contrib import admin

from exhibitions.models import Exhibition


@admin.register(Exhibition)
class ExhibitionAdmin(admin.ModelAdmin):
    list_display = ["title", "location", "start_date", "end_date", "created_at"]
    search_fields = ["title", "location", "description"]
    date_hierarchy = "start_date"
