"""Django ORM implementation of the ExhibitionStore."""

from dataclasses import asdict

from exhibitions import models
from exhibitions.domain import Exhibition, ExhibitionDraft, ExhibitionId
from exhibitions.stores.interfaces import ExhibitionStore


def _to_domain(row: models.Exhibition) -> Exhibition:
    return Exhibition.from_record(
        {
            "id": row.id,
            "title": row.title,
            "location": row.location,
            "description": row.description,
            "detailed_content": row.detailed_content,
            "start_date": row.start_date,
            "end_date": row.end_date,
            "thumbnail_url": row.thumbnail_url,
            "created_at": row.created_at,
            "updated_at": row.updated_at,
        }
    )


class DjangoExhibitionStore(ExhibitionStore):
    """Database-backed exhibition store using Django ORM."""

    def list_exhibitions(self) -> list[Exhibition]:
        return [_to_domain(row) for row in models.Exhibition.objects.all()]

    def get_exhibition(self, exhibition_id: ExhibitionId) -> Exhibition | None:
        row = models.Exhibition.objects.filter(pk=exhibition_id.value).first()
        return _to_domain(row) if row is not None else None

    def create_exhibition(self, draft: ExhibitionDraft) -> Exhibition:
        row = models.Exhibition.objects.create(**asdict(draft))
        return _to_domain(row)

    def update_exhibition(
        self, exhibition_id: ExhibitionId, draft: ExhibitionDraft
    ) -> Exhibition | None:
        row = models.Exhibition.objects.filter(pk=exhibition_id.value).first()
        if row is None:
            return None
        for field, value in asdict(draft).items():
            setattr(row, field, value)
        row.save()
        return _to_domain(row)

    def delete_exhibition(self, exhibition_id: ExhibitionId) -> bool:
        deleted, _ = models.Exhibition.objects.filter(pk=exhibition_id.value).delete()
        return deleted > 0
