"""Read-through cache in front of another ExhibitionStore.

Only the canonical, unsorted collection and single records are cached.
Invalidation happens in exhibitions/signals.py whenever a row changes.
"""

from django.conf import settings
from django.core.cache import cache as default_cache

from exhibitions.domain import Exhibition, ExhibitionDraft, ExhibitionId
from exhibitions.stores.interfaces import ExhibitionStore

LIST_KEY = "exhibitions:list"


def detail_key(exhibition_id) -> str:
    return f"exhibitions:{exhibition_id}"


class CachedExhibitionStore(ExhibitionStore):
    def __init__(self, inner: ExhibitionStore, cache=None, timeout: int | None = None) -> None:
        self._inner = inner
        self._cache = cache if cache is not None else default_cache
        self._timeout = timeout if timeout is not None else settings.FROMOFYOU_CACHE_TIMEOUT

    def list_exhibitions(self) -> list[Exhibition]:
        cached = self._cache.get(LIST_KEY)
        if cached is not None:
            return list(cached)
        exhibitions = self._inner.list_exhibitions()
        self._cache.set(LIST_KEY, tuple(exhibitions), self._timeout)
        return exhibitions

    def get_exhibition(self, exhibition_id: ExhibitionId) -> Exhibition | None:
        key = detail_key(exhibition_id)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        exhibition = self._inner.get_exhibition(exhibition_id)
        if exhibition is not None:
            self._cache.set(key, exhibition, self._timeout)
        return exhibition

    def create_exhibition(self, draft: ExhibitionDraft) -> Exhibition:
        return self._inner.create_exhibition(draft)

    def update_exhibition(
        self, exhibition_id: ExhibitionId, draft: ExhibitionDraft
    ) -> Exhibition | None:
        return self._inner.update_exhibition(exhibition_id, draft)

    def delete_exhibition(self, exhibition_id: ExhibitionId) -> bool:
        return self._inner.delete_exhibition(exhibition_id)
