"""Django signals for cache invalidation."""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from exhibitions.models import Exhibition
from exhibitions.stores.cached_store import LIST_KEY, detail_key


@receiver([post_save, post_delete], sender=Exhibition)
def invalidate_exhibition_cache(sender, instance, **kwargs):
    """Invalidate caches when an exhibition is saved or deleted."""
    cache.delete_many([LIST_KEY, detail_key(instance.id)])
