"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from exhibitions.domain import Exhibition, ExhibitionDraft, ExhibitionId


class ExhibitionStore(ABC):
    """Interface for exhibition persistence operations."""

    @abstractmethod
    def list_exhibitions(self) -> list[Exhibition]:
        """Return every exhibition. Callers must not rely on the order."""
        ...

    @abstractmethod
    def get_exhibition(self, exhibition_id: ExhibitionId) -> Exhibition | None:
        """Return an exhibition by ID, or None if not found."""
        ...

    @abstractmethod
    def create_exhibition(self, draft: ExhibitionDraft) -> Exhibition:
        """Persist a validated draft and return the stored exhibition."""
        ...

    @abstractmethod
    def update_exhibition(
        self, exhibition_id: ExhibitionId, draft: ExhibitionDraft
    ) -> Exhibition | None:
        """Overwrite an exhibition's fields, or return None if not found."""
        ...

    @abstractmethod
    def delete_exhibition(self, exhibition_id: ExhibitionId) -> bool:
        """Delete an exhibition. Return False if it did not exist."""
        ...
