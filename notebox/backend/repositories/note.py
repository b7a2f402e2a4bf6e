"""
Note Repository.

Data access layer for notes. Handles all database operations
for the Note model.
"""

from datetime import datetime

from notebox.backend.models.note import Note
from notebox.backend.repositories.base import BaseRepository


class NoteRepository(BaseRepository[Note]):
    """Repository for Note model."""

    model = Note

    async def insert(
        self,
        *,
        id_account: int,
        id_user: int,
        title: str,
        content: str,
        timestamp: datetime,
    ) -> Note:
        """
        Insert an active note stamped with a single timestamp.

        Returns:
            The flushed note, with its identifier assigned
        """
        return await self.create(
            id_account=id_account,
            id_user=id_user,
            title=title,
            content=content,
            date_created=timestamp,
            date_modified=timestamp,
            deleted=False,
        )

    async def count_for_account(self, id_account: int) -> int:
        """Count active notes of an account."""
        return await self.count(Note.id_account == id_account, self._not_deleted())
