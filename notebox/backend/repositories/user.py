"""
User Repository.

Data access for users, limited to the lookups the note operations need.
"""

from sqlalchemy import select

from notebox.backend.models.user import User
from notebox.backend.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model."""

    model = User

    async def belongs_to_account(self, id_user: int, id_account: int) -> bool:
        """
        Check that an active user exists within the given account.

        Soft-deleted users never match, even when the account is correct.
        """
        result = await self.session.execute(
            select(User.id_user)
            .where(User.id_user == id_user)
            .where(User.id_account == id_account)
            .where(self._not_deleted())
        )
        return result.scalar_one_or_none() is not None
