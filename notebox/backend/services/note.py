"""
Note Service.

Business logic layer for notes. Validates creation requests against
live reads of the store, then inserts the note atomically.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from notebox.backend.core.exceptions import AuthorizationViolationError
from notebox.backend.core.utils import utc_now
from notebox.backend.models.note import TITLE_MAX_LENGTH
from notebox.backend.repositories.note import NoteRepository
from notebox.backend.repositories.user import UserRepository
from notebox.backend.schemas.note import NoteCreate, NoteCreated
from notebox.backend.services.base import BaseService


class NoteService(BaseService):
    """
    Service for note business logic.

    Every validation runs before any mutation is attempted, so a
    rejected request leaves the store untouched.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = NoteRepository(session)
        self.users = UserRepository(session)

    async def create_note(
        self,
        *,
        id_account: int | None,
        id_user: int | None,
        title: str | None,
        content: str | None,
    ) -> int:
        """
        Validate and persist a new note.

        Checks run in a fixed order and the first violation wins:
        idAccount, idUser, title, content presence, then title length,
        then the user's membership in the account.

        Returns:
            Identifier of the created note

        Raises:
            ParameterRequiredError: A value is missing or blank
            ValueTooLongError: The title is longer than 255 characters
            AuthorizationViolationError: The user is not an active member of the account
        """
        self._require(id_account, "idAccount")
        self._require(id_user, "idUser")
        self._require(title, "title")
        self._require(content, "content")
        self._require_max_length(title, "title", TITLE_MAX_LENGTH)

        if not await self.users.belongs_to_account(id_user, id_account):
            raise AuthorizationViolationError("userDoesNotBelongToAccount")

        self._log_operation("Creating note", id_account=id_account, id_user=id_user)

        async with self._transaction("create_note"):
            timestamp = utc_now()
            note = await self.repo.insert(
                id_account=id_account,
                id_user=id_user,
                title=title,
                content=content,
                timestamp=timestamp,
            )
            id_note = note.id_note

        self._log_debug("Note created", id_note=id_note)
        return id_note


async def note_create(session: AsyncSession, data: NoteCreate) -> NoteCreated:
    """
    Create a note from an API request.

    Passes the request straight through to NoteService.create_note and
    returns the created record. Failures propagate unchanged.
    """
    id_note = await NoteService(session).create_note(
        id_account=data.id_account,
        id_user=data.id_user,
        title=data.title,
        content=data.content,
    )
    return NoteCreated(id_note=id_note)
