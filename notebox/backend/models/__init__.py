# Import all models so Base.metadata is complete for create_all and Alembic
from notebox.backend.models.account import Account
from notebox.backend.models.base import Base
from notebox.backend.models.note import Note
from notebox.backend.models.user import User

__all__ = ["Account", "Base", "Note", "User"]
