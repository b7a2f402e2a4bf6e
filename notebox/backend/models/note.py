"""
Note Model.

Tenant-scoped, user-owned note. Notes are never removed: the deleted
flag hides them, and every tenant-scoped index is filtered on it.
"""

from datetime import datetime

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    PrimaryKeyConstraint,
    String,
    Text,
    false,
)
from sqlalchemy.orm import Mapped, mapped_column

from notebox.backend.models.base import Base, SoftDeleteMixin

TITLE_MAX_LENGTH = 255


class Note(SoftDeleteMixin, Base):
    """
    Note database model.

    dateCreated and dateModified are assigned by the create operation
    from a single timestamp, so they carry no column defaults here.
    """

    __tablename__ = "note"
    __table_args__ = (
        PrimaryKeyConstraint("idNote", name="pkNote"),
        CheckConstraint('"dateCreated" <= "dateModified"', name="ckNote_DateOrder"),
        {"sqlite_autoincrement": True},
    )

    id_note: Mapped[int] = mapped_column(
        "idNote",
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    id_account: Mapped[int] = mapped_column(
        "idAccount",
        ForeignKey("account.idAccount", name="fkNote_Account"),
        nullable=False,
    )
    id_user: Mapped[int] = mapped_column(
        "idUser",
        ForeignKey("user.idUser", name="fkNote_User"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    date_created: Mapped[datetime] = mapped_column(
        "dateCreated",
        DateTime,
        nullable=False,
    )
    date_modified: Mapped[datetime] = mapped_column(
        "dateModified",
        DateTime,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Note(id_note={self.id_note}, title={self.title!r})>"


_active = Note.deleted == false()

# Tenant isolation scans
Index(
    "ixNote_Account",
    Note.id_account,
    postgresql_where=_active,
    sqlite_where=_active,
)

# Per-user listing
Index(
    "ixNote_Account_User",
    Note.id_account,
    Note.id_user,
    postgresql_include=["title", "dateCreated", "dateModified"],
    postgresql_where=_active,
    sqlite_where=_active,
)

# Recency-ordered listing
Index(
    "ixNote_Account_DateCreated",
    Note.id_account,
    Note.date_created.desc(),
    postgresql_include=["idUser", "title"],
    postgresql_where=_active,
    sqlite_where=_active,
)
