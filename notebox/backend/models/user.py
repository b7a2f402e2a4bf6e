"""
User Model.

A user belongs to exactly one account. Soft-deleted users keep their
rows but lose every right tied to the account.
"""

from sqlalchemy import ForeignKey, Index, Integer, PrimaryKeyConstraint, String, false
from sqlalchemy.orm import Mapped, mapped_column

from notebox.backend.models.base import Base, DateCreatedMixin, SoftDeleteMixin


class User(DateCreatedMixin, SoftDeleteMixin, Base):
    """User database model."""

    __tablename__ = "user"
    __table_args__ = (
        PrimaryKeyConstraint("idUser", name="pkUser"),
        {"sqlite_autoincrement": True},
    )

    id_user: Mapped[int] = mapped_column(
        "idUser",
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    id_account: Mapped[int] = mapped_column(
        "idAccount",
        ForeignKey("account.idAccount", name="fkUser_Account"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User(id_user={self.id_user}, id_account={self.id_account})>"


# Backs the ownership check performed before a note is created
Index(
    "ixUser_Account",
    User.id_account,
    User.id_user,
    postgresql_where=User.deleted == false(),
    sqlite_where=User.deleted == false(),
)
