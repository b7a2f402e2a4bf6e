"""
Account Model.

The tenant. Every user and every note is partitioned by account.
"""

from sqlalchemy import Integer, PrimaryKeyConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from notebox.backend.models.base import Base, DateCreatedMixin, SoftDeleteMixin


class Account(DateCreatedMixin, SoftDeleteMixin, Base):
    """Account (tenant) database model."""

    __tablename__ = "account"
    __table_args__ = (
        PrimaryKeyConstraint("idAccount", name="pkAccount"),
        {"sqlite_autoincrement": True},
    )

    id_account: Mapped[int] = mapped_column(
        "idAccount",
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"<Account(id_account={self.id_account}, name={self.name!r})>"
