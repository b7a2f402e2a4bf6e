"""
SQLAlchemy Base Model.

Base class for all database models with common fields and utilities.
Column names follow the camelCase names of the persisted schema;
mapped attributes use snake_case.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, false
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from notebox.backend.core.utils import utc_now


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class SoftDeleteMixin:
    """Mixin that adds the soft-delete flag."""

    deleted: Mapped[bool] = mapped_column(
        "deleted",
        Boolean,
        default=False,
        server_default=false(),
        nullable=False,
    )


class DateCreatedMixin:
    """Mixin that adds a creation timestamp assigned on insert."""

    date_created: Mapped[datetime] = mapped_column(
        "dateCreated",
        DateTime,
        default=utc_now,
        nullable=False,
    )
