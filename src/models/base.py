"""Declarative base shared by the users and bookmarks tables."""
from datetime import datetime

from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Root of the ORM model hierarchy; its metadata drives migrations and tests."""


class TimestampMixin:
    """
    Creation and last-modification times, both timezone-aware.

    The database fills both on INSERT. The ORM bumps updated_at on every
    UPDATE it issues; bulk statements (e.g. the cleanup task) do not.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
