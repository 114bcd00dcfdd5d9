# libms/models/base.py
from datetime import datetime, UTC
from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, mapped_column, Mapped


def utcnow() -> datetime:
    """Naive UTC timestamp, matching what TIMESTAMP columns hand back"""
    return datetime.now(UTC).replace(tzinfo=None)


class Base(DeclarativeBase):
    """Base class for all models"""
    pass


class TimestampMixin:
    """Mixin to add CreationDate and UpdationDate columns"""
    created_at: Mapped[datetime | None] = mapped_column(
        'CreationDate', DateTime, nullable=True, default=utcnow, server_default=func.current_timestamp()
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        'UpdationDate', DateTime, nullable=True, onupdate=utcnow
    )


class RegistrationMixin:
    """Mixin to add RegDate and UpdationDate columns"""
    registered_at: Mapped[datetime | None] = mapped_column(
        'RegDate', DateTime, nullable=True, default=utcnow, server_default=func.current_timestamp()
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        'UpdationDate', DateTime, nullable=True, onupdate=utcnow
    )
