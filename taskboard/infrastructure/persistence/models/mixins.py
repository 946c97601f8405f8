"""SQLAlchemy mixins for common model patterns.

Provides: CuidMixin (string primary key) and TimestampMixin.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from taskboard.shared.utils.generators import generate_cuid


class CuidMixin:
    """Mixin for models using a string primary key, defaulting to a new CUID."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String(64), primary_key=True, default=generate_cuid)


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )
