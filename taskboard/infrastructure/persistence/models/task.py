"""Task ORM model. Table: task."""

from sqlalchemy import BigInteger, Identity, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from taskboard.infrastructure.persistence.database import Base
from taskboard.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Task(CuidMixin, TimestampMixin, Base):
    """Stored task. seq keeps insertion order for find_all()."""

    __tablename__ = "task"

    seq: Mapped[int] = mapped_column(
        BigInteger, Identity(always=True), nullable=False, unique=True
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(
        Text, nullable=False, default="", server_default=""
    )
    assigned_to: Mapped[str] = mapped_column(
        String(255), nullable=False, default="", server_default="", index=True
    )
    status: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    severity: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
