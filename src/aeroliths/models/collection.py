# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

from uuid import UUID

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from aeroliths.models.base import Base, TimestampMixin, UUIDMixin


class Collection(UUIDMixin, TimestampMixin, Base):
    """How many of one lithos a user owns."""

    __tablename__ = "collections"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    lithos_id: Mapped[UUID] = mapped_column(
        ForeignKey("lithos.id", ondelete="CASCADE"),
        nullable=False,
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    # Relationships
    user: Mapped[User] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="collections",
    )
    lithos: Mapped[Lithos] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="collections",
    )

    __table_args__ = (
        UniqueConstraint("user_id", "lithos_id"),
        CheckConstraint("quantity >= 0", name="ck_collections_quantity"),
        Index("idx_collections_user", "user_id"),
    )
