# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

from uuid import UUID

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from aeroliths.models.base import Base, TimestampMixin, UUIDMixin


class Lithos(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "lithos"

    name: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    sprite: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String, nullable=False)
    spike_left: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    spike_right: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    spike_up: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    spike_down: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    element_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("elements.id", ondelete="SET NULL"),
        default=None,
    )

    # Relationships
    element: Mapped[Element | None] = relationship(  # type: ignore[name-defined]  # noqa: F821
        "Element",
        back_populates="lithos",
    )
    collections: Mapped[list[Collection]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="lithos",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint("spike_left >= 0", name="ck_lithos_spike_left"),
        CheckConstraint("spike_right >= 0", name="ck_lithos_spike_right"),
        CheckConstraint("spike_up >= 0", name="ck_lithos_spike_up"),
        CheckConstraint("spike_down >= 0", name="ck_lithos_spike_down"),
        Index("idx_lithos_element", "element_id"),
    )
