# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

from uuid import UUID

from sqlalchemy import CheckConstraint, ForeignKey, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from aeroliths.models.base import Base, TimestampMixin, UUIDMixin


class Element(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "elements"

    name: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    sprite: Mapped[str] = mapped_column(Text, nullable=False)

    # Relationships
    strengths_from: Mapped[list[StrengthElement]] = relationship(
        foreign_keys="[StrengthElement.element_id]",
        back_populates="element",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    weaknesses_from: Mapped[list[WeaknessElement]] = relationship(
        foreign_keys="[WeaknessElement.element_id]",
        back_populates="element",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    # Deleting an element keeps its lithos and clears their element_id.
    lithos: Mapped[list[Lithos]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="element",
        passive_deletes=True,
    )


class StrengthElement(UUIDMixin, TimestampMixin, Base):
    """Directed edge: ``element`` is strong against ``strong_against``."""

    __tablename__ = "strength_elements"

    element_id: Mapped[UUID] = mapped_column(
        ForeignKey("elements.id", ondelete="CASCADE"),
        nullable=False,
    )
    strong_against_id: Mapped[UUID] = mapped_column(
        ForeignKey("elements.id", ondelete="CASCADE"),
        nullable=False,
    )

    # Relationships
    element: Mapped[Element] = relationship(
        foreign_keys="[StrengthElement.element_id]",
        back_populates="strengths_from",
    )
    strong_against: Mapped[Element] = relationship(
        foreign_keys="[StrengthElement.strong_against_id]",
    )

    __table_args__ = (
        UniqueConstraint("element_id", "strong_against_id"),
        CheckConstraint(
            "element_id <> strong_against_id",
            name="ck_strength_elements_distinct",
        ),
        Index("idx_strength_elements_target", "strong_against_id"),
    )


class WeaknessElement(UUIDMixin, TimestampMixin, Base):
    """Directed edge: ``element`` is weak against ``weak_against``."""

    __tablename__ = "weakness_elements"

    element_id: Mapped[UUID] = mapped_column(
        ForeignKey("elements.id", ondelete="CASCADE"),
        nullable=False,
    )
    weak_against_id: Mapped[UUID] = mapped_column(
        ForeignKey("elements.id", ondelete="CASCADE"),
        nullable=False,
    )

    # Relationships
    element: Mapped[Element] = relationship(
        foreign_keys="[WeaknessElement.element_id]",
        back_populates="weaknesses_from",
    )
    weak_against: Mapped[Element] = relationship(
        foreign_keys="[WeaknessElement.weak_against_id]",
    )

    __table_args__ = (
        UniqueConstraint("element_id", "weak_against_id"),
        CheckConstraint(
            "element_id <> weak_against_id",
            name="ck_weakness_elements_distinct",
        ),
        Index("idx_weakness_elements_target", "weak_against_id"),
    )
