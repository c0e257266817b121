# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

"""Initial schema: roles, users, elements, lithos and collections.

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def _id() -> sa.Column:
    return sa.Column(
        "id",
        sa.Uuid(),
        primary_key=True,
        server_default=sa.text("gen_random_uuid()"),
    )


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    ]


def upgrade() -> None:
    # ------------------------------------------------------------------
    # 1. roles
    # ------------------------------------------------------------------
    op.create_table(
        "roles",
        _id(),
        sa.Column("name", sa.String(), nullable=False, unique=True),
        *_timestamps(),
    )

    # ------------------------------------------------------------------
    # 2. users
    # ------------------------------------------------------------------
    op.create_table(
        "users",
        _id(),
        sa.Column("email", sa.String(), nullable=False, unique=True),
        sa.Column("username", sa.String(), nullable=False, unique=True),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column("surname", sa.Text(), nullable=True),
        sa.Column("role_id", sa.Uuid(), sa.ForeignKey("roles.id"), nullable=False),
        *_timestamps(),
    )
    op.create_index("idx_users_role", "users", ["role_id"])

    # ------------------------------------------------------------------
    # 3. authentications
    # ------------------------------------------------------------------
    op.create_table(
        "authentications",
        _id(),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        sa.Column("password", sa.Text(), nullable=False),
        *_timestamps(),
    )

    # ------------------------------------------------------------------
    # 4. elements and their directed edges
    # ------------------------------------------------------------------
    op.create_table(
        "elements",
        _id(),
        sa.Column("name", sa.String(), nullable=False, unique=True),
        sa.Column("sprite", sa.Text(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "strength_elements",
        _id(),
        sa.Column(
            "element_id",
            sa.Uuid(),
            sa.ForeignKey("elements.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "strong_against_id",
            sa.Uuid(),
            sa.ForeignKey("elements.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *_timestamps(),
        sa.UniqueConstraint("element_id", "strong_against_id"),
        sa.CheckConstraint(
            "element_id <> strong_against_id",
            name="ck_strength_elements_distinct",
        ),
    )
    op.create_index(
        "idx_strength_elements_target", "strength_elements", ["strong_against_id"]
    )

    op.create_table(
        "weakness_elements",
        _id(),
        sa.Column(
            "element_id",
            sa.Uuid(),
            sa.ForeignKey("elements.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "weak_against_id",
            sa.Uuid(),
            sa.ForeignKey("elements.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *_timestamps(),
        sa.UniqueConstraint("element_id", "weak_against_id"),
        sa.CheckConstraint(
            "element_id <> weak_against_id",
            name="ck_weakness_elements_distinct",
        ),
    )
    op.create_index(
        "idx_weakness_elements_target", "weakness_elements", ["weak_against_id"]
    )

    # ------------------------------------------------------------------
    # 5. lithos
    # ------------------------------------------------------------------
    op.create_table(
        "lithos",
        _id(),
        sa.Column("name", sa.String(), nullable=False, unique=True),
        sa.Column("sprite", sa.Text(), nullable=False),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("spike_left", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("spike_right", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("spike_up", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("spike_down", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "element_id",
            sa.Uuid(),
            sa.ForeignKey("elements.id", ondelete="SET NULL"),
            nullable=True,
        ),
        *_timestamps(),
        sa.CheckConstraint("spike_left >= 0", name="ck_lithos_spike_left"),
        sa.CheckConstraint("spike_right >= 0", name="ck_lithos_spike_right"),
        sa.CheckConstraint("spike_up >= 0", name="ck_lithos_spike_up"),
        sa.CheckConstraint("spike_down >= 0", name="ck_lithos_spike_down"),
    )
    op.create_index("idx_lithos_element", "lithos", ["element_id"])

    # ------------------------------------------------------------------
    # 6. collections
    # ------------------------------------------------------------------
    op.create_table(
        "collections",
        _id(),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "lithos_id",
            sa.Uuid(),
            sa.ForeignKey("lithos.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default="1"),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "lithos_id"),
        sa.CheckConstraint("quantity >= 0", name="ck_collections_quantity"),
    )
    op.create_index("idx_collections_user", "collections", ["user_id"])


def downgrade() -> None:
    op.drop_table("collections")
    op.drop_table("lithos")
    op.drop_table("weakness_elements")
    op.drop_table("strength_elements")
    op.drop_table("elements")
    op.drop_table("authentications")
    op.drop_table("users")
    op.drop_table("roles")
