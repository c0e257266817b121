#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors
"""Seed the Aeroliths database with its roles and, optionally, an admin account.

Usage:
    python scripts/seed.py
    AEROLITHS_ADMIN_PASSWORD=supersecret python scripts/seed.py \\
        --admin-email admin@aeroliths.local --admin-username admin
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys

from aeroliths.auth.guard import ROLE_ADMIN, ROLE_USER
from aeroliths.auth.passwords import hash_password
from aeroliths.config import get_settings
from aeroliths.db.session import get_engine, get_session_factory
from aeroliths.models.user import Authentication, User
from aeroliths.repositories.role_repository import RoleRepository
from aeroliths.repositories.user_repository import UserRepository
from aeroliths.schemas.fields import MIN_PASSWORD_LENGTH, is_valid_email

ADMIN_PASSWORD_ENV = "AEROLITHS_ADMIN_PASSWORD"


async def seed(admin_email: str | None, admin_username: str | None, admin_password: str | None) -> None:
    settings = get_settings()
    async with get_session_factory()() as session:
        roles = RoleRepository(session)
        await roles.get_or_create(ROLE_USER)
        admin_role = await roles.get_or_create(ROLE_ADMIN)
        print(f"Roles ready: {ROLE_USER}, {ROLE_ADMIN}")

        if admin_email and admin_username and admin_password:
            users = UserRepository(session)
            existing = await users.get_by_email_or_username(admin_email, admin_username)
            if existing is not None:
                print(f"Admin account skipped: {existing.email} already exists")
            else:
                await users.create(
                    User(
                        email=admin_email,
                        username=admin_username,
                        role_id=admin_role.id,
                        authentication=Authentication(
                            password=hash_password(admin_password, settings.bcrypt_rounds),
                        ),
                    )
                )
                print(f"Admin account created: {admin_email}")

        await session.commit()
    await get_engine().dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the Aeroliths database")
    parser.add_argument("--admin-email", help="Email of an admin account to create")
    parser.add_argument("--admin-username", help="Username of the admin account")
    args = parser.parse_args()

    admin_password = os.environ.get(ADMIN_PASSWORD_ENV)
    if args.admin_email or args.admin_username:
        if not (args.admin_email and args.admin_username):
            parser.error("--admin-email and --admin-username must be given together")
        if not is_valid_email(args.admin_email):
            parser.error("--admin-email is not a valid email address")
        if not admin_password or len(admin_password) < MIN_PASSWORD_LENGTH:
            print(
                f"ERROR: set {ADMIN_PASSWORD_ENV} to a password of at least "
                f"{MIN_PASSWORD_LENGTH} characters",
                file=sys.stderr,
            )
            sys.exit(1)

    asyncio.run(seed(args.admin_email, args.admin_username, admin_password))


if __name__ == "__main__":
    main()
